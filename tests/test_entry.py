from deskrun.entry import ActionRecord, EntryRecord, decode

FIREFOX = """[Desktop Entry]
Version=1.0
Name=Firefox
GenericName=Web Browser
Exec=firefox %u
Icon=firefox
Type=Application
Actions=new-window;new-private-window;

[Desktop Action new-window]
Name=New Window
Exec=firefox --new-window %u

[Desktop Action new-private-window]
Name=New Private Window
Exec=firefox --private-window %u
"""


def test_minimal_entry():
    rec = decode("[Desktop Entry]\nName=Foo\nExec=foo --bar\n")
    assert rec == EntryRecord(name="Foo", exec="foo --bar", terminal=False, actions={})


def test_values_kept_raw():
    rec = decode("[Desktop Entry]\nName= Spaced = Name\nExec=a=b c\n")
    assert rec.name == " Spaced = Name"
    assert rec.exec == "a=b c"


def test_missing_header_is_rejected():
    assert decode("") is None
    assert decode("Name=Foo\nExec=foo\n") is None
    assert decode("[Desktop Entry] \nName=Foo\nExec=foo\n") is None
    assert decode("\n[Desktop Entry]\nName=Foo\nExec=foo\n") is None


def test_comments_before_header_are_skipped():
    rec = decode("# generated\n#another\n[Desktop Entry]\n# mid\nName=Foo\nExec=foo\n")
    assert rec is not None
    assert rec.name == "Foo"


def test_crlf_header_does_not_match():
    assert decode("[Desktop Entry]\r\nName=Foo\r\nExec=foo\r\n") is None


def test_name_and_exec_required():
    assert decode("[Desktop Entry]\nName=Foo\n") is None
    assert decode("[Desktop Entry]\nExec=foo\n") is None


def test_empty_values_still_count_as_present():
    rec = decode("[Desktop Entry]\nName=\nExec=\n")
    assert rec is not None
    assert rec.name == ""
    assert rec.exec == ""


def test_terminal_coercion():
    def term(value):
        return decode(f"[Desktop Entry]\nName=A\nExec=a\nTerminal={value}\n").terminal

    assert term("true") is True
    assert term("True") is True
    assert term("TRUE") is True
    assert term("false") is False
    assert term("garbage") is False
    assert term("1") is False
    assert term("") is False


def test_nodisplay_true_suppresses_entry():
    assert decode("[Desktop Entry]\nNoDisplay=true\nName=A\nExec=a\n") is None
    assert decode("[Desktop Entry]\nName=A\nExec=a\nNoDisplay=True\n") is None


def test_nodisplay_false_keeps_entry():
    rec = decode("[Desktop Entry]\nName=A\nNoDisplay=false\nExec=a\n")
    assert rec is not None
    rec = decode("[Desktop Entry]\nName=A\nNoDisplay=yes\nExec=a\n")
    assert rec is not None


def test_nodisplay_inside_action_is_ignored():
    text = "[Desktop Entry]\nName=A\nExec=a\n[Desktop Action x]\nNoDisplay=true\n"
    rec = decode(text)
    assert rec is not None
    assert rec.actions == {"x": ActionRecord()}


def test_unknown_keys_and_lines_ignored():
    text = "[Desktop Entry]\nIcon=foo\nnot a pair\n\nName=A\nExec=a\nname=lower\n"
    rec = decode(text)
    assert rec.name == "A"


def test_later_key_overrides_earlier():
    rec = decode("[Desktop Entry]\nName=A\nName=B\nExec=a\n")
    assert rec.name == "B"


def test_other_sections_flow_into_base():
    # only action headers switch sections
    text = "[Desktop Entry]\nName=A\n[X-Extra]\nExec=from-extra\n"
    rec = decode(text)
    assert rec.exec == "from-extra"


def test_actions_are_parsed_independently():
    rec = decode(FIREFOX)
    assert rec.name == "Firefox"
    assert rec.exec == "firefox %u"
    assert rec.terminal is False
    assert list(rec.actions) == ["new-window", "new-private-window"]
    assert rec.actions["new-window"] == ActionRecord(
        name="New Window", exec="firefox --new-window %u", terminal=None
    )
    assert rec.actions["new-private-window"].exec == "firefox --private-window %u"


def test_action_fields_do_not_touch_base():
    text = (
        "[Desktop Entry]\nName=A\nExec=a\n"
        "[Desktop Action foo]\nName=Foo\nExec=foo\nTerminal=true\n"
    )
    rec = decode(text)
    assert rec.name == "A"
    assert rec.exec == "a"
    assert rec.terminal is False
    assert rec.actions["foo"] == ActionRecord(name="Foo", exec="foo", terminal=True)


def test_base_fields_after_action_header_belong_to_action():
    text = "[Desktop Entry]\nName=A\n[Desktop Action foo]\nExec=a\n"
    assert decode(text) is None


def test_incomplete_action_is_kept():
    text = "[Desktop Entry]\nName=A\nExec=a\n[Desktop Action empty]\n[Desktop Action half]\nName=Half\n"
    rec = decode(text)
    assert rec.actions["empty"] == ActionRecord()
    assert rec.actions["half"] == ActionRecord(name="Half")


def test_repeated_action_header_keeps_fields():
    text = (
        "[Desktop Entry]\nName=A\nExec=a\n"
        "[Desktop Action foo]\nName=Foo\n"
        "[Desktop Action bar]\nName=Bar\n"
        "[Desktop Action foo]\nExec=foo\n"
    )
    rec = decode(text)
    assert rec.actions["foo"] == ActionRecord(name="Foo", exec="foo")


def test_action_header_detection_is_substring_based():
    # anything with "Action " is a header; the last character is dropped
    text = (
        "[Desktop Entry]\nName=A\nExec=a\n"
        "Comment=Take Action now\n"
        "Name=ignored\n"
    )
    rec = decode(text)
    assert rec.name == "A"
    assert list(rec.actions) == ["no"]
    assert rec.actions["no"].name == "ignored"


def test_action_header_without_closing_bracket():
    rec = decode("[Desktop Entry]\nName=A\nExec=a\n[Desktop Action foo\n")
    assert list(rec.actions) == ["fo"]


def test_action_header_with_nothing_after_marker():
    rec = decode("[Desktop Entry]\nName=A\nExec=a\nAction \n")
    assert list(rec.actions) == [""]

