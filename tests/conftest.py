from pathlib import Path

import pytest

from deskrun.errors import SpawnFailed
from deskrun.sources import AppRegistry


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("TERMINAL", raising=False)


def desktop(name, exec_line, *extra):
    lines = ["[Desktop Entry]", "Type=Application", f"Name={name}", f"Exec={exec_line}"]
    lines.extend(extra)
    return "\n".join(lines) + "\n"


def write(directory: Path, filename: str, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    p = directory / filename
    p.write_text(text, encoding="utf-8")
    return p


class FakeRunner:
    def __init__(self, fail=None, exit_code=0):
        self.fail = fail
        self.exit_code = exit_code
        self.spawned = []
        self.waited = []

    def spawn(self, argv, show_output):
        if self.fail is not None:
            raise SpawnFailed(self.fail)
        self.spawned.append((argv, show_output))
        return len(self.spawned)

    def wait(self, handle):
        self.waited.append(handle)
        return self.exit_code


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def dirs(tmp_path):
    d = {
        "user": tmp_path / "user",
        "flatpak": tmp_path / "flatpak",
        "system": tmp_path / "system",
    }
    for p in d.values():
        p.mkdir()
    return d


@pytest.fixture
def registry(dirs):
    return AppRegistry(dirs)
