# SPDX-License-Identifier: GPL-3.0-or-later
#
# deskrun - launch desktop entries from the command line
# Copyright (C) 2025 Tasteron
#
# This project is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# deskrun/entry.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional

HEADER = "[Desktop Entry]"
_ACTION_MARK = "Action "

# -------------------------------------------------
# Records
# -------------------------------------------------
@dataclass
class ActionRecord:
    # Unset fields stay None; nothing is defaulted for actions.
    name: Optional[str] = None
    exec: Optional[str] = None
    terminal: Optional[bool] = None

@dataclass
class EntryRecord:
    name: str
    exec: str
    terminal: bool = False
    actions: Dict[str, ActionRecord] = field(default_factory=dict)

# -------------------------------------------------
# Helpers
# -------------------------------------------------
def _str_as_bool(value: str) -> bool:
    return value.lower() == "true"

def _lines(text: str) -> Optional[List[str]]:
    """
    Split into lines and drop comments. Returns None unless the first
    remaining line is exactly the desktop entry header.
    """
    lines = [ln for ln in text.split("\n") if not ln.startswith("#")]
    if not lines or lines[0] != HEADER:
        return None
    return lines

def _action_id(line: str) -> Optional[str]:
    """
    "[Desktop Action new-window]" -> "new-window".
    Anything containing "Action " counts; the last character is dropped
    as the closing bracket whatever it is.
    """
    _, sep, rest = line.partition(_ACTION_MARK)
    if not sep:
        return None
    return rest[:-1]

def _apply_field(line: str, target: ActionRecord) -> None:
    key, sep, value = line.partition("=")
    if not sep:
        return
    if key == "Name":
        target.name = value
    elif key == "Exec":
        target.exec = value
    elif key == "Terminal":
        target.terminal = _str_as_bool(value)

# -------------------------------------------------
# Public API
# -------------------------------------------------
def decode(text: str) -> Optional[EntryRecord]:
    """
    Decode the text of one .desktop file.

    Returns None for anything that is not a usable application entry:
    missing header, missing Name or Exec in the base section, or
    NoDisplay=true. Malformed lines and unknown keys are ignored, so this
    never raises on bad input.

    The scan has two states: the base section (``current is None``) and
    an action section, entered on every action header line.
    """
    lines = _lines(text)
    if lines is None:
        return None

    base = ActionRecord()
    actions: Dict[str, ActionRecord] = {}
    current: Optional[str] = None

    for line in lines:
        act = _action_id(line)
        if act is not None:
            current = act
            actions.setdefault(act, ActionRecord())
            continue
        if current is not None:
            _apply_field(line, actions[current])
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        if key == "NoDisplay":
            if _str_as_bool(value):
                return None
            continue
        _apply_field(line, base)

    if base.name is None or base.exec is None:
        return None
    return EntryRecord(
        name=base.name,
        exec=base.exec,
        terminal=bool(base.terminal),
        actions=actions,
    )
