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
# deskrun/display.py
from __future__ import annotations
from typing import Dict, Iterable, List

from .entry import ActionRecord, EntryRecord

def _b(v) -> str:
    return "true" if v else "false"

def format_actions(actions: Dict[str, ActionRecord]) -> List[str]:
    out = []
    for act_id, act in actions.items():
        out.append(
            f"\n\t[Action]\n\t{act_id}"
            f"\n\t- Name={act.name if act.name is not None else 'None'}"
            f"\n\t- Exec={act.exec if act.exec is not None else 'None'}"
            f"\n\t- Terminal={_b(act.terminal)}"
        )
    return out

def format_entry(entry: EntryRecord, details: bool = False) -> List[str]:
    if not details:
        return [entry.name]
    head = f"Name={entry.name}\n\t- Exec={entry.exec}\n\t- Terminal={_b(entry.terminal)}"
    return [head] + format_actions(entry.actions)

def print_entries(entries: Iterable[EntryRecord], details: bool = False) -> None:
    for entry in entries:
        for block in format_entry(entry, details):
            print(block)
