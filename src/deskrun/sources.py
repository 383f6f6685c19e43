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
# deskrun/sources.py
from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from PyQt5.QtCore import QDir, QDirIterator, QFileInfo

from .config.io import Settings, default_source_dirs
from .entry import EntryRecord, decode
from .errors import NotFound, SourceUnavailable
from .utils.debug import dbg

SOURCE_USER = "user"
SOURCE_FLATPAK = "flatpak"
SOURCE_SYSTEM = "system"

_DESKTOP_SUFFIX = ".desktop"
# QDir.System keeps dangling symlinks in the listing
_DIR_FILTERS = QDir.Files | QDir.System | QDir.Hidden

def list_desktop_files(directory: Path, source: str = "") -> List[Path]:
    """
    Immediate children of `directory` that are regular files or symlinks
    and end in ".desktop". Order is whatever the filesystem returns.
    """
    info = QFileInfo(str(directory))
    if not (info.isDir() and info.isReadable()):
        raise SourceUnavailable(source or str(directory), directory)
    found: List[Path] = []
    it = QDirIterator(str(directory), _DIR_FILTERS, QDirIterator.NoIteratorFlags)
    while it.hasNext():
        full_path = it.next()
        fi = it.fileInfo()
        if not (fi.isFile() or fi.isSymLink()):
            continue
        p = Path(full_path)
        if p.suffix != _DESKTOP_SUFFIX:
            continue
        found.append(p)
    return found

def read_entries(paths: Iterable[Path]) -> List[EntryRecord]:
    """
    Decode every readable UTF-8 file; unreadable or undecodable files are
    skipped without error.
    """
    entries: List[EntryRecord] = []
    for p in paths:
        try:
            text = p.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            dbg("sources", f"skip {p}: {e}")
            continue
        rec = decode(text)
        if rec is None:
            dbg("sources", f"no entry in {p}")
            continue
        entries.append(rec)
    return entries

def scan(directory: Path, source: str = "") -> List[EntryRecord]:
    return read_entries(list_desktop_files(directory, source))

class AppRegistry:
    """
    Desktop entries grouped by source directory.

    `dirs` is ordered by priority; `aggregate` picks the sources used by
    all() and therefore by name lookup (default: every source in `dirs`).
    """
    def __init__(self, dirs: Dict[str, Path], aggregate: Optional[Sequence[str]] = None):
        self.dirs = dict(dirs)
        if aggregate is None:
            aggregate = list(self.dirs)
        self.aggregate = [s for s in self.dirs if s in aggregate]

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppRegistry":
        aggregate = [SOURCE_USER, SOURCE_SYSTEM]
        if settings.include_flatpak:
            aggregate.append(SOURCE_FLATPAK)
        return cls(default_source_dirs(), aggregate)

    def entries(self, source: str) -> List[EntryRecord]:
        directory = self.dirs.get(source)
        if directory is None:
            raise SourceUnavailable(source)
        dbg("sources", f"scanning {source}: {directory}")
        return scan(directory, source)

    def all(self) -> List[EntryRecord]:
        """
        Entries of every aggregated source, highest priority first.
        The first unavailable source aborts the whole call.
        """
        result: List[EntryRecord] = []
        for source in self.aggregate:
            result.extend(self.entries(source))
        return result

    def find(self, name: str, entries: Optional[List[EntryRecord]] = None) -> EntryRecord:
        if entries is None:
            entries = self.all()
        wanted = name.lower()
        for rec in entries:
            if rec.name.lower() == wanted:
                return rec
        raise NotFound(name)
