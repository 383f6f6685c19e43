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
# deskrun/launch.py
from __future__ import annotations
from typing import Any, List, Optional, Protocol

from PyQt5.QtCore import QCoreApplication, QProcess

from .entry import EntryRecord
from .errors import NoTerminalConfigured, SpawnFailed
from .sources import AppRegistry
from .utils.debug import dbg

# Field codes are stripped, never substituted: deskrun does not pass
# files or URLs to applications.
FIELD_CODES = frozenset({
    "%f", "%F", "%u", "%U", "%d", "%D", "%n", "%N",
    "%k", "%v", "%m", "%c", "%i", "%s",
})

def build_argv(entry: EntryRecord, terminal: Optional[str] = None) -> List[str]:
    """
    Exec line -> argv. Tokens are split on whitespace only (no quoting
    rules). Terminal=true entries are wrapped as `<terminal> -e ...`.
    """
    argv = [tok for tok in entry.exec.split() if tok not in FIELD_CODES]
    if entry.terminal:
        if not terminal:
            raise NoTerminalConfigured(entry.name)
        argv = [terminal, "-e"] + argv
    if not argv:
        raise SpawnFailed(ValueError(f"Exec of {entry.name!r} is empty"))
    return argv

# -------------------------------------------------
# Process execution
# -------------------------------------------------
class ProcessRunner(Protocol):
    def spawn(self, argv: List[str], show_output: bool) -> Any: ...
    def wait(self, handle: Any) -> int: ...

_app: Optional[QCoreApplication] = None

def ensure_core_app() -> QCoreApplication:
    """
    QProcess wants a QCoreApplication around; reuse the running one.
    """
    global _app
    inst = QCoreApplication.instance()
    if inst is None:
        _app = QCoreApplication([])
        inst = _app
    return inst

class QtProcessRunner:
    """
    show_output=True: child shares our stdin/stdout/stderr and the caller
    may wait() on it.
    show_output=False: child is started detached with stdout/stderr sent
    to the null device; the handle is only the pid.
    """
    def spawn(self, argv: List[str], show_output: bool) -> Any:
        ensure_core_app()
        program, args = argv[0], argv[1:]
        proc = QProcess()
        proc.setProgram(program)
        proc.setArguments(args)
        if show_output:
            proc.setProcessChannelMode(QProcess.ForwardedChannels)
            proc.setInputChannelMode(QProcess.ForwardedInputChannel)
            proc.start()
            if not proc.waitForStarted(-1):
                raise SpawnFailed(OSError(f"{program}: {proc.errorString()}"))
            return proc
        proc.setStandardOutputFile(QProcess.nullDevice())
        proc.setStandardErrorFile(QProcess.nullDevice())
        ok, pid = proc.startDetached()
        if not ok:
            raise SpawnFailed(OSError(f"{program}: {proc.errorString()}"))
        return pid

    def wait(self, handle: Any) -> int:
        if not handle.waitForFinished(-1) and handle.state() != QProcess.NotRunning:
            raise SpawnFailed(OSError(handle.errorString()))
        return handle.exitCode()

# -------------------------------------------------
# Launcher
# -------------------------------------------------
class Launcher:
    def __init__(self, registry: AppRegistry, terminal: Optional[str] = None,
                 runner: Optional[ProcessRunner] = None, show_output: bool = False):
        self.registry = registry
        self.terminal = terminal
        self.runner = runner or QtProcessRunner()
        self.show_output = show_output

    def launch(self, name: str) -> Optional[int]:
        """
        Start the first entry named `name` (case-insensitive).
        Returns the exit code when output is shown, otherwise None as
        soon as the process is running.
        """
        entry = self.registry.find(name)
        argv = build_argv(entry, self.terminal)
        dbg("launch", f"{entry.name}: {argv}")
        handle = self.runner.spawn(argv, self.show_output)
        print(f"Launching application {entry.name!r}.")
        if not self.show_output:
            return None
        return self.runner.wait(handle)
