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

from __future__ import annotations
from pathlib import Path
from typing import Optional


class LaunchError(Exception):
    """Base class for everything deskrun reports to the user."""


class SourceUnavailable(LaunchError):
    def __init__(self, source: str, path: Optional[Path] = None):
        self.source = source
        self.path = path
        where = f" ({path})" if path else ""
        super().__init__(f"Failed to get {source} applications{where}.")


class NoTerminalConfigured(LaunchError):
    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(
            f"Application {app_name!r} needs a terminal but none is configured "
            f"(set $TERMINAL)."
        )


class SpawnFailed(LaunchError):
    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"An error occurred executing the application.\n{cause}")


class NotFound(LaunchError):
    def __init__(self, app_name: str):
        self.app_name = app_name
        super().__init__(f"Application {app_name!r} does not exist.")
