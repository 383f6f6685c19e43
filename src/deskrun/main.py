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
# deskrun/main.py
from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .config.io import get_config_path, load_settings, resolve_terminal
from .display import print_entries
from .errors import LaunchError
from .launch import Launcher, ensure_core_app
from .sources import AppRegistry, SOURCE_FLATPAK, SOURCE_SYSTEM, SOURCE_USER
from .utils.debug import dbg

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="deskrun",
        description="List and launch applications from their .desktop entries.",
    )
    p.add_argument("apps", nargs="*", metavar="APP",
                   help="Launch applications by name (case-insensitive)")
    p.add_argument("-u", "--user-apps", action="store_true",
                   help="List user installed apps in ~/.local/share/applications")
    p.add_argument("-f", "--flatpak-apps", action="store_true",
                   help="List flatpak apps in /var/lib/flatpak/exports/share/applications")
    p.add_argument("-s", "--system-apps", action="store_true",
                   help="List system installed apps in /usr/share/applications")
    p.add_argument("-a", "--all-apps", action="store_true",
                   help="List apps of every configured source")
    p.add_argument("-d", "--details", action="store_true",
                   help="Show details about the application entries")
    p.add_argument("-o", "--output", action="store_true",
                   help="Send application output to stdout and wait for it to exit")
    return p

def _launch_all(launcher: Launcher, names: List[str]) -> int:
    failed = 0
    for name in names:
        try:
            launcher.launch(name)
        except LaunchError as e:
            failed += 1
            print(e, file=sys.stderr)
    return 1 if failed else 0

def _list(registry: AppRegistry, sources: List[str], details: bool) -> int:
    status = 0
    for source in sources:
        try:
            entries = registry.entries(source)
        except LaunchError as e:
            status = 1
            print(e, file=sys.stderr)
            continue
        print_entries(entries, details)
    return status

def run(argv: Optional[List[str]] = None, registry: Optional[AppRegistry] = None,
        launcher: Optional[Launcher] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_settings()
    dbg("main", f"settings from {get_config_path()}: {settings}")
    registry = registry or AppRegistry.from_settings(settings)

    if args.apps:
        launcher = launcher or Launcher(
            registry,
            terminal=resolve_terminal(settings),
            show_output=args.output,
        )
        return _launch_all(launcher, args.apps)

    if args.all_apps:
        try:
            entries = registry.all()
        except LaunchError as e:
            print(e, file=sys.stderr)
            return 1
        print_entries(entries, args.details)
        return 0

    sources = [
        src for src, wanted in (
            (SOURCE_USER, args.user_apps),
            (SOURCE_FLATPAK, args.flatpak_apps),
            (SOURCE_SYSTEM, args.system_apps),
        ) if wanted
    ]
    if not sources:
        parser.print_usage()
        return 0
    return _list(registry, sources, args.details)

def main():
    ensure_core_app()
    sys.exit(run())


if __name__ == "__main__":
    main()
