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
# deskrun/config/io.py
from __future__ import annotations
import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Mapping, Optional
# -------------------------------------------------
# Constants / App Name
# -------------------------------------------------
_APP_NAME = "deskrun"
TERMINAL_ENV = "TERMINAL"
# -------------------------------------------------
# XDG Paths
# -------------------------------------------------
def _xdg_config_home() -> Path:
    x = os.environ.get("XDG_CONFIG_HOME")
    return Path(x) if x else (Path.home() / ".config")
def get_config_path(prefer_env: bool = True) -> Path:
    """
    Path to settings file:
      $XDG_CONFIG_HOME/deskrun/settings.json
      or ~/.config/deskrun/settings.json
    """
    base = _xdg_config_home() if prefer_env else (Path.home() / ".config")
    return base / _APP_NAME / "settings.json"
# Application directories (.desktop), freedesktop.org locations
USER_APPS_SUFFIX = ".local/share/applications"
FLATPAK_APPS_DIR = "/var/lib/flatpak/exports/share/applications"
SYSTEM_APPS_DIR = "/usr/share/applications"
def default_source_dirs() -> Dict[str, Path]:
    """
    Source name -> directory, in lookup priority order.
    """
    return {
        "user": Path.home() / USER_APPS_SUFFIX,
        "flatpak": Path(FLATPAK_APPS_DIR),
        "system": Path(SYSTEM_APPS_DIR),
    }
# -------------------------------------------------
# Settings Model
# -------------------------------------------------
@dataclass
class Settings:
    # ---- Launching ----
    terminal: str = ""              # used when $TERMINAL is unset
    # ---- App Sources ----
    include_flatpak: bool = False   # flatpak exports take part in --all-apps
    def to_dict(self) -> dict:
        return asdict(self)
# -------------------------------------------------
# JSON I/O Helpers
# -------------------------------------------------
def _ensure_parent_dir(p: Path) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
def _read_json(p: Path) -> dict:
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}
def _write_json_atomic(p: Path, obj: dict) -> None:
    _ensure_parent_dir(p)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(p)
def _coerce_bool(val: object, default: bool) -> bool:
    if isinstance(val, bool):
        return val
    if isinstance(val, str):
        v = val.strip().lower()
        if v in ("1", "true", "yes", "on"):
            return True
        if v in ("0", "false", "no", "off"):
            return False
    return default
def _coerce_str(val: object, default: str) -> str:
    if isinstance(val, str):
        return val.strip().strip('"').strip("'")
    return default
# -------------------------------------------------
# Public API
# -------------------------------------------------
def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Loads settings and merges known fields with defaults.
    Unknown keys are ignored (forward/backward compatible).
    """
    target = path or get_config_path()
    raw: dict = {}
    if target.exists():
        raw = _read_json(target)
    s = Settings()  # Defaults
    s.terminal = _coerce_str(raw.get("terminal"), s.terminal)
    s.include_flatpak = _coerce_bool(raw.get("include_flatpak"), s.include_flatpak)
    return s
def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    target = path or get_config_path()
    _write_json_atomic(target, settings.to_dict())
    return target
def resolve_terminal(settings: Settings, environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Terminal emulator for Terminal=true entries: $TERMINAL first, then
    the settings file. None means such entries cannot be launched.
    """
    env = os.environ if environ is None else environ
    term = (env.get(TERMINAL_ENV) or "").strip()
    if term:
        return term
    return settings.terminal or None
