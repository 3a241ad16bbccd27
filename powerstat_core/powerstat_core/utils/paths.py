from __future__ import annotations
import os
from pathlib import Path

"""
Config path resolver with env overrides.
Priority:
1) Explicit env override: POWERSTAT_CONFIG_DIR
2) If running as root (uid==0): /etc/powerstat
3) XDG (user scope): $XDG_CONFIG_HOME/powerstat or ~/.config/powerstat
"""

CONFIG_FILENAME = "powerstat.yml"


def _is_root() -> bool:
    try:
        return os.geteuid() == 0
    except AttributeError:
        return False


def config_dir() -> str:
    if os.environ.get("POWERSTAT_CONFIG_DIR"):
        return os.environ["POWERSTAT_CONFIG_DIR"]
    if _is_root():
        return "/etc/powerstat"
    xdg = os.environ.get("XDG_CONFIG_HOME") or os.path.join(Path.home(), ".config")
    return os.path.join(xdg, "powerstat")


def config_path() -> str:
    return os.path.join(config_dir(), CONFIG_FILENAME)
