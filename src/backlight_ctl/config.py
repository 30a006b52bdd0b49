from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_BACKLIGHT_DIR = Path("/sys/class/backlight")


@dataclass(frozen=True)
class Settings:
    backlight_dir: Path = DEFAULT_BACKLIGHT_DIR
    subsystem: str = "backlight"
    logind_bus: str = "org.freedesktop.login1"
    logind_session_path: str = "/org/freedesktop/login1/session/auto"
    logind_session_iface: str = "org.freedesktop.login1.Session"
