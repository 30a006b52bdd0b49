from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_NUMERIC_RE = re.compile(rb"([0-9]+)\n*")


class AttributeParseError(ValueError):
    def __init__(self, path: Path, content: bytes):
        super().__init__(f"Unexpected content {content!r} in {path}")
        self.path = path
        self.content = content


class DeviceNameError(ValueError):
    pass


@dataclass(frozen=True)
class Backlight:
    sysfs_dir: Path

    @property
    def name(self) -> str:
        return self.sysfs_dir.name

    def read_attribute(self, attribute: str) -> int:
        path = self.sysfs_dir / attribute
        with path.open("rb") as f:
            line = f.readline()
        m = _NUMERIC_RE.fullmatch(line)
        if not m:
            raise AttributeParseError(path, line)
        return int(m.group(1))

    def write_attribute(self, attribute: str, value: int) -> None:
        (self.sysfs_dir / attribute).write_text(str(int(value)), encoding="utf-8")

    def brightness(self) -> int:
        return self.read_attribute("brightness")

    def max_brightness(self) -> int:
        return self.read_attribute("max_brightness")

    def set_brightness(self, value: int) -> None:
        self.write_attribute("brightness", value)


@dataclass(frozen=True)
class BacklightClass:
    """The kernel's backlight class directory, one entry per device."""

    root: Path

    def list_devices(self) -> list[str]:
        # Entries are usually symlinks into /sys/devices.
        if not self.root.is_dir():
            return []
        return sorted(p.name for p in self.root.iterdir())

    def device(self, name: str) -> Backlight:
        if not name or name in (".", "..") or "/" in name:
            raise DeviceNameError(f"Invalid device name: {name!r}")
        return Backlight(self.root / name)
