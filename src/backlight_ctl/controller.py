from __future__ import annotations

import logging
from dataclasses import dataclass, field

from backlight_ctl.command import DEC, GET, INC, LIST, SET, Action, Command
from backlight_ctl.config import Settings
from backlight_ctl.percent import clamp, format_percentage, to_percentage, to_raw
from backlight_ctl.system.backlight import Backlight, BacklightClass
from backlight_ctl.system.logind import LogindBrightness

logger = logging.getLogger(__name__)


class NoDriverError(RuntimeError):
    pass


class UnsupportedDeviceError(RuntimeError):
    pass


class WriteDeniedError(PermissionError):
    pass


@dataclass
class Controller:
    settings: Settings = field(default_factory=Settings)
    verbose: bool = False
    use_logind: bool = False

    def __post_init__(self) -> None:
        self._backlights = BacklightClass(self.settings.backlight_dir)
        self._logind = LogindBrightness(self.settings)

    def _info(self, msg: str, *args: object) -> None:
        if self.verbose:
            logger.info(msg, *args)

    def resolve_driver(self, driver: str | None) -> Backlight:
        if driver is None:
            found = self._backlights.list_devices()
            if not found:
                raise NoDriverError("No driver found")
            if len(found) > 1:
                logger.warning("Multiple drivers found: %s; using %s", ", ".join(found), found[0])
            driver = found[0]
        self._info("Using driver %s", driver)
        return self._backlights.device(driver)

    def _current(self, bl: Backlight, max_brightness: int) -> float:
        raw = bl.brightness()
        pct = to_percentage(raw, max_brightness)
        self._info("Brightness: %d/%d (%s%%)", raw, max_brightness, format_percentage(pct))
        return pct

    def _write(self, bl: Backlight, max_brightness: int, target: float) -> float:
        target, clamped = clamp(target)
        if clamped:
            logger.warning("Brightness out of range, clamped to %s%%", format_percentage(target))
        raw = to_raw(max_brightness, target)
        self._info("Writing brightness %d", raw)
        if self.use_logind:
            self._logind.set_brightness(bl.name, raw)
        else:
            try:
                bl.set_brightness(raw)
            except PermissionError as e:
                err = WriteDeniedError(*e.args)
                err.filename = e.filename
                raise err from e
        return self._current(bl, max_brightness)

    def run(self, command: Command) -> str:
        action: Action = command.action
        if action.kind == LIST:
            return "\n".join(self._backlights.list_devices())

        bl = self.resolve_driver(command.driver)
        max_brightness = bl.max_brightness()
        if max_brightness <= 0:
            raise UnsupportedDeviceError(f"{bl.name} reports max_brightness {max_brightness}")
        # Read for every action, Set included, so verbose output always shows it.
        current = self._current(bl, max_brightness)

        if action.kind == GET:
            result = current
        elif action.kind == INC:
            result = self._write(bl, max_brightness, current + action.amount)
        elif action.kind == DEC:
            result = self._write(bl, max_brightness, current - action.amount)
        elif action.kind == SET:
            result = self._write(bl, max_brightness, action.amount)
        else:
            raise ValueError(f"Unknown action: {action.kind}")
        return format_percentage(result)
