from __future__ import annotations

import asyncio
from dataclasses import dataclass

from dbus_next import BusType
from dbus_next.aio import MessageBus
from dbus_next.errors import AuthError, DBusError, InvalidAddressError

from backlight_ctl.config import Settings


@dataclass(frozen=True)
class LogindBrightness:
    """Writes brightness through systemd-logind's session SetBrightness call.

    logind performs the sysfs write on behalf of the active session, so this
    works for users without write access to the brightness file.
    """

    settings: Settings

    async def _call(self, device: str, value: int) -> None:
        s = self.settings
        bus = await MessageBus(bus_type=BusType.SYSTEM).connect()
        try:
            introspection = await bus.introspect(s.logind_bus, s.logind_session_path)
            obj = bus.get_proxy_object(s.logind_bus, s.logind_session_path, introspection)
            iface = obj.get_interface(s.logind_session_iface)
            await iface.call_set_brightness(s.subsystem, device, value)
        finally:
            bus.disconnect()

    def set_brightness(self, device: str, value: int) -> None:
        try:
            asyncio.run(self._call(device, int(value)))
        except DBusError as e:
            raise OSError(f"logind SetBrightness failed: {e.text}") from e
        except (AuthError, InvalidAddressError) as e:
            raise OSError(f"cannot reach logind on the system bus: {e}") from e
