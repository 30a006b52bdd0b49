from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from backlight_ctl import __version__
from backlight_ctl.command import (
    HelpRequested,
    UsageError,
    VersionRequested,
    parse_args,
    usage,
)
from backlight_ctl.config import Settings
from backlight_ctl.controller import (
    Controller,
    NoDriverError,
    UnsupportedDeviceError,
    WriteDeniedError,
)
from backlight_ctl.system.backlight import AttributeParseError, DeviceNameError

PERMISSION_HINT = """\
You don't have permission to write the backlight brightness file.
Either pass -logind to let systemd-logind write it for your session, or add
a udev rule such as /etc/udev/rules.d/90-backlight.rules:

ACTION=="add", SUBSYSTEM=="backlight", RUN+="/bin/chgrp video /sys/class/backlight/%k/brightness"
ACTION=="add", SUBSYSTEM=="backlight", RUN+="/bin/chmod g+w /sys/class/backlight/%k/brightness"

and add yourself to the video group."""


class _MaxLevelFilter(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def configure_logging() -> None:
    """Route warnings to stderr and verbose diagnostics to stdout."""

    log = logging.getLogger("backlight_ctl")
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.INFO)

    out = logging.StreamHandler(sys.stdout)
    out.setLevel(logging.INFO)
    out.addFilter(_MaxLevelFilter(logging.WARNING))
    out.setFormatter(logging.Formatter("%(message)s"))

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(logging.WARNING)
    err.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    log.addHandler(out)
    log.addHandler(err)


def _fail(message: str) -> SystemExit:
    print(message, file=sys.stderr)
    return SystemExit(1)


def main(argv: Sequence[str] | None = None, settings: Settings | None = None) -> None:
    prog = os.path.basename(sys.argv[0])
    if prog in ("", "__main__.py"):
        prog = "backlight-ctl"
    args = sys.argv[1:] if argv is None else list(argv)
    configure_logging()

    try:
        cmd = parse_args(args)
    except HelpRequested:
        print(usage(prog), end="")
        raise SystemExit(0) from None
    except VersionRequested:
        print(__version__)
        raise SystemExit(0) from None
    except UsageError as e:
        print(f"{prog}: {e}", file=sys.stderr)
        print(usage(prog), end="", file=sys.stderr)
        raise SystemExit(1) from None

    ctl = Controller(settings or Settings(), verbose=cmd.verbose, use_logind=cmd.use_logind)
    try:
        result = ctl.run(cmd)
    except WriteDeniedError as e:
        raise _fail(f"{prog}: {e}\n{PERMISSION_HINT}") from e
    except OSError as e:
        raise _fail(f"{prog}: {e}") from e
    except (AttributeParseError, DeviceNameError, NoDriverError, UnsupportedDeviceError) as e:
        raise _fail(f"{prog}: {e}") from e

    if result:
        print(result)
