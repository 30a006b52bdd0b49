"""Parsing of xbacklight-style command lines.

The legacy syntax mixes single-dash long flags (``-set 50``) with bare
shorthand tokens (``+10``, ``-10``, ``=50``), which argparse cannot express,
so arguments are walked by index.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

GET = "get"
SET = "set"
INC = "inc"
DEC = "dec"
LIST = "list"

USAGE = """\
usage: {prog} [options]
  where options are:
  -d <driver> or -driver <driver> or -display <driver>
  -help
  -version
  -verbose or -v
  -list
  -set <percentage> or =<percentage>
  -inc <percentage> or +<percentage>
  -dec <percentage> or -<percentage>
  -get
  -logind (write through systemd-logind instead of sysfs)
  -time <ignored>
  -steps <ignored>
"""

_NUMBER_RE = re.compile(r"([0-9]+(?:\.[0-9]*)?)%?")
_SHORTHAND_RE = re.compile(r"([=+-])([0-9]+(?:\.[0-9]*)?)%?")
_XDISPLAY_RE = re.compile(r":[0-9]")

_DRIVER_FLAGS = ("-d", "-driver", "-display")
_IGNORED_FLAGS = ("-time", "-steps")
_ACTION_FLAGS = {"-set": SET, "-inc": INC, "-dec": DEC}
_SHORTHAND = {"=": SET, "+": INC, "-": DEC}


class UsageError(ValueError):
    pass


class HelpRequested(Exception):
    pass


class VersionRequested(Exception):
    pass


@dataclass(frozen=True)
class Action:
    kind: str
    amount: float = 0.0


@dataclass(frozen=True)
class Command:
    driver: str | None = None
    action: Action = Action(GET)
    verbose: bool = False
    use_logind: bool = False


def usage(prog: str) -> str:
    return USAGE.format(prog=prog)


def _value(args: Sequence[str], i: int, flag: str) -> str:
    if i >= len(args):
        raise UsageError(f"{flag} requires an argument")
    return args[i]


def _number(text: str, flag: str) -> float:
    m = _NUMBER_RE.fullmatch(text)
    if not m:
        raise UsageError(f"{flag}: invalid percentage {text!r}")
    return float(m.group(1))


def _one_action(current: Action | None, new: Action) -> Action:
    if current is not None:
        raise UsageError("only one action allowed")
    return new


def parse_args(argv: Sequence[str]) -> Command:
    args = tuple(argv)
    driver: str | None = None
    action: Action | None = None
    verbose = False
    use_logind = False

    i = 0
    while i < len(args):
        arg = args[i]
        i += 1

        if arg in ("-h", "-help"):
            raise HelpRequested()
        elif arg == "-version":
            raise VersionRequested()
        elif arg in ("-v", "-verbose"):
            verbose = True
            logger.info("Verbose output enabled")
        elif arg in _DRIVER_FLAGS:
            name = _value(args, i, arg)
            i += 1
            if _XDISPLAY_RE.match(name):
                logger.warning("%s looks like an X display, not a driver; ignoring it", name)
                continue
            if driver is not None:
                logger.warning("Driver already set to %s, replacing it with %s", driver, name)
            driver = name
            if verbose:
                logger.info("Driver: %s", driver)
        elif arg in _ACTION_FLAGS:
            amount = _number(_value(args, i, arg), arg)
            i += 1
            action = _one_action(action, Action(_ACTION_FLAGS[arg], amount))
        elif arg == "-get":
            action = _one_action(action, Action(GET))
        elif arg == "-list":
            action = _one_action(action, Action(LIST))
        elif arg == "-logind":
            use_logind = True
        elif arg in _IGNORED_FLAGS:
            _value(args, i, arg)
            i += 1
            logger.warning("%s is not supported, ignoring it", arg)
        else:
            m = _SHORTHAND_RE.fullmatch(arg)
            if not m:
                raise UsageError(f"Unrecognized argument: {arg}")
            action = _one_action(action, Action(_SHORTHAND[m.group(1)], float(m.group(2))))

    if action is None:
        action = Action(GET)
    if verbose:
        logger.info("Action: %s %g", action.kind, action.amount)
    return Command(
        driver=driver,
        action=action,
        verbose=verbose,
        use_logind=use_logind,
    )
