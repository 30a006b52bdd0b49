from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from backlight_ctl.config import Settings


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    yield
    log = logging.getLogger("backlight_ctl")
    for h in list(log.handlers):
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)


@pytest.fixture
def make_device(tmp_path: Path) -> Callable[..., Path]:
    def _make(name: str, brightness: int | str = 500, max_brightness: int | str = 1000) -> Path:
        d = tmp_path / name
        d.mkdir()
        (d / "brightness").write_text(f"{brightness}\n", encoding="utf-8")
        (d / "max_brightness").write_text(f"{max_brightness}\n", encoding="utf-8")
        return d

    return _make


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(backlight_dir=tmp_path)
