"""
Pytest configuration and fixtures for the ganttline tests.

Architecture:
    - Factories: build items and tick lists
    - Fixtures: a fixed "now", a temporary configuration directory and a
      header state that is restored after every test
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterator

import pendulum
import pytest

from ganttline import configuration
from ganttline.model.item import Item
from ganttline.model.tick import Tick
from ganttline.repository.configuration import CONFIGURATION_REPO
from ganttline.view import state as view_state


# =============================================================================
# Time Utilities
# =============================================================================


FIXED_NOW = pendulum.datetime(2024, 1, 5, 12, 0, tz="UTC")


def utc(year: int, month: int, day: int, hour: int = 0) -> pendulum.DateTime:
    return pendulum.datetime(year, month, day, hour, tz="UTC")


# =============================================================================
# Factories
# =============================================================================


def make_item(
    item_id: Any = 1,
    priority: float = 1,
    name: str = "Item",
    start: pendulum.DateTime | None = None,
    end: pendulum.DateTime | None = None,
    **extra: Any,
) -> Item:
    item: Item = {
        "id": item_id,
        "priority": priority,
        "name": name,
        "start": start if start is not None else utc(2024, 1, 1),
        "end": end if end is not None else utc(2024, 1, 10),
    }
    item.update(extra)  # type: ignore[typeddict-item]
    return item


def make_ticks(xs: list[float], label: str = "Jan") -> list[Tick]:
    return [{"x": x, "label": label, "is_major": False} for x in xs]


@pytest.fixture
def now() -> pendulum.DateTime:
    return FIXED_NOW


@pytest.fixture
def two_items() -> list[Item]:
    return [
        make_item(2, priority=2, name="Second", start=utc(2024, 2, 1), end=utc(2024, 2, 20)),
        make_item(1, priority=1, name="First", start=utc(2024, 1, 1), end=utc(2024, 1, 10)),
    ]


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary directory."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reload()
    yield config_path
    CONFIGURATION_REPO.reload()


@pytest.fixture(autouse=True)
def restore_header_state() -> Iterator[None]:
    yield
    view_state.set_show_header(True)
