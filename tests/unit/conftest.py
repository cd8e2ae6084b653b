"""Roster fixtures shared by the unit tests."""

from __future__ import annotations

import sys
from datetime import datetime

import pytest
from loguru import logger

from rosterlens.core.config import AppSettings
from tests.fakes import ROSTER_HEADERS, roster_row


@pytest.fixture
def headers() -> list[str]:
    return list(ROSTER_HEADERS)


@pytest.fixture
def rows() -> list[list[object]]:
    return [
        roster_row(1, "Anna", "Alice", 50, "ja", start=datetime(2020, 1, 15)),
        roster_row(2, "Bram", "Alice", 100, "nee"),
        roster_row(3, "Carla", "Bob", 80, "Yes"),
        roster_row(4, "Daan", "Bob", "60", None),
        roster_row(5, "Eva", None, 40, "ja"),
    ]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(environment="test")


@pytest.fixture(autouse=True)
def quiet_logger():
    logger.remove()
    yield
    logger.remove()
    logger.add(sys.stderr)
