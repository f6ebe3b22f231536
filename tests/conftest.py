"""Shared fixtures for picklist tests."""

from unittest.mock import MagicMock

import pytest

from picklist.i18n import init_i18n


@pytest.fixture(autouse=True, scope="session")
def english_locale():
    """Render every test with the English catalog."""
    init_i18n("en")


@pytest.fixture
def options() -> list[tuple[str, str]]:
    return [("A", "Alpha"), ("B", "Beta")]


@pytest.fixture
def on_state_change() -> MagicMock:
    return MagicMock()


@pytest.fixture
def on_selection_change() -> MagicMock:
    return MagicMock()
