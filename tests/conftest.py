import pytest

import sqlfrags.settings.main as settings_main
from sqlfrags import TableRef


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop the settings singleton so environment changes never leak between tests."""
    settings_main._settings = None
    yield
    settings_main._settings = None


@pytest.fixture
def employee():
    return TableRef("Employee")


@pytest.fixture
def organization():
    return TableRef("Organization")
