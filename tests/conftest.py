"""Pytest fixtures."""

import datetime
import pathlib

import pytest

from simpledate import config
from simpledate.features import validators
from simpledate.model.date_field import SimpleDateField


TEST_FOLDER = pathlib.Path(__file__).parent
DATA_FOLDER = TEST_FOLDER / "data"
CONFIG_PATH = DATA_FOLDER / "simpledate.toml"

NOW = datetime.datetime(2024, 6, 15, 10, 30)


@pytest.fixture
def clock():
    """Clock fixed at 2024-06-15 10:30."""
    return lambda: NOW


@pytest.fixture
def settings() -> config.Settings:
    """Default settings, independent of the module-level singleton."""
    return config.Settings()


@pytest.fixture
def date_field(clock, settings: config.Settings) -> SimpleDateField:
    """An empty date field in day-month-year order."""
    return SimpleDateField("dob", "Date of Birth", clock=clock, settings=settings)


@pytest.fixture
def form_validator() -> validators.FormValidator:
    """Collects validation errors."""
    return validators.FormValidator()
