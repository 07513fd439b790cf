"""Test command-line args and settings."""
import argparse
import pathlib

import pytest

from simpledate import config
from simpledate.model.date_field import SimpleDateField
from simpledate.model.subfields import FieldOrder


DATA_PATH = pathlib.Path(__file__).parent / "data"


def test_default_settings(settings: config.Settings) -> None:
    """Defaults match the original field behavior."""
    # Assert
    assert settings.order == FieldOrder.DMY
    assert settings.year_filler == "19"
    assert settings.legacy_year_routing
    assert settings.invalid_date_message == "Please enter a valid date"


def test_read_config(settings: config.Settings) -> None:
    """Read the configuration from a TOML file."""
    # Arrange
    args = argparse.Namespace(config_path=DATA_PATH / "simpledate.toml")
    # Act
    settings.update_from_args(args)
    # Assert
    assert settings.config_path == DATA_PATH / "simpledate.toml"
    assert settings.order == FieldOrder.YMD
    assert settings.year_filler == "20"
    assert not settings.legacy_year_routing
    assert settings.invalid_date_message == "Enter a real date"
    assert settings.day_invalid_message == "Day invalid"
    assert settings.log_level == "DEBUG"


def test_order_arg_overrides_file(settings: config.Settings) -> None:
    """The order argument wins over the config file."""
    # Arrange
    args = argparse.Namespace(config_path=DATA_PATH / "simpledate.toml", order="MDY")
    # Act
    settings.update_from_args(args)
    # Assert
    assert settings.order == FieldOrder.MDY


def test_settings_used_by_field(settings: config.Settings) -> None:
    """Fields pick up filler and messages from settings."""
    # Arrange
    settings.update_from_args(
        argparse.Namespace(config_path=DATA_PATH / "simpledate.toml")
    )
    field = SimpleDateField("dob", order=settings.order, settings=settings)
    # Act
    field.set_submitted_value({"_Day": "1", "_Month": "2", "_Year": "3"})
    # Assert
    assert [sub.value for sub in field.children] == ["2003", "02", "01"]
    assert field.value == "2003-02-01"


def test_missing_config_file(settings: config.Settings) -> None:
    """A missing config file raises a ConfigError."""
    # Arrange
    args = argparse.Namespace(config_path=DATA_PATH / "missing.toml")
    # Act, Assert
    with pytest.raises(config.ConfigError) as excinfo:
        settings.update_from_args(args)
    assert excinfo.value.error_type == config.ConfigError.ErrorType.PATH_DOES_NOT_EXIST


def test_config_path_is_folder(settings: config.Settings) -> None:
    """A folder is not a config file."""
    # Arrange
    args = argparse.Namespace(config_path=DATA_PATH)
    # Act, Assert
    with pytest.raises(config.ConfigError) as excinfo:
        settings.update_from_args(args)
    assert excinfo.value.error_type == config.ConfigError.ErrorType.NOT_A_FILE


@pytest.mark.parametrize(
    "args",
    [
        argparse.Namespace(config_path=DATA_PATH / "bad-order.toml"),
        argparse.Namespace(config_path=None, order="dym"),
    ],
)
def test_invalid_order(settings: config.Settings, args: argparse.Namespace) -> None:
    """Unknown order names are rejected."""
    # Act, Assert
    with pytest.raises(config.ConfigError) as excinfo:
        settings.update_from_args(args)
    assert excinfo.value.error_type == config.ConfigError.ErrorType.INVALID_VALUE


def test_field_order_from_name() -> None:
    """Orders can be looked up by name or number."""
    # Act, Assert
    assert FieldOrder.from_name("ymd") == FieldOrder.YMD
    assert FieldOrder.from_name(" Mdy ") == FieldOrder.MDY
    assert FieldOrder.from_name(1) == FieldOrder.DMY
    with pytest.raises(ValueError):
        FieldOrder.from_name("xyz")
