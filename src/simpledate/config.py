"""Manage configuration settings for the simpledate package."""

import argparse
import dataclasses
import enum
import logging
import pathlib
import tomllib
from typing import Optional

from simpledate.model import subfields


CONFIG_FILE_NAME = "simpledate.toml"

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Errors when setting or accessing settings."""

    class ErrorType(enum.Enum):
        NOT_A_FILE = 1
        PATH_DOES_NOT_EXIST = 2
        INVALID_VALUE = 3

    error_type: ErrorType

    def __init__(self, message: str, error_type: ErrorType) -> None:
        """Set error type."""
        super().__init__(message)
        self.error_type = error_type


@dataclasses.dataclass
class Settings:
    """Configuration data for date fields.

    year_filler is prepended to short year inputs and extended with zeros to
    four characters, so "5" becomes "1905" and "" becomes "1900".
    legacy_year_routing sends "[_Year]" messages to the month sub-field.
    """

    config_path: Optional[pathlib.Path] = None
    order: subfields.FieldOrder = subfields.FieldOrder.DMY
    year_filler: str = "19"
    legacy_year_routing: bool = True
    month_invalid_message: str = "Month invalid"
    day_invalid_message: str = "Day invalid"
    invalid_date_message: str = "Please enter a valid date"
    log_level: str = "WARNING"

    def update_from_args(self, args: argparse.Namespace) -> None:
        """Read settings."""
        config_path = getattr(args, "config_path", None)
        if config_path is not None:
            self.config_path = self._get_full_path(config_path)
            self._read_config_file()
        order = getattr(args, "order", None)
        if order is not None:
            self.order = self._to_field_order(order)

    @staticmethod
    def _to_field_order(name: str) -> subfields.FieldOrder:
        """Convert an order name such as "ymd" to a FieldOrder."""
        try:
            return subfields.FieldOrder.from_name(name)
        except ValueError as err:
            raise ConfigError(str(err), ConfigError.ErrorType.INVALID_VALUE) from err

    @staticmethod
    def _get_full_path(path: pathlib.Path | str) -> pathlib.Path:
        """Convert path arg to an absolute path to an existing file."""
        if isinstance(path, str):
            path = pathlib.Path(path)
        full_path = path if path.is_absolute() else pathlib.Path.cwd() / path
        if not full_path.exists():
            raise ConfigError(
                f"Config file {full_path} does not exist.",
                ConfigError.ErrorType.PATH_DOES_NOT_EXIST,
            )
        if not full_path.is_file():
            raise ConfigError(
                f"Config path {full_path} is not a file.",
                ConfigError.ErrorType.NOT_A_FILE,
            )
        return full_path

    def _read_config_file(self) -> None:
        """Read TOML configuration file."""
        if self.config_path is None:
            return
        app_settings = dataclasses.asdict(self)
        with open(self.config_path, "rb") as toml_file:
            file_settings = tomllib.load(toml_file)
        for setting_name, value in file_settings.items():
            if setting_name not in app_settings or setting_name == "config_path":
                logger.warning("Ignoring unknown setting %r", setting_name)
                continue
            if setting_name == "order":
                value = self._to_field_order(value)
            setattr(self, setting_name, value)


# Module-level settings instance shared by every module that imports
# simpledate.config.
settings = Settings()
