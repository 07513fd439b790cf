"""Data entry validator classes.

FormValidator collects errors reported by fields during a validation pass and
hands them back to the fields as messages. The textual Validator subclasses
give immediate feedback inside Input widgets.
"""

import dataclasses
import datetime
import logging
from collections.abc import Iterable
from typing import Optional, Protocol

from textual import validation

from simpledate.model import dates
from simpledate.model.subfields import MessageCast, MessageType


logger = logging.getLogger(__name__)


class ValidationCollector(Protocol):
    """Receives errors from fields during validation."""

    def validation_error(
        self,
        field_name: str,
        message: str,
        message_type: MessageType = MessageType.ERROR,
    ) -> None: ...


class MessageTarget(Protocol):
    """A field that can display messages."""

    name: str

    def set_message(
        self,
        message: Optional[str],
        message_type: MessageType = MessageType.ERROR,
        message_cast: MessageCast = MessageCast.TEXT,
    ) -> object: ...


@dataclasses.dataclass(frozen=True)
class ValidationError:
    """An error reported by a field."""

    field_name: str
    message: str
    message_type: MessageType = MessageType.ERROR


class FormValidator:
    """Accumulate validation errors for a form."""

    errors: list[ValidationError]
    """Errors in the order they were reported."""

    def __init__(self) -> None:
        self.errors = []

    def validation_error(
        self,
        field_name: str,
        message: str,
        message_type: MessageType = MessageType.ERROR,
    ) -> None:
        """Record an error against a field."""
        logger.debug("Validation error on %s: %s", field_name, message)
        self.errors.append(ValidationError(field_name, message, message_type))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages_for(self, field_name: str) -> list[str]:
        """Messages reported for a single field."""
        return [err.message for err in self.errors if err.field_name == field_name]

    def validate(self, fields: Iterable) -> bool:
        """Validate every field, then attach the resulting messages.

        All fields are validated even after one fails.
        """
        fields = list(fields)
        results = [field.validate(self) for field in fields]
        self.apply_to(fields)
        return all(results)

    def apply_to(self, fields: Iterable[MessageTarget]) -> None:
        """Send each recorded error to the field it was reported against."""
        by_name = {field.name: field for field in fields}
        for error in self.errors:
            field = by_name.get(error.field_name)
            if field is None:
                logger.warning("No field named %r for message", error.field_name)
                continue
            field.set_message(error.message, error.message_type, MessageCast.TEXT)

    def clear(self) -> None:
        self.errors.clear()


class DateValidator(validation.Validator):
    """Validate user input."""

    strict: bool
    """Require a YYYY-MM-DD string when True."""

    def __init__(self, strict: bool = False, clock: Optional[dates.Clock] = None) -> None:
        super().__init__()
        self.strict = strict
        self.clock = clock if clock is not None else datetime.datetime.now

    def validate(self, value: str) -> validation.ValidationResult:
        """Verify input is a valid date."""
        if self.strict:
            if dates.is_valid_iso_date(value):
                return self.success()
            return self.failure("Enter a date as YYYY-MM-DD.")
        if dates.parse_date(value, self.clock) is None:
            return self.failure(f"Unable to interpret {value!r} as a date.")
        return self.success()


class DigitsValidator(validation.Validator):
    """Allow empty input or up to max_length digits."""

    def __init__(self, max_length: int, label: str) -> None:
        super().__init__()
        self.max_length = max_length
        self.label = label

    def validate(self, value: str) -> validation.ValidationResult:
        if value and not (value.isascii() and value.isdigit()):
            return self.failure(f"{self.label} must be a number.")
        if len(value) > self.max_length:
            return self.failure(
                f"{self.label} must be at most {self.max_length} digits."
            )
        return self.success()
