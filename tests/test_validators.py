"""Test the form validator and input validators."""

from simpledate.features import validators
from simpledate.model.date_field import SimpleDateField
from simpledate.model.subfields import MessageType


def test_collect_errors(form_validator: validators.FormValidator) -> None:
    """Errors are kept in order and grouped by field name."""
    # Act
    form_validator.validation_error("start", "first")
    form_validator.validation_error("end", "second", MessageType.WARNING)
    form_validator.validation_error("start", "third")
    # Assert
    assert not form_validator.is_valid
    assert form_validator.messages_for("start") == ["first", "third"]
    assert form_validator.errors[1] == validators.ValidationError(
        "end", "second", MessageType.WARNING
    )
    # Act
    form_validator.clear()
    # Assert
    assert form_validator.is_valid


def test_validate_several_fields(
    settings, form_validator: validators.FormValidator
) -> None:
    """Every field is validated and gets its own messages."""
    # Arrange
    start = SimpleDateField("start", settings=settings)
    end = SimpleDateField("end", settings=settings)
    start.set_submitted_value({"_Day": "31", "_Month": "04", "_Year": "2021"})
    end.set_submitted_value({"_Day": "30", "_Month": "04", "_Year": "2021"})
    # Act
    valid = form_validator.validate([start, end])
    # Assert
    assert not valid
    assert start.day_field.message == "Day invalid"
    assert start.message == "Please enter a valid date"
    assert end.message is None
    assert end.value == "2021-04-30"


def test_apply_to_unknown_field(
    date_field: SimpleDateField, form_validator: validators.FormValidator
) -> None:
    """Errors for fields that are not present are skipped."""
    # Arrange
    form_validator.validation_error("missing", "Please enter a valid date")
    # Act
    form_validator.apply_to([date_field])
    # Assert
    assert date_field.message is None


def test_date_validator_permissive(clock) -> None:
    """Permissive validation accepts anything that parses."""
    # Arrange
    validator = validators.DateValidator(clock=clock)
    # Act, Assert
    assert validator.validate("2020-02-29").is_valid
    assert validator.validate("tomorrow").is_valid
    assert not validator.validate("banana").is_valid


def test_date_validator_strict() -> None:
    """Strict validation requires YYYY-MM-DD."""
    # Arrange
    validator = validators.DateValidator(strict=True)
    # Act, Assert
    assert validator.validate("2020-02-29").is_valid
    assert not validator.validate("2020-2-29").is_valid
    assert not validator.validate("2021-02-29").is_valid


def test_digits_validator() -> None:
    """Only short runs of ASCII digits are allowed."""
    # Arrange
    validator = validators.DigitsValidator(2, "Day")
    # Act, Assert
    assert validator.validate("").is_valid
    assert validator.validate("31").is_valid
    assert not validator.validate("3a").is_valid
    assert not validator.validate("123").is_valid
    assert not validator.validate("١٢").is_valid
