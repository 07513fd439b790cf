"""Composite date field made of day, month, and year sub-fields.

A SimpleDateField keeps two pieces of state:

* value: the canonical YYYY-MM-DD string, or None when no valid date is known.
  When not None it is always a real calendar date.
* raw_value: the last submitted mapping of sub-field strings. It is set only
  by set_submitted_value() and cleared by every call to set_value(), so
  validate() only ever rejects dates that a user actually typed.
"""

import datetime
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Optional

from simpledate import config
from simpledate.model import dates
from simpledate.model.subfields import (
    FieldOrder,
    MessageCast,
    MessageType,
    Slot,
    SubField,
    TextSubField,
)

if TYPE_CHECKING:
    from simpledate.features import validators


logger = logging.getLogger(__name__)

_DEFAULT_DAYS_IN_MONTH = object()


class SimpleDateField:
    """Date entry split into three numeric inputs."""

    name: str
    """Form field name. Sub-fields are named name[_Day], name[_Month], etc."""
    title: str
    """Label shown for the whole field."""
    order: FieldOrder
    """Display order of the sub-fields."""
    value: Optional[str]
    """Canonical YYYY-MM-DD value or None."""
    raw_value: Optional[Any]
    """Last submitted sub-field mapping, or None since the last set_value()."""
    message: Optional[str]
    """Message attached to the field as a whole."""
    message_type: MessageType
    message_cast: MessageCast

    def __init__(
        self,
        name: str,
        title: Optional[str] = None,
        value: "str | datetime.date | None" = None,
        order: FieldOrder | int = FieldOrder.DMY,
        *,
        clock: Optional[dates.Clock] = None,
        days_in_month: Any = _DEFAULT_DAYS_IN_MONTH,
        settings: Optional[config.Settings] = None,
    ) -> None:
        """Create the sub-fields and set the initial value.

        clock supplies the reference time for permissive parsing and defaults
        to datetime.datetime.now. Pass days_in_month=None to skip the
        day-out-of-range check during validation.
        """
        self.name = name
        self.title = title if title is not None else self._name_to_label(name)
        self.order = FieldOrder.coerce(order)
        self.settings = settings if settings is not None else config.settings
        self.clock = clock if clock is not None else datetime.datetime.now
        self.days_in_month: Optional[dates.DaysInMonth] = (
            dates.days_in_month
            if days_in_month is _DEFAULT_DAYS_IN_MONTH
            else days_in_month
        )
        self._fields: dict[Slot, SubField] = {
            slot: TextSubField.for_slot(name, slot) for slot in Slot
        }
        self._children: Optional[list[SubField]] = None
        self.value = None
        self.raw_value = None
        self.message = None
        self.message_type = MessageType.ERROR
        self.message_cast = MessageCast.TEXT
        self.set_value(value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, value={self.value!r}, "
            f"order={self.order.name})"
        )

    @staticmethod
    def _name_to_label(name: str) -> str:
        """Convert a field name like 'date_of_birth' to 'Date of birth'."""
        return name.replace("_", " ").strip().capitalize()

    # Sub-field set
    # -------------

    def get_field(self, slot: Slot | str) -> SubField:
        """Sub-field for a slot."""
        return self._fields[Slot(slot)]

    def set_field(self, slot: Slot | str, field: SubField) -> "SimpleDateField":
        """Replace the sub-field for a slot with a custom implementation."""
        self._fields[Slot(slot)] = field
        return self

    @property
    def day_field(self) -> SubField:
        return self._fields[Slot.DAY]

    @day_field.setter
    def day_field(self, field: SubField) -> None:
        self.set_field(Slot.DAY, field)

    @property
    def month_field(self) -> SubField:
        return self._fields[Slot.MONTH]

    @month_field.setter
    def month_field(self, field: SubField) -> None:
        self.set_field(Slot.MONTH, field)

    @property
    def year_field(self) -> SubField:
        return self._fields[Slot.YEAR]

    @year_field.setter
    def year_field(self, field: SubField) -> None:
        self.set_field(Slot.YEAR, field)

    @property
    def children(self) -> list[SubField]:
        """Sub-fields in display order."""
        if self._children is not None:
            return list(self._children)
        return [self._fields[slot] for slot in self.order.slots]

    def set_children(self, children: Optional[Sequence[SubField]]) -> "SimpleDateField":
        """Override the displayed sub-fields. Pass None to restore the default."""
        self._children = list(children) if children is not None else None
        return self

    def set_display(self, day: str, month: str, year: str) -> "SimpleDateField":
        """Push display strings into the sub-fields without any validation."""
        self.day_field.value = day
        self.month_field.value = month
        self.year_field.value = year
        return self

    # Normalizer
    # ----------

    def set_value(self, value: "str | datetime.date | None") -> "SimpleDateField":
        """Set the date programmatically.

        Strings are parsed as YYYY-MM-DD, then permissively relative to the
        clock. Unparseable values leave the field empty without raising.
        """
        self.raw_value = None
        self._assign(value)
        return self

    def _assign(self, value: "str | datetime.date | None") -> None:
        """Set the canonical value and sync displays. Leaves raw_value alone."""
        parsed = dates.parse_date(value, self.clock)
        if parsed is None:
            if value:
                logger.debug("%s: could not interpret %r as a date", self.name, value)
            self.value = None
            return
        self.value = dates.to_iso(parsed)
        self.set_display(
            f"{parsed.day:02d}", f"{parsed.month:02d}", f"{parsed.year:04d}"
        )

    def set_submitted_value(self, value: Any) -> "SimpleDateField":
        """Accept a mapping of user input keyed by '_Day', '_Month', '_Year'.

        Inputs are padded and written back to the sub-fields even when they
        do not form a valid date, so the user sees what they typed.
        """
        self.value = None
        if not isinstance(value, Mapping):
            self.raw_value = value
            return self
        self.raw_value = {slot.value: str(value.get(slot.value) or "") for slot in Slot}
        year = dates.pad_left(
            self.raw_value[Slot.YEAR], 4, self.settings.year_filler
        )
        month = dates.pad_left(self.raw_value[Slot.MONTH], 2, "0")
        day = dates.pad_left(self.raw_value[Slot.DAY], 2, "0")
        self.set_display(day, month, year)

        submitted = f"{year}-{month}-{day}"
        if dates.is_valid_iso_date(submitted):
            self._assign(submitted)
        else:
            logger.debug("%s: submitted %r is not a valid date", self.name, submitted)
        return self

    @property
    def date(self) -> Optional[datetime.date]:
        """Canonical value as a datetime.date."""
        if self.value is None:
            return None
        return datetime.date.fromisoformat(self.value)

    def data_value(self) -> Optional[str]:
        """Value to be saved by the persistence layer."""
        return self.value

    def is_empty(self) -> bool:
        return self.value is None

    # Validator
    # ---------

    def validate(self, validator: "validators.ValidationCollector") -> bool:
        """Check a submitted value and report errors to validator.

        Fields that have not been submitted since the last set_value() always
        pass. A failing field reports a generic message, preceded by a
        month or day message when the cause can be narrowed down.
        """
        if self.raw_value is None:
            return True
        if self.value is not None and dates.is_valid_iso_date(self.value):
            return True

        raw = self.raw_value if isinstance(self.raw_value, Mapping) else {}
        year = dates.leading_int(raw.get(Slot.YEAR))
        month = dates.leading_int(raw.get(Slot.MONTH))
        day = dates.leading_int(raw.get(Slot.DAY))
        if month > 0:
            if month > 12:
                validator.validation_error(
                    self.name,
                    f"{Slot.MONTH.tag} {self.settings.month_invalid_message}",
                )
            elif year > 0 and self.days_in_month is not None:
                if day > self.days_in_month(year, month):
                    validator.validation_error(
                        self.name,
                        f"{Slot.DAY.tag} {self.settings.day_invalid_message}",
                    )
        validator.validation_error(self.name, self.settings.invalid_date_message)
        logger.debug("%s: rejected submission %r", self.name, self.raw_value)
        return False

    # Message router
    # --------------

    def set_message(
        self,
        message: Optional[str],
        message_type: MessageType | str = MessageType.ERROR,
        message_cast: MessageCast | str = MessageCast.TEXT,
    ) -> "SimpleDateField":
        """Attach a message, routing tagged messages to a sub-field.

        Messages starting with "[_Month]" or "[_Day]" go to that sub-field
        with the tag removed. "[_Year]" messages go to the month sub-field
        unless settings.legacy_year_routing is False.
        """
        message_type = MessageType(message_type)
        message_cast = MessageCast(message_cast)
        target = self._message_target(message or "")
        if target is None:
            self.message = message
            self.message_type = message_type
            self.message_cast = message_cast
            return self
        slot, field = target
        remainder = (message or "")[len(slot.tag) :].lstrip()
        field.set_message(remainder, message_type, message_cast)
        return self

    def _message_target(self, message: str) -> Optional[tuple[Slot, SubField]]:
        """Find the slot tag at the start of message and the field to receive it."""
        if message.startswith(Slot.YEAR.tag):
            # TODO: drop legacy_year_routing once year messages are confirmed
            # to belong on the year sub-field.
            # set_message() also strips the space that follows any tag, so
            # "[_Month] Month invalid" is routed as "Month invalid".
            if self.settings.legacy_year_routing:
                return Slot.YEAR, self.month_field
            return Slot.YEAR, self.year_field
        elif message.startswith(Slot.MONTH.tag):
            return Slot.MONTH, self.month_field
        elif message.startswith(Slot.DAY.tag):
            return Slot.DAY, self.day_field
        return None

    def clear_messages(self) -> "SimpleDateField":
        """Remove messages from the field and its sub-fields."""
        self.message = None
        for field in self._fields.values():
            field.set_message(None)
        return self
