"""Sub-field entities that hold the day, month, and year display strings.

## Slots
A composite date field owns exactly three sub-fields, addressed by Slot.
Slot values double as the keys of a submitted mapping ("_Day", "_Month",
"_Year") and, wrapped in brackets, as message prefixes ("[_Day]").

## Ordering
FieldOrder only controls the order in which sub-fields are displayed. It has
no effect on how submitted values are parsed.
"""

import dataclasses
import enum
from typing import Optional, Protocol, runtime_checkable


class Slot(enum.StrEnum):
    """Addressable sub-field positions."""

    DAY = "_Day"
    MONTH = "_Month"
    YEAR = "_Year"

    @property
    def tag(self) -> str:
        """Message prefix that attributes a message to this slot."""
        return f"[{self.value}]"

    @property
    def label(self) -> str:
        """Default human readable label, e.g., 'Day'."""
        return self.value.lstrip("_")


class FieldOrder(enum.IntEnum):
    """Display order of the three sub-fields."""

    DMY = 1
    YMD = 2
    MDY = 3

    @property
    def slots(self) -> tuple[Slot, Slot, Slot]:
        """Slots in display order."""
        if self is FieldOrder.YMD:
            return (Slot.YEAR, Slot.MONTH, Slot.DAY)
        elif self is FieldOrder.MDY:
            return (Slot.MONTH, Slot.DAY, Slot.YEAR)
        return (Slot.DAY, Slot.MONTH, Slot.YEAR)

    @classmethod
    def coerce(cls, order: "FieldOrder | int | None") -> "FieldOrder":
        """Convert to a FieldOrder, falling back to DMY for unknown values."""
        try:
            return cls(order)
        except ValueError:
            return cls.DMY

    @classmethod
    def from_name(cls, name: "str | int") -> "FieldOrder":
        """Look up an order by name ("dmy", "ymd", "mdy") or number.

        Raises ValueError for unknown names.
        """
        if isinstance(name, int):
            return cls(name)
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown field order {name!r}. Use one of: "
                + ", ".join(order.name.lower() for order in cls)
            ) from None


class MessageType(enum.StrEnum):
    """Severity of a message attached to a field."""

    ERROR = "error"
    WARNING = "warning"
    GOOD = "good"
    INFO = "info"


class MessageCast(enum.StrEnum):
    """How a message should be rendered."""

    TEXT = "text"
    HTML = "html"


@runtime_checkable
class SubField(Protocol):
    """Capabilities a sub-field must provide to be used in a date field."""

    name: str
    title: Optional[str]
    value: str
    message: Optional[str]
    message_type: MessageType
    message_cast: MessageCast

    def get_attribute(self, name: str) -> Optional[str]: ...

    def set_attribute(self, name: str, value: str) -> "SubField": ...

    def set_message(
        self,
        message: Optional[str],
        message_type: MessageType = MessageType.ERROR,
        message_cast: MessageCast = MessageCast.TEXT,
    ) -> "SubField": ...


@dataclasses.dataclass
class TextSubField:
    """Default single-value text input."""

    name: str
    title: Optional[str] = None
    value: str = ""
    input_type: str = "text"
    attributes: dict[str, str] = dataclasses.field(default_factory=dict)
    message: Optional[str] = None
    message_type: MessageType = MessageType.ERROR
    message_cast: MessageCast = MessageCast.TEXT

    @classmethod
    def for_slot(cls, field_name: str, slot: Slot) -> "TextSubField":
        """Create a numeric input named after the parent field, e.g., dob[_Day]."""
        sub_field = cls(
            name=f"{field_name}{slot.tag}", title=slot.label, input_type="number"
        )
        sub_field.set_attribute("pattern", "[0-9]*")
        return sub_field

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> "TextSubField":
        self.attributes[name] = value
        return self

    def set_value(self, value: str) -> "TextSubField":
        """Set the display string."""
        self.value = value
        return self

    def set_message(
        self,
        message: Optional[str],
        message_type: MessageType = MessageType.ERROR,
        message_cast: MessageCast = MessageCast.TEXT,
    ) -> "TextSubField":
        """Attach a message to this input."""
        self.message = message
        self.message_type = MessageType(message_type)
        self.message_cast = MessageCast(message_cast)
        return self
