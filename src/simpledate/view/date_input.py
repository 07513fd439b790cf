"""Textual widget for entering a date as day, month, and year."""

from typing import Optional

import textual
from textual import app, containers, message, widgets

from simpledate.features import validators
from simpledate.model.date_field import SimpleDateField
from simpledate.model.subfields import Slot, SubField


_MAX_DIGITS = {Slot.DAY: 2, Slot.MONTH: 2, Slot.YEAR: 4}


class DateInput(containers.VerticalGroup):
    """Three inputs bound to a SimpleDateField."""

    class Changed(message.Message):
        """Sent after the inputs are submitted and validated."""

        date_input: "DateInput"
        value: Optional[str]
        """Canonical YYYY-MM-DD value, or None."""
        valid: bool

        def __init__(
            self, date_input: "DateInput", value: Optional[str], valid: bool
        ) -> None:
            super().__init__()
            self.date_input = date_input
            self.value = value
            self.valid = valid

        @property
        def control(self) -> "DateInput":
            return self.date_input

    field: SimpleDateField
    """The date field holding the value and sub-field displays."""

    def __init__(
        self,
        field: SimpleDateField,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ) -> None:
        """Set the date field."""
        super().__init__(id=id, classes=classes)
        self.field = field

    def _slot_of(self, sub_field: SubField) -> Optional[Slot]:
        for slot in Slot:
            if self.field.get_field(slot) is sub_field:
                return slot
        return None

    def compose(self) -> app.ComposeResult:
        """Lay out the sub-field inputs in display order."""
        yield widgets.Label(self.field.title, classes="emphasis")
        with containers.HorizontalGroup():
            for sub_field in self.field.children:
                slot = self._slot_of(sub_field)
                if slot is None:
                    continue
                with containers.VerticalGroup(classes="date-part"):
                    yield widgets.Label(sub_field.title or slot.label)
                    yield widgets.Input(
                        value=sub_field.value,
                        placeholder=slot.label,
                        restrict=r"[0-9]*",
                        max_length=_MAX_DIGITS[slot],
                        validators=[
                            validators.DigitsValidator(_MAX_DIGITS[slot], slot.label)
                        ],
                        id=self.input_id(slot),
                    )
                    yield widgets.Static("", id=self.message_id(slot), classes="error")
        yield widgets.Static("", id="date-message", classes="error")

    @staticmethod
    def input_id(slot: Slot) -> str:
        return f"date{slot.value.lower()}"

    @staticmethod
    def message_id(slot: Slot) -> str:
        return f"date{slot.value.lower()}-message"

    @textual.on(widgets.Input.Submitted)
    def on_part_submitted(self, event: widgets.Input.Submitted) -> None:
        """Submit the whole date when enter is pressed in any input."""
        event.stop()
        self.submit()

    def submit(self) -> bool:
        """Normalize and validate the current input values.

        Padded values are written back to the inputs and any messages are
        shown under the input they belong to.
        """
        submitted = {}
        for slot in Slot:
            inputs = self.query(f"#{self.input_id(slot)}").results(widgets.Input)
            input_widget = next(inputs, None)
            submitted[slot.value] = input_widget.value if input_widget else ""
        self.field.clear_messages()
        self.field.set_submitted_value(submitted)
        form_validator = validators.FormValidator()
        valid = form_validator.validate([self.field])
        self.refresh_parts()
        self.post_message(self.Changed(self, self.field.value, valid))
        return valid

    def refresh_parts(self) -> None:
        """Copy sub-field values and messages into the widgets."""
        for slot in Slot:
            sub_field = self.field.get_field(slot)
            for input_widget in self.query(f"#{self.input_id(slot)}").results(
                widgets.Input
            ):
                input_widget.value = sub_field.value
            for static in self.query(f"#{self.message_id(slot)}").results(
                widgets.Static
            ):
                static.update(sub_field.message or "")
        self.query_one("#date-message", widgets.Static).update(
            self.field.message or ""
        )
