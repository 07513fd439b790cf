"""Demonstration form with a single date input."""

from typing import Optional

import rich.markup
import textual
from textual import app, binding, containers, reactive, widgets

from simpledate import config
from simpledate.features import validators
from simpledate.model import dates
from simpledate.model.date_field import SimpleDateField
from simpledate.view.date_input import DateInput


class DateFormApp(app.App):
    """Ask for a date and report the canonical value."""

    TITLE = "Simple Date Field"
    BINDINGS = [
        binding.Binding("ctrl+s", "submit", "Validate", show=True),
        binding.Binding("escape", "quit", "Quit", show=True),
    ]
    CSS = """
    .date-part {
        width: 12;
    }
    .error {
        color: $error;
    }
    """
    result = reactive.reactive("")
    """Outcome of the last submission shown to the user."""

    field: SimpleDateField
    text_validator: validators.DateValidator
    """Checks free-form text before it is used to set the date."""

    def __init__(
        self,
        field_name: str = "date",
        initial_value: Optional[str] = None,
        settings: Optional[config.Settings] = None,
        clock: Optional[dates.Clock] = None,
    ) -> None:
        """Create the date field using the order from settings."""
        super().__init__()
        settings = settings if settings is not None else config.settings
        self.field = SimpleDateField(
            field_name,
            value=initial_value,
            order=settings.order,
            clock=clock,
            settings=settings,
        )
        self.text_validator = validators.DateValidator(clock=clock)

    def compose(self) -> app.ComposeResult:
        yield widgets.Header()
        with containers.Vertical():
            yield DateInput(self.field, id="date-input")
            yield widgets.Button("Validate", variant="primary", id="validate-date")
            yield widgets.Label("Or type a date:", classes="emphasis")
            yield widgets.Input(
                placeholder="YYYY-MM-DD, 5 March 2010, tomorrow, ...",
                validators=[self.text_validator],
                id="date-text",
            )
            yield widgets.Label("", id="date-result")
        yield widgets.Footer()

    def watch_result(self, result: str) -> None:
        for label in self.query("#date-result").results(widgets.Label):
            label.update(result)

    def action_submit(self) -> None:
        self.query_one(DateInput).submit()

    @textual.on(widgets.Button.Pressed, "#validate-date")
    def validate_date(self) -> None:
        """Validate when the button is pressed."""
        self.action_submit()

    @textual.on(widgets.Input.Submitted, "#date-text")
    def on_text_submitted(self, event: widgets.Input.Submitted) -> None:
        """Set the date from the free-form input."""
        self.apply_text(event.value)

    def apply_text(self, text: str) -> bool:
        """Set the date programmatically from free-form text.

        Text the validator rejects leaves the date field untouched.
        """
        validation_result = self.text_validator.validate(text)
        if not validation_result.is_valid:
            reasons = " ".join(validation_result.failure_descriptions)
            self.result = f"[bold red]{rich.markup.escape(reasons)}[/]"
            return False
        self.field.set_value(text)
        self.field.clear_messages()
        self.query_one(DateInput).refresh_parts()
        self.result = f"[green]Date: {self.field.value}[/]"
        return True

    def on_date_input_changed(self, message: DateInput.Changed) -> None:
        """Show the canonical value or a rejection."""
        if message.valid and message.value is not None:
            self.result = f"[green]Date: {message.value}[/]"
        elif message.valid:
            self.result = "No date entered."
        else:
            self.result = "[bold red]Invalid date[/]"
