"""Forecast panel: renders a ForecastState as a message or a Time/UV table."""

from pydantic import BaseModel, ConfigDict
from textual.app import ComposeResult
from textual.widgets import DataTable, Label, Static

from ..models.forecast import Failure, ForecastState, HourForecast, Loading, Success

HEADER = ("Time", "UV")


class ForecastView(BaseModel):
    """What the result area shows for a given state."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    header: tuple[str, ...] = ()
    rows: tuple[tuple[str, str], ...] = ()


def format_hour(month: int, day: int, hour: int, midnight_as_twelve: bool = False) -> str:
    """Format an hour as ``"{month}/{day} {h}:00 {am|pm}"``.

    Hours above 12 wrap with ``% 12``. Midnight stays ``0:00 am`` unless
    ``midnight_as_twelve`` is set.
    """
    display_hour = hour if hour <= 12 else hour % 12
    if display_hour == 0 and midnight_as_twelve:
        display_hour = 12
    suffix = "am" if hour < 12 else "pm"
    return f"{month}/{day} {display_hour}:00 {suffix}"


def format_entry(entry: HourForecast, midnight_as_twelve: bool = False) -> tuple[str, str]:
    """Return the (time, UV) cells for one forecast hour."""
    return format_hour(entry.month, entry.day, entry.hour, midnight_as_twelve), str(entry.uv)


def render_forecast(state: ForecastState, midnight_as_twelve: bool = False) -> ForecastView:
    """Map a forecast state to its view. Idle renders nothing."""
    if isinstance(state, Failure):
        return ForecastView(message="Error")
    if isinstance(state, Loading):
        return ForecastView(message="Loading...")
    if isinstance(state, Success):
        return ForecastView(
            header=HEADER,
            rows=tuple(format_entry(entry, midnight_as_twelve) for entry in state.entries),
        )
    return ForecastView()


class ForecastPanel(Static):
    """Result area showing the current forecast view."""

    DEFAULT_CSS = """
    ForecastPanel {
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    ForecastPanel #forecast-message {
        padding: 1 0;
    }

    ForecastPanel #forecast-message.error {
        color: $error;
    }

    ForecastPanel DataTable {
        height: 1fr;
        display: none;
    }

    ForecastPanel DataTable.visible {
        display: block;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._view = ForecastView()

    @property
    def view(self) -> ForecastView:
        return self._view

    def compose(self) -> ComposeResult:
        yield Label("", id="forecast-message")
        yield DataTable(id="forecast-table")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True

    def show(self, view: ForecastView) -> None:
        """Replace the displayed view."""
        self._view = view

        message_label = self.query_one("#forecast-message", Label)
        message_label.update(view.message)
        message_label.set_class(view.message == "Error", "error")
        message_label.display = bool(view.message)

        table = self.query_one(DataTable)
        table.clear(columns=True)
        if view.header:
            table.add_columns(*view.header)
            table.add_rows(view.rows)
        table.set_class(bool(view.header), "visible")
