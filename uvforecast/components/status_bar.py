"""Address bar showing the in-app location, links and keyboard hints."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


def escape_markup(text: str) -> str:
    """Escape Rich markup characters in user content."""
    return text.replace("[", r"\[").replace("]", r"\]")


class StatusBar(Horizontal):
    """Bottom bar with the current path, navigation links and hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-location {
        width: auto;
    }

    StatusBar #status-links {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self, routing: bool = True, source_url: str = "") -> None:
        super().__init__()
        self._routing = routing
        self._source_url = source_url
        self._location = ""

    @property
    def location(self) -> str:
        return self._location

    def compose(self) -> ComposeResult:
        yield Static("", id="status-location")
        yield Static(self._links_markup(), id="status-links")
        yield Static("", id="status-spacer")
        yield Static(self._hints_markup(), id="status-hints")

    def _links_markup(self) -> str:
        links = []
        if self._routing:
            links.append("[@click=app.follow_link('/')]Home[/]")
        if self._source_url:
            links.append(f"[@click=app.follow_link('{self._source_url}')]Data source[/]")
        return "  ".join(links)

    def _hints_markup(self) -> str:
        hints = ""
        if self._routing:
            hints = "[dim]alt+←[/dim] Back  [dim]alt+→[/dim] Forward  "
        return hints + "[dim]ctrl+q[/dim] Quit"

    def set_location(self, location: str) -> None:
        """Show the current in-app location."""
        self._location = location
        text = f"[bold]{escape_markup(location)}[/bold]" if self._routing else ""
        self.query_one("#status-location", Static).update(text)
