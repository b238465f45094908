"""Textual application wiring the search bar, controller and result area."""

import logging
import webbrowser

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Header

from .components.forecast_panel import ForecastPanel, render_forecast
from .components.search_bar import SearchBar
from .components.status_bar import StatusBar
from .controller import ForecastController
from .models.config import Config
from .models.forecast import FetchRequest, Model
from .services.router import HOME_PATH, Router, parse_route
from .services.uv_service import UVService

logger = logging.getLogger(__name__)


class UVForecastApp(App):
    """Single-screen UV forecast client."""

    TITLE = "UV Forecast"

    CSS = """
    #main {
        height: 1fr;
        padding: 1 0 0 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("alt+left", "back", "Back", show=False),
        Binding("alt+right", "forward", "Forward", show=False),
    ]

    def __init__(
        self,
        config: Config | None = None,
        initial_path: str = HOME_PATH,
        service: UVService | None = None,
    ) -> None:
        super().__init__()
        config = config or Config.load_or_default()
        self.config = config
        self.service = service or UVService(config.api)
        self.initial_path = initial_path
        self.router = (
            Router(initial_path, origin=config.settings.app_origin or None)
            if config.settings.routing
            else None
        )
        self.controller = ForecastController(
            self.service, router=self.router, schedule=self._schedule_fetch
        )
        self.controller.subscribe(self._on_model_changed)

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield SearchBar()
            yield ForecastPanel()
        yield StatusBar(
            routing=self.router is not None, source_url=self.config.api.info_url
        )

    def on_mount(self) -> None:
        logger.info(
            f"UV Forecast started at {self.initial_path} "
            f"(routing {'on' if self.router is not None else 'off'})"
        )
        self._on_model_changed(self.controller.model)
        if self.router is not None:
            self.controller.start()
        else:
            # Without routing a postal code given on the command line is submitted directly
            code = parse_route(self.initial_path)
            if code:
                self.controller.submit(code)

    def _schedule_fetch(self, request: FetchRequest) -> None:
        self.run_worker(
            self.controller.perform(request),
            name=f"forecast-{request.request_id}",
            group="forecast",
        )

    def _on_model_changed(self, model: Model) -> None:
        """Re-render everything that depends on the model."""
        view = render_forecast(
            model.forecast_state, midnight_as_twelve=self.config.settings.midnight_as_twelve
        )
        self.query_one(ForecastPanel).show(view)
        if self.router is not None:
            self.query_one(StatusBar).set_location(self.router.location)

    def on_search_bar_submitted(self, message: SearchBar.Submitted) -> None:
        self.controller.submit(message.postal_code)

    def on_search_bar_input_changed(self, message: SearchBar.InputChanged) -> None:
        if self.router is not None:
            self.controller.on_input_changed(message.text)

    def action_back(self) -> None:
        if self.router is not None:
            self.router.back()

    def action_forward(self) -> None:
        if self.router is not None:
            self.router.forward()

    def action_follow_link(self, href: str) -> None:
        """Follow a link from the address bar."""
        if self.router is not None:
            self.router.follow(href)
        else:
            webbrowser.open(href)
