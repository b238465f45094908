"""Entry point for running the UV forecast client as a module."""

import argparse
import asyncio
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .app import UVForecastApp
from .components.forecast_panel import ForecastView, render_forecast
from .controller import ForecastController
from .models.config import Config
from .services.router import HOME_PATH, Router, route_path
from .services.uv_service import UVService

_app: UVForecastApp | None = None
_logger = logging.getLogger(__name__)

LOG_DIR = Path("logs")
LOG_FILE = "uv-forecast.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "INFO", log_dir: Path = LOG_DIR) -> None:
    """Log to stderr and, when ``log_dir`` is writable, to a rotating file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    try:
        log_dir.mkdir(exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / LOG_FILE,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        )
    except OSError as e:
        print(f"File logging disabled: {e}", file=sys.stderr)

    logging.basicConfig(level=log_level.upper(), format=LOG_FORMAT, handlers=handlers)


def _request_exit(signum: int, frame: object) -> None:
    """Ask the running app to exit on SIGINT/SIGTERM."""
    _logger.info(f"Received {signal.Signals(signum).name}, exiting")
    if _app is not None:
        _app.exit()


def setup_signal_handlers() -> None:
    """Route SIGINT/SIGTERM to the app and log the final shutdown."""
    for signum in (signal.SIGINT, signal.SIGTERM):
        signal.signal(signum, _request_exit)
    atexit.register(lambda: _logger.info("UV Forecast stopped"))


def resolve_initial_path(postal_code: str | None, url: str | None) -> str:
    """Pick the starting in-app path from the command line."""
    if url:
        return url
    if postal_code:
        return route_path(postal_code)
    return HOME_PATH


def print_view(view: ForecastView, console: Console | None = None) -> None:
    """Write a rendered forecast view to the terminal."""
    console = console or Console()
    if view.message:
        console.print(view.message)
    if view.header:
        table = Table(*view.header)
        for row in view.rows:
            table.add_row(*row)
        console.print(table)


async def fetch_once(config: Config, initial_path: str) -> ForecastView:
    """Resolve the initial route, fetch once and return the rendered view."""
    controller = ForecastController(UVService(config.api), router=Router(initial_path))
    request = controller.start()
    if request is not None:
        await controller.perform(request)
    return render_forecast(
        controller.model.forecast_state,
        midnight_as_twelve=config.settings.midnight_as_twelve,
    )


def main() -> None:
    """Main entry point."""
    global _app

    parser = argparse.ArgumentParser(
        description="UV Forecast - hourly UV-index forecast for a postal code"
    )
    parser.add_argument(
        "postal_code",
        nargs="?",
        help="Postal code to load on start (shorthand for --url /zipcode/CODE)",
    )
    parser.add_argument(
        "--url",
        help="Initial in-app path, e.g. /zipcode/90210",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "--simple",
        action="store_true",
        help="Run without URL routing",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Fetch once, print the table and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args()

    if args.version:
        from . import __version__

        print(f"UV Forecast v{__version__}")
        sys.exit(0)

    config = Config.load_or_default(args.config)
    if args.simple:
        config = config.model_copy(
            update={"settings": config.settings.model_copy(update={"routing": False})}
        )

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)

    initial_path = resolve_initial_path(args.postal_code, args.url)

    if args.print_only:
        view = asyncio.run(fetch_once(config, initial_path))
        print_view(view)
        sys.exit(1 if view.message == "Error" else 0)

    setup_signal_handlers()

    _logger.info("Starting UV Forecast")

    if not args.config.exists():
        _logger.info(f"Config file not found: {args.config}, using defaults")

    _app = UVForecastApp(config=config, initial_path=initial_path)
    _app.run()


if __name__ == "__main__":
    main()
