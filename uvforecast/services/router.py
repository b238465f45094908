"""In-app URL routing with a browser-style history."""

import logging
import re
import webbrowser
from collections.abc import Callable
from typing import Literal, NamedTuple
from urllib.parse import quote, unquote, urlsplit

logger = logging.getLogger(__name__)

HOME_PATH = "/"

_ROUTE_RE = re.compile(r"^/zipcode/([^/]+)/?$")


def parse_route(url: str) -> str | None:
    """Return the postal code for a ``/zipcode/{code}`` path, else None.

    Accepts a bare path or a full URL; query and fragment are ignored.
    """
    match = _ROUTE_RE.match(urlsplit(url).path)
    if not match:
        return None
    code = unquote(match.group(1))
    return code or None


def route_path(postal_code: str) -> str:
    """Build the path for a postal code."""
    return f"/zipcode/{quote(postal_code, safe='')}"


class Link(NamedTuple):
    """A classified link target."""

    kind: Literal["internal", "external"]
    target: str  # path for internal links, full URL for external ones


class Router:
    """Keeps the current location and its history.

    Listeners are called with the new path after every location change,
    including back/forward moves.
    """

    def __init__(self, initial_path: str = HOME_PATH, origin: str | None = None):
        self._history: list[str] = [initial_path or HOME_PATH]
        self._index = 0
        self._origin = urlsplit(origin) if origin else None
        self._listeners: list[Callable[[str], None]] = []

    @property
    def location(self) -> str:
        """Current path."""
        return self._history[self._index]

    @property
    def can_go_back(self) -> bool:
        return self._index > 0

    @property
    def can_go_forward(self) -> bool:
        return self._index < len(self._history) - 1

    @property
    def route(self) -> str | None:
        """Postal code of the current location, if it matches the route."""
        return parse_route(self.location)

    def listen(self, callback: Callable[[str], None]) -> None:
        """Register a location change listener."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        path = self.location
        for callback in self._listeners:
            callback(path)

    def push(self, path: str) -> None:
        """Add a history entry and make it current, dropping forward history."""
        del self._history[self._index + 1 :]
        self._history.append(path)
        self._index += 1
        logger.debug(f"Navigated to {path}")
        self._notify()

    def navigate(self, postal_code: str) -> None:
        """Push the route for a postal code."""
        self.push(route_path(postal_code))

    def back(self) -> bool:
        """Go one entry back. Returns False at the start of history."""
        if not self.can_go_back:
            return False
        self._index -= 1
        self._notify()
        return True

    def forward(self) -> bool:
        """Go one entry forward. Returns False at the end of history."""
        if not self.can_go_forward:
            return False
        self._index += 1
        self._notify()
        return True

    def classify(self, href: str) -> Link:
        """Decide whether a link stays inside the app."""
        parts = urlsplit(href)
        if not parts.scheme and not parts.netloc:
            path = parts.path or HOME_PATH
            if not path.startswith("/"):
                path = "/" + path
            return Link("internal", path)
        if self._origin and (parts.scheme, parts.netloc) == (
            self._origin.scheme,
            self._origin.netloc,
        ):
            return Link("internal", parts.path or HOME_PATH)
        return Link("external", href)

    def follow(self, href: str) -> Link:
        """Handle a link click: push internal links, open external ones."""
        link = self.classify(href)
        if link.kind == "internal":
            self.push(link.target)
        else:
            logger.info(f"Opening external link {link.target}")
            webbrowser.open(link.target)
        return link
