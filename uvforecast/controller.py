"""Forecast controller: owns the application model and the fetch lifecycle."""

import logging
from collections.abc import Callable

from .models.forecast import Failure, FetchRequest, HourForecast, Idle, Loading, Model, Success
from .services.router import Router, parse_route
from .services.uv_service import ForecastError, UVService

logger = logging.getLogger(__name__)


class ForecastController:
    """State machine for Idle -> Loading -> Success | Failure.

    The model is never mutated; each event stores a new ``Model``. Requests
    are handed to ``schedule``, which is expected to eventually await
    ``perform``. With a ``router`` the controller runs in routing mode:
    submissions change the URL and URL changes trigger fetches.
    """

    def __init__(
        self,
        service: UVService,
        router: Router | None = None,
        schedule: Callable[[FetchRequest], None] | None = None,
    ):
        self.service = service
        self.router = router
        self._schedule = schedule
        self._model = Model()
        self._subscribers: list[Callable[[Model], None]] = []

        if router is not None:
            router.listen(self.on_url_changed)

    @property
    def model(self) -> Model:
        return self._model

    def subscribe(self, callback: Callable[[Model], None]) -> None:
        """Register a callback receiving every new model."""
        self._subscribers.append(callback)

    def _set_model(self, model: Model) -> None:
        self._model = model
        for callback in self._subscribers:
            callback(model)

    def start(self) -> FetchRequest | None:
        """Activate the route of the router's initial location, if any."""
        if self.router is None:
            return None
        code = self.router.route
        if code is None:
            return None
        return self.on_route_activated(code)

    def submit(self, postal_code: str) -> FetchRequest | None:
        """Handle a submission from the input.

        Blank input is ignored. In routing mode this only navigates; the
        resulting URL change starts the fetch.
        """
        code = postal_code.strip()
        if not code:
            logger.debug("Ignoring blank postal code submission")
            return None

        if self.router is None:
            return self.on_route_activated(code)

        previous_id = self._model.request_id
        self.router.navigate(code)
        if self._model.request_id != previous_id and isinstance(
            self._model.forecast_state, Loading
        ):
            return FetchRequest(
                postal_code=self._model.active_postal_code, request_id=self._model.request_id
            )
        return None

    def on_input_changed(self, text: str) -> None:
        """Track the text box content without touching the forecast."""
        self._set_model(self._model.model_copy(update={"pending_input": text}))

    def on_url_changed(self, path: str) -> FetchRequest | None:
        """Re-parse the location after any URL change."""
        code = parse_route(path)
        if code is not None:
            return self.on_route_activated(code)

        # Leaving the route also invalidates any request still in flight.
        logger.debug(f"No route for {path}, resetting forecast")
        self._set_model(
            self._model.model_copy(
                update={
                    "active_postal_code": "",
                    "forecast_state": Idle(),
                    "request_id": self._model.request_id + 1,
                }
            )
        )
        return None

    def on_route_activated(self, postal_code: str) -> FetchRequest:
        """Start a fetch for a postal code."""
        request = FetchRequest(postal_code=postal_code, request_id=self._model.request_id + 1)
        self._set_model(
            self._model.model_copy(
                update={
                    "active_postal_code": postal_code,
                    "forecast_state": Loading(),
                    "request_id": request.request_id,
                }
            )
        )
        logger.info(f"Requesting UV forecast for {postal_code} (request {request.request_id})")
        if self._schedule is not None:
            self._schedule(request)
        return request

    def resolve(self, request: FetchRequest, result: list[HourForecast] | ForecastError) -> bool:
        """Apply the outcome of a request.

        Returns False when the request is stale and the result was dropped.
        """
        if request.request_id != self._model.request_id:
            logger.debug(
                f"Dropping stale response for request {request.request_id} "
                f"(latest is {self._model.request_id})"
            )
            return False

        if isinstance(result, ForecastError):
            state = Failure()
        else:
            state = Success(entries=tuple(result))
        self._set_model(self._model.model_copy(update={"forecast_state": state}))
        return True

    async def perform(self, request: FetchRequest) -> bool:
        """Run a request against the service and apply its outcome."""
        try:
            result: list[HourForecast] | ForecastError = await self.service.fetch_forecast(
                request.postal_code
            )
        except ForecastError as e:
            result = e
        return self.resolve(request, result)
