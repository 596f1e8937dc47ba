"""Unicafe public API client."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

import httpx
from pydantic import ValidationError

from unicafe_menu.adapters.unicafe_models import (
    ApiResponse,
    MenuPayload,
    RestaurantPayload,
)
from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.errors import ApiError
from unicafe_menu.domain.models import Menu, Restaurant

DEFAULT_BASE_URL = "http://messi.hyyravintolat.fi/publicapi"

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnicafeClient(Protocol):
    """Interface for Unicafe API interactions."""

    def fetch_restaurants(self) -> list[Restaurant]:
        """Return every restaurant in API order."""

    def fetch_menus(self, restaurant_id: int) -> list[Menu]:
        """Return the published menus of a restaurant."""


@dataclass
class HttpxUnicafeClient(UnicafeClient):
    """HTTPX-backed Unicafe client.

    Every failure is raised as an ``ApiError``: transport problems first, then
    a non-200 status, then payload decoding. Menu dates take their year from
    ``clock``.
    """

    base_url: str
    http_client: httpx.Client
    timeout: float = 10.0
    clock: Callable[[], MenuDate] = MenuDate.today

    @classmethod
    def create(
        cls,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        clock: Callable[[], MenuDate] = MenuDate.today,
    ) -> "HttpxUnicafeClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.Client(),
            timeout=timeout,
            clock=clock,
        )

    def fetch(self, path: str, data_type: type[T]) -> T:
        """GET ``path`` and return the envelope's ``data`` decoded as ``data_type``.

        The envelope ``status`` field is not checked; only the HTTP status
        code decides success.
        """
        url = f"{self.base_url.rstrip('/')}{path}"
        _logger.debug("GET %s", url)
        try:
            with self.http_client.stream("GET", url, timeout=self.timeout) as response:
                if response.status_code != httpx.codes.OK:
                    _logger.warning("GET %s returned %s", url, response.status_code)
                    raise ApiError.bad_status(response.status_code)
                response.read()
                body = response.text
        except (httpx.RequestError, httpx.StreamError) as exc:
            _logger.warning("GET %s failed: %s", url, exc)
            raise ApiError.transport(exc) from exc

        try:
            envelope = ApiResponse[data_type].model_validate_json(
                body, context={"today": self.clock()}
            )
        except ValidationError as exc:
            _logger.warning("Could not decode response from %s: %s", url, exc)
            raise ApiError.decode(exc) from exc
        _logger.debug("GET %s decoded (status=%s)", url, envelope.status)
        return envelope.data

    def fetch_restaurants(self) -> list[Restaurant]:
        """Fetch the restaurant listing."""
        payload = self.fetch("/restaurants", list[RestaurantPayload])
        return [entry.to_domain() for entry in payload]

    def fetch_menus(self, restaurant_id: int) -> list[Menu]:
        """Fetch the menus of one restaurant."""
        payload = self.fetch(f"/restaurant/{restaurant_id}", list[MenuPayload])
        return [entry.to_domain() for entry in payload]

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
