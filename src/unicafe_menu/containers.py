"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from unicafe_menu.adapters.unicafe_client import HttpxUnicafeClient, UnicafeClient
from unicafe_menu.config import Settings
from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.services.menus import MenuService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    unicafe_client: UnicafeClient
    menu_service: MenuService
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    unicafe_client = HttpxUnicafeClient.create(
        base_url=resolved_settings.api_base_url,
        timeout=resolved_settings.http_timeout_seconds,
        clock=MenuDate.today,
    )
    menu_service = MenuService(unicafe_client, clock=MenuDate.today)

    def close_resources() -> None:
        unicafe_client.close()

    return AppContainer(
        settings=resolved_settings,
        unicafe_client=unicafe_client,
        menu_service=menu_service,
        close_resources=close_resources,
    )
