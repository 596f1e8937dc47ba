"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from unicafe_menu.adapters.unicafe_client import UnicafeClient
from unicafe_menu.config import Settings
from unicafe_menu.containers import AppContainer
from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.errors import ApiError
from unicafe_menu.domain.models import Food, Menu, Price, Restaurant
from unicafe_menu.domain.prices import PriceClass
from unicafe_menu.services.menus import MenuService


@dataclass
class FakeUnicafeClient(UnicafeClient):
    """Fake Unicafe client with in-memory responses."""

    restaurants: list[Restaurant] = field(
        default_factory=lambda: [Restaurant(id=7, name="Porthania")]
    )
    menus: dict[int, list[Menu]] = field(default_factory=dict)
    menu_error: ApiError | None = None
    menu_calls: list[int] = field(default_factory=list)

    def fetch_restaurants(self) -> list[Restaurant]:
        return self.restaurants

    def fetch_menus(self, restaurant_id: int) -> list[Menu]:
        self.menu_calls.append(restaurant_id)
        if self.menu_error is not None:
            raise self.menu_error
        return self.menus.get(restaurant_id, [])


def make_menu(date: MenuDate, *foods: tuple[str, PriceClass]) -> Menu:
    return Menu(
        date=date,
        foods=tuple(Food(name=name, price=Price(name=tier)) for name, tier in foods),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://api.test/publicapi")


@pytest.fixture
def today() -> MenuDate:
    return MenuDate.decode("Ma 3.11")


@pytest.fixture
def unicafe_client(today: MenuDate) -> FakeUnicafeClient:
    return FakeUnicafeClient(
        menus={7: [make_menu(today, ("Soup", PriceClass.KEITTO))]}
    )


@pytest.fixture
def container(
    settings: Settings, unicafe_client: FakeUnicafeClient, today: MenuDate
) -> AppContainer:
    menu_service = MenuService(unicafe_client, clock=lambda: today)

    def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        unicafe_client=unicafe_client,
        menu_service=menu_service,
        close_resources=close_resources,
    )
