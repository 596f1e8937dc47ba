"""Tests for the menu lookup pipeline."""

from datetime import date

import pytest

from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.errors import ApiError, ApiErrorKind
from unicafe_menu.domain.prices import PriceClass
from unicafe_menu.services.menus import MenuService
from tests.conftest import FakeUnicafeClient, make_menu

TODAY = MenuDate(date(2025, 11, 3))
TOMORROW = MenuDate(date(2025, 11, 4))


def _client() -> FakeUnicafeClient:
    return FakeUnicafeClient(
        menus={
            7: [
                make_menu(TODAY, ("Soup", PriceClass.KEITTO)),
                make_menu(TOMORROW, ("Steak", PriceClass.BISTRO)),
            ]
        }
    )


def test_run_returns_all_menus() -> None:
    client = _client()
    service = MenuService(client, clock=lambda: TODAY)

    menus = service.run("Porthania")

    assert [menu.date for menu in menus] == [TODAY, TOMORROW]
    assert client.menu_calls == [7]


def test_run_today_only_returns_single_menu() -> None:
    service = MenuService(_client(), clock=lambda: TOMORROW)

    menus = service.run("Porthania", today_only=True)

    assert len(menus) == 1
    assert menus[0].foods[0].name == "Steak"


def test_unknown_restaurant_skips_menu_fetch() -> None:
    client = _client()
    service = MenuService(client, clock=lambda: TODAY)

    with pytest.raises(ApiError) as exc_info:
        service.run("Unknown")

    assert exc_info.value.kind is ApiErrorKind.NO_SUCH_RESTAURANT
    assert exc_info.value.restaurant == "Unknown"
    assert exc_info.value.known_restaurants == ("Porthania",)
    assert client.menu_calls == []


def test_no_food_today() -> None:
    client = _client()
    client.menus[7] = [
        make_menu(TODAY),
        make_menu(TOMORROW, ("Cake", PriceClass.MAKEASTI)),
    ]
    service = MenuService(client, clock=lambda: TODAY)

    with pytest.raises(ApiError) as exc_info:
        service.run("Porthania", today_only=True)

    assert exc_info.value.kind is ApiErrorKind.NO_FOOD_TODAY


def test_menu_fetch_errors_propagate() -> None:
    client = _client()
    client.menu_error = ApiError.bad_status(503)
    service = MenuService(client, clock=lambda: TODAY)

    with pytest.raises(ApiError) as exc_info:
        service.run("Porthania", today_only=True)

    assert exc_info.value.kind is ApiErrorKind.BAD_STATUS
    assert exc_info.value.status_code == 503
