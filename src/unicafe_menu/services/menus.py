"""Menu lookup pipeline."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from unicafe_menu.adapters.unicafe_client import UnicafeClient
from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.errors import ApiError
from unicafe_menu.domain.models import Menu, Restaurant

_logger = logging.getLogger(__name__)


def resolve_restaurant_id(restaurants: Sequence[Restaurant], name: str) -> int | None:
    """Return the id of the first restaurant named exactly ``name``."""
    for restaurant in restaurants:
        if restaurant.name == name:
            return restaurant.id
    return None


def todays_menu(menus: Sequence[Menu], today: MenuDate | None = None) -> Menu | None:
    """Return the first menu dated today that lists at least one food."""
    current = today or MenuDate.today()
    for menu in menus:
        if menu.date == current and menu.foods:
            return menu
    return None


@dataclass
class MenuService:
    """Resolves a restaurant by name and loads its menus."""

    client: UnicafeClient
    clock: Callable[[], MenuDate] = MenuDate.today

    def run(self, restaurant: str, today_only: bool = False) -> list[Menu]:
        """Return all menus of ``restaurant``, or only today's when requested.

        Raises ``ApiError`` on the first failing step; the menu endpoint is not
        called when the restaurant name does not resolve.
        """
        restaurants = self.client.fetch_restaurants()
        restaurant_id = resolve_restaurant_id(restaurants, restaurant)
        if restaurant_id is None:
            raise ApiError.no_such_restaurant(
                restaurant, known=[entry.name for entry in restaurants]
            )
        _logger.debug("Resolved %s to restaurant id %s", restaurant, restaurant_id)

        menus = self.client.fetch_menus(restaurant_id)
        if not today_only:
            return menus
        menu = todays_menu(menus, today=self.clock())
        if menu is None:
            raise ApiError.no_food_today()
        return [menu]
