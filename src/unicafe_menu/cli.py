"""Command-line entry point."""

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from unicafe_menu.app_logging import configure_logging
from unicafe_menu.config import Settings
from unicafe_menu.containers import AppContainer, build_container
from unicafe_menu.domain.errors import ApiError, ApiErrorKind
from unicafe_menu.domain.models import Menu

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="unicafe", description="Show the lunch menu of a Unicafe restaurant."
    )
    parser.add_argument("restaurant", help="exact restaurant name, e.g. Exactum")
    parser.add_argument(
        "--today", action="store_true", help="display only today's menu"
    )
    parser.add_argument("--base-url", help="override the public API base URL")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log requests to stderr"
    )
    return parser


def render_menus(menus: Sequence[Menu], today_only: bool = False) -> list[str]:
    """Format menus as terminal lines.

    Today's menu is printed without the date header or leading tab.
    """
    lines: list[str] = []
    for menu in menus:
        foods = [f"{food.price.name.symbol}\t{food.name}" for food in menu.foods]
        if today_only:
            lines.extend(foods)
            continue
        lines.append(menu.date.format())
        lines.extend(f"\t{food}" for food in foods)
    return lines


def _report_error(error: ApiError) -> None:
    print(f"error: {error}", file=sys.stderr)
    if error.kind is ApiErrorKind.NO_SUCH_RESTAURANT and error.known_restaurants:
        print("Known restaurants:", file=sys.stderr)
        for name in error.known_restaurants:
            print(f"\t{name}", file=sys.stderr)


def main(
    argv: Sequence[str] | None = None, container: AppContainer | None = None
) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    if container is None:
        try:
            settings = Settings()
        except ValidationError as exc:
            print(f"error: invalid configuration: {exc}", file=sys.stderr)
            return 2
        if args.base_url:
            settings = settings.model_copy(update={"api_base_url": args.base_url})
        container = build_container(settings)
    configure_logging("DEBUG" if args.verbose else container.settings.log_level)

    try:
        menus = container.menu_service.run(args.restaurant, today_only=args.today)
    except ApiError as exc:
        _logger.debug("Menu lookup failed", exc_info=exc)
        _report_error(exc)
        return 1
    finally:
        container.close_resources()

    for line in render_menus(menus, today_only=args.today):
        print(line)
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
