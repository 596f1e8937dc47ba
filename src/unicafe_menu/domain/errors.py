"""Error taxonomy for the Unicafe menu client."""

from collections.abc import Sequence
from enum import Enum


class DecodeError(ValueError):
    """Raised when a wire value cannot be decoded into a domain value."""


class ApiErrorKind(Enum):
    """Discriminator for ApiError variants."""

    TRANSPORT = "transport"
    BAD_STATUS = "bad_status"
    DECODE = "decode"
    NO_SUCH_RESTAURANT = "no_such_restaurant"
    NO_FOOD_TODAY = "no_food_today"


_DESCRIPTIONS = {
    ApiErrorKind.TRANSPORT: "HTTP transport error",
    ApiErrorKind.BAD_STATUS: "bad HTTP status code",
    ApiErrorKind.DECODE: "JSON decode error",
    ApiErrorKind.NO_SUCH_RESTAURANT: "no such restaurant",
    ApiErrorKind.NO_FOOD_TODAY: "no food today",
}


class ApiError(Exception):
    """Single error type for every failure of a menu lookup.

    Use the named constructors; each upstream failure source maps to exactly
    one of them. The originating exception, if any, is kept as ``__cause__``.
    """

    def __init__(
        self,
        kind: ApiErrorKind,
        *,
        status_code: int | None = None,
        restaurant: str | None = None,
        known_restaurants: Sequence[str] = (),
    ) -> None:
        self.kind = kind
        self.status_code = status_code
        self.restaurant = restaurant
        self.known_restaurants = tuple(known_restaurants)
        super().__init__(kind, status_code, restaurant)

    @classmethod
    def transport(cls, cause: BaseException) -> "ApiError":
        """Wrap a connection, DNS, TLS or read failure."""
        error = cls(ApiErrorKind.TRANSPORT)
        error.__cause__ = cause
        return error

    @classmethod
    def bad_status(cls, status_code: int) -> "ApiError":
        """Report a non-200 HTTP response."""
        return cls(ApiErrorKind.BAD_STATUS, status_code=status_code)

    @classmethod
    def decode(cls, cause: BaseException) -> "ApiError":
        """Wrap a JSON or payload shape failure."""
        error = cls(ApiErrorKind.DECODE)
        error.__cause__ = cause
        return error

    @classmethod
    def no_such_restaurant(
        cls, name: str, known: Sequence[str] = ()
    ) -> "ApiError":
        """Report a restaurant name missing from the listing."""
        return cls(
            ApiErrorKind.NO_SUCH_RESTAURANT, restaurant=name, known_restaurants=known
        )

    @classmethod
    def no_food_today(cls) -> "ApiError":
        """Report that no menu with food is published for today."""
        return cls(ApiErrorKind.NO_FOOD_TODAY)

    @property
    def description(self) -> str:
        """Short description of the error kind."""
        return _DESCRIPTIONS[self.kind]

    def __str__(self) -> str:
        if self.kind is ApiErrorKind.BAD_STATUS:
            return f"bad status code: {self.status_code}"
        if self.kind is ApiErrorKind.NO_SUCH_RESTAURANT:
            return f"no restaurant {self.restaurant}"
        if self.__cause__ is not None:
            return f"{self.description}: {self.__cause__}"
        return self.description

    def __repr__(self) -> str:
        return f"ApiError({self.kind.name}, {str(self)!r})"
