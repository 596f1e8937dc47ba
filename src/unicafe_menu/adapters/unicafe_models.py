"""Pydantic models for Unicafe public API payloads."""

from typing import Generic, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from unicafe_menu.domain.dates import MenuDate
from unicafe_menu.domain.models import Food, Menu, Price, Restaurant
from unicafe_menu.domain.prices import PriceClass

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Envelope returned by every endpoint."""

    model_config = ConfigDict(strict=True)

    status: str
    data: T


class RestaurantPayload(BaseModel):
    """Restaurant listing entry."""

    model_config = ConfigDict(strict=True)

    id: int
    name: str

    def to_domain(self) -> Restaurant:
        return Restaurant(id=self.id, name=self.name)


class PricePayload(BaseModel):
    """Price payload of a food item."""

    model_config = ConfigDict(strict=True)

    name: PriceClass

    @field_validator("name", mode="before")
    @classmethod
    def _decode_price_class(cls, value: object) -> PriceClass:
        if isinstance(value, PriceClass):
            return value
        if not isinstance(value, str):
            raise ValueError("price name must be a string")
        return PriceClass.decode(value)

    def to_domain(self) -> Price:
        return Price(name=self.name)


class FoodPayload(BaseModel):
    """Food payload."""

    model_config = ConfigDict(strict=True)

    name: str
    price: PricePayload

    def to_domain(self) -> Food:
        return Food(name=self.name, price=self.price.to_domain())


class MenuPayload(BaseModel):
    """Menu of one day; ``data`` holds the foods.

    The date year comes from ``context["today"]`` when given.
    """

    model_config = ConfigDict(strict=True, arbitrary_types_allowed=True)

    date: MenuDate = Field(validation_alias=AliasChoices("date", "date_text"))
    data: list[FoodPayload]

    @field_validator("date", mode="before")
    @classmethod
    def _decode_date(cls, value: object, info: ValidationInfo) -> MenuDate:
        if isinstance(value, MenuDate):
            return value
        if not isinstance(value, str):
            raise ValueError("menu date must be a string")
        today = (info.context or {}).get("today")
        return MenuDate.decode(value, today=today)

    def to_domain(self) -> Menu:
        return Menu(
            date=self.date, foods=tuple(food.to_domain() for food in self.data)
        )
