from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from tourism_catalog.schemas.catalog import Difficulty

PRICE_FLOOR = 0
PRICE_CEILING_MAX = 5000
PRICE_STEP = 50

ANY = ""


class SortOrder(StrEnum):
    price_low = "price-low"
    price_high = "price-high"
    rating = "rating"


class FilterState(BaseModel):
    """Sidebar selections for one tab. Empty strings mean "any"."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    category: str = ANY
    price_ceiling: int = Field(default=PRICE_CEILING_MAX, ge=PRICE_FLOOR, le=PRICE_CEILING_MAX)
    min_rating: int = Field(default=0, ge=0, le=5)
    difficulty: str = ANY
    destination: str = ANY

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, value: str) -> str:
        if value and value not in {d.value for d in Difficulty}:
            raise ValueError(f"unknown difficulty {value!r}")
        return value


class DateRange(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(default="", alias="from")
    to: str = ""

    @property
    def is_ordered(self) -> bool:
        """Display hint only: True unless both dates are set and `to` precedes `from`."""
        if not self.from_ or not self.to:
            return True
        return self.to >= self.from_


class CategoryOption(BaseModel):
    value: str
    label: str


class PriceSlider(BaseModel):
    min: int = PRICE_FLOOR
    max: int = PRICE_CEILING_MAX
    step: int = PRICE_STEP


class FilterOptions(BaseModel):
    tab: str
    categories: list[CategoryOption]
    price: PriceSlider = PriceSlider()
    ratings: list[int]
    difficulties: list[CategoryOption]
    destinations: list[str]
