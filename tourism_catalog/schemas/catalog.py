from __future__ import annotations

from enum import StrEnum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Tab(StrEnum):
    tours = "tours"
    homestay = "homestay"
    activities = "activities"
    events = "events"


class ItemKind(StrEnum):
    tour = "tour"
    hotel = "hotel"
    activity = "activity"


class Difficulty(StrEnum):
    easy = "easy"
    moderate = "moderate"
    challenging = "challenging"
    extreme = "extreme"


TAB_ITEM_KIND: dict[Tab, ItemKind] = {
    Tab.tours: ItemKind.tour,
    Tab.homestay: ItemKind.hotel,
    Tab.activities: ItemKind.activity,
    Tab.events: ItemKind.activity,
}


class CatalogModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageRef(CatalogModel):
    url: str
    alt: str = ""


class PriceQuote(CatalogModel):
    amount: float
    currency: str = "USD"


class _CatalogItemBase(CatalogModel):
    id: str
    images: list[ImageRef] = []
    rating: float = Field(default=0, ge=0, le=5)
    review_count: int = Field(default=0, ge=0)
    category: str = ""
    featured: bool = False

    placeholder_url: ClassVar[str] = "/images/placeholder.jpg"

    @property
    def display_title(self) -> str:
        raise NotImplementedError

    @property
    def location_label(self) -> str:
        raise NotImplementedError

    @property
    def price_quote(self) -> PriceQuote:
        raise NotImplementedError

    @property
    def thumbnail(self) -> ImageRef:
        """First image, or the kind's placeholder when there are none."""
        if self.images:
            first = self.images[0]
            return ImageRef(url=first.url, alt=first.alt or self.display_title)
        return ImageRef(url=self.placeholder_url, alt=self.display_title)


class TourDuration(CatalogModel):
    days: int = Field(ge=0)
    nights: int = Field(ge=0)


class TourPrice(CatalogModel):
    adult: float = Field(ge=0)
    child: float = Field(default=0, ge=0)
    currency: str = "USD"


class Tour(_CatalogItemBase):
    kind: Literal["tour"] = "tour"
    title: str
    destination: str = ""
    duration: TourDuration | None = None
    price: TourPrice
    difficulty: Difficulty | None = None
    short_description: str = ""

    @property
    def display_title(self) -> str:
        return self.title

    @property
    def location_label(self) -> str:
        return self.destination

    @property
    def price_quote(self) -> PriceQuote:
        return PriceQuote(amount=self.price.adult, currency=self.price.currency)


class HotelLocation(CatalogModel):
    city: str = ""
    address: str = ""


class HotelRoom(CatalogModel):
    type: str
    price_per_night: float = Field(ge=0)


class Hotel(_CatalogItemBase):
    kind: Literal["hotel"] = "hotel"
    name: str
    location: HotelLocation = Field(default_factory=HotelLocation)
    star_rating: int = Field(default=0, ge=0, le=5)
    rooms: list[HotelRoom] = []
    currency: str = "USD"

    placeholder_url: ClassVar[str] = "/images/placeholder-hotel.jpg"

    @property
    def display_title(self) -> str:
        return self.name

    @property
    def location_label(self) -> str:
        return self.location.city

    @property
    def price_quote(self) -> PriceQuote:
        # Cards quote the first listed room
        amount = self.rooms[0].price_per_night if self.rooms else 0
        return PriceQuote(amount=amount, currency=self.currency)

    @property
    def difficulty(self) -> None:
        return None

    @property
    def short_description(self) -> str:
        return self.location.address


class ActivityLocation(CatalogModel):
    name: str = ""


class ActivityDuration(CatalogModel):
    hours: float = Field(ge=0)
    type: str = ""


class ActivityPrice(CatalogModel):
    amount: float = Field(ge=0)
    currency: str = "USD"


class Activity(_CatalogItemBase):
    kind: Literal["activity"] = "activity"
    title: str
    location: ActivityLocation = Field(default_factory=ActivityLocation)
    duration: ActivityDuration | None = None
    price: ActivityPrice
    difficulty: Difficulty | None = None
    short_description: str = ""

    placeholder_url: ClassVar[str] = "/images/placeholder-activity.jpg"

    @property
    def display_title(self) -> str:
        return self.title

    @property
    def location_label(self) -> str:
        return self.location.name

    @property
    def price_quote(self) -> PriceQuote:
        return PriceQuote(amount=self.price.amount, currency=self.price.currency)


CatalogItem = Annotated[Union[Tour, Hotel, Activity], Field(discriminator="kind")]

ITEM_MODELS: dict[ItemKind, type[Tour] | type[Hotel] | type[Activity]] = {
    ItemKind.tour: Tour,
    ItemKind.hotel: Hotel,
    ItemKind.activity: Activity,
}
