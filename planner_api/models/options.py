"""Venue, food and decor option models and their catalog filters."""

from typing import Self

from pydantic import Field, model_validator

from planner_api.models.constraints import CamelModel, Number


class VenueOption(CamelModel):
    """A venue with location, capacity and pricing."""

    id: str
    name: str
    location: str
    capacity: int = Field(gt=0)
    price_per_day: Number = Field(gt=0)
    amenities: list[str] = Field(default_factory=list)
    description: str = ""
    images: list[str] | None = None


class FoodOption(CamelModel):
    """A catering option with per-person pricing and dietary coverage."""

    id: str
    name: str
    type: str = Field(description="e.g. buffet, plated, cocktail")
    price_per_person: Number = Field(gt=0)
    min_attendees: int = Field(gt=0)
    max_attendees: int | None = None
    dietary_options: list[str] = Field(
        default_factory=list, description="e.g. vegetarian, vegan, gluten-free"
    )
    description: str = ""

    @model_validator(mode="after")
    def _check_attendee_bounds(self) -> Self:
        if self.max_attendees is not None and self.max_attendees <= self.min_attendees:
            raise ValueError("maxAttendees must be greater than minAttendees")
        return self


class DecorOption(CamelModel):
    """A decor package with style and total price."""

    id: str
    name: str
    style: str = Field(description="e.g. modern, rustic, elegant")
    total_price: Number = Field(gt=0)
    description: str = ""
    includes: list[str] = Field(default_factory=list)
    images: list[str] | None = None


class VenueFilters(CamelModel):
    """Filters for querying venues."""

    location: str | None = None
    min_capacity: int | None = None
    max_price_per_day: Number | None = None


class FoodFilters(CamelModel):
    """Filters for querying food options."""

    type: str | None = None
    max_price_per_person: Number | None = None
    dietary_options: list[str] | None = None


class DecorFilters(CamelModel):
    """Filters for querying decor options."""

    style: str | None = None
    max_total_price: Number | None = None
