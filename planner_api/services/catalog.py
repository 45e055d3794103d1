"""
Option catalog for venues, food and decor.

``OptionCatalog`` is the data-store contract a recommendation service reads
from. ``InMemoryOptionCatalog`` is a non-persistent implementation used for
local development and tests; data is lost when the process restarts.
Results keep insertion order; no ranking is applied.
"""

import logging
from typing import Protocol

from planner_api.errors import DuplicateOptionError
from planner_api.models.options import (
    DecorFilters,
    DecorOption,
    FoodFilters,
    FoodOption,
    VenueFilters,
    VenueOption,
)

logger = logging.getLogger(__name__)


class OptionCatalog(Protocol):
    """Read/write access to venue, food and decor options."""

    def get_venues(self, filters: VenueFilters | None = None) -> list[VenueOption]: ...

    def get_food_options(self, filters: FoodFilters | None = None) -> list[FoodOption]: ...

    def get_decor_options(self, filters: DecorFilters | None = None) -> list[DecorOption]: ...

    def add_venue(self, venue: VenueOption) -> None: ...

    def add_food_option(self, food: FoodOption) -> None: ...

    def add_decor_option(self, decor: DecorOption) -> None: ...


def _matches_venue(venue: VenueOption, filters: VenueFilters) -> bool:
    if filters.location and filters.location.strip().lower() not in venue.location.lower():
        return False
    if filters.min_capacity is not None and venue.capacity < filters.min_capacity:
        return False
    if filters.max_price_per_day is not None and venue.price_per_day > filters.max_price_per_day:
        return False
    return True


def _matches_food(food: FoodOption, filters: FoodFilters) -> bool:
    if filters.type and food.type.lower() != filters.type.strip().lower():
        return False
    if (
        filters.max_price_per_person is not None
        and food.price_per_person > filters.max_price_per_person
    ):
        return False
    if filters.dietary_options:
        offered = {option.lower() for option in food.dietary_options}
        if not all(wanted.lower() in offered for wanted in filters.dietary_options):
            return False
    return True


def _matches_decor(decor: DecorOption, filters: DecorFilters) -> bool:
    if filters.style and decor.style.lower() != filters.style.strip().lower():
        return False
    if filters.max_total_price is not None and decor.total_price > filters.max_total_price:
        return False
    return True


class InMemoryOptionCatalog:
    """Dict-backed option catalog keyed by option id."""

    def __init__(self) -> None:
        self._venues: dict[str, VenueOption] = {}
        self._food: dict[str, FoodOption] = {}
        self._decor: dict[str, DecorOption] = {}

    def get_venues(self, filters: VenueFilters | None = None) -> list[VenueOption]:
        venues = list(self._venues.values())
        if filters is None:
            return venues
        return [v for v in venues if _matches_venue(v, filters)]

    def get_food_options(self, filters: FoodFilters | None = None) -> list[FoodOption]:
        options = list(self._food.values())
        if filters is None:
            return options
        return [f for f in options if _matches_food(f, filters)]

    def get_decor_options(self, filters: DecorFilters | None = None) -> list[DecorOption]:
        options = list(self._decor.values())
        if filters is None:
            return options
        return [d for d in options if _matches_decor(d, filters)]

    def add_venue(self, venue: VenueOption) -> None:
        """
        Add a venue.

        Raises:
            DuplicateOptionError: If a venue with the same id exists
        """
        if venue.id in self._venues:
            raise DuplicateOptionError("venue", venue.id)
        self._venues[venue.id] = venue
        logger.debug("Added venue %s (%s)", venue.id, venue.location)

    def add_food_option(self, food: FoodOption) -> None:
        if food.id in self._food:
            raise DuplicateOptionError("food", food.id)
        self._food[food.id] = food
        logger.debug("Added food option %s", food.id)

    def add_decor_option(self, decor: DecorOption) -> None:
        if decor.id in self._decor:
            raise DuplicateOptionError("decor", decor.id)
        self._decor[decor.id] = decor
        logger.debug("Added decor option %s", decor.id)

    def __len__(self) -> int:
        """Return total number of options across all kinds."""
        return len(self._venues) + len(self._food) + len(self._decor)
