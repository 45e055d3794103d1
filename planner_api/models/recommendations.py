"""Recommendation response models."""

from pydantic import Field

from planner_api.models.constraints import CamelModel, Number
from planner_api.models.options import DecorOption, FoodOption, VenueOption


class CostEstimate(CamelModel):
    """Estimated total cost range for the recommended options."""

    min: Number = Field(ge=0)
    max: Number = Field(ge=0)


class RecommendationResponse(CamelModel):
    """Options returned by the recommendation collaborator."""

    venues: list[VenueOption] = Field(default_factory=list)
    food_options: list[FoodOption] = Field(default_factory=list)
    decor_options: list[DecorOption] = Field(default_factory=list)
    total_estimate: CostEstimate
    message: str | None = Field(
        default=None, description="User-facing note about the recommendations"
    )
