"""Event constraint models collected by the planner form.

Wire format is camelCase (``timeRange.startDate``); Python code uses the
snake_case field names. These models deliberately accept "not yet entered"
values (empty strings, zero, negative numbers) so the validator can report
them instead of the request being rejected outright.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

Number = int | float
DateValue = str | datetime | date


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimeRange(CamelModel):
    """Requested event dates. Empty string means not yet entered."""

    start_date: DateValue = Field(default="", description="ISO date the event starts")
    end_date: DateValue = Field(default="", description="ISO date the event ends")

    @field_serializer("start_date", "end_date")
    def _serialize_date(self, value: DateValue) -> str:
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value


class BudgetRange(CamelModel):
    """Budget bounds in a single (unspecified) currency. Zero means unset."""

    min: Number = Field(default=0, description="Minimum budget")
    max: Number = Field(default=0, description="Maximum budget")


class PlannerFormData(CamelModel):
    """The fields the planner form collects."""

    time_range: TimeRange = Field(default_factory=TimeRange)
    budget: BudgetRange = Field(default_factory=BudgetRange)
    location: str = Field(default="", description="Free-text venue location")
    attendees: Number = Field(default=0, description="Expected number of attendees")


class EventConstraints(PlannerFormData):
    """Full constraint record, including the optional food/decor tags."""

    food_options: list[str] = Field(
        default_factory=list, description="Food category tags (optional, never validated)"
    )
    decor_options: list[str] = Field(
        default_factory=list, description="Decor style tags (optional, never validated)"
    )


class RecommendationRequest(EventConstraints):
    """JSON payload handed to the recommendation collaborator."""
