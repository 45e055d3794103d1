"""API data models for the Event Planning Platform."""

from .chat import ChatMessage, ChatRequest, ChatResponse
from .constraints import (
    BudgetRange,
    EventConstraints,
    PlannerFormData,
    RecommendationRequest,
    TimeRange,
)
from .options import (
    DecorFilters,
    DecorOption,
    FoodFilters,
    FoodOption,
    VenueFilters,
    VenueOption,
)
from .recommendations import CostEstimate, RecommendationResponse
from .results import ErrorDetail, ErrorResponse, ValidationResult

__all__ = [
    "BudgetRange",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "CostEstimate",
    "DecorFilters",
    "DecorOption",
    "ErrorDetail",
    "ErrorResponse",
    "EventConstraints",
    "FoodFilters",
    "FoodOption",
    "PlannerFormData",
    "RecommendationRequest",
    "RecommendationResponse",
    "TimeRange",
    "ValidationResult",
    "VenueFilters",
    "VenueOption",
]
