"""Chat models for the planning assistant contract."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from planner_api.models.constraints import CamelModel, RecommendationRequest
from planner_api.models.recommendations import RecommendationResponse


class ChatMessage(CamelModel):
    """A message in the conversation history."""

    id: str
    sender: Literal["user", "ai"]
    content: str = Field(min_length=1)
    timestamp: datetime
    recommendations: RecommendationResponse | None = None


class ChatRequest(CamelModel):
    """Request body for the chat endpoint."""

    message: str
    context: RecommendationRequest | None = Field(
        default=None, description="Constraints the user is currently planning with"
    )
    conversation_history: list[ChatMessage] = Field(default_factory=list)


class ChatResponse(CamelModel):
    """Reply from the chat collaborator."""

    message: str
    recommendations: RecommendationResponse | None = None
