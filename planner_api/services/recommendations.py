"""
Recommendation collaborator contract.

The service that turns a valid constraint record into venue, food and decor
suggestions lives outside this API. Deployments plug one in at startup::

    from planner_api.services.recommendations import set_recommendation_service

    set_recommendation_service(MyRecommender())

Until one is configured the recommendations endpoint answers 503.
"""

import logging
from typing import Protocol, runtime_checkable

from planner_api.models.constraints import RecommendationRequest
from planner_api.models.recommendations import RecommendationResponse

logger = logging.getLogger(__name__)


@runtime_checkable
class RecommendationService(Protocol):
    """Turns validated constraints into recommendations."""

    name: str

    def is_configured(self) -> bool:
        """Check if the service has what it needs to answer requests."""
        ...

    async def recommend(self, request: RecommendationRequest) -> RecommendationResponse:
        """Return recommendations for an already-validated request."""
        ...


_service: RecommendationService | None = None


def get_recommendation_service() -> RecommendationService | None:
    """Get the configured recommendation service, if any."""
    return _service


def set_recommendation_service(service: RecommendationService | None) -> None:
    """Install (or clear, with None) the recommendation service."""
    global _service
    _service = service
    if service is None:
        logger.info("Recommendation service cleared")
    else:
        logger.info("Recommendation service set: %s", service.name)
