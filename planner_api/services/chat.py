"""Chat collaborator contract for the planning assistant."""

import logging
from typing import Protocol, runtime_checkable

from planner_api.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


@runtime_checkable
class ChatService(Protocol):
    """Answers planning questions, optionally with recommendations."""

    name: str

    def is_configured(self) -> bool: ...

    async def reply(self, request: ChatRequest) -> ChatResponse: ...


_service: ChatService | None = None


def get_chat_service() -> ChatService | None:
    """Get the configured chat service, if any."""
    return _service


def set_chat_service(service: ChatService | None) -> None:
    """Install (or clear, with None) the chat service."""
    global _service
    _service = service
    if service is not None:
        logger.info("Chat service set: %s", service.name)
