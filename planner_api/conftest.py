"""Pytest configuration for planner_api tests."""

import os

import pytest
from hypothesis import HealthCheck, settings

from planner_api.config import get_settings
from planner_api.services.chat import set_chat_service
from planner_api.services.recommendations import set_recommendation_service

# Autouse resets below are function-scoped; allow them under @given
settings.register_profile(
    "planner", suppress_health_check=[HealthCheck.function_scoped_fixture]
)
settings.load_profile("planner")


@pytest.fixture(autouse=True)
def reset_env():
    """Reset environment variables and cached settings between tests."""
    original = os.environ.copy()
    get_settings.cache_clear()
    yield
    os.environ.clear()
    os.environ.update(original)
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_collaborators():
    """Start every test without recommendation or chat services."""
    set_recommendation_service(None)
    set_chat_service(None)
    yield
    set_recommendation_service(None)
    set_chat_service(None)
