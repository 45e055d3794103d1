"""
Services for the Event Planning Platform backend.

Constraint validation is the only logic this API owns. Recommendations and
chat are delegated to collaborators plugged in at startup.

Validating a record::

    from planner_api.services import validate_constraints

    errors = validate_constraints(constraints)  # {} when valid

Available Services
------------------
- validate_constraints, validate: Pure constraint validator
- PlannerForm: Touched-field tracking and submit gating
- RecommendationService: Recommendation collaborator contract
- ChatService: Chat collaborator contract
- OptionCatalog, InMemoryOptionCatalog: Venue/food/decor option store
"""

from .catalog import InMemoryOptionCatalog, OptionCatalog
from .chat import ChatService, get_chat_service, set_chat_service
from .planner_form import FormField, PlannerForm
from .recommendations import (
    RecommendationService,
    get_recommendation_service,
    set_recommendation_service,
)
from .validation import ConstraintField, validate, validate_constraints

__all__ = [
    "InMemoryOptionCatalog",
    "OptionCatalog",
    "ChatService",
    "get_chat_service",
    "set_chat_service",
    "FormField",
    "PlannerForm",
    "RecommendationService",
    "get_recommendation_service",
    "set_recommendation_service",
    "ConstraintField",
    "validate",
    "validate_constraints",
]
