"""Exception hierarchy for the Event Planning Platform API.

Each error knows the HTTP status and machine-readable code it renders as,
so endpoint handlers can raise and let the app turn it into an
``ErrorResponse`` envelope.
"""

from typing import Any


class PlannerError(Exception):
    """Base exception for all application errors."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Any = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ConstraintValidationError(PlannerError):
    """Event constraints failed validation.

    ``details`` carries the field-keyed error mapping.
    """

    status_code = 422
    code = "VALIDATION_ERROR"

    def __init__(self, errors: dict[str, str]) -> None:
        super().__init__("Event constraints are invalid", details=dict(errors))


class ServiceUnavailableError(PlannerError):
    """A required collaborator is not configured."""

    status_code = 503
    code = "SERVICE_UNAVAILABLE"


class UpstreamError(PlannerError):
    """A collaborator failed while handling a request."""

    status_code = 502
    code = "UPSTREAM_ERROR"


class DuplicateOptionError(PlannerError):
    """An option with the same id is already in the catalog."""

    status_code = 409
    code = "DUPLICATE_OPTION"

    def __init__(self, kind: str, option_id: str) -> None:
        self.kind = kind
        self.option_id = option_id
        super().__init__(f"{kind} option '{option_id}' already exists")
