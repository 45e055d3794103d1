"""API endpoints for the Event Planning Platform."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from planner_api.config import configure_logging, get_settings
from planner_api.errors import (
    ConstraintValidationError,
    PlannerError,
    ServiceUnavailableError,
    UpstreamError,
)
from planner_api.models import (
    ChatRequest,
    ChatResponse,
    ErrorDetail,
    ErrorResponse,
    EventConstraints,
    RecommendationRequest,
    RecommendationResponse,
    ValidationResult,
)
from planner_api.services.chat import get_chat_service
from planner_api.services.recommendations import get_recommendation_service
from planner_api.services.validation import validate, validate_constraints

load_dotenv()

# Configure logging from settings (uses LOG_LEVEL env var)
configure_logging()
logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Event Planning Platform API is running"

_STATUS_CODES = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "INVALID_REQUEST",
    503: "SERVICE_UNAVAILABLE",
}


def _format_user_error(error: Exception) -> str:
    """Format a collaborator exception into a user-friendly error message."""
    error_str = str(error).lower()

    if "timeout" in error_str or "timed out" in error_str:
        return "The request timed out. Please try again."
    elif "rate limit" in error_str:
        return "We're a bit busy right now. Please try again in a moment."
    else:
        return "Something went wrong. Please try again."


def error_response(
    status_code: int, code: str, message: str, details: object = None
) -> JSONResponse:
    """Render the standard error envelope."""
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, details=details))
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


app = FastAPI(
    title="Event Planning Platform API",
    description="Constraint validation and recommendation gateway for event planning",
    version="0.1.0",
)

settings = get_settings()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message, exc.details)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _STATUS_CODES.get(exc.status_code, "INTERNAL_ERROR" if exc.status_code >= 500 else "ERROR")
    return error_response(exc.status_code, code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
    return error_response(
        422,
        "INVALID_REQUEST",
        "Request body is malformed",
        details=jsonable_encoder(exc.errors()),
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=True)
    return error_response(500, "INTERNAL_ERROR", "Something went wrong. Please try again.")


@app.get("/")
def root():
    """Root endpoint."""
    return {"status": "ok"}


@app.get("/api/health")
def health():
    """Health check endpoint."""
    return {"status": "ok", "message": HEALTH_MESSAGE}


@app.post("/api/constraints/validate", response_model=ValidationResult)
def validate_event_constraints(constraints: EventConstraints) -> ValidationResult:
    """Re-validate constraints server-side. Errors are returned as data."""
    return validate(constraints)


@app.post("/api/recommendations", response_model=RecommendationResponse)
async def recommendations(request: RecommendationRequest):
    """Validate constraints and hand them to the recommendation service."""
    errors = validate_constraints(request)
    if errors:
        logger.info("Recommendation request rejected: %s", sorted(errors))
        raise ConstraintValidationError(errors)

    service = get_recommendation_service()
    if service is None or not service.is_configured():
        raise ServiceUnavailableError("Recommendations are not available yet")

    try:
        return await service.recommend(request)
    except PlannerError:
        raise
    except Exception as e:
        logger.error("Recommendation service %s failed: %s", service.name, e, exc_info=True)
        raise UpstreamError(_format_user_error(e)) from e


@app.post("/api/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Forward a chat message, with optional planning context, to the chat service."""
    if not request.message.strip():
        raise HTTPException(status_code=400, detail="Message must not be empty")

    if request.context is not None:
        errors = validate_constraints(request.context)
        if errors:
            raise ConstraintValidationError(errors)

    service = get_chat_service()
    if service is None or not service.is_configured():
        raise ServiceUnavailableError("The planning assistant is not available yet")

    try:
        return await service.reply(request)
    except PlannerError:
        raise
    except Exception as e:
        logger.error("Chat service %s failed: %s", service.name, e, exc_info=True)
        raise UpstreamError(_format_user_error(e)) from e
