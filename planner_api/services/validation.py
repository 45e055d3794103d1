"""Constraint validation for event planning input.

``validate_constraints`` is a pure function: it takes the full constraint
record and returns a fresh mapping of field id to message. It is called on
every form change and again server-side before anything is dispatched to a
collaborator, so it does no I/O, keeps no state and never raises for
"not yet entered" values.
"""

import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Final

from planner_api.models.constraints import DateValue, PlannerFormData
from planner_api.models.results import ValidationResult


class ConstraintField(str, Enum):
    """Keys that can appear in a validation error mapping."""

    START_DATE = "startDate"
    END_DATE = "endDate"
    DATE_RANGE = "dateRange"
    MIN_BUDGET = "minBudget"
    MAX_BUDGET = "maxBudget"
    BUDGET_RANGE = "budgetRange"
    LOCATION = "location"
    ATTENDEES = "attendees"


START_DATE_REQUIRED: Final = "Start date is required"
END_DATE_REQUIRED: Final = "End date is required"
END_BEFORE_START: Final = "End date must be after start date"
MIN_BUDGET_NEGATIVE: Final = "Minimum budget must be positive"
MAX_BUDGET_NEGATIVE: Final = "Maximum budget must be positive"
BUDGET_RANGE_INVERTED: Final = "Minimum budget must be less than or equal to maximum budget"
LOCATION_REQUIRED: Final = "Location is required"
ATTENDEES_NOT_POSITIVE: Final = "Number of attendees must be a positive integer"
ATTENDEES_NOT_WHOLE: Final = "Number of attendees must be a whole number"

ISO_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^\d{4}-\d{2}-\d{2}(?:[T ].+)?$", re.ASCII
)


def parse_calendar_date(value: DateValue | None) -> date | None:
    """Parse a date value to a calendar date.

    Accepts ``date``/``datetime`` objects and ``YYYY-MM-DD`` strings with an
    optional ``T``/space separated time part. Compact (``20240601``) and
    ISO-week forms are rejected. Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not ISO_DATE_PATTERN.match(text):
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _is_whole_number(value: float) -> bool:
    if isinstance(value, int):
        return True
    return math.isfinite(value) and float(value).is_integer()


def validate_constraints(data: PlannerFormData) -> dict[str, str]:
    """Validate a constraint record.

    Args:
        data: Form data or a full ``EventConstraints`` record. Food and decor
            tags, when present, are not checked.

    Returns:
        Mapping of ``ConstraintField`` value to message. Empty when valid.
    """
    errors: dict[str, str] = {}
    start_raw = data.time_range.start_date
    end_raw = data.time_range.end_date

    if not start_raw:
        errors[ConstraintField.START_DATE.value] = START_DATE_REQUIRED

    if not end_raw:
        errors[ConstraintField.END_DATE.value] = END_DATE_REQUIRED

    # Unparseable dates are present but not comparable: no range error
    if start_raw and end_raw:
        start = parse_calendar_date(start_raw)
        end = parse_calendar_date(end_raw)
        if start is not None and end is not None and start >= end:
            errors[ConstraintField.DATE_RANGE.value] = END_BEFORE_START

    if data.budget.min < 0:
        errors[ConstraintField.MIN_BUDGET.value] = MIN_BUDGET_NEGATIVE

    if data.budget.max < 0:
        errors[ConstraintField.MAX_BUDGET.value] = MAX_BUDGET_NEGATIVE

    # Zero is "not yet entered", so the range is only checked once both are set
    if data.budget.min > 0 and data.budget.max > 0:
        if data.budget.min > data.budget.max:
            errors[ConstraintField.BUDGET_RANGE.value] = BUDGET_RANGE_INVERTED

    if not data.location or not data.location.strip():
        errors[ConstraintField.LOCATION.value] = LOCATION_REQUIRED

    # Whole-number message wins when both attendee checks fail
    if data.attendees <= 0:
        errors[ConstraintField.ATTENDEES.value] = ATTENDEES_NOT_POSITIVE

    if not _is_whole_number(data.attendees):
        errors[ConstraintField.ATTENDEES.value] = ATTENDEES_NOT_WHOLE

    return errors


def validate(data: PlannerFormData) -> ValidationResult:
    """Validate a constraint record and wrap the outcome."""
    errors = validate_constraints(data)
    return ValidationResult(is_valid=not errors, errors=errors)
