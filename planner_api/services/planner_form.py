"""Planner form state: touched-field tracking and submit gating.

Mirrors how the planner UI drives the validator. Every change re-runs
``validate_constraints`` over the whole record; errors are only *shown* for
fields the user has touched, and submission dispatches to the
recommendation collaborator only when the record is fully valid.
"""

import logging
import math
from collections.abc import Callable
from enum import Enum
from typing import Any

from planner_api.models.constraints import PlannerFormData
from planner_api.services.validation import ConstraintField, validate_constraints

logger = logging.getLogger(__name__)


class FormField(str, Enum):
    """Inputs on the planner form."""

    START_DATE = "startDate"
    END_DATE = "endDate"
    MIN_BUDGET = "minBudget"
    MAX_BUDGET = "maxBudget"
    LOCATION = "location"
    ATTENDEES = "attendees"


NUMERIC_FIELDS = frozenset({FormField.MIN_BUDGET, FormField.MAX_BUDGET, FormField.ATTENDEES})

# Inputs whose touched state reveals each error key
ERROR_VISIBILITY: dict[str, frozenset[FormField]] = {
    ConstraintField.START_DATE.value: frozenset({FormField.START_DATE}),
    ConstraintField.END_DATE.value: frozenset({FormField.END_DATE}),
    ConstraintField.DATE_RANGE.value: frozenset({FormField.START_DATE, FormField.END_DATE}),
    ConstraintField.MIN_BUDGET.value: frozenset({FormField.MIN_BUDGET}),
    ConstraintField.MAX_BUDGET.value: frozenset({FormField.MAX_BUDGET}),
    ConstraintField.BUDGET_RANGE.value: frozenset({FormField.MIN_BUDGET, FormField.MAX_BUDGET}),
    ConstraintField.LOCATION.value: frozenset({FormField.LOCATION}),
    ConstraintField.ATTENDEES.value: frozenset({FormField.ATTENDEES}),
}


def coerce_number(value: Any) -> int | float:
    """Coerce raw input the way a browser number input does.

    Blank input becomes 0 and unparseable input becomes NaN, which the
    validator then reports.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    text = str(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


class PlannerForm:
    """
    Interactive planner form.

    Usage:
        form = PlannerForm(on_submit=dispatch_recommendation)
        form.change(FormField.START_DATE, "2024-06-01")
        form.blur(FormField.LOCATION)
        form.visible_errors()
        form.submit()
    """

    def __init__(
        self,
        data: PlannerFormData | None = None,
        on_submit: Callable[[PlannerFormData], None] | None = None,
    ) -> None:
        self._data = data or PlannerFormData()
        self._on_submit = on_submit
        self._touched: set[FormField] = set()
        self._errors: dict[str, str] = {}

    @property
    def data(self) -> PlannerFormData:
        return self._data

    @property
    def errors(self) -> dict[str, str]:
        """All errors from the last validation run, touched or not."""
        return dict(self._errors)

    @property
    def touched(self) -> frozenset[FormField]:
        return frozenset(self._touched)

    def change(self, field: FormField | str, value: Any) -> None:
        """Write a field value, mark it touched and re-validate."""
        field = FormField(field)
        if field in NUMERIC_FIELDS:
            value = coerce_number(value)

        time_range = self._data.time_range
        budget = self._data.budget
        if field is FormField.START_DATE:
            update = {"time_range": time_range.model_copy(update={"start_date": value})}
        elif field is FormField.END_DATE:
            update = {"time_range": time_range.model_copy(update={"end_date": value})}
        elif field is FormField.MIN_BUDGET:
            update = {"budget": budget.model_copy(update={"min": value})}
        elif field is FormField.MAX_BUDGET:
            update = {"budget": budget.model_copy(update={"max": value})}
        elif field is FormField.LOCATION:
            update = {"location": value}
        else:
            update = {"attendees": value}

        self._data = self._data.model_copy(update=update)
        self._touched.add(field)
        self._errors = validate_constraints(self._data)

    def blur(self, field: FormField | str) -> None:
        """Mark a field touched after the user leaves it."""
        self._touched.add(FormField(field))
        self._errors = validate_constraints(self._data)

    def visible_errors(self) -> dict[str, str]:
        """Errors for touched fields, including cross-field pairs."""
        return {
            key: message
            for key, message in self._errors.items()
            if ERROR_VISIBILITY[key] & self._touched
        }

    def submit(self) -> bool:
        """
        Validate every field and dispatch when the record is valid.

        Returns:
            True if the record was valid and handed to ``on_submit``
        """
        self._touched = set(FormField)
        self._errors = validate_constraints(self._data)

        if self._errors:
            logger.debug("Planner submit blocked: %s", sorted(self._errors))
            return False

        if self._on_submit is not None:
            self._on_submit(self._data)
        return True
