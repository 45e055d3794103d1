"""Tests for PlannerForm touched tracking and submit gating."""

import math
import os
from unittest.mock import Mock

import pytest

from planner_api.services.planner_form import FormField, PlannerForm, coerce_number


def fill(form: PlannerForm, **overrides) -> None:
    values = {
        FormField.START_DATE: "2024-06-01",
        FormField.END_DATE: "2024-06-05",
        FormField.MIN_BUDGET: "5000",
        FormField.MAX_BUDGET: "10000",
        FormField.LOCATION: "New York",
        FormField.ATTENDEES: "100",
    }
    for name, value in overrides.items():
        values[FormField(name)] = value
    for field, value in values.items():
        form.change(field, value)


class TestCoerceNumber:
    """Tests for browser-style number coercion."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("", 0), ("  ", 0), ("5000", 5000), ("-1000", -1000), ("1.5", 1.5), (42, 42), (2.5, 2.5)],
    )
    def test_coerces(self, raw, expected):
        assert coerce_number(raw) == expected

    def test_integer_text_stays_int(self):
        assert isinstance(coerce_number("100"), int)

    def test_garbage_is_nan(self):
        assert math.isnan(coerce_number("abc"))


class TestSubmit:
    """End-to-end submit scenarios."""

    def test_valid_form_dispatches_once(self):
        """Scenario A: valid input dispatches exactly once with the payload."""
        on_submit = Mock()
        form = PlannerForm(on_submit=on_submit)
        fill(form)

        assert form.submit() is True
        assert form.errors == {}
        on_submit.assert_called_once()
        payload = on_submit.call_args.args[0]
        assert payload.model_dump(by_alias=True) == {
            "timeRange": {"startDate": "2024-06-01", "endDate": "2024-06-05"},
            "budget": {"min": 5000, "max": 10000},
            "location": "New York",
            "attendees": 100,
        }

    def test_end_before_start_blocks_submit(self):
        """Scenario B: inverted dates never dispatch."""
        on_submit = Mock()
        form = PlannerForm(on_submit=on_submit)
        fill(form, startDate="2024-06-10", endDate="2024-06-05")

        assert form.submit() is False
        assert form.errors["dateRange"] == "End date must be after start date"
        on_submit.assert_not_called()

    def test_empty_form_submit_touches_everything(self):
        on_submit = Mock()
        form = PlannerForm(on_submit=on_submit)

        assert form.submit() is False
        assert form.touched == frozenset(FormField)
        assert set(form.visible_errors()) == {"startDate", "endDate", "location", "attendees"}
        on_submit.assert_not_called()

    def test_submit_without_callback_reports_validity(self):
        form = PlannerForm()
        fill(form)
        assert form.submit() is True


class TestIndependentErrors:
    """Scenario C: each error clears on its own."""

    def test_fixing_dates_keeps_budget_error(self):
        form = PlannerForm()
        fill(form, startDate="2024-06-10", endDate="2024-06-05", minBudget="10000", maxBudget="5000")
        assert {"dateRange", "budgetRange"} <= set(form.errors)

        form.change(FormField.END_DATE, "2024-06-15")
        assert "dateRange" not in form.errors
        assert form.errors["budgetRange"] == (
            "Minimum budget must be less than or equal to maximum budget"
        )

        form.change(FormField.MAX_BUDGET, "20000")
        assert form.errors == {}


class TestVisibility:
    """Tests for touched-gated error display."""

    def test_untouched_errors_are_hidden(self):
        form = PlannerForm()
        form.change(FormField.ATTENDEES, "0")

        assert "location" in form.errors
        assert form.visible_errors() == {
            "attendees": "Number of attendees must be a positive integer"
        }

    def test_blur_reveals_required_location(self):
        form = PlannerForm()
        form.blur(FormField.LOCATION)
        assert form.visible_errors() == {"location": "Location is required"}

    def test_date_range_shows_when_either_date_touched(self):
        form = PlannerForm()
        form.change(FormField.START_DATE, "2024-06-10")
        form.change(FormField.END_DATE, "2024-06-05")
        assert form.visible_errors()["dateRange"] == "End date must be after start date"

    def test_budget_range_shows_with_one_budget_touched(self):
        form = PlannerForm()
        form.change(FormField.MIN_BUDGET, "10000")
        form.change(FormField.MAX_BUDGET, "5000")
        visible = form.visible_errors()
        assert "budgetRange" in visible
        assert "dateRange" not in visible

    def test_negative_budget_message(self):
        form = PlannerForm()
        form.change("minBudget", "-1000")
        assert form.visible_errors() == {"minBudget": "Minimum budget must be positive"}

    def test_unknown_field_raises(self):
        form = PlannerForm()
        with pytest.raises(ValueError):
            form.change("foodOptions", ["buffet"])


class TestEnvironmentIsolation:
    """Tests that service tests start from a clean environment."""

    def test_starts_without_collaborators(self):
        from planner_api.services import get_chat_service, get_recommendation_service

        assert get_recommendation_service() is None
        assert get_chat_service() is None

    def test_settings_follow_environment(self):
        from planner_api.config import get_settings

        os.environ["SERVER_PORT"] = "5050"
        assert get_settings().server_port == 5050
