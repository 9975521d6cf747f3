"""Submit-time validation of form data against field descriptors and computed state."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from datetime import date
from typing import Any

from pydantic import Field, ValidationError

from formrules.forms.evaluation import evaluate_form
from formrules.forms.models import FieldDescriptor, FieldType, NameValue, PostcodeAddressValue
from formrules.rule_engine.models import CamelModel, EvaluationResult, Rule
from formrules.values import is_falsy, to_number, to_text

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MAX_AGE_YEARS = 120


class SubmissionResult(CamelModel):
    can_submit: bool
    errors: dict[str, str] = Field(default_factory=dict)
    evaluation: EvaluationResult = Field(default_factory=EvaluationResult)


def _is_missing(field: FieldDescriptor, value: Any) -> bool:
    if field.type == FieldType.NAME and isinstance(value, dict):
        try:
            name = NameValue.model_validate(value)
        except ValidationError:
            return True
        return not name.first_name.strip() or not name.last_name.strip()
    if field.type == FieldType.POSTCODE_ADDRESS and isinstance(value, dict):
        try:
            address = PostcodeAddressValue.model_validate(value)
        except ValidationError:
            return True
        return not address.postcode.strip()
    return is_falsy(value) or to_text(value).strip() == ""


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29 February in a non-leap target year
        return day.replace(year=day.year - years, day=28)


def validate_field_value(
    field: FieldDescriptor,
    value: Any,
    required: bool,
    today: date | None = None,
) -> str | None:
    """Return an error message for ``value``, or None when it is acceptable."""
    if required and _is_missing(field, value):
        label = field.label or field.id
        return f"{label} is required"

    if is_falsy(value):
        return None

    if field.type == FieldType.EMAIL:
        if not EMAIL_PATTERN.match(to_text(value)):
            return "Invalid email address"

    elif field.type == FieldType.NUMBER:
        number = to_number(value)
        if number != number:
            return "Must be a valid number"
        if field.min_value is not None and number < field.min_value:
            return f"Minimum value is {to_text(field.min_value)}"

    elif field.type == FieldType.DATE:
        try:
            selected = date.fromisoformat(to_text(value)[:10])
        except ValueError:
            # Unparseable dates compare false against both bounds
            return None
        today = today or date.today()
        if selected > today:
            return "Date cannot be in the future"
        if selected < _years_before(today, MAX_AGE_YEARS):
            return "Please enter a valid date of birth"

    return None


def validate_submission(
    fields: Sequence[FieldDescriptor],
    rules: Sequence[Rule],
    form_data: Mapping[str, Any],
    today: date | None = None,
) -> SubmissionResult:
    """Validate every visible input field and combine it with the rule submit gate.

    Hidden fields are not validated. A field's effective required flag is the
    one computed by the rules, so requireField and optionalField apply here too.
    A value set by a rule takes the place of the submitted value.
    """
    evaluation = evaluate_form(fields, rules, form_data)
    errors: dict[str, str] = {}

    for field in fields:
        if field.type == FieldType.STATIC_TEXT:
            continue
        state = evaluation.field_states.get(field.id)
        if state is not None and not state.visible:
            continue
        required = state.required if state is not None else field.required
        value = form_data.get(field.id)
        if state is not None and state.value is not None:
            value = state.value
        error = validate_field_value(field, value, required, today=today)
        if error:
            errors[field.id] = error

    gate_open = not evaluation.form_state.submit_disabled
    can_submit = gate_open and not errors
    if not can_submit:
        logger.debug(
            "Submission blocked: %d field error(s), submit gate %s",
            len(errors),
            "open" if gate_open else "closed",
        )
    return SubmissionResult(can_submit=can_submit, errors=errors, evaluation=evaluation)
