"""Evaluate a campaign form's rules starting from its field descriptors."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from formrules.forms.models import FieldDescriptor, FieldType
from formrules.rule_engine.applier import apply_rules_to_fields, initial_field_states
from formrules.rule_engine.models import EvaluationResult, FormState, Rule


def seed_states(fields: Sequence[FieldDescriptor]) -> EvaluationResult:
    """Field states before any rule runs, with the submit gate open."""
    states = initial_field_states(
        [f.id for f in fields],
        {f.id: f.required for f in fields},
    )
    return EvaluationResult(field_states=states, form_state=FormState())


def evaluate_form(
    fields: Sequence[FieldDescriptor],
    rules: Sequence[Rule],
    form_data: Mapping[str, Any],
) -> EvaluationResult:
    """Run ``rules`` over ``form_data`` for a form made of ``fields``.

    Static text fields are display-only, so they are not seeded for evaluation;
    a rule that targets one (e.g. setContent) gets a default state on demand.
    """
    seeded = seed_states(fields)
    if not rules:
        return seeded

    field_ids = [f.id for f in fields if f.type != FieldType.STATIC_TEXT]
    return apply_rules_to_fields(rules, form_data, field_ids, seeded.field_states)
