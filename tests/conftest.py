"""Shared fixtures for formrules tests."""

import json
from pathlib import Path

import pytest


def make_rule(
    conditions: list[dict],
    actions: list[dict],
    *,
    logic: str = "AND",
    rule_id: str = "r1",
) -> dict:
    """Build an authored rule in the camelCase shape the rule builder stores."""
    return {
        "id": rule_id,
        "conditions": [{"id": f"c{i}", **c} for i, c in enumerate(conditions)],
        "actions": [{"id": f"a{i}", **a} for i, a in enumerate(actions)],
        "logicOperator": logic,
    }


@pytest.fixture
def signup_campaign() -> dict:
    """Campaign with an email/company pair, an age gate and a static notice."""
    return {
        "id": "camp-1",
        "title": "Solar panels door-to-door",
        "description": "Spring push",
        "created_by": "manager-1",
        "form_fields": [
            {"id": "email", "label": "Email", "type": "email", "required": True},
            {"id": "company", "label": "Company", "type": "text", "required": False},
            {"id": "age", "label": "Age", "type": "number", "required": False, "minValue": 0},
            {
                "id": "notice",
                "label": "Notice",
                "type": "statictext",
                "required": False,
                "content": "Thanks for your time",
            },
        ],
        "conditional_rules": [
            make_rule(
                [{"field": "email", "operator": "is_not_empty", "value": ""}],
                [{"type": "requireField", "field": "company"}],
                rule_id="company-when-email",
            ),
            make_rule(
                [{"field": "age", "operator": "less_than", "value": "18"}],
                [{"type": "disableSubmit", "field": "", "errorMessage": "Must be 18+"}],
                rule_id="adults-only",
            ),
        ],
    }


@pytest.fixture
def campaign_file(tmp_path: Path, signup_campaign: dict) -> Path:
    path = tmp_path / "campaign.json"
    path.write_text(json.dumps(signup_campaign))
    return path


@pytest.fixture
def rule_factory():
    """Expose make_rule to tests."""
    return make_rule
