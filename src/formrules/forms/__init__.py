"""Campaign form fields, rule evaluation over descriptors, and submit validation."""

from formrules.forms.evaluation import evaluate_form, seed_states
from formrules.forms.models import (
    Campaign,
    CampaignStatus,
    FieldDescriptor,
    FieldType,
    NameValue,
    PostcodeAddressValue,
)
from formrules.forms.submission import SubmissionResult, validate_field_value, validate_submission

__all__ = [
    "Campaign",
    "CampaignStatus",
    "FieldDescriptor",
    "FieldType",
    "NameValue",
    "PostcodeAddressValue",
    "SubmissionResult",
    "evaluate_form",
    "seed_states",
    "validate_field_value",
    "validate_submission",
]
