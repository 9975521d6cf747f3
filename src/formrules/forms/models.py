"""Pydantic models for campaign form fields and compound field values."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from formrules.rule_engine.models import CamelModel, Rule


class FieldType(StrEnum):
    TEXT = "text"
    EMAIL = "email"
    PHONE = "phone"
    TEXTAREA = "textarea"
    NUMBER = "number"
    YES_NO = "yesno"
    MULTIPLE_CHOICE = "multiplechoice"
    MULTI_SELECT = "multiselect"
    DROPDOWN = "dropdown"
    CHECKBOX = "checkbox"
    STATIC_TEXT = "statictext"
    POSTCODE_ADDRESS = "postcode_address"
    NAME = "name"
    DATE = "date"


class CampaignStatus(StrEnum):
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"


class FieldDescriptor(CamelModel):
    id: str
    label: str = ""
    type: FieldType = FieldType.TEXT
    required: bool = False
    permanent: bool = False
    options: list[str] | None = None
    min_value: float | None = None
    content: str | None = None


class NameValue(CamelModel):
    title: str = ""
    first_name: str = ""
    last_name: str = ""


class PostcodeAddressValue(CamelModel):
    postcode: str = ""
    address: str = ""
    address1: str = ""
    address2: str = ""
    city: str = ""


class Campaign(CamelModel):
    """A campaign's form configuration: fields plus the rules authored against them."""

    id: str = ""
    title: str = ""
    description: str = ""
    created_by: str = ""
    form_fields: list[FieldDescriptor] = Field(default_factory=list)
    conditional_rules: list[Rule] = Field(default_factory=list)
    status: CampaignStatus = CampaignStatus.ACTIVE
