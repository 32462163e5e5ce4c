from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.core.errors import FieldIssue, InquiryValidationError


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InquiryCreate(CamelModel):
    # strict: no coercion of numbers/bools into text; unknown keys (id, createdAt, ...) are dropped.
    # camelCase keys only; config is inherited, so populate_by_name must be switched off here
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=False, strict=True, extra="ignore"
    )

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str | None = None
    check_in: str | None = None
    check_out: str | None = None
    message: str = Field(min_length=1)


class InquiryOut(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None
    check_in: str | None
    check_out: str | None
    message: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; they were written as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class InquiryCreatedOut(CamelModel):
    success: bool = True
    inquiry: InquiryOut


class InquiryListOut(CamelModel):
    success: bool = True
    inquiries: list[InquiryOut]


class FieldIssueOut(BaseModel):
    field: str
    issue: str


class ErrorOut(BaseModel):
    success: bool = False
    error: str
    details: list[FieldIssueOut] | None = None


def issues_from_errors(errors: list[dict[str, Any]]) -> list[FieldIssue]:
    """
    Flatten pydantic error dicts into one (field, issue) pair per field,
    keeping the first issue reported for each field.
    """
    issues: list[FieldIssue] = []
    seen: set[str] = set()
    for err in errors:
        loc = [part for part in err.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = ".".join(loc) or "body"
        if field in seen:
            continue
        seen.add(field)
        issues.append({"field": field, "issue": err.get("msg", "Invalid value")})
    return issues


def validate_inquiry(raw: Any) -> InquiryCreate:
    """
    Validate an untrusted payload. Pure: no I/O.
    Raises InquiryValidationError listing every failing field at once.
    """
    if not isinstance(raw, Mapping):
        raise InquiryValidationError([{"field": "body", "issue": "Expected a JSON object"}])
    try:
        return InquiryCreate.model_validate(dict(raw))
    except ValidationError as e:
        raise InquiryValidationError(issues_from_errors(e.errors())) from e
