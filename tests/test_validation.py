"""
Tests for inquiry payload validation.

Covers:
- Required and optional fields
- Every failing field reported at once
- No type coercion
- Unknown / server-owned keys ignored
"""

import pytest

from app.core.errors import InquiryValidationError
from app.schemas.inquiry import InquiryCreate, validate_inquiry

REQUIRED = ["firstName", "lastName", "email", "message"]


class TestValidPayloads:
    def test_minimal_payload_is_accepted(self, valid_payload):
        data = validate_inquiry(valid_payload)
        assert isinstance(data, InquiryCreate)
        assert data.first_name == "Sarah"
        assert data.last_name == "Lee"
        assert data.email == "s@example.com"
        assert data.message == "Is Dec 15-17 available?"
        assert data.phone is None
        assert data.check_in is None
        assert data.check_out is None

    def test_optional_fields_are_kept(self, full_payload):
        data = validate_inquiry(full_payload)
        assert data.phone == "+1 555 0100"
        assert data.check_in == "2026-12-15"
        assert data.check_out == "2026-12-17"

    def test_optional_fields_accept_null(self, valid_payload):
        data = validate_inquiry({**valid_payload, "phone": None, "checkIn": None, "checkOut": None})
        assert data.phone is None

    def test_stay_dates_are_not_checked_against_each_other(self, valid_payload):
        data = validate_inquiry({**valid_payload, "checkIn": "2026-12-17", "checkOut": "2026-12-15"})
        assert data.check_in == "2026-12-17"

    def test_email_format_is_not_enforced(self, valid_payload):
        data = validate_inquiry({**valid_payload, "email": "call me"})
        assert data.email == "call me"

    def test_unknown_and_server_keys_are_dropped(self, valid_payload):
        data = validate_inquiry({**valid_payload, "id": "abc", "createdAt": "yesterday", "foo": 1})
        dumped = data.model_dump()
        assert "id" not in dumped
        assert "created_at" not in dumped
        assert "foo" not in dumped


class TestInvalidPayloads:
    @pytest.mark.parametrize("field", REQUIRED)
    def test_missing_required_field(self, valid_payload, field):
        payload = dict(valid_payload)
        del payload[field]
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry(payload)
        assert exc.value.fields == [field]

    @pytest.mark.parametrize("field", REQUIRED)
    def test_empty_required_field(self, valid_payload, field):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry({**valid_payload, field: ""})
        assert exc.value.fields == [field]

    def test_all_failing_fields_are_reported(self):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry({"phone": "123"})
        assert sorted(exc.value.fields) == sorted(REQUIRED)

    def test_each_issue_has_field_and_text(self):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry({})
        for detail in exc.value.details:
            assert set(detail) == {"field", "issue"}
            assert detail["issue"]

    def test_wrong_primitive_types_are_not_coerced(self, valid_payload):
        payload = {**valid_payload, "firstName": 42, "message": True, "phone": 5550100}
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry(payload)
        assert sorted(exc.value.fields) == ["firstName", "message", "phone"]

    def test_null_required_field_is_rejected(self, valid_payload):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry({**valid_payload, "email": None})
        assert exc.value.fields == ["email"]

    def test_snake_case_keys_are_not_aliases(self, valid_payload):
        payload = {**valid_payload, "check_in": "2026-12-15", "first_name": "Sarah"}
        del payload["firstName"]
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry(payload)
        assert exc.value.fields == ["firstName"]

    def test_snake_case_optional_key_is_ignored(self, valid_payload):
        data = validate_inquiry({**valid_payload, "check_in": "2026-12-15"})
        assert data.check_in is None

    @pytest.mark.parametrize("raw", [None, [], ["firstName"], "Sarah", 7])
    def test_non_object_payload(self, raw):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry(raw)
        assert exc.value.fields == ["body"]

    def test_error_carries_http_status(self):
        with pytest.raises(InquiryValidationError) as exc:
            validate_inquiry({})
        assert exc.value.status_code == 400
        assert exc.value.message == "Validation failed"
