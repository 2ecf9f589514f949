"""
Test suite for shared input validation rules.

System role: Verification of business-rule validation
"""

import uuid
from datetime import date, timedelta

import pytest

from micourses.core import validation
from micourses.core.exceptions import ValidationError


class TestValidateName:
    """Names: letters with at most two embedded single or double spaces."""

    @pytest.mark.parametrize("name", ["Jane", "Jane Doe", "Jane  Doe", "Mary Ann Lee"])
    def test_accepts_letter_names(self, name: str) -> None:
        assert validation.validate_name(name) == name

    @pytest.mark.parametrize("name", ["", "Jane3", "Jane   Doe", "A B C D", "Jane-Doe"])
    def test_rejects_invalid_names(self, name: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_name(name)
        assert exc_info.value.field == "names"

    def test_reports_custom_field(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validation.validate_name("x1", field="firstName")
        assert exc_info.value.field == "firstName"


class TestValidateEmailAndContact:
    def test_email_is_lowercased_and_trimmed(self) -> None:
        assert validation.validate_email("  Jane@Example.COM ") == "jane@example.com"

    @pytest.mark.parametrize("email", ["jane", "jane@", "jane@example", "ja ne@example.com", None])
    def test_rejects_malformed_email(self, email) -> None:
        with pytest.raises(ValidationError):
            validation.validate_email(email)

    def test_contact_must_be_ten_digits(self) -> None:
        assert validation.validate_contact("0123456789") == "0123456789"
        for bad in ["012345678", "01234567890", "01234abcde"]:
            with pytest.raises(ValidationError):
                validation.validate_contact(bad)


class TestValidatePassword:
    def test_minimum_length_is_six(self) -> None:
        assert validation.validate_password("secret") == "secret"
        with pytest.raises(ValidationError, match="at least 6"):
            validation.validate_password("short")


class TestProfileRules:
    def test_gender_is_normalized(self) -> None:
        assert validation.validate_gender(" Female ") == "female"

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validation.validate_gender("robot")

    def test_birth_date_must_be_past(self) -> None:
        past = date(1990, 5, 1)
        assert validation.validate_birth_date(past) == past
        with pytest.raises(ValidationError):
            validation.validate_birth_date(date.today() + timedelta(days=1))

    def test_required_rejects_whitespace(self) -> None:
        with pytest.raises(ValidationError, match="sector is required"):
            validation.validate_required("   ", "sector")


class TestParseId:
    def test_parses_string_uuid(self) -> None:
        value = uuid.uuid4()
        assert validation.parse_id(str(value)) == value

    def test_passes_uuid_through(self) -> None:
        value = uuid.uuid4()
        assert validation.parse_id(value) is value

    @pytest.mark.parametrize("value", ["not-a-uuid", "", None, "1234"])
    def test_rejects_malformed_ids(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validation.parse_id(value, field="courseId")
        assert exc_info.value.status_code == 400
        assert exc_info.value.field == "courseId"
