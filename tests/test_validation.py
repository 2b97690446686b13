"""
Tests para core/validation.py - Reglas de validación de campos.
"""

import pytest

from portfolio_forms.config import FormMessages
from portfolio_forms.core.validation import (
    check_field,
    validate_field,
    is_valid_email,
    is_valid_url,
)
from portfolio_forms.models import FormField, FieldType, FieldValidity


class TestRequired:
    """Tests para campos requeridos."""

    def test_empty_required_fails(self):
        fld = FormField(name="name", required=True)
        assert check_field(fld) == (False, "This field is required")

    def test_whitespace_counts_as_empty(self):
        fld = FormField(name="name", required=True, value="   ")
        assert check_field(fld) == (False, "This field is required")

    def test_required_wins_over_other_constraints(self):
        """Vacío y requerido falla con 'required' aunque haya otras reglas."""
        fld = FormField(
            name="email",
            field_type=FieldType.EMAIL,
            required=True,
            min_length=5,
            pattern=r"^\d+$",
            title="Digits only",
        )
        valid, message = check_field(fld)
        assert not valid
        assert message == "This field is required"

    def test_optional_empty_passes(self):
        fld = FormField(name="company")
        assert check_field(fld) == (True, "")

    def test_required_checkbox_must_be_checked(self):
        fld = FormField(name="terms", field_type=FieldType.CHECKBOX, required=True, value="yes")
        assert check_field(fld) == (False, "This field is required")
        fld.set_value("on")
        assert check_field(fld) == (True, "")


class TestEmail:
    """Tests para campos de tipo email."""

    @pytest.mark.parametrize("value", [
        "ada@example.com",
        "a@b.c",
        "first.last+tag@sub.domain.org",
    ])
    def test_valid_emails(self, value):
        fld = FormField(name="email", field_type=FieldType.EMAIL, value=value)
        assert check_field(fld)[0]

    @pytest.mark.parametrize("value", [
        "bad-email",
        "ada@example",
        "ada example@example.com",
        "@example.com",
        "ada@@example.com",
    ])
    def test_invalid_emails(self, value):
        fld = FormField(name="email", field_type=FieldType.EMAIL, value=value)
        assert check_field(fld) == (False, "Please enter a valid email address")

    def test_is_valid_email_helper(self):
        assert is_valid_email("x@y.z")
        assert not is_valid_email("x@y")

    def test_optional_empty_email_passes(self):
        fld = FormField(name="email", field_type=FieldType.EMAIL)
        assert check_field(fld)[0]


class TestUrl:
    """Tests para campos de tipo URL."""

    def test_valid_url(self):
        assert is_valid_url("https://example.com/portfolio")

    def test_relative_url_is_invalid(self):
        assert not is_valid_url("example")

    def test_invalid_url_message(self):
        fld = FormField(name="site", field_type=FieldType.URL, value="not a url")
        assert check_field(fld) == (False, "Please enter a valid URL")


class TestLength:
    """Tests para minlength y maxlength."""

    def test_min_length_cites_configured_number(self):
        fld = FormField(name="name", min_length=7, value="Ada")
        assert check_field(fld) == (False, "Minimum 7 characters required")

    def test_min_length_exact_passes(self):
        fld = FormField(name="name", min_length=3, value="Ada")
        assert check_field(fld)[0]

    def test_min_length_uses_trimmed_value(self):
        fld = FormField(name="name", min_length=4, value="  Ada  ")
        assert not check_field(fld)[0]

    def test_max_length(self):
        fld = FormField(name="name", max_length=3, value="Grace")
        assert check_field(fld) == (False, "Maximum 3 characters allowed")

    def test_min_checked_before_max(self):
        """Un solo error por campo: gana la primera regla que falla."""
        fld = FormField(name="code", min_length=5, max_length=2, value="abc")
        assert check_field(fld)[1] == "Minimum 5 characters required"


class TestPattern:
    """Tests para el atributo pattern."""

    def test_pattern_match(self):
        fld = FormField(name="zip", pattern=r"^\d{5}$", value="12345")
        assert check_field(fld)[0]

    def test_pattern_custom_message(self):
        fld = FormField(name="zip", pattern=r"^\d{5}$", title="Five digits", value="12a45")
        assert check_field(fld) == (False, "Five digits")

    def test_pattern_generic_message(self):
        fld = FormField(name="zip", pattern=r"^\d{5}$", value="abc")
        assert check_field(fld) == (False, "Invalid format")

    def test_invalid_regex_does_not_block(self):
        fld = FormField(name="zip", pattern="([", value="abc")
        assert check_field(fld)[0]

    def test_custom_messages(self):
        msgs = FormMessages(required="Campo requerido")
        fld = FormField(name="name", required=True)
        assert check_field(fld, msgs) == (False, "Campo requerido")


class TestValidateField:
    """Tests para validate_field (actualiza el estado del campo)."""

    def test_marks_invalid_with_annotation(self):
        fld = FormField(name="name", required=True)
        assert validate_field(fld) is False
        assert fld.validity == FieldValidity.INVALID
        assert fld.error.message == "This field is required"
        assert fld.error.role == "alert"

    def test_marks_valid_and_clears_annotation(self):
        fld = FormField(name="name", required=True)
        validate_field(fld)
        fld.value = "Ada"
        assert validate_field(fld) is True
        assert fld.validity == FieldValidity.VALID
        assert fld.error is None

    def test_idempotent(self):
        """Validar dos veces el mismo valor da el mismo resultado y una sola anotación."""
        fld = FormField(name="email", field_type=FieldType.EMAIL, value="bad")
        first = validate_field(fld)
        annotation = fld.error
        second = validate_field(fld)
        assert first == second is False
        assert fld.error == annotation
