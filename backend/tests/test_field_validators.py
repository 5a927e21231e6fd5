"""
Tests for Field Validators

Allowed-email, country-aware phone, strong password and input confirmation
rules.
"""

import pytest

from workwhiz.core.constants import ValidationMessages
from workwhiz.domain.validators import (
    ConstraintContext,
    ConstraintEngine,
    IS_ALLOWED_EMAIL,
    allowed_email_message,
    check_password,
    get_country_pattern,
    is_allowed_email,
    is_blocked_domain,
    is_not_empty,
    is_strong_password,
    phone_number,
    validate_input,
    validate_phone_number,
)


class TestAllowedEmail:
    """Test suite for the allowed-email rule"""

    @pytest.mark.parametrize("email", [
        "valid@gmail.com",
        "john.doe+jobs@outlook.com",
        "hr@acme.co.za",
    ])
    def test_valid_emails_are_allowed(self, email):
        """Test that well-formed addresses on accepted providers pass"""
        assert is_allowed_email(email) is True

    @pytest.mark.parametrize("email", [
        "test@protonmail.com",
        "test@PROTONMAIL.COM",
        "test@mail.protonmail.com",
        "someone@pront.me",
        "someone@eu.Tutanota.io",
    ])
    def test_blocked_domains_fail_with_provider_message(self, email):
        """Test that blocked providers and their sub-domains are refused, any case"""
        assert is_allowed_email(email) is False
        assert allowed_email_message(email) == ValidationMessages.EMAIL_PROVIDER_BLOCKED

    def test_lookalike_domain_is_not_blocked(self):
        """Test that only exact or sub-domain matches are blocked"""
        assert is_blocked_domain("notprotonmail.com") is False
        assert is_allowed_email("user@notprotonmail.com") is True

    @pytest.mark.parametrize("email", [
        "test@example.invalidtld",
        "test@domain.localhost",
        "test@domain.test",
        "test@domain.example",
    ])
    def test_disallowed_tlds_fail_with_generic_message(self, email):
        """Test that undeliverable top-level domains are refused"""
        assert is_allowed_email(email) is False
        assert allowed_email_message(email) == ValidationMessages.EMAIL_INVALID

    @pytest.mark.parametrize("email", ["", None])
    def test_missing_email_is_required(self, email):
        """Test that an empty value reports the required message first"""
        assert is_allowed_email(email) is False
        assert allowed_email_message(email) == ValidationMessages.EMAIL_REQUIRED

    @pytest.mark.parametrize("email", ["not-an-email", "user@", "@gmail.com", "user@localhost"])
    def test_malformed_email_reports_format(self, email):
        """Test that malformed addresses report the format message"""
        assert is_allowed_email(email) is False
        assert allowed_email_message(email) == ValidationMessages.EMAIL_INVALID_FORMAT

    def test_constraint_reports_single_message(self):
        """Test that the constraint contributes one prioritized message"""
        errors = ConstraintEngine.evaluate(
            "email", "x@protonmail.com", [IS_ALLOWED_EMAIL], ConstraintContext("email")
        )

        assert errors == ["We do not accept emails from this provider"]


class TestPhoneNumber:
    """Test suite for the country-aware phone rule"""

    @pytest.mark.parametrize("phone", ["+27821234567", "0821234567", "0612345678", "+27712345678"])
    def test_valid_south_african_numbers(self, phone):
        """Test that ZA mobile numbers in local or international form pass"""
        assert validate_phone_number(phone, "ZA") is True

    @pytest.mark.parametrize("phone", ["+44821234567", "0521234567", "082123456", "08212345678", ""])
    def test_invalid_south_african_numbers(self, phone):
        """Test that foreign, short, long and empty numbers fail for ZA"""
        assert validate_phone_number(phone, "ZA") is False

    def test_default_country_is_south_africa(self):
        """Test that the country code defaults to ZA"""
        assert validate_phone_number("0821234567") is True

    @pytest.mark.parametrize("phone, expected", [
        ("2025550123", True),
        ("+12025550123", True),
        ("0025550123", False),
        ("1025550123", False),
        ("2021550123", False),
    ])
    def test_united_states_numbers(self, phone, expected):
        """Test NANP rules: area code and exchange cannot start with 0 or 1"""
        assert validate_phone_number(phone, "US") is expected

    @pytest.mark.parametrize("phone, expected", [
        ("+447911123456", True),
        ("07911123456", True),
        ("+44821234567", False),
    ])
    @pytest.mark.parametrize("country_code", ["GB", "UK"])
    def test_united_kingdom_numbers(self, phone, expected, country_code):
        """Test UK mobile numbers under both the ISO and the common code"""
        assert validate_phone_number(phone, country_code) is expected

    @pytest.mark.parametrize("phone, expected", [
        ("+1234567890", True),
        ("12345678", True),
        ("+0123456789", False),
        ("1234567", False),
        ("1234567890123456", False),
    ])
    def test_unknown_country_uses_fallback(self, phone, expected):
        """Test the generic international pattern for unknown countries"""
        assert validate_phone_number(phone, "XX") is expected

    def test_country_code_is_case_insensitive(self):
        """Test that lowercase country codes select the same pattern"""
        assert get_country_pattern("za") is get_country_pattern("ZA")

    def test_non_string_fails(self):
        """Test that non-string values are never valid"""
        assert validate_phone_number(821234567, "ZA") is False

    def test_constraint_uses_same_patterns(self):
        """Test that the schema constraint agrees with the standalone check"""
        constraint = phone_number("ZA")
        context = ConstraintContext("phone")

        assert constraint.validate("+27821234567", context) is True
        assert constraint.validate("+44821234567", context) is False
        assert constraint.message("+44821234567", context) == "phone must be a valid ZA phone number"


class TestPasswordStrength:
    """Test suite for the strong password policy"""

    @pytest.mark.parametrize("password", ["Short1!", "Ab1!", "aB3$aB3$aB3"])
    def test_short_passwords_fail_with_length_message(self, password):
        """Test that passwords under 12 characters report the minimum length"""
        errors = check_password(password)

        assert ValidationMessages.PASSWORD_TOO_SHORT in errors

    @pytest.mark.parametrize("password", [
        "Str0ngP@ssw0rd!",
        "Abcdefghij1!",
        "A1!" + "a" * 61,
    ])
    def test_strong_passwords_pass(self, password):
        """Test passwords of valid length containing all four character classes"""
        assert check_password(password) == []

    def test_65_characters_fails_with_max_length_message(self):
        """Test that 65 repeated 'A' characters exceed the maximum"""
        errors = check_password("A" * 65)

        assert ValidationMessages.PASSWORD_TOO_LONG in errors
        assert ValidationMessages.PASSWORD_TOO_SHORT not in errors

    def test_lowercase_only_fails_strength_only(self):
        """Test that a long lowercase password fails the character-class rule only"""
        assert check_password("onlylowercaseletters") == [ValidationMessages.PASSWORD_WEAK]

    def test_empty_password_reports_every_rule(self):
        """Test that an empty password reports all failing rules, in order"""
        assert check_password("") == [
            ValidationMessages.PASSWORD_EMPTY,
            ValidationMessages.PASSWORD_TOO_SHORT,
            ValidationMessages.PASSWORD_WEAK,
        ]

    def test_characters_outside_allowed_set_fail(self):
        """Test that whitespace or unlisted symbols break the strength rule"""
        assert is_strong_password("Str0ng P@ssw0rd") is False
        assert is_strong_password("Str0ngP@ssw0rd~") is False

    def test_non_ascii_digits_do_not_count(self):
        """Test that only ASCII digits satisfy the digit class"""
        assert is_strong_password("StrongP@ssword٣") is False


class TestStringConstraints:
    """Test suite for generic string constraints"""

    @pytest.mark.parametrize("value, expected", [
        (None, False),
        ("", False),
        (" ", True),
        ("text", True),
        (0, True),
    ])
    def test_is_not_empty(self, value, expected):
        """Test that only None and the empty string are empty"""
        assert is_not_empty().validate(value, ConstraintContext("field")) is expected

    def test_custom_message_overrides_template(self):
        """Test that a fixed message replaces the field-based template"""
        constraint = is_not_empty("Please enter a password")

        assert constraint.message("", ConstraintContext("password")) == "Please enter a password"


class TestValidateInput:
    """Test suite for the input confirmation check"""

    def test_surrounding_whitespace_is_ignored(self):
        """Test that both operands are trimmed before comparison"""
        assert validate_input("  Hello, World!  ", "Hello, World!") is True
        assert validate_input("Hello", "\tHello\n") is True

    def test_comparison_is_case_sensitive(self):
        """Test that case differences are mismatches"""
        assert validate_input("Hello, World!", "hello, world!") is False

    def test_inner_whitespace_matters(self):
        """Test that only leading and trailing whitespace is trimmed"""
        assert validate_input("Hello World", "Hello  World") is False

    def test_non_strings_never_match(self):
        """Test that None and numbers are not comparable inputs"""
        assert validate_input(None, None) is False
        assert validate_input("1", 1) is False
