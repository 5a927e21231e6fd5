"""
Tests for Utility Functions

Role resolution from hosts, string sanitization, masking and timestamps.
"""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from workwhiz.domain.roles import Role
from workwhiz.utils import (
    generate_request_id,
    mask_email,
    mask_phone,
    parse_timestamp,
    sanitize_log_data,
    sanitize_string,
)
from workwhiz.utils.roles import get_user_role


class TestGetUserRole:
    """Test suite for role resolution by sub-domain"""

    @pytest.mark.parametrize("host, expected", [
        ("admin.dev.example.com", Role.ADMIN),
        ("employer.dev.example.com", Role.EMPLOYER),
        ("www.dev.example.com", Role.CANDIDATE),
        ("admin.workwhiz.co.za", Role.ADMIN),
    ])
    def test_known_subdomains(self, host, expected):
        """Test that the first label selects the role"""
        assert get_user_role(host) == expected

    @pytest.mark.parametrize("host, expected", [
        ("ADMIN.Example.COM", Role.ADMIN),
        ("Employer.example.com", Role.EMPLOYER),
    ])
    def test_case_insensitive(self, host, expected):
        """Test that matching ignores case"""
        assert get_user_role(host) == expected

    @pytest.mark.parametrize("host, expected", [
        ("admin.localhost:3000", Role.ADMIN),
        ("employer.localhost:8080", Role.EMPLOYER),
        ("www.localhost:5173", Role.CANDIDATE),
    ])
    def test_port_is_ignored(self, host, expected):
        """Test that a port suffix does not affect matching"""
        assert get_user_role(host) == expected

    @pytest.mark.parametrize("host", [
        "myadmin.example.com",
        "adminx.example.com",
        "candidate.example.com",
        "example.com",
        "localhost",
        "admin",
        "admin.example.com/path",
        "",
        None,
    ])
    def test_unrecognised_hosts(self, host):
        """Test that partial labels, bare hosts and empty values map to no role"""
        assert get_user_role(host) is None


class TestStringUtilities:
    """Test suite for string helpers"""

    def test_sanitize_string_trims(self):
        """Test that surrounding whitespace is removed"""
        assert sanitize_string("  hello world  ") == "hello world"

    @pytest.mark.parametrize("value", [None, 42, ["a"], {"a": 1}])
    def test_sanitize_string_leaves_non_strings(self, value):
        """Test that non-string values are returned untouched"""
        assert sanitize_string(value) == value

    def test_mask_email(self):
        """Test that only the first characters of the local part stay visible"""
        assert mask_email("john.doe@gmail.com") == "jo****@gmail.com"
        assert mask_email("invalid") == "****"
        assert mask_email(None) == "****"

    def test_mask_phone(self):
        """Test that only the last digits stay visible"""
        assert mask_phone("+27821234567") == "****567"
        assert mask_phone("12") == "****"

    def test_sanitize_log_data(self):
        """Test that secrets are redacted and PII masked, recursively"""
        data = {
            "email": "john.doe@gmail.com",
            "password": "Str0ngP@ssw0rd!",
            "user": {"phone": "+27821234567", "mfa_secret": "JBSWY3DP"},
            "items": [{"password_confirmation": "x"}, "plain"],
        }

        sanitized = sanitize_log_data(data)

        assert sanitized == {
            "email": "jo****@gmail.com",
            "password": "[REDACTED]",
            "user": {"phone": "****567", "mfa_secret": "[REDACTED]"},
            "items": [{"password_confirmation": "[REDACTED]"}, "plain"],
        }
        assert data["password"] == "Str0ngP@ssw0rd!"


class TestParseTimestamp:
    """Test suite for timestamp parsing"""

    def test_zulu_string(self):
        """Test that a trailing Z is read as UTC"""
        assert parse_timestamp("2024-01-15T10:30:00Z") == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_offset_string(self):
        """Test that explicit offsets are kept"""
        parsed = parse_timestamp("2024-01-15T12:30:00+02:00")

        assert parsed.utcoffset() == timedelta(hours=2)
        assert parsed == datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_naive_values_are_utc(self):
        """Test that naive datetimes and strings are assumed to be UTC"""
        assert parse_timestamp(datetime(2024, 1, 15)).tzinfo == UTC
        assert parse_timestamp("2024-01-15T10:30:00").tzinfo == UTC

    def test_aware_datetime_is_unchanged(self):
        """Test that aware datetimes pass through"""
        value = datetime(2024, 1, 15, tzinfo=timezone(timedelta(hours=-5)))

        assert parse_timestamp(value) is value

    @pytest.mark.parametrize("value", ["not-a-date", "", "   ", None, 1700000000])
    def test_unparsable_values(self, value):
        """Test that anything else yields None"""
        assert parse_timestamp(value) is None


class TestGenerateRequestId:
    """Test suite for request ID generation"""

    def test_unique_ids(self):
        """Test that IDs do not repeat"""
        assert generate_request_id() != generate_request_id()

    def test_prefix(self):
        """Test that a prefix is prepended"""
        assert generate_request_id("API").startswith("API-")
