"""Application Constants.

Centralized constants used throughout the application.
This file contains all hardcoded values that should be maintained in one place.
"""

from datetime import UTC, datetime

# ============================================================================
# ROLE CONSTANTS
# ============================================================================

class UserRoles:
    """User role values."""
    ADMIN = "admin"
    EMPLOYER = "employer"
    CANDIDATE = "candidate"


class Permissions:
    """Admin permission catalogue."""
    MANAGE_USERS = "manage_users"
    MANAGE_ADMINS = "manage_admins"
    MANAGE_EMPLOYERS = "manage_employers"
    MANAGE_CANDIDATES = "manage_candidates"
    MANAGE_JOBS = "manage_jobs"
    VIEW_REPORTS = "view_reports"

    ALL_PERMISSIONS = frozenset({
        MANAGE_USERS,
        MANAGE_ADMINS,
        MANAGE_EMPLOYERS,
        MANAGE_CANDIDATES,
        MANAGE_JOBS,
        VIEW_REPORTS,
    })


# ============================================================================
# EMAIL RULE CONSTANTS
# ============================================================================

class EmailRules:
    """Allowed-email policy."""
    # Domains (and their sub-domains) whose addresses are refused
    BLOCKED_DOMAINS = (
        "protonmail.com",
        "pront.me",
        "tutanota.io",
    )

    # Top-level domains that are never deliverable
    INVALID_TLDS = frozenset({
        "invalidtld",
        "localhost",
        "test",
        "example",
    })

    # local@domain.tld, labels of letters, digits and inner hyphens
    EMAIL_PATTERN = (
        r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+"
        r"@(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+"
        r"[A-Za-z]{2,63}$"
    )


# ============================================================================
# PHONE RULE CONSTANTS
# ============================================================================

class PhonePatterns:
    """Per-country phone number patterns (full match)."""
    SOUTH_AFRICA = "ZA"
    UNITED_STATES = "US"
    UNITED_KINGDOM = "GB"
    UNITED_KINGDOM_ALIAS = "UK"

    DEFAULT_COUNTRY = SOUTH_AFRICA

    PATTERNS: dict[str, str] = {
        SOUTH_AFRICA: r"^(\+27|0)[6-8][0-9]{8}$",
        UNITED_STATES: r"^(\+1)?[2-9][0-9]{2}[2-9][0-9]{6}$",
        UNITED_KINGDOM: r"^(\+44|0)7[0-9]{9}$",
        UNITED_KINGDOM_ALIAS: r"^(\+44|0)7[0-9]{9}$",
    }

    # International fallback for any other country code
    FALLBACK_PATTERN = r"^\+?[1-9][0-9]{7,14}$"


# ============================================================================
# PASSWORD POLICY CONSTANTS
# ============================================================================

class PasswordPolicy:
    """Strong password policy."""
    MIN_LENGTH = 12
    MAX_LENGTH = 64

    # One of each class, nothing outside letters, digits and the special set
    STRONG_PATTERN = (
        r'^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[!@#$%^&*(),.?":{}|<>])'
        r'[A-Za-z\d!@#$%^&*(),.?":{}|<>]+$'
    )


# ============================================================================
# FIELD LENGTH CONSTANTS
# ============================================================================

class ValidationLimits:
    """Validation limits for registration fields."""
    MIN_NAME_LENGTH = 2
    MIN_TITLE_LENGTH = 3
    MIN_COMPANY_LENGTH = 2
    MIN_INDUSTRY_LENGTH = 2


# ============================================================================
# VALIDATION MESSAGE CONSTANTS
# ============================================================================

class ValidationMessages:
    """Messages produced by field constraints."""
    EMAIL_REQUIRED = "Email is required"
    EMAIL_INVALID_FORMAT = "Invalid email format"
    EMAIL_PROVIDER_BLOCKED = "We do not accept emails from this provider"
    EMAIL_INVALID = "Please enter a valid email address"

    PHONE_INVALID = "{field} must be a valid {country_code} phone number"

    PASSWORD_EMPTY = "Please enter a password"
    PASSWORD_TOO_SHORT = "Password should be at least 12 characters long"
    PASSWORD_TOO_LONG = "Password should not exceed 64 characters"
    PASSWORD_WEAK = (
        "Password must contain at least one uppercase letter, one lowercase letter, "
        "one number, and one special character"
    )
    PASSWORDS_DO_NOT_MATCH = "Passwords do not match"

    NOT_A_STRING = "{field} must be a string"
    NOT_EMPTY = "{field} should not be empty"
    MIN_LENGTH = "{field} must be longer than or equal to {length} characters"
    MAX_LENGTH = "{field} must be shorter than or equal to {length} characters"
    REQUIRED = "{field} is required"


# ============================================================================
# CONSTRAINT NAME CONSTANTS
# ============================================================================

class ConstraintNames:
    """Names under which constraints report violations."""
    IS_ALLOWED_EMAIL = "isAllowedEmail"
    IS_VALID_PHONE_NUMBER = "isValidPhoneNumber"
    IS_STRONG_PASSWORD = "isStrongPassword"
    IS_STRING = "isString"
    IS_NOT_EMPTY = "isNotEmpty"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    REQUIRED = "required"
    PASSWORDS_MATCH = "passwordsMatch"


# ============================================================================
# TRANSFORMATION CONSTANTS
# ============================================================================

class TransformDefaults:
    """Defaults applied to missing fields in internal DTOs."""
    EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


class StatusLabels:
    """Labels computed for response DTOs."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    MFA_ENABLED = "ENABLED"
    MFA_DISABLED = "DISABLED"


class SensitiveFields:
    """Fields that must never appear in response DTOs."""
    PASSWORD = "password"
    MFA_SECRET = "mfa_secret"
    OTP_SECRET = "otp_secret"
    MFA_RECOVERY_CODES = "mfa_recovery_codes"

    USER = frozenset({PASSWORD})
    AUTHENTICATION = frozenset({MFA_SECRET, OTP_SECRET, MFA_RECOVERY_CODES})

    # Stripped from every response DTO whatever the entity declares
    ALWAYS = USER | AUTHENTICATION


# ============================================================================
# EMAIL TEMPLATE CONSTANTS
# ============================================================================

class EmailTemplates:
    """Names of the transactional email templates."""
    PASSWORD_RESET = "password_reset"
    PASSWORD_SETUP = "password_setup"
    PASSWORD_UPDATE = "password_update"

    SUBJECTS: dict[str, str] = {
        PASSWORD_RESET: "Reset your Work Whiz password",
        PASSWORD_SETUP: "Welcome to Work Whiz - set up your password",
        PASSWORD_UPDATE: "Your Work Whiz password was changed",
    }

    PASSWORD_SETUP_PATH = "/auth/password/setup"


# ============================================================================
# ERROR MESSAGE CONSTANTS
# ============================================================================

class ErrorMessages:
    """Error messages for API responses."""
    INTERNAL_SERVER_ERROR = "Internal server error"
    UNKNOWN_ENTITY_KIND = "Unknown entity kind '{kind}'"
    ROLE_NOT_RESOLVED = "Unable to determine the registration role from host '{host}'"
    TRANSFORMATION_FAILED = "Record could not be transformed"


# ============================================================================
# HTTP HEADER CONSTANTS
# ============================================================================

class HttpHeaders:
    """HTTP header names."""
    REQUEST_ID = "X-Request-ID"
    PROCESS_TIME = "X-Process-Time"
    HOST = "host"


# ============================================================================
# API ENDPOINT CONSTANTS
# ============================================================================

class ApiEndpoints:
    """API endpoint paths."""
    DOCS = "/docs"
    REDOC = "/redoc"
    OPENAPI = "/openapi.json"
    HEALTH = "/health"
    METRICS = "/metrics"


# ============================================================================
# SECURITY & MASKING CONSTANTS
# ============================================================================

class Security:
    """Security-related constants."""
    MASK = "****"
    REDACTED = "[REDACTED]"
    EMAIL_VISIBLE_CHARS = 2
    PHONE_VISIBLE_CHARS = 3

    # Keys never written to logs verbatim
    REDACTED_LOG_KEYS = frozenset({
        "password",
        "password_confirmation",
        "mfa_secret",
        "otp_secret",
        "mfa_recovery_codes",
    })

    REQUEST_ID_PREFIX_WORKER = "worker-"
    REQUEST_ID_UUID_LENGTH = 8
