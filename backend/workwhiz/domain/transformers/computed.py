"""Getter-only fields computed when a response DTO is built."""

from collections.abc import Mapping
from typing import Any

from ...core.constants import StatusLabels


def full_name(dto: Mapping[str, Any]) -> str | None:
    """First and last name joined by a space, skipping empty parts.

    Examples:
        >>> full_name({"first_name": "John", "last_name": ""})
        'John'
        >>> full_name({}) is None
        True
    """
    parts = [dto.get("first_name"), dto.get("last_name")]
    return " ".join(part for part in parts if part) or None


def account_status(dto: Mapping[str, Any]) -> str:
    return StatusLabels.ACTIVE if dto.get("is_active") else StatusLabels.INACTIVE


def mfa_status(dto: Mapping[str, Any]) -> str:
    return StatusLabels.MFA_ENABLED if dto.get("mfa_enabled") else StatusLabels.MFA_DISABLED


def company_info(dto: Mapping[str, Any]) -> dict[str, Any]:
    """Summary of an employer for listings."""
    return {
        "name": dto.get("name"),
        "industry": dto.get("industry"),
        "size": dto.get("size"),
        "founded": dto.get("founded_in"),
    }
