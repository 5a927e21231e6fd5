"""Utility functions organized by domain.

Prefer importing from specific modules for better clarity:
    from workwhiz.utils.strings import sanitize_string
    from workwhiz.utils.datetime import parse_timestamp
    from workwhiz.utils.roles import get_user_role
"""

from .datetime import parse_timestamp
from .generators import generate_request_id
from .strings import mask_email, mask_phone, sanitize_log_data, sanitize_string

__all__ = [
    "parse_timestamp",
    "generate_request_id",
    "mask_email",
    "mask_phone",
    "sanitize_log_data",
    "sanitize_string",
]
