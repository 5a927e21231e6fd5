"""User roles."""

import enum

from ..core.constants import UserRoles


class Role(str, enum.Enum):
    """Role a user registers and signs in under."""
    ADMIN = UserRoles.ADMIN
    EMPLOYER = UserRoles.EMPLOYER
    CANDIDATE = UserRoles.CANDIDATE
