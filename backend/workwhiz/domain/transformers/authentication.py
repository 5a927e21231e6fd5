"""Authentication (MFA/OTP) transformer.

Secrets and recovery codes exist only in the internal DTO.
"""

from ...core.constants import SensitiveFields
from .base import (
    EntityTransformer,
    TransformSpec,
    collection,
    counter,
    flag,
    nullable,
    required,
    to_datetime,
)
from .computed import mfa_status

AUTHENTICATION_INTERNAL = TransformSpec(
    fields={
        "id": required(str),
        "mfa_enabled": flag(),
        SensitiveFields.MFA_SECRET: nullable(),
        SensitiveFields.MFA_RECOVERY_CODES: collection(),
        SensitiveFields.OTP_SECRET: nullable(),
        "otp_expires_at": nullable(to_datetime),
        "last_otp_attempt": nullable(to_datetime),
        "otp_attempt_count": counter(),
        "user_id": required(str),
    }
)

AUTHENTICATION_RESPONSE = AUTHENTICATION_INTERNAL.derive(
    exclude=tuple(SensitiveFields.AUTHENTICATION) + ("otp_expires_at", "last_otp_attempt"),
    computed={"mfa_status": mfa_status},
)

authentication_transformer = EntityTransformer(
    "authentication",
    internal=AUTHENTICATION_INTERNAL,
    response=AUTHENTICATION_RESPONSE,
    sensitive=SensitiveFields.AUTHENTICATION,
)
