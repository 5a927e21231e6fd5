"""Authentication Endpoints.

Registration is portal-aware: the role comes from the Host header
(admin., employer. or www.), and the body is validated against that role's
registration schema.
"""

from typing import Any

from arq.connections import ArqRedis
from fastapi import APIRouter, Body, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from ....core.constants import ErrorMessages, HttpHeaders
from ....core.logging import get_logger
from ....domain.roles import Role
from ....schemas.api import RegistrationAccepted, ValidationResponse
from ....services import ValidationService
from ....utils.strings import sanitize_log_data
from ....workers.tasks import build_password_setup_template, enqueue_email
from ...dependencies import get_job_queue, get_request_role, get_validation_service

logger = get_logger(__name__)

router = APIRouter()


def _display_name(role: Role, data: dict[str, Any]) -> str | None:
    if role is Role.EMPLOYER:
        return data.get("company")
    return data.get("first_name")


@router.post(
    "/register",
    response_model=RegistrationAccepted,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        400: {"description": "Host does not identify a registration portal"},
        422: {"model": ValidationResponse, "description": "Registration form failed validation"},
    }
)
async def register(
    request: Request,
    payload: Any = Body(default=None),
    role: Role | None = Depends(get_request_role),
    service: ValidationService = Depends(get_validation_service),
    job_queue: ArqRedis = Depends(get_job_queue)
) -> RegistrationAccepted:
    """Validate a registration form and queue the password setup email.

    Raises:
        HTTPException: 400 if the host maps to no role
    """
    if role is None:
        host = request.headers.get(HttpHeaders.HOST)
        logger.warning("Registration from unrecognised host", extra={'host': host})
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorMessages.ROLE_NOT_RESOLVED.format(host=host)
        )

    result = await service.validate_registration(role, payload)
    if not result.is_valid:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=result.model_dump(exclude_none=True)
        )

    data = result.validated_data
    job = await enqueue_email(
        job_queue,
        data["email"],
        template=build_password_setup_template(_display_name(role, data))
    )

    logger.info(
        "Registration accepted",
        extra={'role': role.value, 'registration': sanitize_log_data(data)}
    )

    return RegistrationAccepted(
        role=role,
        validated_data=data,
        job_id=job.job_id if job else None
    )
