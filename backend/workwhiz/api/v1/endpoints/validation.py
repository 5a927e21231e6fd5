"""Validation Endpoints.

Validate raw input against the schema of an entity kind.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from ....schemas.api import ErrorResponse, ValidationResponse
from ....services import ValidationService
from ...dependencies import get_validation_service

router = APIRouter()


@router.post(
    "/{entity_kind}",
    response_model=ValidationResponse,
    response_model_exclude_none=True,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown entity kind"},
        422: {"model": ValidationResponse, "description": "Input failed validation"},
    }
)
async def validate_input(
    entity_kind: str,
    payload: Any = Body(default=None),
    service: ValidationService = Depends(get_validation_service)
):
    """Validate a JSON body against an entity kind's schema.

    Returns 200 with the coerced data when valid, and 422 with every
    failure message (in field order) when not.
    """
    result = await service.validate_async(entity_kind, payload)

    if not result.is_valid:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=result.model_dump(exclude_none=True)
        )

    return ValidationResponse(is_valid=True, validated_data=result.validated_data)
