"""Transformation Endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Query

from ....domain.entities import TransformMode
from ....schemas.api import ErrorResponse
from ....services import TransformService
from ...dependencies import get_transform_service

router = APIRouter()


@router.post(
    "/{entity_kind}",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown entity kind"},
        500: {"model": ErrorResponse, "description": "Record could not be transformed"},
    }
)
async def transform_record(
    entity_kind: str,
    record: dict[str, Any] = Body(...),
    mode: TransformMode = Query(default=TransformMode.RESPONSE),
    service: TransformService = Depends(get_transform_service)
) -> dict[str, Any]:
    """Transform a domain record into its internal or response DTO.

    Response DTOs never carry sensitive fields such as passwords or MFA
    secrets.
    """
    return service.transform(entity_kind, record, mode)
