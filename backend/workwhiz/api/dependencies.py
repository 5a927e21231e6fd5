"""FastAPI Dependencies.

Provides reusable dependencies so endpoints never reach for globals and
tests can swap them through ``app.dependency_overrides``.
"""

from arq.connections import ArqRedis
from fastapi import Request

from ..core.constants import HttpHeaders
from ..domain.roles import Role
from ..infrastructure.messaging import get_arq_pool
from ..services import TransformService, ValidationService, transform_service, validation_service
from ..utils.roles import get_user_role


async def get_job_queue() -> ArqRedis:
    """ARQ pool used to enqueue background email jobs.

    Usage:
        @router.post("/register")
        async def register(job_queue: ArqRedis = Depends(get_job_queue)):
            await enqueue_email(job_queue, ...)
    """
    return await get_arq_pool()


def get_validation_service() -> ValidationService:
    return validation_service


def get_transform_service() -> TransformService:
    return transform_service


def get_request_role(request: Request) -> Role | None:
    """Role implied by the request's Host header, or None."""
    return get_user_role(request.headers.get(HttpHeaders.HOST))
