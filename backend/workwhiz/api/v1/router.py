"""API v1 Router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from .endpoints import auth, transform, validation

api_router = APIRouter()

# Include validation endpoints
api_router.include_router(
    validation.router,
    prefix="/validation",
    tags=["Validation"]
)

# Include transformation endpoints
api_router.include_router(
    transform.router,
    prefix="/transform",
    tags=["Transformation"]
)

# Include authentication endpoints
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)
