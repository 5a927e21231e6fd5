"""
Pytest Configuration and Shared Fixtures

This module contains shared test fixtures and configuration for all test modules.
"""

import gc
import os
from unittest.mock import AsyncMock, MagicMock

os.environ["ENVIRONMENT"] = "test"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from workwhiz.api.dependencies import get_job_queue
from workwhiz.main import app

CANDIDATE_HOST = "www.workwhiz.co.za"


@pytest.fixture(autouse=True)
def cleanup_memory():
    """
    Force garbage collection after each test to free memory.
    """
    yield
    gc.collect()


@pytest.fixture()
def job_queue():
    """Fake ARQ pool recording enqueued jobs"""
    queue = MagicMock()
    queue.enqueue_job = AsyncMock(return_value=MagicMock(job_id="job-123"))
    return queue


@pytest_asyncio.fixture()
async def client(job_queue):
    """
    HTTP client bound to the app through ASGITransport.

    Requests default to the candidate site host; the ARQ pool is replaced by
    the job_queue fake so no Redis server is needed.
    """
    app.dependency_overrides[get_job_queue] = lambda: job_queue
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=f"http://{CANDIDATE_HOST}"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture()
def valid_candidate_input():
    """Candidate registration form that passes every rule"""
    return {
        "email": "john.doe@gmail.com",
        "phone": "+27821234567",
        "first_name": "John",
        "last_name": "Doe",
        "title": "Software Engineer",
    }


@pytest.fixture()
def valid_employer_input():
    """Employer registration form that passes every rule"""
    return {
        "email": "hr@acme.co.za",
        "phone": "0821234567",
        "company": "Acme",
        "industry": "Manufacturing",
    }


@pytest.fixture()
def valid_admin_input():
    """Admin registration form that passes every rule"""
    return {
        "email": "ops@workwhiz.co.za",
        "phone": "0612345678",
        "first_name": "Ada",
        "last_name": "Lovelace",
    }


@pytest.fixture()
def user_record():
    """Stored user record, including the password hash"""
    return {
        "id": "u-1",
        "email": "john.doe@gmail.com",
        "phone": "+27821234567",
        "password": "$2b$10$hashedpasswordvalue",
        "role": "candidate",
        "is_verified": True,
        "is_active": True,
        "is_locked": False,
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-02-01T08:00:00Z",
    }


@pytest.fixture()
def candidate_record(user_record):
    """Stored candidate record with its linked user"""
    return {
        "id": "c-1",
        "first_name": "John",
        "last_name": "Doe",
        "title": "Software Engineer",
        "skills": ["python", "sql"],
        "is_employed": True,
        "user_id": "u-1",
        "user": user_record,
        "created_at": "2024-01-15T10:30:00Z",
    }


@pytest.fixture()
def admin_record(user_record):
    """Stored admin record with its linked user"""
    return {
        "id": "a-1",
        "first_name": "Ada",
        "last_name": "Lovelace",
        "permissions": ["manage_users", "view_reports"],
        "user_id": "u-1",
        "user": {**user_record, "role": "admin"},
    }


@pytest.fixture()
def employer_record(user_record):
    """Stored employer record with its linked user"""
    return {
        "id": "e-1",
        "name": "Acme",
        "industry": "Manufacturing",
        "website_url": "https://acme.co.za",
        "location": "Cape Town",
        "description": "We make everything",
        "size": 250,
        "founded_in": 1998,
        "is_verified": True,
        "user_id": "u-1",
        "user": {**user_record, "role": "employer"},
    }


@pytest.fixture()
def authentication_record():
    """Stored MFA/OTP record with secrets"""
    return {
        "id": "auth-1",
        "mfa_enabled": True,
        "mfa_secret": "JBSWY3DPEHPK3PXP",
        "mfa_recovery_codes": ["code-1", "code-2"],
        "otp_secret": "123456",
        "otp_expires_at": "2024-03-01T12:00:00+00:00",
        "otp_attempt_count": 2,
        "user_id": "u-1",
    }
