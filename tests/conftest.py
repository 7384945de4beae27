"""Test configuration and fixtures for the User Admin API.

Every test gets its own user store and application, so ids always
start from 1 and no state leaks between tests.
"""
import sys
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from user_admin_api.app.core.config import settings  # noqa: E402
from user_admin_api.app.main import create_app  # noqa: E402
from user_admin_api.app.services.user_service import SAMPLE_USERS, UserService  # noqa: E402


@pytest.fixture
def empty_service() -> UserService:
    return UserService()


@pytest.fixture
def seeded_service() -> UserService:
    """Store holding the three sample users (ids 1, 2, 3)."""
    return UserService(SAMPLE_USERS)


@pytest.fixture
def app(seeded_service: UserService) -> FastAPI:
    return create_app(replace(settings, api_prefix="/api"), user_service=seeded_service)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def empty_client(empty_service: UserService) -> TestClient:
    app = create_app(replace(settings, api_prefix="/api"), user_service=empty_service)
    with TestClient(app) as test_client:
        yield test_client
