"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tests import factories


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user():
    return factories.create_user()


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    """Client carrying a valid token for ``user``."""
    api_client.credentials(HTTP_AUTHORIZATION=f"Token {factories.create_token(user)}")
    return api_client


@pytest.fixture
def hotel():
    return factories.create_hotel()
