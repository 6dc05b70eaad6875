"""Shared fixtures for API tests."""
from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient

SignupUser = Callable[..., Awaitable[dict[str, str]]]


@pytest.fixture
def signup_user(client: AsyncClient) -> SignupUser:
    """Return a helper that signs up a user and returns its Authorization header."""

    async def _signup(email: str, password: str = "test-password") -> dict[str, str]:
        response = await client.post(
            "/auth/signup", json={"email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _signup


@pytest.fixture
async def auth_headers(signup_user: SignupUser) -> dict[str, str]:
    """Authorization header for a freshly signed-up user."""
    return await signup_user("user@testing.com")


@pytest.fixture
async def other_auth_headers(signup_user: SignupUser) -> dict[str, str]:
    """Authorization header for a second, unrelated user."""
    return await signup_user("other@testing.com")
