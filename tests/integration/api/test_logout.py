import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import User


@pytest.mark.asyncio
async def test_logout_invalidates_refresh_token(client: AsyncClient, db_session, test_data):
    """Logout

    Given I am signed in
    When I log out with my access token
    Then the stored refresh token hash is cleared
    And my refresh token can no longer be used
    """
    credentials = test_data.get_copy("credentials")
    tokens = (await client.post("/auth/signup", json=credentials)).json()

    response = await client.post(
        "/auth/logout", headers={"Authorization": f"Bearer {tokens['access_token']}"}
    )

    assert response.status_code == 200
    assert response.json() is True

    result = await db_session.exec(select(User).where(User.email == credentials["email"]))
    assert result.one().hashed_refresh_token is None

    refresh = await client.post(
        "/auth/refresh", headers={"Authorization": f"Bearer {tokens['refresh_token']}"}
    )
    assert refresh.status_code == 403


@pytest.mark.asyncio
async def test_logout_is_idempotent(client: AsyncClient, test_data):
    tokens = (await client.post("/auth/signup", json=test_data.get_copy("credentials"))).json()
    headers = {"Authorization": f"Bearer {tokens['access_token']}"}

    first = await client.post("/auth/logout", headers=headers)
    second = await client.post("/auth/logout", headers=headers)

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json() is True


@pytest.mark.asyncio
async def test_logout_with_invalid_access_token(client: AsyncClient, test_data):
    tokens = (await client.post("/auth/signup", json=test_data.get_copy("credentials"))).json()

    # Refresh tokens are signed with a different secret
    response = await client.post(
        "/auth/logout", headers={"Authorization": f"Bearer {tokens['refresh_token']}"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_logout_without_authorization_header(client: AsyncClient):
    response = await client.post("/auth/logout")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
