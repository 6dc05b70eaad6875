"""End-to-end walk through signup, signin, and the bookmark lifecycle."""
from httpx import AsyncClient


async def test_signup_signin_and_bookmark_lifecycle(client: AsyncClient) -> None:
    """A user signs up, signs in, and creates, edits, and deletes a bookmark."""
    credentials = {"email": "user@testing.com", "password": "test-password"}

    response = await client.post("/auth/signup", json=credentials)
    assert response.status_code == 201

    response = await client.post("/auth/signin", json=credentials)
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['access_token']}"}

    response = await client.get("/bookmarks", headers=headers)
    assert response.status_code == 200
    assert response.json() == []

    response = await client.post(
        "/bookmarks",
        json={"title": "First bookmark", "link": "https://dco.dev"},
        headers=headers,
    )
    assert response.status_code == 201
    bookmark_id = response.json()["id"]

    response = await client.get("/bookmarks", headers=headers)
    assert len(response.json()) == 1

    response = await client.get(f"/bookmarks/{bookmark_id}", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == bookmark_id

    response = await client.patch(
        f"/bookmarks/{bookmark_id}",
        json={"title": "New Title", "description": "This is a new description"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json()["title"] == "New Title"
    assert response.json()["description"] == "This is a new description"

    response = await client.delete(f"/bookmarks/{bookmark_id}", headers=headers)
    assert response.status_code == 204

    response = await client.get("/bookmarks", headers=headers)
    assert response.status_code == 200
    assert response.json() == []
