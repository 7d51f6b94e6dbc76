"""Test account and post API endpoints"""

from datetime import datetime, timezone

import pytest
from fastapi import status
from sqlalchemy import text
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from prediction_diary.domain.exceptions import ValidationException
from tests.support import EXPECTED_DEADLINE


async def create_account(client, outdoor=True, extrovert=False) -> str:
    response = await client.post("/user", json={"outdoor": outdoor, "extrovert": extrovert})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["uid"]


@pytest.mark.asyncio
async def test_create_account(client):
    response = await client.post("/user", json={"outdoor": False, "extrovert": True})

    assert response.status_code == status.HTTP_201_CREATED
    assert len(response.json()["uid"]) == 36


@pytest.mark.asyncio
async def test_create_account_rejects_malformed_body(client):
    response = await client.post("/user", json={"outdoor": "maybe"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_create_account_validation_error_is_400(client, app, monkeypatch):
    def reject(personality_class):
        raise ValidationException("personality class rejected", field="outdoor")

    monkeypatch.setattr(app.state.context.user_service, "create_user", reject)

    response = await client.post("/user", json={"outdoor": True, "extrovert": True})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {
        "error": "VALIDATION_ERROR",
        "message": "personality class rejected",
        "details": {"field": "outdoor"},
    }


@pytest.mark.asyncio
async def test_add_new_post(client, app_settings):
    uid = await create_account(client)

    response = await client.post("/post", json={"uid": uid})

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["owner"] == uid
    assert data["description"] == ""
    assert data["deadline"] == EXPECTED_DEADLINE
    assert data["image"] == app_settings.image_unuploaded_url
    assert set(data) == {"id", "title", "description", "image", "deadline", "owner"}


@pytest.mark.asyncio
async def test_add_new_post_unknown_user(client):
    response = await client.post("/post", json={"uid": "no-such-user"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    body = response.json()
    assert body["error"] == "USER_NOT_FOUND"
    assert body["details"]["resource_id"] == "no-such-user"


@pytest.mark.asyncio
async def test_edit_post(client):
    uid = await create_account(client)
    post = (await client.post("/post", json={"uid": uid})).json()

    response = await client.put(
        f"/post/{post['id']}",
        json={"description": "Clear skies", "image": "https://img.example/1.png"},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data == {**post, "description": "Clear skies", "image": "https://img.example/1.png"}


@pytest.mark.asyncio
async def test_edit_post_not_found(client):
    response = await client.put("/post/missing", json={"description": "d", "image": "i"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["error"] == "POST_NOT_FOUND"


@pytest.mark.asyncio
async def test_edit_post_requires_both_fields(client):
    response = await client.put("/post/any", json={"description": "only this"})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_timeline(client, clock, app_settings):
    uid = await create_account(client)
    other = await create_account(client)
    first = (await client.post("/post", json={"uid": uid})).json()
    await client.post("/post", json={"uid": other})

    clock.now = datetime.fromtimestamp(first["deadline"] + 1, tz=timezone.utc)
    response = await client.get(f"/posts/by-uid/{uid}")

    assert response.status_code == status.HTTP_200_OK
    posts = response.json()["list"]
    assert [p["id"] for p in posts] == [first["id"]]
    assert posts[0]["image"] == app_settings.image_failed_url


@pytest.mark.asyncio
async def test_timeline_unknown_user_is_empty(client):
    response = await client.get("/posts/by-uid/nobody")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"list": []}


@pytest.fixture
async def database_client(database_settings, database_provider, clock):
    """HTTP client backed by the database repositories"""
    from httpx import ASGITransport, AsyncClient

    from main import create_app
    from prediction_diary.presentation.api.dependencies import build_app_context

    context = build_app_context(database_settings, clock=clock, repository_provider=database_provider)
    app = create_app(settings=database_settings, context=context)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_full_flow_on_database_backend(database_client):
    uid = await create_account(database_client)
    post = (await database_client.post("/post", json={"uid": uid})).json()

    edited = await database_client.put(
        f"/post/{post['id']}", json={"description": "done", "image": "https://img/db.png"}
    )
    timeline = (await database_client.get(f"/posts/by-uid/{uid}")).json()["list"]

    assert edited.status_code == status.HTTP_200_OK
    assert timeline == [edited.json()]
    assert timeline[0]["image"] == "https://img/db.png"


@pytest.mark.asyncio
async def test_unknown_user_on_database_backend(database_client):
    response = await database_client.post("/post", json={"uid": "ghost"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def fail_commits(monkeypatch):
    async def failing_commit(self):
        raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(AsyncSession, "commit", failing_commit)


async def count_rows(provider, table: str) -> int:
    async with provider.engine.connect() as conn:
        result = await conn.execute(text(f'SELECT COUNT(*) FROM "{table}"'))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_failed_commit_on_create_account_is_500(database_client, database_provider, monkeypatch):
    fail_commits(monkeypatch)

    response = await database_client.post("/user", json={"outdoor": True, "extrovert": False})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    body = response.json()
    assert body["error"] == "REPOSITORY_ERROR"
    assert body["details"] == {"operation": "commit", "entity_type": "transaction"}
    # Driver text stays in the logs
    assert "disk I/O" not in response.text
    assert "SQL" not in response.text

    monkeypatch.undo()
    assert await count_rows(database_provider, "user") == 0


@pytest.mark.asyncio
async def test_failed_commit_on_add_post_is_500(database_client, database_provider, monkeypatch):
    uid = await create_account(database_client)
    fail_commits(monkeypatch)

    response = await database_client.post("/post", json={"uid": uid})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    monkeypatch.undo()
    assert await count_rows(database_provider, "post") == 0


@pytest.mark.asyncio
async def test_failed_commit_on_edit_keeps_stored_post(database_client, monkeypatch):
    uid = await create_account(database_client)
    post = (await database_client.post("/post", json={"uid": uid})).json()
    fail_commits(monkeypatch)

    response = await database_client.put(
        f"/post/{post['id']}", json={"description": "lost", "image": "https://img/lost.png"}
    )

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    monkeypatch.undo()
    timeline = (await database_client.get(f"/posts/by-uid/{uid}")).json()["list"]
    assert timeline == [post]
