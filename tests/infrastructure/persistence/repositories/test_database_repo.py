"""Database backend specifics: layout and error translation"""

import pytest
from sqlalchemy import inspect, text

from prediction_diary.domain.entities import UserEntity
from prediction_diary.domain.value_objects import PersonalityClass
from prediction_diary.infrastructure.exceptions import RepositoryException


@pytest.mark.asyncio
async def test_tables_are_named_user_and_post(database_provider):
    async with database_provider.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        post_indexes = await conn.run_sync(
            lambda sync_conn: inspect(sync_conn).get_indexes("post")
        )

    assert {"user", "post"} <= set(tables)
    assert any(index["column_names"] == ["owner"] for index in post_indexes)


@pytest.mark.asyncio
async def test_user_document_keeps_nested_personality_class(database_provider):
    user = UserEntity(id="u1", personality_class=PersonalityClass(outdoor=False, extrovert=True))

    async with database_provider.session() as repos:
        await repos.users.create(user)

    async with database_provider.engine.connect() as conn:
        result = await conn.execute(text('SELECT personality_class FROM "user" WHERE id = :id'), {"id": "u1"})
        raw = result.scalar_one()

    assert '"extrovert": true' in raw
    assert '"outdoor": false' in raw


@pytest.mark.asyncio
async def test_duplicate_create_raises_repository_exception(database_provider):
    user = UserEntity(id="dup", personality_class=PersonalityClass(outdoor=True, extrovert=True))

    async with database_provider.session() as repos:
        await repos.users.create(user)

    with pytest.raises(RepositoryException) as exc_info:
        async with database_provider.session() as repos:
            await repos.users.create(user)

    assert exc_info.value.error_code == "REPOSITORY_ERROR"
    assert exc_info.value.details["operation"] == "create"
    assert exc_info.value.details["entity_type"] == "user"

    # The failed transaction left the original row alone
    async with database_provider.session() as repos:
        assert await repos.users.find_by_id("dup") == user


@pytest.mark.asyncio
async def test_ping(database_provider):
    assert await database_provider.ping() is True
