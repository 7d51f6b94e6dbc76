"""Shared test fixtures for pytest"""
import pytest
from httpx import ASGITransport, AsyncClient

from main import create_app
from prediction_diary.application.services import PostService, UserService
from prediction_diary.domain.value_objects import PersonalityClass
from prediction_diary.infrastructure.config.settings import Settings
from prediction_diary.infrastructure.persistence.factory import (
    DatabaseRepositoryProvider, MemoryRepositoryProvider)
from prediction_diary.presentation.api.dependencies import build_app_context
from tests.support import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def personality() -> PersonalityClass:
    return PersonalityClass(outdoor=True, extrovert=False)


@pytest.fixture
def user_service() -> UserService:
    return UserService()


@pytest.fixture
def post_service(clock) -> PostService:
    return PostService(clock=clock)


@pytest.fixture
def database_settings(tmp_path) -> Settings:
    return Settings(
        storage_backend="database",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'diary.db'}",
    )


@pytest.fixture
async def database_provider(database_settings):
    """Database backend on a fresh SQLite file"""
    provider = DatabaseRepositoryProvider(database_settings)
    await provider.startup()
    yield provider
    await provider.shutdown()


@pytest.fixture(params=["memory", "database"])
async def provider(request, database_settings):
    """Each repository contract test runs once per backend"""
    if request.param == "memory":
        yield MemoryRepositoryProvider()
        return

    provider = DatabaseRepositoryProvider(database_settings)
    await provider.startup()
    yield provider
    await provider.shutdown()


@pytest.fixture
def app_settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def app(app_settings, clock):
    context = build_app_context(app_settings, clock=clock)
    return create_app(settings=app_settings, context=context)


@pytest.fixture
async def client(app):
    """HTTP client for API testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
