from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from team_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from team_service.api.utils.jwt import create_access_token
from team_service.depends import get_notification_dispatcher, get_unit_of_work


class RecordingNotificationDispatcher:
    """Keeps every dispatched event so tests can assert on notifications"""

    def __init__(self):
        self.events = []

    async def notify(self, event):
        self.events.append(event)

    def kinds(self):
        return [event.kind.value for event in self.events]


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def notifier():
    return RecordingNotificationDispatcher()


@pytest_asyncio.fixture
async def client(session_factory, notifier):
    from team_service.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_dispatcher] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_user():
    """Returns (user_id, auth headers) for a fresh user"""

    def _make():
        user_id = uuid4()
        token = create_access_token(user_id)
        return user_id, {"Authorization": f"Bearer {token}"}

    return _make


@pytest_asyncio.fixture
async def create_team(client):
    async def _create(headers, name="Hackers", max_members=3):
        response = await client.post(
            "/teams",
            json={"name": name, "max_members": max_members},
            headers=headers,
        )
        assert response.status_code == 201
        return response.json()

    return _create
