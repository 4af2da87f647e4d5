import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.recording_sender import RecordingEmailSender
from tests.fixtures.json_loader import PayloadLoader
from src.depends import (
    get_notifier,
    get_password_hasher,
    get_token_service,
    get_unit_of_work,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.account_notifier import AccountNotifier
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService

TEST_DOMAIN = "http://test/"


@pytest_asyncio.fixture
def test_data():
    return PayloadLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def notifier(email_sender):
    return AccountNotifier(email_sender, TEST_DOMAIN)


@pytest.fixture
def password_hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret="integration-test-secret")


@pytest_asyncio.fixture
async def client(session_factory, notifier, password_hasher, token_service):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_token_service] = lambda: token_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
