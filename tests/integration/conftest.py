import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain  # noqa: F401  registers tables
from config import ApplicationConfig
from src.depends import get_session


class IntegrationConfig(ApplicationConfig):
    DB_URI = "sqlite+aiosqlite://"
    CREATE_TABLES_ON_STARTUP = False
    AUTH_DISABLED = False
    ENABLE_LOGGING_MIDDLEWARE = False
    ENABLE_SENTRY = 0
    DEFAULT_PAGE_LIMIT = 10
    MAX_PAGE_LIMIT = 100


@pytest_asyncio.fixture(scope="function")
async def engine():
    """In-memory SQLite database, one per test"""
    engine = create_async_engine(
        IntegrationConfig.DB_URI,
        echo=False,
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    """Create a new database session for each test"""
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """Create test client with database session override"""
    from src.api.app import create_app

    app = create_app(IntegrationConfig)

    async def override_get_session():
        yield db_session

    app.dependency_overrides[get_session] = override_get_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"X-User-Role": "Admin"},
    ) as ac:
        yield ac
