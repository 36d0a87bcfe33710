"""Test configuration and fixtures."""

import os

# Point the global engine at SQLite before the application modules load
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from tour_catalog.core.database import Base, get_db
from tour_catalog.models import *  # noqa: F403 - Import all models
from tour_catalog.repositories.base import TourGateway
from tour_catalog.repositories.tour_repository import SqlAlchemyTourRepository
from tour_catalog.schemas.tour import TourRequest
from tour_catalog.services.tour_service import TourService

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def tour_repository(test_session):
    """SQLAlchemy gateway bound to the test session."""
    return SqlAlchemyTourRepository(test_session)


@pytest.fixture
def tour_service(tour_repository):
    """Tour service over the SQLite-backed gateway."""
    return TourService(tour_repository)


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session):
    """Create the application with the database dependency overridden."""
    from tour_catalog.main import create_app

    app = create_app()

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create a test HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_tour_data():
    """Sample tour payload as the web client sends it."""
    return {
        "title": "Alps Trek",
        "description": "Ten days hiking between Swiss mountain villages",
        "duration": "10 days",
        "startDate": "2024-06-01",
        "price": 2499.0,
        "imageLink": "https://images.example.com/alps-trek.jpg",
        "destinations": [
            {
                "destName": "Zermatt",
                "state": "Valais",
                "description": "Car-free village below the Matterhorn",
                "accommodation": {
                    "name": "Hotel X",
                    "type": "Hotel",
                    "location": "Bahnhofstrasse 12",
                    "details": "Half board, mountain view",
                    "checkIn": "14:00",
                    "checkOut": "10:00"
                }
            },
            {
                "destName": "Grindelwald",
                "state": "Bern",
                "description": "Gateway to the Jungfrau region"
            }
        ]
    }


@pytest.fixture
def sample_tour_request(sample_tour_data):
    """The sample payload parsed into a request schema."""
    return TourRequest.model_validate(sample_tour_data)


class BrokenGateway(TourGateway):
    """Gateway whose every call fails like an unreachable database."""

    def __init__(self):
        self.error = OperationalError("SELECT 1", {}, Exception("connection refused"))

    async def exists_by_title_and_start_date(self, title, start_date):
        raise self.error

    async def find_by_id(self, tour_id):
        raise self.error

    async def find_by_title(self, title):
        raise self.error

    async def find_all_with_destinations(self):
        raise self.error

    async def save(self, tour):
        raise self.error

    async def delete(self, tour):
        raise self.error


@pytest.fixture
def broken_gateway():
    """A gateway that fails on every call."""
    return BrokenGateway()
