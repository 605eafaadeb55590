"""
Test configuration and fixtures for the property listing service.
Provides database fixtures, service wiring, test data factories and an HTTP client.
"""

import os

# Settings are read at import time; point them at SQLite before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
import uuid
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

import listings.models  # noqa: F401
from listings.main import app
from listings.database import Base, get_db
from listings.models.enums import ApprovalStatus, ListingStatus, PropertyType, State
from listings.repositories.location import LocationRepository
from listings.repositories.property import PropertyRepository
from listings.schemas.location import LocationCreate
from listings.schemas.property import PropertyCreate, PropertyResponse
from listings.services.location import LocationService
from listings.services.property import PropertyWorkflowService


TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def location_repository(db_session: AsyncSession) -> LocationRepository:
    """Create a location repository instance."""
    return LocationRepository(db_session)


# Service fixtures
@pytest.fixture
def location_service(location_repository: LocationRepository) -> LocationService:
    """Create a location service instance."""
    return LocationService(location_repository)


@pytest.fixture
def property_service(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    location_service: LocationService
) -> PropertyWorkflowService:
    """Create a property workflow service with lenient transitions."""
    return PropertyWorkflowService(db_session, property_repository, location_service)


@pytest.fixture
def strict_property_service(
    db_session: AsyncSession,
    property_repository: PropertyRepository,
    location_service: LocationService
) -> PropertyWorkflowService:
    """Create a property workflow service that enforces the transition table."""
    return PropertyWorkflowService(
        db_session,
        property_repository,
        location_service,
        strict_transitions=True
    )


# Test data factories
class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_location_data(
        address: str = "Baneshwor-10",
        city: str = "Kathmandu",
        state: State = State.BAGMATI,
        zipcode: int = 44600,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None
    ) -> LocationCreate:
        """Create location payload."""
        return LocationCreate(
            address=address,
            city=city,
            state=state,
            zipcode=zipcode,
            latitude=latitude,
            longitude=longitude
        )

    @staticmethod
    def create_property_data(
        title: str = "2 Bigha Land",
        description: Optional[str] = "Flat land near the ring road",
        property_type: PropertyType = PropertyType.LAND,
        status: ListingStatus = ListingStatus.AVAILABLE,
        owner_id: Optional[uuid.UUID] = None,
        city: str = "Kathmandu",
        state: State = State.BAGMATI
    ) -> PropertyCreate:
        """Create property payload."""
        return PropertyCreate(
            title=title,
            description=description,
            type=property_type,
            status=status,
            owner_id=owner_id or uuid.uuid4(),
            location=PropertyFactory.create_location_data(city=city, state=state)
        )

    @staticmethod
    def create_property_payload(**overrides) -> dict:
        """JSON body for the create endpoints."""
        payload = {
            "title": "2 Bigha Land",
            "description": "Flat land near the ring road",
            "type": "Land",
            "status": "Available",
            "owner_id": str(uuid.uuid4()),
            "location": {
                "address": "Baneshwor-10",
                "city": "Kathmandu",
                "state": "Bagmati",
                "zipcode": 44600
            }
        }
        payload.update(overrides)
        return payload

    @staticmethod
    async def create_property(
        service: PropertyWorkflowService,
        approval_status: ApprovalStatus = ApprovalStatus.DRAFT,
        **kwargs
    ) -> PropertyResponse:
        """Create a property and walk it to the requested approval state."""
        property_data = PropertyFactory.create_property_data(**kwargs)

        if approval_status == ApprovalStatus.APPROVED:
            return await service.create_admin_approved_property(property_data)

        created = await service.create_property(property_data)
        if approval_status == ApprovalStatus.PENDING_APPROVAL:
            await service.submit_for_approval(created.id)
        elif approval_status == ApprovalStatus.REJECTED:
            await service.reject_property(created.id)
        elif approval_status == ApprovalStatus.ARCHIVED:
            await service.archive_property(created.id)

        return await service.get_property(created.id)


@pytest.fixture
def property_factory() -> type:
    """Expose the property factory to tests."""
    return PropertyFactory


# Common test fixtures
@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
async def draft_property(property_service: PropertyWorkflowService, owner_id: uuid.UUID) -> PropertyResponse:
    """Create a draft property."""
    return await PropertyFactory.create_property(property_service, owner_id=owner_id)


@pytest.fixture
async def approved_property(property_service: PropertyWorkflowService) -> PropertyResponse:
    """Create an approved property."""
    return await PropertyFactory.create_property(
        property_service,
        approval_status=ApprovalStatus.APPROVED,
        title="Approved House",
        property_type=PropertyType.HOUSE
    )
