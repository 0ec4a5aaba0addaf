"""
Test configuration and fixtures for the LightBnB data access layer.
Provides database fixtures, test data factories, and common test utilities.
"""

import pytest
import uuid
import os
from datetime import date
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from lightbnb.database import build_engine, create_tables, drop_tables
from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.services.query import QueryService


# Test database configuration
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an engine with a fresh schema for each test."""
    if TEST_DATABASE_URL.startswith("sqlite"):
        # One shared connection keeps the in-memory database alive
        engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    else:
        engine = build_engine(TEST_DATABASE_URL)
    
    await create_tables(engine)
    yield engine
    await drop_tables(engine)
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker:
    """Session factory bound to the test engine."""
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()
            await session.close()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(db_session)


@pytest.fixture
def property_repository(db_session: AsyncSession) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(db_session)


@pytest.fixture
def reservation_repository(db_session: AsyncSession) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(db_session)


# Service fixtures
@pytest.fixture
def query_service(session_factory: async_sessionmaker) -> QueryService:
    """Create a query service over the test engine's pool."""
    return QueryService(session_factory)


# Test data factories
class UserFactory:
    """Factory for creating test users."""
    
    @staticmethod
    def create_user_data(
        email: str = None,
        name: str = "Test User",
        password: str = "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u."
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "password": password
        }
    
    @staticmethod
    async def create_user(user_repo: UserRepository, email: str = None, name: str = "Test User") -> User:
        """Create a test user in the database."""
        return await user_repo.add_user(UserFactory.create_user_data(email=email, name=name))


class PropertyFactory:
    """Factory for creating test properties."""
    
    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        **overrides
    ) -> dict:
        """Create property data dictionary with every recognized field."""
        data = {
            "owner_id": owner_id,
            "title": title,
            "description": "A beautiful test property",
            "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
            "cover_photo_url": "https://images.example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "street": "536 Namsub Highway",
            "city": city,
            "province": "British Columbia",
            "post_code": "28142",
            "country": "Canada",
            "parking_spaces": 2,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 3
        }
        data.update(overrides)
        return data
    
    @staticmethod
    async def create_property(
        property_repo: PropertyRepository,
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: int = 10000,
        city: str = "Vancouver",
        **overrides
    ) -> Property:
        """Create a test property in the database."""
        data = PropertyFactory.create_property_data(
            owner_id,
            title=title,
            cost_per_night=cost_per_night,
            city=city,
            **overrides
        )
        return await property_repo.add_property(data)


class ReservationFactory:
    """Factory for creating test reservations."""
    
    @staticmethod
    async def create_reservation(
        reservation_repo: ReservationRepository,
        guest_id: int,
        property_id: int,
        start_date: date = date(2026, 7, 1),
        end_date: date = date(2026, 7, 5)
    ) -> Reservation:
        """Create a test reservation in the database."""
        return await reservation_repo.add_reservation({
            "guest_id": guest_id,
            "property_id": property_id,
            "start_date": start_date,
            "end_date": end_date
        })


class ReviewFactory:
    """Factory for creating property reviews directly through the session."""
    
    @staticmethod
    async def create_review(
        db: AsyncSession,
        guest_id: int,
        property_id: int,
        rating: int,
        reservation_id: Optional[int] = None
    ) -> PropertyReview:
        review = PropertyReview(
            guest_id=guest_id,
            property_id=property_id,
            reservation_id=reservation_id,
            rating=rating,
            message="messages"
        )
        db.add(review)
        await db.commit()
        await db.refresh(review)
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> User:
    """Create a property owner."""
    return await UserFactory.create_user(user_repository, email="owner@test.com", name="Test Owner")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> User:
    """Create a guest user."""
    return await UserFactory.create_user(user_repository, email="guest@test.com", name="Test Guest")


@pytest.fixture
async def test_property(property_repository: PropertyRepository, test_owner: User) -> Property:
    """Create a test property."""
    return await PropertyFactory.create_property(
        property_repository,
        owner_id=test_owner.id,
        title="Test Property",
        cost_per_night=15000,
        city="Vancouver"
    )


# Utility functions for tests
RECOGNIZED_PROPERTY_FIELDS = (
    "owner_id", "title", "description", "thumbnail_photo_url", "cover_photo_url",
    "cost_per_night", "street", "city", "province", "post_code", "country",
    "parking_spaces", "number_of_bathrooms", "number_of_bedrooms"
)


def assert_property_fields(record, expected: dict):
    """Assert that a property record carries every recognized field of the expected data."""
    for field in RECOGNIZED_PROPERTY_FIELDS:
        assert getattr(record, field) == expected[field], field
