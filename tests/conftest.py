"""
Test configuration and fixtures for the LightBnB data access layer.
Provides an in-memory database, repository fixtures and test data factories.
"""

import pytest
import uuid
from datetime import date
from decimal import Decimal
from typing import Any, AsyncGenerator, Dict, List, Optional, Sequence
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lightbnb.config import Settings
from lightbnb.database import EngineQueryExecutor, create_engine_from_settings, create_tables, drop_tables
from lightbnb.models.reservation import Reservation
from lightbnb.models.review import PropertyReview
from lightbnb.repositories.property import PropertyRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.property import PropertyListing
from lightbnb.schemas.user import UserRecord


TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at an in-memory SQLite database."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        environment="testing",
        _env_file=None
    )


@pytest.fixture
async def db_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Create the schema on a fresh in-memory database."""
    engine = create_engine_from_settings(test_settings)
    await create_tables(engine)
    yield engine
    await drop_tables(engine, test_settings)
    await engine.dispose()


@pytest.fixture
def executor(db_engine: AsyncEngine) -> EngineQueryExecutor:
    """Query executor bound to the test engine."""
    return EngineQueryExecutor(db_engine)


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """ORM session for seeding rows that have no repository insert."""
    session_factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# Repository fixtures
@pytest.fixture
def user_repository(executor: EngineQueryExecutor, test_settings: Settings) -> UserRepository:
    """Create a user repository instance."""
    return UserRepository(executor, test_settings)


@pytest.fixture
def property_repository(executor: EngineQueryExecutor, test_settings: Settings) -> PropertyRepository:
    """Create a property repository instance."""
    return PropertyRepository(executor, test_settings)


@pytest.fixture
def reservation_repository(executor: EngineQueryExecutor, test_settings: Settings) -> ReservationRepository:
    """Create a reservation repository instance."""
    return ReservationRepository(executor, test_settings)


class RecordingExecutor:
    """Executor double that records every call and returns canned rows or fails."""

    def __init__(self, rows: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    async def execute(self, query_text: str, parameters: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        self.calls.append((query_text, list(parameters)))
        if self.error is not None:
            raise self.error
        return self.rows


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        name: str = "Test Guest",
        email: str = None,
        password: str = "testpassword123"
    ) -> dict:
        """Create user data dictionary."""
        return {
            "name": name,
            "email": email or f"guest{uuid.uuid4().hex[:8]}@gmx.com",
            "password": password
        }

    @staticmethod
    async def create_user(user_repo: UserRepository, **kwargs) -> UserRecord:
        """Create a test user in the database."""
        return await user_repo.add_user(UserFactory.create_user_data(**kwargs))


class PropertyFactory:
    """Factory for creating test properties."""

    @staticmethod
    def create_property_data(
        owner_id: int,
        title: str = "Test Property",
        cost_per_night: Decimal = Decimal("100.00"),
        city: str = "Vancouver",
        description: str = "A cozy test property",
        number_of_bedrooms: int = 2,
        active: bool = True
    ) -> dict:
        """Create property data dictionary."""
        return {
            "owner_id": owner_id,
            "title": title,
            "description": description,
            "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/thumb.jpeg",
            "cover_photo_url": "https://images.pexels.com/photos/2086676/cover.jpeg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": number_of_bedrooms,
            "country": "Canada",
            "street": "536 Namsub Highway",
            "city": city,
            "province": "British Columbia",
            "post_code": "28142",
            "active": active
        }

    @staticmethod
    async def create_property(property_repo: PropertyRepository, owner_id: int, **kwargs) -> PropertyListing:
        """Create a test property in the database."""
        return await property_repo.add_property(PropertyFactory.create_property_data(owner_id, **kwargs))


class ReservationFactory:
    """Factory for reservations and reviews, seeded through the ORM."""

    @staticmethod
    async def create_reservation(
        session: AsyncSession,
        guest_id: int,
        property_id: int,
        start_date: date = date(2024, 6, 1),
        end_date: date = date(2024, 6, 7)
    ) -> Reservation:
        """Create a test reservation in the database."""
        reservation = Reservation(
            guest_id=guest_id,
            property_id=property_id,
            start_date=start_date,
            end_date=end_date
        )
        session.add(reservation)
        await session.commit()
        return reservation

    @staticmethod
    async def create_review(
        session: AsyncSession,
        guest_id: int,
        property_id: int,
        rating: int,
        message: str = "Lovely stay"
    ) -> PropertyReview:
        """Create a reservation and a review of it."""
        reservation = await ReservationFactory.create_reservation(session, guest_id, property_id)
        review = PropertyReview(
            guest_id=guest_id,
            property_id=property_id,
            reservation_id=reservation.id,
            rating=rating,
            message=message
        )
        session.add(review)
        await session.commit()
        return review


# Common test fixtures
@pytest.fixture
async def test_owner(user_repository: UserRepository) -> UserRecord:
    """Create a property owner."""
    return await UserFactory.create_user(user_repository, name="Devin Sanders", email="devin@ymail.com")


@pytest.fixture
async def test_guest(user_repository: UserRepository) -> UserRecord:
    """Create a guest."""
    return await UserFactory.create_user(user_repository, name="Eva Stanley", email="eva@gmail.com")


@pytest.fixture
async def seeded_listings(
    property_repository: PropertyRepository,
    db_session: AsyncSession,
    test_owner: UserRecord,
    test_guest: UserRecord
) -> Dict[str, PropertyListing]:
    """
    Four listings with known prices and ratings:

    - vancouver_cheap: $50, ratings 4 and 5 (avg 4.5)
    - vancouver_pricey: $200, rating 2
    - paris_mid: $120, ratings 3 and 3 (avg 3)
    - calgary_unreviewed: $80, no reviews
    """
    listings = {
        "vancouver_cheap": await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Cheap Vancouver Loft",
            cost_per_night=Decimal("50"), city="Vancouver"
        ),
        "vancouver_pricey": await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Pricey North Vancouver House",
            cost_per_night=Decimal("200"), city="North Vancouver"
        ),
        "paris_mid": await PropertyFactory.create_property(
            property_repository, test_guest.id, title="Paris Apartment",
            cost_per_night=Decimal("120"), city="Paris"
        ),
        "calgary_unreviewed": await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Calgary Basement Suite",
            cost_per_night=Decimal("80"), city="Calgary"
        ),
    }

    for key, ratings in (
        ("vancouver_cheap", [4, 5]),
        ("vancouver_pricey", [2]),
        ("paris_mid", [3, 3]),
    ):
        for rating in ratings:
            await ReservationFactory.create_review(db_session, test_guest.id, listings[key].id, rating)

    return listings
