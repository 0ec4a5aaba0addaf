"""
Query service: the data access facade used by the web layer.
Each operation runs on its own pooled session and returns pydantic records.
"""

from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel
from lightbnb.config import settings
from lightbnb.database import AsyncSessionLocal
from lightbnb.repositories.user import UserRepository
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.property import PropertyRepository
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.schemas.reservation import ReservationCreate, ReservationRecord, ReservationSummary
from lightbnb.schemas.property import (
    PropertyCreate,
    PropertyRecord,
    PropertyListing,
    PropertySearchFilters
)
from lightbnb.utils.exceptions import StoreError, UserNotFoundError
from typing import AsyncIterator, List, Optional, Type, TypeVar, Union, Any, Dict
import logging

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def _coerce(schema: Type[SchemaType], value: Union[SchemaType, BaseModel, Dict[str, Any]]) -> SchemaType:
    """Accept a schema instance, another pydantic model or a plain mapping."""
    if isinstance(value, schema):
        return value
    if isinstance(value, BaseModel):
        value = value.model_dump()
    return schema.model_validate(value)


class QueryService:
    """
    Stateless facade over the connection pool.
    
    Failures are reported consistently: missing users raise UserNotFoundError,
    duplicate registrations raise DuplicateUserError and every store failure
    raises StoreError. Listing operations return an empty list when nothing matches.
    """
    
    def __init__(self, session_factory: Optional[async_sessionmaker] = None):
        self.session_factory = session_factory or AsyncSessionLocal
    
    @asynccontextmanager
    async def _session(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session for one operation and translate store failures."""
        async with self.session_factory() as session:
            try:
                yield session
            except (SQLAlchemyError, OSError) as e:
                logger.error(f"{operation} failed: {e}")
                raise StoreError(operation, str(e)) from e
    
    # Users
    
    async def get_user_with_email(self, email: str) -> UserRecord:
        """
        Get a single user given their email.
        
        Raises:
            UserNotFoundError: If no user has this email
            StoreError: If the query fails
        """
        async with self._session("get_user_with_email") as session:
            user = await UserRepository(session).get_by_email(email)
        
        if user is None:
            raise UserNotFoundError(f"email {email}")
        return UserRecord.model_validate(user)
    
    async def get_user_with_id(self, user_id: int) -> UserRecord:
        """
        Get a single user given their id.
        
        Raises:
            UserNotFoundError: If no user has this id
            StoreError: If the query fails
        """
        async with self._session("get_user_with_id") as session:
            user = await UserRepository(session).get_by_id(user_id)
        
        if user is None:
            raise UserNotFoundError(f"id {user_id}")
        return UserRecord.model_validate(user)
    
    async def add_user(self, user: Union[UserCreate, Dict[str, Any]]) -> UserRecord:
        """
        Add a new user.
        
        Raises:
            DuplicateUserError: If the email is already registered
            StoreError: If the insert fails for any other reason
        """
        user_in = _coerce(UserCreate, user)
        async with self._session("add_user") as session:
            created = await UserRepository(session).add_user(user_in.model_dump())
            return UserRecord.model_validate(created)
    
    # Reservations
    
    async def get_all_reservations(self, guest_id: int, limit: Optional[int] = None) -> List[ReservationSummary]:
        """
        Get a guest's reservations, earliest start date first.
        
        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations, defaults to the configured query limit
        """
        limit = settings.default_query_limit if limit is None else limit
        async with self._session("get_all_reservations") as session:
            rows = await ReservationRepository(session).get_reservations_for_guest(guest_id, limit)
        return [ReservationSummary.model_validate(row) for row in rows]
    
    async def add_reservation(self, reservation: Union[ReservationCreate, Dict[str, Any]]) -> ReservationRecord:
        """Book a reservation and return the persisted row."""
        reservation_in = _coerce(ReservationCreate, reservation)
        async with self._session("add_reservation") as session:
            created = await ReservationRepository(session).add_reservation(reservation_in.model_dump())
            return ReservationRecord.model_validate(created)
    
    # Properties
    
    async def get_all_properties(
        self,
        filters: Union[PropertySearchFilters, Dict[str, Any], None] = None,
        limit: Optional[int] = None
    ) -> List[PropertyListing]:
        """
        Search properties, cheapest first.
        
        Args:
            filters: Optional city, owner_id, price range and minimum_rating filters
            limit: Maximum number of properties, defaults to the configured query limit
        """
        search_filters = _coerce(PropertySearchFilters, filters or {})
        async with self._session("get_all_properties") as session:
            rows = await PropertyRepository(session).search_properties(search_filters, limit)
            listings = [
                PropertyListing(
                    **PropertyRecord.model_validate(property_obj).model_dump(),
                    average_rating=average_rating
                )
                for property_obj, average_rating in rows
            ]
        return listings
    
    async def add_property(self, property: Union[PropertyCreate, Dict[str, Any]]) -> PropertyRecord:
        """
        Add a property. Only recognized fields are stored; unknown fields are ignored.
        """
        property_in = _coerce(PropertyCreate, property)
        async with self._session("add_property") as session:
            created = await PropertyRepository(session).add_property(property_in.model_dump(exclude_none=True))
            return PropertyRecord.model_validate(created)
