"""
Pydantic schemas for records passed into and returned from the data access layer.
"""

from .user import UserBase, UserCreate, UserRecord
from .property import (
    PropertyBase,
    PropertyCreate,
    PropertyRecord,
    PropertyListing,
    PropertySearchFilters
)
from .reservation import ReservationCreate, ReservationRecord, ReservationSummary

__all__ = [
    # User schemas
    "UserBase",
    "UserCreate",
    "UserRecord",
    
    # Property schemas
    "PropertyBase",
    "PropertyCreate",
    "PropertyRecord",
    "PropertyListing",
    "PropertySearchFilters",
    
    # Reservation schemas
    "ReservationCreate",
    "ReservationRecord",
    "ReservationSummary",
]
