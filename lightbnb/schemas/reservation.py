"""
Pydantic schemas for reservation records.
"""

from pydantic import BaseModel
from datetime import date
from typing import Optional


class ReservationCreate(BaseModel):
    """Schema for booking a stay."""
    
    guest_id: int
    property_id: int
    start_date: date
    end_date: date
    
    class Config:
        extra = "ignore"


class ReservationRecord(ReservationCreate):
    """A persisted reservation row."""
    
    id: int
    
    class Config:
        from_attributes = True


class ReservationSummary(BaseModel):
    """A guest's reservation joined with its property and the property's average rating."""
    
    id: int
    property_id: int
    title: str
    cost_per_night: int
    start_date: date
    end_date: date
    average_rating: Optional[float] = None
    
    class Config:
        from_attributes = True
