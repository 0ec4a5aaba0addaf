"""
Pydantic schemas for user records.
"""

from pydantic import BaseModel, Field
from typing import Optional


class UserBase(BaseModel):
    """Base user schema with common fields."""
    
    name: str = Field(..., description="User's display name", examples=["Devin Sanders"])
    email: str = Field(..., description="User email address", examples=["tristanjacobs@gmail.com"])


class UserCreate(UserBase):
    """Schema for creating a new user. The password is stored as given."""
    
    password: str = Field(..., description="Password hash")
    
    class Config:
        extra = "ignore"


class UserRecord(UserBase):
    """A persisted user row."""
    
    id: int
    password: Optional[str] = None
    
    class Config:
        from_attributes = True
