"""
Pydantic schemas for property records and search filters.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


class PropertyBase(BaseModel):
    """Fields recognized when creating or returning a property."""
    
    owner_id: Optional[int] = Field(None, description="ID of the owning user")
    title: Optional[str] = Field(None, description="Property listing title", examples=["Speed lamp"])
    description: Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url: Optional[str] = None
    cost_per_night: Optional[int] = Field(None, description="Nightly cost in the smallest currency unit")
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    post_code: Optional[str] = None
    country: Optional[str] = None
    parking_spaces: Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms: Optional[int] = None


class PropertyCreate(PropertyBase):
    """
    Schema for creating a property.
    Unrecognized fields are dropped; missing fields fall back to column defaults.
    """
    
    class Config:
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 93061,
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
                "country": "Canada",
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8
            }
        }


class PropertyRecord(PropertyBase):
    """A persisted property row."""
    
    id: int
    active: bool = True
    
    class Config:
        from_attributes = True


class PropertyListing(PropertyRecord):
    """A property row returned by search, with its average review rating."""
    
    average_rating: Optional[float] = None


class PropertySearchFilters(BaseModel):
    """
    Optional filters for property search.
    Each supplied filter adds exactly one predicate to the search statement.
    """
    
    city: Optional[str] = Field(None, description="Substring of the city name (case-insensitive)")
    owner_id: Optional[int] = Field(None, description="Only properties owned by this user")
    minimum_price_per_night: Optional[int] = Field(None, description="Lower bound on cost_per_night")
    maximum_price_per_night: Optional[int] = Field(None, description="Upper bound on cost_per_night")
    minimum_rating: Optional[float] = Field(None, description="Lower bound on the average rating")
    include_unrated: bool = Field(False, description="Keep properties that have no reviews")
    
    @field_validator('city')
    @classmethod
    def blank_city_is_absent(cls, v):
        """Treat an empty city string as no filter."""
        if v is not None and not v.strip():
            return None
        return v
    
    @property
    def has_price_range(self) -> bool:
        return self.minimum_price_per_night is not None or self.maximum_price_per_night is not None
    
    class Config:
        extra = "ignore"
