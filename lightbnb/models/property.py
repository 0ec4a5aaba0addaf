"""
Property model for rental listings.
Handles listing details, address, pricing and ownership.
"""

from sqlalchemy import String, Text, Integer, Boolean, Index, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class Property(Base):
    """
    Rental property listed by an owner.
    """
    
    __tablename__ = "properties"
    
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the user who owns this property"
    )
    
    # Listing information
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Property listing title"
    )
    
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Property description"
    )
    
    thumbnail_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cover_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    
    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly cost in the smallest currency unit"
    )
    
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    
    # Address
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    province: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    post_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    
    active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Whether the listing is active"
    )
    
    def __repr__(self) -> str:
        """String representation of the property."""
        return f"<Property(id={self.id}, title={self.title[:30]}, cost_per_night={self.cost_per_night})>"


# Search by city ordered by nightly cost
city_cost_index = Index(
    'idx_properties_city_cost',
    Property.city,
    Property.cost_per_night
)
