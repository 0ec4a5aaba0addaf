"""
User model for guests and property owners.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base


class User(Base):
    """
    User account. Owns properties and makes reservations as a guest.
    """
    
    __tablename__ = "users"
    
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )
    
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="User email address - must be unique"
    )
    
    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password hash supplied by the caller"
    )
    
    def __repr__(self) -> str:
        """String representation of the user."""
        return f"<User(id={self.id}, email={self.email})>"
