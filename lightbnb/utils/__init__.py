"""
Utility modules for the LightBnB data access layer.
"""

from .exceptions import (
    LightBnBError,
    StoreError,
    NotFoundError,
    ConflictError,
    UserNotFoundError,
    DuplicateUserError
)

__all__ = [
    "LightBnBError",
    "StoreError",
    "NotFoundError",
    "ConflictError",
    "UserNotFoundError",
    "DuplicateUserError",
]
