"""
Custom exception classes for the LightBnB data access layer.
Every operation reports failures through this hierarchy instead of empty results.
"""

from typing import Optional


class LightBnBError(Exception):
    """Base data access exception class."""
    
    error_code = "INTERNAL_ERROR"
    
    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if error_code:
            self.error_code = error_code
    
    def to_dict(self) -> dict:
        return {"code": self.error_code, "message": self.detail}


class StoreError(LightBnBError):
    """The store could not be reached or rejected a statement."""
    
    error_code = "STORE_ERROR"
    
    def __init__(self, operation: str, reason: str):
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason


class NotFoundError(LightBnBError):
    """Resource not found exception."""
    
    error_code = "NOT_FOUND"
    
    def __init__(self, resource: str, lookup: Optional[str] = None):
        detail = f"{resource} not found"
        if lookup:
            detail += f" with {lookup}"
        super().__init__(detail)


class ConflictError(LightBnBError):
    """Resource conflict exception."""
    
    error_code = "CONFLICT"


# User specific exceptions
class UserNotFoundError(NotFoundError):
    """User not found exception."""
    
    def __init__(self, lookup: str):
        super().__init__("User", lookup)


class DuplicateUserError(ConflictError):
    """A user with the same email already exists."""
    
    def __init__(self, email: str):
        super().__init__(f"User with email '{email}' already exists")
        self.email = email
