"""
Service layer exposing the data access operations.
"""

from lightbnb.services.query import QueryService

__all__ = ["QueryService"]
