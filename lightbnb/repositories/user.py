"""
User repository for account lookup and registration.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.utils.exceptions import DuplicateUserError
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user accounts.
    Emails are unique; registration refuses to create a second row for an email.
    """
    
    def __init__(self, db: AsyncSession):
        super().__init__(User, db)
    
    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by exact email address.
        
        Args:
            email: Email address to search for
            
        Returns:
            User instance if found, None otherwise
        """
        return await self.get_by_field("email", email)
    
    async def email_exists(self, email: str) -> bool:
        """Check whether any user is registered with the email."""
        return await self.count({"email": email}) > 0
    
    async def add_user(self, user_data: Dict[str, Any]) -> User:
        """
        Register a new user.
        
        The existence check is a fast path; the unique constraint on users.email
        decides when two registrations for the same email race.
        
        Args:
            user_data: Dictionary with name, email and password
            
        Returns:
            Created user instance
            
        Raises:
            DuplicateUserError: If the email is already registered
            Exception: If database operation fails
        """
        email = user_data["email"]
        
        if await self.email_exists(email):
            logger.warning(f"User exists: {email}")
            raise DuplicateUserError(email)
        
        try:
            user = await self.create(user_data)
        except IntegrityError as e:
            # create() has already rolled back the session
            logger.warning(f"User exists (constraint): {email}")
            raise DuplicateUserError(email) from e
        
        logger.info(f"Created user: {user.email} (ID: {user.id})")
        return user
