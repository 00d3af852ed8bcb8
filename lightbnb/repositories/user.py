"""
User repository for lookups and account inserts.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.models.user import User
from lightbnb.schemas.user import UserCreate, UserRecord
from lightbnb.utils.exceptions import DuplicateResourceError
from lightbnb.utils.query_builder import ParameterizedQuery
from typing import Optional, Dict, Any, Union
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    """
    Repository for user accounts.
    """

    async def get_user_with_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a single user given their email.

        Args:
            email: Email address to search for

        Returns:
            UserRecord if found, None otherwise
        """
        # Emails are stored normalized
        normalized_email = email.lower().strip()

        row = await self.fetch_one(ParameterizedQuery(
            "SELECT * FROM users WHERE email = $1",
            (normalized_email,)
        ))

        if row is None:
            logger.debug(f"User with email {normalized_email} not found")
            return None
        return UserRecord.model_validate(row)

    async def get_user_with_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Get a single user given their id.

        Args:
            user_id: ID of the user

        Returns:
            UserRecord if found, None otherwise
        """
        row = await self.fetch_one(ParameterizedQuery(
            "SELECT * FROM users WHERE id = $1",
            (user_id,)
        ))

        if row is None:
            logger.debug(f"User with id {user_id} not found")
            return None
        return UserRecord.model_validate(row)

    async def add_user(self, user_data: Union[UserCreate, Dict[str, Any]]) -> UserRecord:
        """
        Add a new user with a hashed password.

        Args:
            user_data: UserCreate, or a mapping with name, email and password

        Returns:
            The stored user

        Raises:
            pydantic.ValidationError: If user data is invalid
            DuplicateResourceError: If the email is already registered
            Exception: If database operation fails
        """
        if not isinstance(user_data, UserCreate):
            user_data = UserCreate.model_validate(user_data)

        existing_user = await self.get_user_with_email(user_data.email)
        if existing_user:
            raise DuplicateResourceError("User", user_data.email)

        row = await self.fetch_one(ParameterizedQuery(
            "INSERT INTO users (name, email, password) VALUES ($1, $2, $3) RETURNING *",
            (user_data.name, user_data.email, User.hash_password(user_data.password))
        ))

        created_user = UserRecord.model_validate(row)
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user
