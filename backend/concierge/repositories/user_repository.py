from typing import Optional, List
from .base import BaseRepository
from ..models.business import Business
from ..models.users import User


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self):
        super().__init__(User)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get a user by email address.

        Args:
            email: The user's email address

        Returns:
            User instance or None if not found
        """
        return self.session.query(User).filter_by(email=email).first()

    def get_businesses(self, user: User) -> List[Business]:
        """
        Get all businesses owned by a user.

        Args:
            user: The owner

        Returns:
            List of Business instances ordered by name
        """
        return user.businesses.order_by(Business.name).all()
