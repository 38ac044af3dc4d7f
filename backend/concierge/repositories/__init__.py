"""
Repository layer for data access.

This module provides a clean abstraction over database operations,
following the repository pattern. All database access should go through
these repositories rather than directly using SQLAlchemy models.

Usage:
    from concierge.repositories import BusinessRepository, UserRepository

    business_repo = BusinessRepository()
    business = business_repo.create(name="My Awesome Biz", phone="")
    business.slug   # 'my-awesome-biz'
    business.phone  # None

    owner = UserRepository().get_by_email("owner@example.com")
    business_repo.add_owner(business, owner)
    business_repo.owners(business)  # {owner}
"""

from .base import BaseRepository
from .business_repository import BusinessRepository
from .user_repository import UserRepository
from .category_repository import CategoryRepository

__all__ = [
    'BaseRepository',
    'BusinessRepository',
    'UserRepository',
    'CategoryRepository',
]
