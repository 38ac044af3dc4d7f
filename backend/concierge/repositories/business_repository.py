from typing import Optional, List, Set
from uuid import UUID
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, selectinload
from .base import BaseRepository
from ..models.business import Business, business_user
from ..models.bookings import Booking
from ..models.categories import Category
from ..models.resources import Humanresource, ServiceType
from ..models.users import User


class BusinessRepository(BaseRepository[Business]):
    """
    Repository for Business model operations.

    Relation accessors query on every call and return materialized
    collections. Use get_with_relations() to eager-load everything at once.
    """

    def __init__(self):
        super().__init__(Business)

    def assign(self, instance: Business, **kwargs) -> Business:
        # name, phone and postal_address go through the normalizing setters
        known = {key: value for key, value in kwargs.items() if hasattr(instance, key)}
        return instance.fill(**known)

    def get_by_slug(self, slug: str) -> Optional[Business]:
        """
        Get the oldest business with the given slug.

        Args:
            slug: The business slug

        Returns:
            Business instance or None if not found
        """
        return self.session.query(Business).filter_by(slug=slug).order_by(Business.created_at).first()

    def get_active_businesses(self) -> List[Business]:
        """
        Get all active businesses.

        Returns:
            List of active Business instances
        """
        return self.session.query(Business).filter_by(is_active=True).all()

    def get_with_relations(self, business_id: UUID) -> Optional[Business]:
        """
        Get a business with owners, category, humanresources, service types
        and bookings loaded up front.
        """
        return self.session.query(Business).options(
            joinedload(Business.category),
            selectinload(Business.owners),
            selectinload(Business.humanresources),
            selectinload(Business.service_types),
            selectinload(Business.bookings),
        ).filter_by(id=business_id).first()

    def deactivate(self, business_id: UUID) -> bool:
        """
        Deactivate a business.

        Args:
            business_id: The UUID of the business to deactivate

        Returns:
            True if deactivated successfully, False if business not found
        """
        business = self.get_by_id(business_id)
        if not business:
            return False

        business.is_active = False
        self.commit()
        return True

    def activate(self, business_id: UUID) -> bool:
        """
        Activate a business.

        Args:
            business_id: The UUID of the business to activate

        Returns:
            True if activated successfully, False if business not found
        """
        business = self.get_by_id(business_id)
        if not business:
            return False

        business.is_active = True
        self.commit()
        return True

    def owners(self, business: Business) -> Set[User]:
        """Get every user owning the business."""
        return set(
            self.session.query(User)
            .join(business_user, business_user.c.user_id == User.id)
            .filter(business_user.c.business_id == business.id)
            .all()
        )

    def owner(self, business: Business) -> Optional[User]:
        """
        Get the main owner of the business.

        Returns:
            The user that was associated first, or None without owners
        """
        return (
            self.session.query(User)
            .join(business_user, business_user.c.user_id == User.id)
            .filter(business_user.c.business_id == business.id)
            .order_by(business_user.c.created_at, User.created_at)
            .first()
        )

    def add_owner(self, business: Business, user: User) -> Business:
        """
        Associate a user as owner. Adding an existing owner is a no-op.

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            business.owners.add(user)
            self.session.commit()
            return business
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

    def remove_owner(self, business: Business, user: User) -> Business:
        """
        Remove a user from the owners.

        Raises:
            SQLAlchemyError: If database operation fails
        """
        try:
            business.owners.discard(user)
            self.session.commit()
            return business
        except SQLAlchemyError as e:
            self.session.rollback()
            raise e

    def humanresources(self, business: Business) -> List[Humanresource]:
        return self.session.query(Humanresource).filter_by(
            business_id=business.id
        ).order_by(Humanresource.name).all()

    def service_types(self, business: Business) -> List[ServiceType]:
        return self.session.query(ServiceType).filter_by(
            business_id=business.id
        ).order_by(ServiceType.name).all()

    def bookings(self, business: Business) -> List[Booking]:
        return self.session.query(Booking).filter_by(
            business_id=business.id
        ).order_by(Booking.start_at).all()

    def category(self, business: Business) -> Optional[Category]:
        if business.category_id is None:
            return None
        return self.session.get(Category, business.category_id)
