from .business import Business, business_user
from .users import User
from .categories import Category
from .resources import Humanresource, ServiceType
from .bookings import Booking

__all__ = [
    'Business',
    'business_user',
    'User',
    'Category',
    'Humanresource',
    'ServiceType',
    'Booking',
]
