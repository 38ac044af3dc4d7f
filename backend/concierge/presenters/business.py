from typing import Any, Dict, Optional
from urllib.parse import urlencode

STATIC_MAP_URL = 'https://maps.googleapis.com/maps/api/staticmap'


class BusinessPresenter:
    """Read-only display view of a Business."""

    def __init__(self, business):
        self.business = business

    @property
    def name(self) -> str:
        return self.business.name

    @property
    def slug(self) -> str:
        return self.business.slug

    @property
    def display_phone(self) -> str:
        return self.business.phone or '-'

    @property
    def facebook_url(self) -> Optional[str]:
        handle = self.business.social_facebook
        if not handle:
            return None
        if handle.startswith('http://') or handle.startswith('https://'):
            return handle
        return f"https://www.facebook.com/{handle.lstrip('/')}"

    @property
    def industry_icon(self) -> str:
        category = self.business.category
        slug = category.slug if category is not None else 'default'
        return f"/img/industries/{slug}.png"

    def static_map_url(self, zoom: int = 15, width: int = 180, height: int = 100) -> Optional[str]:
        """
        Google Static Maps URL centered on the postal address.

        Returns None when the business has no postal address.
        """
        address = self.business.postal_address
        if not address:
            return None
        params = {
            'center': address,
            'zoom': zoom,
            'size': f"{width}x{height}",
            'maptype': 'roadmap',
            'markers': f"color:blue|{address}",
        }
        return f"{STATIC_MAP_URL}?{urlencode(params)}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': str(self.business.id) if self.business.id else None,
            'name': self.name,
            'slug': self.slug,
            'description': self.business.description,
            'phone': self.display_phone,
            'postal_address': self.business.postal_address,
            'facebook_url': self.facebook_url,
            'industry_icon': self.industry_icon,
            'static_map_url': self.static_map_url(),
        }
