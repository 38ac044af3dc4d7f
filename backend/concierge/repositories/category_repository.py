from typing import Optional
from .base import BaseRepository
from ..models.categories import Category


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model operations."""

    def __init__(self):
        super().__init__(Category)

    def get_by_slug(self, slug: str) -> Optional[Category]:
        return self.session.query(Category).filter_by(slug=slug).first()
