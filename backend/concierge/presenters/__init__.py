"""
Presenter lookup.

Presenters format an entity for display without mutating it. Each entity
type maps to exactly one presenter class through a static table.
"""
from ..models.business import Business
from .business import BusinessPresenter

PRESENTERS = {
    Business: BusinessPresenter,
}


def resolve_presenter_type(entity):
    """
    Get the presenter class registered for an entity's type.

    Raises:
        LookupError: If no presenter is registered for the type
    """
    try:
        return PRESENTERS[type(entity)]
    except KeyError:
        raise LookupError(f"No presenter registered for {type(entity).__name__}") from None


def present(entity):
    """Wrap an entity in its presenter."""
    return resolve_presenter_type(entity)(entity)


__all__ = [
    'BusinessPresenter',
    'PRESENTERS',
    'resolve_presenter_type',
    'present',
]
