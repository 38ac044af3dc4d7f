from datetime import datetime, timezone
from typing import Optional
import re
import unicodedata


def utc_now():
    return datetime.now(timezone.utc)


def slugify(value: str) -> str:
    """
    Convert text to a URL-friendly slug.

    Accents are folded to ASCII, everything is lowercased and each run of
    non-alphanumeric characters becomes a single hyphen. Leading and
    trailing hyphens are dropped, so an all-punctuation value yields ''.
    """
    if not value:
        return ''
    text = unicodedata.normalize('NFKD', value)
    text = text.encode('ascii', 'ignore').decode('ascii')
    text = re.sub(r'[^a-z0-9]+', '-', text.lower())
    return text.strip('-')


def nullable_text(value: Optional[str]) -> Optional[str]:
    """Store empty strings as NULL."""
    if value == '':
        return None
    return value
