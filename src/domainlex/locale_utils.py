"""Locale utilities for language-tag handling.

Centralizes the small amount of language-tag manipulation the registry needs:
BCP-47 to POSIX normalization for Babel, primary-subtag extraction for the
directory fallback, and cached Babel Locale parsing for plural defaults.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from domainlex.constants import PRIMARY_SUBTAG_LENGTH

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "primary_subtag",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def primary_subtag(language: str) -> str | None:
    """Return the fallback directory name for a language tag.

    The fallback is the first two characters of the tag, tried only when the
    tag is longer than that. No further shortening is ever attempted.

    Args:
        language: Language tag as given to the registry (e.g., "en_US")

    Returns:
        Two-character prefix, or None when the tag is already two
        characters or shorter.

    Example:
        >>> primary_subtag("en_US")
        'en'
        >>> primary_subtag("en") is None
        True
    """
    if len(language) > PRIMARY_SUBTAG_LENGTH:
        return language[:PRIMARY_SUBTAG_LENGTH]
    return None


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    The parsed locale supplies CLDR-derived plural defaults for catalogs whose
    PO header declares no Plural-Forms.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
