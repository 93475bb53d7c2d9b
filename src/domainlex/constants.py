"""Shared constants for domainlex.

Single source of truth for the values the registry, the loader and the
catalog layer agree on. Kept free of imports to avoid cycles.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Domains
    "DEFAULT_DOMAIN",
    # Files
    "CATALOG_EXTENSION",
    # Locale fallback
    "PRIMARY_SUBTAG_LENGTH",
    # Plural selection
    "SINGULAR_COUNT",
]

# ============================================================================
# DOMAINS
# ============================================================================

# Domain consulted by the resolve()/resolve_n()/resolve_c()/resolve_nc()
# shortcuts when the caller names none.
DEFAULT_DOMAIN: str = "default"

# ============================================================================
# FILES
# ============================================================================

# Catalog files are gettext PO sources: <root>/<language>/<domain>.po
CATALOG_EXTENSION: str = ".po"

# ============================================================================
# LOCALE FALLBACK
# ============================================================================

# "en_US" falls back to "en". Tags of this length or shorter are never shortened.
PRIMARY_SUBTAG_LENGTH: int = 2

# ============================================================================
# PLURAL SELECTION
# ============================================================================

# Count passed by the singular call shapes. Singular semantics are selected by
# key == plural_key, not by the count itself.
SINGULAR_COUNT: int = 0
