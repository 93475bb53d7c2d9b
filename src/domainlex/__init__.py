"""domainlex - multi-domain gettext translation registry for one language.

Resolves source strings against per-domain PO catalogs laid out as
<root>/<language>/<domain>.po, with fallback to the two-letter language
directory, plural and context lookups, and printf-style formatting. Lookups
never fail: anything unresolved echoes its (formatted) input.

Public API:
    LocaleRegistry - Domain registry and resolve* lookups for one language
    RegistryConfig - Default domain, catalog extension, fuzzy handling
    Catalog - One parsed domain (Babel-backed)
    parse_catalog - PO file to Catalog, never raising
    format_message - printf-style substitution used on every result

Load diagnostics:
    LoadStatus, CatalogLoadResult, LoadSummary

Submodules:
    domainlex.localization - Registry, configuration, loading, type aliases
    domainlex.runtime - Catalog, formatting, RWLock
    domainlex.locale_utils - Language-tag helpers
"""

from .constants import DEFAULT_DOMAIN
from .enums import LoadStatus
from .localization import (
    CatalogLoadResult,
    LoadSummary,
    LocaleRegistry,
    RegistryConfig,
    parse_catalog,
)
from .runtime import Catalog, format_message

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("domainlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_DOMAIN",
    "Catalog",
    "CatalogLoadResult",
    "LoadStatus",
    "LoadSummary",
    "LocaleRegistry",
    "RegistryConfig",
    "__version__",
    "format_message",
    "parse_catalog",
]
