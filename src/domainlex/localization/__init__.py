"""Single-language domain registry package.

Provides the registry, its configuration, catalog loading infrastructure and
type aliases.

Submodules:
    types    - PEP 695 type aliases (DomainName, LocaleCode, MessageKey, MessageContext)
    config   - RegistryConfig
    loading  - build_catalog_path, resolve_catalog_path, parse_catalog,
               CatalogLoadResult, LoadSummary
    registry - LocaleRegistry

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from domainlex.enums import LoadStatus
from domainlex.localization.config import RegistryConfig
from domainlex.localization.loading import (
    CatalogLoadResult,
    LoadSummary,
    build_catalog_path,
    parse_catalog,
    resolve_catalog_path,
)
from domainlex.localization.registry import LocaleRegistry
from domainlex.localization.types import DomainName, LocaleCode, MessageContext, MessageKey

__all__ = [
    # Registry
    "LocaleRegistry",
    "RegistryConfig",
    # Loading
    "build_catalog_path",
    "resolve_catalog_path",
    "parse_catalog",
    # Load tracking
    "LoadStatus",
    "LoadSummary",
    "CatalogLoadResult",
    # Type aliases for user code type annotations
    "DomainName",
    "LocaleCode",
    "MessageContext",
    "MessageKey",
]
