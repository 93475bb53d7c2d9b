"""Catalog loading infrastructure for LocaleRegistry.

Locates a domain's PO file with the primary-subtag fallback, parses it into a
Catalog without ever raising, and records each attempt for diagnostics.

Components:
    build_catalog_path - Lexically normalized <root>/<language>/<domain><ext>
    resolve_catalog_path - Full-tag path, else primary-subtag path
    parse_catalog - PO file -> Catalog; failures become empty catalogs
    CatalogLoadResult - Immutable record of one load attempt
    LoadSummary - Immutable aggregate of load results

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from babel.core import UnknownLocaleError
from babel.messages.pofile import PoFileError, read_po

from domainlex.constants import CATALOG_EXTENSION
from domainlex.enums import LoadStatus
from domainlex.locale_utils import get_babel_locale, primary_subtag
from domainlex.runtime.catalog import Catalog

if TYPE_CHECKING:
    from babel import Locale

    from domainlex.localization.types import DomainName, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Path resolution
    "build_catalog_path",
    "resolve_catalog_path",
    # Parsing
    "parse_catalog",
    # Load result types
    "CatalogLoadResult",
    "LoadSummary",
]

logger = logging.getLogger(__name__)


def build_catalog_path(
    root_path: str,
    language: LocaleCode,
    domain: DomainName,
    extension: str = CATALOG_EXTENSION,
) -> str:
    """Build the catalog path for one language directory.

    Redundant separators and "." / ".." segments are resolved lexically;
    the filesystem is not consulted and symlinks are not followed.

    Example:
        >>> build_catalog_path("locales//", "fr", "default")
        'locales/fr/default.po'
        >>> build_catalog_path("locales/x/..", "fr", "extras")
        'locales/fr/extras.po'
    """
    return os.path.normpath(os.path.join(root_path, language, f"{domain}{extension}"))


def resolve_catalog_path(
    root_path: str,
    language: LocaleCode,
    domain: DomainName,
    extension: str = CATALOG_EXTENSION,
) -> tuple[str, bool]:
    """Choose the file a domain is loaded from.

    Tries <root>/<language>/<domain><ext> first. If that path does not exist
    and the language tag is longer than two characters, the first two
    characters are used instead (en_US -> en). The result is returned even
    when it does not exist either; parse_catalog() handles absence.

    Args:
        root_path: Directory holding one subdirectory per language
        language: Language tag (e.g., "en_US")
        domain: Domain name (e.g., "default")
        extension: Catalog file extension including the dot

    Returns:
        (path, used_fallback) tuple
    """
    path = build_catalog_path(root_path, language, domain, extension)
    if os.path.exists(path):
        return path, False

    fallback_language = primary_subtag(language)
    if fallback_language is None:
        return path, False

    fallback_path = build_catalog_path(root_path, fallback_language, domain, extension)
    logger.debug("Catalog %s not found, trying %s", path, fallback_path)
    return fallback_path, True


def _babel_locale_or_none(language: LocaleCode | None) -> Locale | None:
    if not language:
        return None
    try:
        return get_babel_locale(language)
    except (UnknownLocaleError, ValueError) as e:
        # Unknown tags still load; plural defaults fall back to n != 1
        logger.debug("No CLDR data for language '%s': %s", language, e)
        return None


def parse_catalog(
    path: str,
    *,
    domain: DomainName,
    language: LocaleCode | None = None,
    use_fuzzy: bool = False,
    used_fallback: bool = False,
) -> Catalog:
    """Parse a PO file into a Catalog. Never raises.

    A missing file yields an empty catalog with status NOT_FOUND. An
    unreadable or malformed file (including one whose header names an unknown
    charset) yields an empty catalog with status ERROR
    and the exception recorded in its load_result. Lookups against either
    echo their input.

    When the file declares no Plural-Forms header, Babel derives the plural
    rule from the CLDR data for ``language``.

    Args:
        path: PO file path (need not exist)
        domain: Domain name the catalog will serve
        language: Language tag used for plural defaults
        use_fuzzy: Include entries flagged fuzzy
        used_fallback: Recorded in the load result (primary-subtag path)

    Returns:
        Catalog with a CatalogLoadResult attached
    """
    try:
        with open(path, "rb") as fileobj:
            po_catalog = read_po(
                fileobj,
                locale=_babel_locale_or_none(language),
                domain=domain,
            )
        return Catalog.from_po(
            po_catalog,
            domain=domain,
            language=language,
            use_fuzzy=use_fuzzy,
            load_result=CatalogLoadResult(
                domain=domain,
                language=language,
                path=path,
                status=LoadStatus.SUCCESS,
                used_fallback=used_fallback,
            ),
        )
    except FileNotFoundError:
        logger.debug("Catalog file for domain '%s' not found: %s", domain, path)
        return Catalog.empty(
            domain,
            language=language,
            load_result=CatalogLoadResult(
                domain=domain,
                language=language,
                path=path,
                status=LoadStatus.NOT_FOUND,
                used_fallback=used_fallback,
            ),
        )
    except (OSError, LookupError, ValueError, PoFileError, UnknownLocaleError) as e:
        logger.warning("Failed to load catalog %s for domain '%s': %s", path, domain, e)
        return Catalog.empty(
            domain,
            language=language,
            load_result=CatalogLoadResult(
                domain=domain,
                language=language,
                path=path,
                status=LoadStatus.ERROR,
                error=e,
                used_fallback=used_fallback,
            ),
        )


@dataclass(frozen=True, slots=True)
class CatalogLoadResult:
    """Result of loading a single domain catalog.

    Attributes:
        domain: Domain name
        language: Language tag the registry was built for
        path: Path handed to the parser (after fallback selection)
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        used_fallback: True if the primary-subtag directory was chosen
    """

    domain: DomainName
    language: LocaleCode | None
    path: str
    status: LoadStatus
    error: Exception | None = None
    used_fallback: bool = False

    @property
    def is_success(self) -> bool:
        """Check if the catalog loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no catalog file existed."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the catalog file could not be read or parsed."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of catalog load results.

    All statistics are computed properties derived from ``results``.

    Example:
        >>> summary = registry.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.domain} ({result.path}): {result.error}")
    """

    results: tuple[CatalogLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of catalogs not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    def get_errors(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[CatalogLoadResult, ...]:
        """Get all results where the catalog file was not found."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[CatalogLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_domain(self, domain: DomainName) -> tuple[CatalogLoadResult, ...]:
        """Get all results for a specific domain."""
        return tuple(r for r in self.results if r.domain == domain)

    @property
    def has_errors(self) -> bool:
        """Check if any catalog failed to load with an error."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted catalog was found and parsed."""
        return self.errors == 0 and self.not_found == 0
