"""Single-language domain registry.

LocaleRegistry maps domain names to parsed Catalogs for one language and
normalizes every lookup into one of two canonical operations:

    resolve_nd(domain, key, plural_key, count, *args)
    resolve_ndc(domain, key, plural_key, count, context, *args)

The six remaining resolve* methods only fill in defaults: the configured
default domain, plural_key = key with count = 0, or no context.

Failure model:
    Nothing raises. A missing domain, a missing file, a malformed file or a
    missing key all resolve to plural_key formatted with the arguments.
    Load diagnostics are carried by each catalog and aggregated by
    get_load_summary().

Thread safety:
    One RWLock guards the domain map. Lookups take the read side and run
    concurrently. register_domain() parses the file before taking the write
    side, so the exclusive section is a single dict assignment.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from domainlex.constants import SINGULAR_COUNT
from domainlex.localization.config import RegistryConfig
from domainlex.localization.loading import LoadSummary, parse_catalog, resolve_catalog_path
from domainlex.runtime.formatting import format_message
from domainlex.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from domainlex.localization.types import (
        DomainName,
        LocaleCode,
        MessageContext,
        MessageKey,
    )
    from domainlex.runtime.catalog import Catalog

__all__ = ["LocaleRegistry"]

logger = logging.getLogger(__name__)


class LocaleRegistry:
    """Translation domains of one language, resolved from a files root.

    Example:
        >>> registry = LocaleRegistry("/path/to/locales", "fr")
        >>> registry.register_domain("default")   # locales/fr/default.po
        >>> registry.resolve("Hello")
        'Bonjour'
        >>> registry.resolve("Goodbye")           # untranslated: echoed
        'Goodbye'
        >>> registry.resolve_n("%d file", "%d files", 3, 3)
        '3 fichiers'
        >>> registry.register_domain("extras")    # locales/fr/extras.po
        >>> registry.resolve_d("extras", "Save")
        'Enregistrer'

    Attributes:
        root_path: Directory holding one subdirectory per language
        language: Language tag (e.g., "en_US"); "en" is tried when the
            "en_US" directory lacks a domain file
    """

    __slots__ = (
        "_config",
        "_domains",
        "_language",
        "_lock",
        "_root_path",
    )

    def __init__(
        self,
        root_path: str,
        language: LocaleCode,
        *,
        config: RegistryConfig | None = None,
    ) -> None:
        """Create an empty registry. Performs no I/O.

        Args:
            root_path: Files root (e.g., "./locales")
            language: Language tag (e.g., "en_US", "fr")
            config: Registry configuration (defaults to RegistryConfig())

        Raises:
            ValueError: If language is empty
        """
        if not language:
            msg = "language must be a non-empty string"
            raise ValueError(msg)

        self._root_path = root_path
        self._language = language
        self._config = config if config is not None else RegistryConfig()
        self._domains: dict[DomainName, Catalog] = {}
        self._lock = RWLock()

    @property
    def root_path(self) -> str:
        """Files root this registry loads from."""
        return self._root_path

    @property
    def language(self) -> LocaleCode:
        """Language tag this registry serves."""
        return self._language

    @property
    def config(self) -> RegistryConfig:
        """Registry configuration."""
        return self._config

    @property
    def default_domain(self) -> DomainName:
        """Domain consulted when a lookup names none."""
        return self._config.default_domain

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LocaleRegistry(root_path={self._root_path!r}, "
            f"language={self._language!r}, domains={len(self)})"
        )

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._domains)

    def __contains__(self, domain: object) -> bool:
        with self._lock.read():
            return domain in self._domains

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_domain(self, domain: DomainName) -> None:
        """Load a domain's catalog from disk and publish it.

        Looks for <root>/<language>/<domain>.po, then
        <root>/<language[:2]>/<domain>.po. A missing, unreadable or malformed
        file registers an empty catalog. Registering an existing domain
        replaces its catalog.

        Args:
            domain: Domain name (bare identifier, e.g. "default")
        """
        path, used_fallback = resolve_catalog_path(
            self._root_path,
            self._language,
            domain,
            self._config.catalog_extension,
        )
        catalog = parse_catalog(
            path,
            domain=domain,
            language=self._language,
            use_fuzzy=self._config.use_fuzzy,
            used_fallback=used_fallback,
        )
        self.register_catalog(domain, catalog)

        load_result = catalog.load_result
        logger.info(
            "Registered domain '%s' for %s from %s: %s, %d messages",
            domain,
            self._language,
            path,
            load_result.status if load_result is not None else "ad-hoc",
            len(catalog),
        )

    def register_catalog(self, domain: DomainName, catalog: Catalog) -> None:
        """Publish an already built catalog under a domain name.

        Replaces any catalog registered under the same name. Readers see
        either the previous catalog or this one.

        Args:
            domain: Domain name
            catalog: Catalog to serve for the domain
        """
        with self._lock.write():
            self._domains[domain] = catalog

    def remove_domain(self, domain: DomainName) -> bool:
        """Drop a domain's catalog.

        Subsequent lookups against the domain echo their input.

        Returns:
            True if the domain was registered
        """
        with self._lock.write():
            return self._domains.pop(domain, None) is not None

    def clear(self) -> None:
        """Drop every registered catalog."""
        with self._lock.write():
            self._domains.clear()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def domain_names(self) -> tuple[DomainName, ...]:
        """Registered domain names, sorted."""
        with self._lock.read():
            return tuple(sorted(self._domains))

    def has_domain(self, domain: DomainName) -> bool:
        """Check whether a catalog is registered under the domain name."""
        return domain in self

    def get_catalog(self, domain: DomainName) -> Catalog | None:
        """Get the catalog registered under a domain name, if any."""
        with self._lock.read():
            return self._domains.get(domain)

    def is_translated(
        self,
        key: MessageKey,
        *,
        domain: DomainName | None = None,
        context: MessageContext | None = None,
    ) -> bool:
        """Check whether a source string has a translation.

        Args:
            key: Source string (singular msgid)
            domain: Domain to check (default domain if None)
            context: Optional msgctxt

        Returns:
            True if the domain is registered and translates (key, context)
        """
        catalog = self.get_catalog(domain if domain is not None else self.default_domain)
        return catalog is not None and catalog.has_translation(key, context)

    def get_load_summary(self) -> LoadSummary:
        """Summarize how the currently registered catalogs were loaded.

        Catalogs published through register_catalog() without a load
        result are not included.

        Example:
            >>> summary = registry.get_load_summary()
            >>> for result in summary.get_not_found():
            ...     print(f"Missing: {result.path}")
        """
        with self._lock.read():
            catalogs = [self._domains[name] for name in sorted(self._domains)]
        return LoadSummary(
            results=tuple(c.load_result for c in catalogs if c.load_result is not None)
        )

    # ------------------------------------------------------------------
    # Canonical lookups
    # ------------------------------------------------------------------

    def resolve_nd(
        self,
        domain: DomainName,
        key: MessageKey,
        plural_key: MessageKey,
        count: int,
        *args: object,
    ) -> str:
        """Resolve a string in a domain, selecting a plural form by count.

        Args:
            domain: Domain name
            key: Singular source string
            plural_key: Plural source string (== key for singular lookups)
            count: Quantity selecting the plural form
            *args: printf-style format arguments

        Returns:
            Formatted translation; formatted plural_key if the domain is not
            registered or has no entry for key
        """
        with self._lock.read():
            catalog = self._domains.get(domain)
            if catalog is None:
                logger.debug("Domain '%s' not registered for %s", domain, self._language)
                return format_message(plural_key, args)
            return catalog.lookup_plural(key, plural_key, count, *args)

    def resolve_ndc(
        self,
        domain: DomainName,
        key: MessageKey,
        plural_key: MessageKey,
        count: int,
        context: MessageContext,
        *args: object,
    ) -> str:
        """Resolve a string in a domain and context, selecting a plural form.

        Same contract as resolve_nd(), restricted to entries whose msgctxt
        equals context.
        """
        with self._lock.read():
            catalog = self._domains.get(domain)
            if catalog is None:
                logger.debug("Domain '%s' not registered for %s", domain, self._language)
                return format_message(plural_key, args)
            return catalog.lookup_plural_context(key, plural_key, count, context, *args)

    # ------------------------------------------------------------------
    # Shortcuts
    # ------------------------------------------------------------------

    def resolve(self, key: MessageKey, *args: object) -> str:
        """Resolve a string in the default domain."""
        return self.resolve_d(self.default_domain, key, *args)

    def resolve_n(
        self, key: MessageKey, plural_key: MessageKey, count: int, *args: object
    ) -> str:
        """Resolve a plural string in the default domain."""
        return self.resolve_nd(self.default_domain, key, plural_key, count, *args)

    def resolve_d(self, domain: DomainName, key: MessageKey, *args: object) -> str:
        """Resolve a string in the given domain."""
        return self.resolve_nd(domain, key, key, SINGULAR_COUNT, *args)

    def resolve_c(self, key: MessageKey, context: MessageContext, *args: object) -> str:
        """Resolve a string in the default domain within a context."""
        return self.resolve_dc(self.default_domain, key, context, *args)

    def resolve_nc(
        self,
        key: MessageKey,
        plural_key: MessageKey,
        count: int,
        context: MessageContext,
        *args: object,
    ) -> str:
        """Resolve a plural string in the default domain within a context."""
        return self.resolve_ndc(self.default_domain, key, plural_key, count, context, *args)

    def resolve_dc(
        self, domain: DomainName, key: MessageKey, context: MessageContext, *args: object
    ) -> str:
        """Resolve a string in the given domain within a context."""
        return self.resolve_ndc(domain, key, key, SINGULAR_COUNT, context, *args)
