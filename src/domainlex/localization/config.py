"""Registry configuration for LocaleRegistry.

Provides a single frozen dataclass holding the knobs a registry is built
with. The files root and language are constructor arguments, not config.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from domainlex.constants import CATALOG_EXTENSION, DEFAULT_DOMAIN

__all__ = ["RegistryConfig"]


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Immutable configuration for LocaleRegistry.

    Constructing ``RegistryConfig()`` with no arguments reproduces the
    defaults the registry uses when no config is passed.

    Attributes:
        default_domain: Domain used by the shortcuts that take no domain
            argument (default: "default").
        catalog_extension: Catalog file extension including the leading dot
            (default: ".po").
        use_fuzzy: Treat PO entries flagged ``#, fuzzy`` as translated
            (default: False, matching msgfmt).

    Example:
        >>> config = RegistryConfig(default_domain="messages")
        >>> registry = LocaleRegistry("locales", "de_DE", config=config)
        >>> registry.default_domain
        'messages'
    """

    default_domain: str = DEFAULT_DOMAIN
    catalog_extension: str = CATALOG_EXTENSION
    use_fuzzy: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_domain is empty or catalog_extension does
                not start with "." or contains a path separator.
        """
        if not self.default_domain:
            msg = "default_domain must be a non-empty string"
            raise ValueError(msg)
        if not self.catalog_extension.startswith("."):
            msg = f"catalog_extension must start with '.', got: '{self.catalog_extension}'"
            raise ValueError(msg)
        if "/" in self.catalog_extension or "\\" in self.catalog_extension:
            msg = f"Path separators not allowed in catalog_extension: '{self.catalog_extension}'"
            raise ValueError(msg)
