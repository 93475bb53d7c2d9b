"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating LocaleRegistry call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DomainName",
    "LocaleCode",
    "MessageContext",
    "MessageKey",
]

type DomainName = str
"""Text domain identifier (e.g., 'default', 'extras'). One PO file per domain."""

type LocaleCode = str
"""POSIX-style language tag (e.g., 'en', 'en_US', 'pt_BR')."""

type MessageKey = str
"""Source string used as gettext msgid (e.g., 'Hello', '%d file')."""

type MessageContext = str
"""gettext msgctxt disambiguating identical source strings (e.g., 'menu')."""
