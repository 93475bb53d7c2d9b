"""Catalog - one parsed translation domain.

Thin adapter over Babel's gettext machinery. Babel parses the PO source and
evaluates the catalog's plural rule; this module only fixes the lookup
contract the registry relies on:

- Every miss resolves to the plural form of the request (for singular
  requests plural form == key), never to the singular form and never to an
  error.
- Every result, hit or miss, goes through format_message().
- A Catalog is immutable once built and safe to share between threads.

Python 3.13+. External dependency: Babel.
"""

from __future__ import annotations

from gettext import c2py
from io import BytesIO
from typing import TYPE_CHECKING

from babel.messages.catalog import Catalog as PoCatalog
from babel.messages.mofile import write_mo
from babel.support import NullTranslations, Translations

from domainlex.constants import DEFAULT_DOMAIN
from domainlex.runtime.formatting import format_message

if TYPE_CHECKING:
    from gettext import NullTranslations as _GettextTranslations

    from babel.messages.catalog import Message

    from domainlex.localization.loading import CatalogLoadResult

__all__ = ["Catalog"]


class _EchoTranslations(NullTranslations):
    """Terminal fallback of every catalog: a miss yields the plural form.

    gettext's own miss rule picks the singular form when n == 1; the
    registry contract requires the plural form regardless of count.
    """

    def ngettext(self, msgid1: str, msgid2: str, n: int) -> str:
        return msgid2

    def npgettext(self, context: str, msgid1: str, msgid2: str, n: int) -> str:
        return msgid2


def _is_translated(message: Message, use_fuzzy: bool) -> bool:
    if message.fuzzy and not use_fuzzy:
        return False
    if isinstance(message.string, str):
        return bool(message.string)
    return any(message.string)


def _compilable(po_catalog: PoCatalog, use_fuzzy: bool) -> PoCatalog:
    """Copy the translated entries of po_catalog into a fresh catalog.

    write_mo keeps plural entries whose forms are all empty and fills empty
    forms with the msgids, which would turn a miss into the singular form.
    Untranslated entries are left out here and empty forms of partly
    translated ones are filled with the plural msgid.
    """
    compiled = PoCatalog(locale=po_catalog.locale, domain=po_catalog.domain, charset="utf-8")
    for message in po_catalog:
        if not message.id or not _is_translated(message, use_fuzzy):
            continue
        string = message.string
        if message.pluralizable and not isinstance(string, str):
            string = tuple(form or message.id[1] for form in string)
        compiled.add(message.id, string, context=message.context)
    return compiled


class Catalog:
    """Parsed translation domain with singular, plural and contextual lookup.

    Instances are normally produced by ``parse_catalog()`` (from a PO file)
    or ``Catalog.empty()``. Both lookup methods are total: they return a
    usable string for every input.

    Example:
        >>> catalog = Catalog.empty("default")
        >>> catalog.lookup_plural("%d file", "%d files", 1, 1)
        '1 files'
    """

    __slots__ = (
        "_domain",
        "_language",
        "_load_result",
        "_message_count",
        "_messages",
        "_translations",
        "_use_fuzzy",
    )

    def __init__(
        self,
        translations: _GettextTranslations,
        *,
        domain: str = DEFAULT_DOMAIN,
        language: str | None = None,
        messages: PoCatalog | None = None,
        use_fuzzy: bool = False,
        load_result: CatalogLoadResult | None = None,
    ) -> None:
        """Wrap gettext translations as a catalog.

        Args:
            translations: Compiled translations (babel.support.Translations
                or any gettext.NullTranslations). An echo fallback is
                chained onto it so misses resolve to the plural form.
            domain: Domain name this catalog serves
            language: Language tag the catalog was loaded for
            messages: Parsed PO catalog backing membership queries
            use_fuzzy: Whether fuzzy entries count as translated
            load_result: How the catalog was loaded (None for ad-hoc catalogs)
        """
        if not isinstance(translations, _EchoTranslations):
            translations.add_fallback(_EchoTranslations())
        self._translations = translations
        self._domain = domain
        self._language = language
        self._messages = messages
        self._use_fuzzy = use_fuzzy
        self._load_result = load_result
        if messages is None:
            self._message_count = 0
        else:
            self._message_count = sum(
                1 for message in messages if message.id and _is_translated(message, use_fuzzy)
            )

    @classmethod
    def from_po(
        cls,
        po_catalog: PoCatalog,
        *,
        domain: str = DEFAULT_DOMAIN,
        language: str | None = None,
        use_fuzzy: bool = False,
        load_result: CatalogLoadResult | None = None,
    ) -> Catalog:
        """Compile a parsed PO catalog into a lookup catalog.

        The PO catalog is compiled to MO form in memory and loaded through
        babel.support.Translations, which evaluates the Plural-Forms rule.

        Args:
            po_catalog: Result of babel.messages.pofile.read_po()
            domain: Domain name this catalog serves
            language: Language tag the catalog was loaded for
            use_fuzzy: Include entries flagged fuzzy
            load_result: How the catalog was loaded

        Returns:
            Catalog serving the translated entries of po_catalog

        Raises:
            ValueError: If the Plural-Forms expression cannot be evaluated
        """
        buffer = BytesIO()
        write_mo(buffer, _compilable(po_catalog, use_fuzzy))
        buffer.seek(0)
        translations = Translations(fp=buffer, domain=domain)
        # Babel omits Plural-Forms from the MO header when the catalog has no locale.
        # c2py is the compiler GNUTranslations itself applies to that header.
        translations.plural = c2py(po_catalog.plural_expr)
        return cls(
            translations,
            domain=domain,
            language=language,
            messages=po_catalog,
            use_fuzzy=use_fuzzy,
            load_result=load_result,
        )

    @classmethod
    def empty(
        cls,
        domain: str = DEFAULT_DOMAIN,
        *,
        language: str | None = None,
        load_result: CatalogLoadResult | None = None,
    ) -> Catalog:
        """Create a catalog with no entries; every lookup echoes its input."""
        return cls(
            _EchoTranslations(),
            domain=domain,
            language=language,
            load_result=load_result,
        )

    @property
    def domain(self) -> str:
        """Domain name this catalog serves."""
        return self._domain

    @property
    def language(self) -> str | None:
        """Language tag the catalog was loaded for."""
        return self._language

    @property
    def load_result(self) -> CatalogLoadResult | None:
        """Load outcome recorded by parse_catalog(), None for ad-hoc catalogs."""
        return self._load_result

    @property
    def is_empty(self) -> bool:
        """True when the catalog holds no translated entries."""
        return self._message_count == 0

    def __len__(self) -> int:
        """Number of translated entries (header excluded)."""
        return self._message_count

    def __repr__(self) -> str:
        return (
            f"Catalog(domain={self._domain!r}, language={self._language!r}, "
            f"messages={self._message_count})"
        )

    def has_translation(self, key: str, context: str | None = None) -> bool:
        """Check whether the catalog translates a source string.

        Args:
            key: Source string (msgid, or singular msgid of a plural entry)
            context: Optional msgctxt

        Returns:
            True if a non-empty translation exists for (key, context)
        """
        if not key or self._messages is None:
            return False
        message = self._messages.get(key, context=context)
        return message is not None and _is_translated(message, self._use_fuzzy)

    def lookup_plural(self, key: str, plural_key: str, count: int, *args: object) -> str:
        """Resolve a source string, selecting a plural form by count.

        When key == plural_key the request has singular semantics and the
        count is not consulted.

        Args:
            key: Singular source string (msgid)
            plural_key: Plural source string (msgid_plural)
            count: Quantity selecting the plural form
            *args: printf-style format arguments

        Returns:
            Formatted translation, or formatted plural_key on a miss
        """
        if not key:
            return format_message(plural_key, args)
        if key == plural_key:
            result = self._translations.gettext(key)
        else:
            result = self._translations.ngettext(key, plural_key, count)
        return format_message(result, args)

    def lookup_plural_context(
        self,
        key: str,
        plural_key: str,
        count: int,
        context: str,
        *args: object,
    ) -> str:
        """Resolve a source string within a context, selecting a plural form.

        Same contract as lookup_plural(), restricted to entries whose
        msgctxt equals context.
        """
        if not key:
            return format_message(plural_key, args)
        if key == plural_key:
            result = self._translations.pgettext(context, key)
        else:
            result = self._translations.npgettext(context, key, plural_key, count)
        return format_message(result, args)
