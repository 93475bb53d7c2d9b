"""Quickstart - Resolving strings with LocaleRegistry.

Builds a small locales tree in a temporary directory, registers two domains
for French and walks through the resolve* call shapes.

Layout used:
    <root>/fr/default.po
    <root>/fr/extras.po

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from domainlex import LocaleRegistry

DEFAULT_PO = r'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\n"
"Plural-Forms: nplurals=2; plural=(n > 1);\n"

msgid "Hello"
msgstr "Bonjour"

msgid "Hello, %(name)s"
msgstr "Bonjour, %(name)s"

msgid "%d file"
msgid_plural "%d files"
msgstr[0] "%d fichier"
msgstr[1] "%d fichiers"

msgctxt "menu"
msgid "Open"
msgstr "Ouvrir"

msgctxt "status"
msgid "Open"
msgstr "Ouvert"
'''

EXTRAS_PO = r'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\n"

msgid "Save"
msgstr "Enregistrer"
'''


def write_tree(root: Path) -> None:
    """Write the French catalogs under root."""
    (root / "fr").mkdir(parents=True)
    (root / "fr" / "default.po").write_text(DEFAULT_PO, encoding="utf-8")
    (root / "fr" / "extras.po").write_text(EXTRAS_PO, encoding="utf-8")


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        write_tree(root)

        registry = LocaleRegistry(str(root), "fr")
        registry.register_domain("default")
        registry.register_domain("extras")
        print(registry)

        print("=" * 60)
        print("Singular")
        print("=" * 60)
        print(registry.resolve("Hello"))
        print(registry.resolve("Goodbye"))  # untranslated: echoed
        print(registry.resolve("Hello, %(name)s", {"name": "Ada"}))

        print("\n" + "=" * 60)
        print("Plural (French: 0 and 1 are singular)")
        print("=" * 60)
        for count in (0, 1, 2, 10):
            print(registry.resolve_n("%d file", "%d files", count, count))

        print("\n" + "=" * 60)
        print("Context and domains")
        print("=" * 60)
        print(registry.resolve_c("Open", "menu"))
        print(registry.resolve_c("Open", "status"))
        print(registry.resolve_d("extras", "Save"))
        print(registry.resolve_d("admin", "Save"))  # unregistered domain: echoed

        summary = registry.get_load_summary()
        print(f"\n{summary}")


if __name__ == "__main__":
    main()
