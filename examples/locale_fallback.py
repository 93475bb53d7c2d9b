"""Language Fallback Example - en_US falling back to en.

A registry for "en_US" looks for <root>/en_US/<domain>.po first and, when a
domain has no file there, uses <root>/en/<domain>.po. Each domain falls back
independently. A domain with no file at all registers an empty catalog and
every lookup against it echoes the input.

Python 3.13+.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from domainlex import LocaleRegistry

EN_DEFAULT_PO = r'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\n"

msgid "Color"
msgstr "Colour"
'''

EN_US_MENU_PO = r'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\n"

msgid "Trash"
msgstr "Trash can"
'''


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "en").mkdir()
        (root / "en_US").mkdir()
        (root / "en" / "default.po").write_text(EN_DEFAULT_PO, encoding="utf-8")
        (root / "en_US" / "menu.po").write_text(EN_US_MENU_PO, encoding="utf-8")

        registry = LocaleRegistry(str(root), "en_US")
        for domain in ("default", "menu", "help"):
            registry.register_domain(domain)

        print(registry.resolve("Color"))  # from en/default.po
        print(registry.resolve_d("menu", "Trash"))  # from en_US/menu.po
        print(registry.resolve_d("help", "Manual"))  # no file: echoed

        for result in registry.get_load_summary().results:
            marker = " (fallback)" if result.used_fallback else ""
            print(f"  {result.domain}: {result.status}{marker} {result.path}")


if __name__ == "__main__":
    main()
