"""Thread Safety Example - Sharing one LocaleRegistry between threads.

LocaleRegistry guards its domain map with a reader/writer lock:

- resolve* calls take the read side and run concurrently.
- register_domain() parses the PO file first, then takes the write side
  only to publish the catalog. Readers see the previous catalog or the new
  one, never a partial state.

Demonstrates:
1. Register at startup, resolve from a thread pool
2. Registering new domains while other threads keep resolving

Python 3.13+.
"""

from __future__ import annotations

import tempfile
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from domainlex import LocaleRegistry

PO_TEMPLATE = r'''msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\n"

msgid "%%d item"
msgid_plural "%%d items"
msgstr[0] "%%d item (%(domain)s)"
msgstr[1] "%%d items (%(domain)s)"
'''


def write_domains(root: Path, domains: list[str]) -> None:
    (root / "de").mkdir(parents=True, exist_ok=True)
    for domain in domains:
        source = PO_TEMPLATE % {"domain": domain}
        (root / "de" / f"{domain}.po").write_text(source, encoding="utf-8")


def example_1_startup_registration(root: Path) -> None:
    """Example 1: Register during startup, then share the registry for reads."""
    print("=" * 60)
    print("Example 1: Startup registration, pooled reads")
    print("=" * 60)

    registry = LocaleRegistry(str(root), "de")
    registry.register_domain("default")

    with ThreadPoolExecutor(max_workers=4) as executor:
        results = list(
            executor.map(
                lambda n: registry.resolve_n("%d item", "%d items", n, n), range(6)
            )
        )

    for result in results:
        print(f"  {result}")


def example_2_dynamic_registration(root: Path) -> None:
    """Example 2: Writers add domains while readers keep resolving."""
    print("\n" + "=" * 60)
    print("Example 2: Dynamic registration")
    print("=" * 60)

    registry = LocaleRegistry(str(root), "de")
    registry.register_domain("default")
    stop = threading.Event()
    reads = 0
    reads_lock = threading.Lock()

    def reader() -> None:
        nonlocal reads
        while not stop.is_set():
            registry.resolve_n("%d item", "%d items", 2, 2)
            with reads_lock:
                reads += 1

    readers = [threading.Thread(target=reader) for _ in range(3)]
    for thread in readers:
        thread.start()

    for domain in ("shop", "admin", "help"):
        registry.register_domain(domain)
        sample = registry.resolve_nd(domain, "%d item", "%d items", 1, 1)
        print(f"  [writer] registered {domain}: {sample}")

    stop.set()
    for thread in readers:
        thread.join()

    print(f"  [readers] {reads} lookups completed during registration")
    print(f"  domains: {', '.join(registry.domain_names())}")


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        locales = Path(tmp)
        write_domains(locales, ["default", "shop", "admin", "help"])
        example_1_startup_registration(locales)
        example_2_dynamic_registration(locales)
