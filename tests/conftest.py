"""Pytest configuration for the domainlex test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples (fast feedback, derandomized)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are skipped unless run via ``pytest -m fuzz``.

Shared fixtures build PO trees under tmp_path laid out as
<root>/<language>/<domain>.po.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.po_sources import FR_DEFAULT_PO, FR_EXTRAS_PO, WritePo

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive concurrency/property tests (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Intensive test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# PO FIXTURES
# =============================================================================


@pytest.fixture
def locales_root(tmp_path: Path) -> Path:
    """Empty files root."""
    root = tmp_path / "locales"
    root.mkdir()
    return root


@pytest.fixture
def write_po(locales_root: Path) -> WritePo:
    """Factory writing <root>/<language>/<domain>.po and returning its path."""

    def _write(language: str, domain: str, content: str) -> Path:
        directory = locales_root / language
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{domain}.po"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fr_root(write_po: WritePo, locales_root: Path) -> Path:
    """Files root with fr/default.po and fr/extras.po."""
    write_po("fr", "default", FR_DEFAULT_PO)
    write_po("fr", "extras", FR_EXTRAS_PO)
    return locales_root
