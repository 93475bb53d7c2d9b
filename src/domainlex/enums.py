"""Enumerations for domainlex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LoadStatus(StrEnum):
    """Outcome of loading one domain catalog from disk.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """File found and parsed."""

    NOT_FOUND = "not_found"
    """No file at the resolved path; the domain behaves as an empty catalog."""

    ERROR = "error"
    """File present but unreadable or malformed; the domain behaves as empty."""


__all__ = [
    "LoadStatus",
]
