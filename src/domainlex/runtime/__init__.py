"""Runtime pieces shared by the registry: catalog lookup, formatting, locking."""

from .catalog import Catalog
from .formatting import format_message
from .rwlock import RWLock

__all__ = [
    "Catalog",
    "RWLock",
    "format_message",
]
