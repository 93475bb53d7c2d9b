"""Readers-writer lock guarding a LocaleRegistry domain map.

resolve* lookups share the read side. register_domain, register_catalog,
remove_domain and clear take the write side, and only after any PO parsing
is done, so a write section is a single dict operation. A queued writer
holds back new lookups until it has published its catalog. A thread may nest
read sections.

Acquisition blocks until granted; there is no timeout.

Prohibited transitions (each raises RuntimeError):
    - read -> write upgrade: the thread would wait on its own read lock.
    - write -> read downgrade.
    - write reentry.

Python 3.13+.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Allows multiple concurrent readers OR a single exclusive writer.
    Writers have priority so a steady stream of lookups cannot starve
    a registration.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
        >>> with lock.read():
        ...     with lock.read():  # Same thread can reacquire
        ...         pass
    """

    __slots__ = ("_condition", "_pending_writers", "_read_depth", "_writer")

    def __init__(self) -> None:
        """Create an unlocked lock."""
        self._condition = threading.Condition(threading.Lock())
        # thread id -> nesting depth of its read section; one key per reader
        self._read_depth: dict[int, int] = {}
        self._writer: int | None = None
        # Registrations queued for the write side; new lookups wait behind them
        self._pending_writers = 0

    @contextmanager
    def read(self) -> Generator[None]:
        """Hold the shared side for the duration of a lookup.

        Nested read sections on one thread are allowed and count as a
        single reader.

        Raises:
            RuntimeError: If the thread is inside a write section.
        """
        self._acquire_read()
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self) -> Generator[None]:
        """Hold the exclusive side while the domain map is replaced.

        Waits for in-flight lookups to finish. Lookups arriving after this
        call started wait until the write section ends.

        Raises:
            RuntimeError: If the thread is inside a read or write section.
        """
        self._acquire_write()
        try:
            yield
        finally:
            self._release_write()

    def _readers_may_enter(self) -> bool:
        return self._writer is None and self._pending_writers == 0

    def _writer_may_enter(self) -> bool:
        return self._writer is None and not self._read_depth

    def _acquire_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._read_depth.get(me)
            if depth is not None:
                self._read_depth[me] = depth + 1
                return
            if self._writer == me:
                msg = "Cannot acquire read lock while holding write lock"
                raise RuntimeError(msg)
            self._condition.wait_for(self._readers_may_enter)
            self._read_depth[me] = 1

    def _release_read(self) -> None:
        me = threading.get_ident()
        with self._condition:
            depth = self._read_depth.get(me)
            if depth is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if depth > 1:
                self._read_depth[me] = depth - 1
                return
            del self._read_depth[me]
            if not self._read_depth:
                self._condition.notify_all()

    def _acquire_write(self) -> None:
        me = threading.get_ident()
        with self._condition:
            if me in self._read_depth:
                # Waiting here would wait on this thread's own read section.
                msg = "Cannot upgrade read lock to write lock"
                raise RuntimeError(msg)
            if self._writer == me:
                msg = "Cannot acquire write lock: already holding write lock"
                raise RuntimeError(msg)
            self._pending_writers += 1
            try:
                self._condition.wait_for(self._writer_may_enter)
                self._writer = me
            finally:
                self._pending_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if self._writer != threading.get_ident():
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._writer = None
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Threads currently inside a read section."""
        with self._condition:
            return len(self._read_depth)

    @property
    def writer_active(self) -> bool:
        """True while some thread is inside a write section."""
        with self._condition:
            return self._writer is not None

    @property
    def writers_waiting(self) -> int:
        """Writers queued for the exclusive side; non-zero holds back new readers."""
        with self._condition:
            return self._pending_writers
