"""Tests for the RWLock guarding the registry domain map.

Tests verify:
- Multiple concurrent readers
- Exclusive writer access
- Writer preference (waiting writer blocks new readers)
- Reentrant read locks
- Rejected upgrade, downgrade and write reentry
- Monitoring snapshots
- Error handling on unbalanced release
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from domainlex.runtime.rwlock import RWLock


class TestRWLockBasics:
    """Test basic RWLock functionality."""

    def test_single_reader(self) -> None:
        """Single reader can acquire lock."""
        lock = RWLock()
        acquired = False

        with lock.read():
            acquired = True

        assert acquired

    def test_single_writer(self) -> None:
        """Single writer can acquire lock."""
        lock = RWLock()
        acquired = False

        with lock.write():
            acquired = True

        assert acquired

    def test_readers_overlap(self) -> None:
        """Two readers hold the lock at the same time."""
        lock = RWLock()
        both_inside = threading.Barrier(2, timeout=2.0)

        def reader() -> None:
            with lock.read():
                # Barrier only passes if both threads are inside the read section
                both_inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert not both_inside.broken

    def test_write_blocks_readers(self) -> None:
        """Active writer blocks readers until released."""
        lock = RWLock()
        writer_active = threading.Event()
        writer_release = threading.Event()
        reader_done = threading.Event()

        def writer() -> None:
            with lock.write():
                writer_active.set()
                writer_release.wait()

        def reader() -> None:
            with lock.read():
                reader_done.set()

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        writer_active.wait()

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        time.sleep(0.02)
        assert not reader_done.is_set()

        writer_release.set()
        writer_thread.join()
        reader_thread.join()
        assert reader_done.is_set()

    def test_read_blocks_writers(self) -> None:
        """Active reader blocks writers until released."""
        lock = RWLock()
        reader_active = threading.Event()
        reader_release = threading.Event()
        writer_done = threading.Event()

        def reader() -> None:
            with lock.read():
                reader_active.set()
                reader_release.wait()

        def writer() -> None:
            with lock.write():
                writer_done.set()

        reader_thread = threading.Thread(target=reader)
        reader_thread.start()
        reader_active.wait()

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        time.sleep(0.02)
        assert not writer_done.is_set()

        reader_release.set()
        reader_thread.join()
        writer_thread.join()
        assert writer_done.is_set()


class TestRWLockReentrancy:
    """Test reentrant read lock behavior and lock acquisition prohibitions."""

    def test_same_thread_multiple_read_locks(self) -> None:
        """Same thread can acquire read lock multiple times (reentrant)."""
        lock = RWLock()
        depth = 0

        with lock.read():
            depth += 1
            with lock.read():
                depth += 1
                with lock.read():
                    depth += 1

        assert depth == 3

    def test_reentrant_reader_counts_once(self) -> None:
        """A reentrant reader is one reader."""
        lock = RWLock()

        with lock.read(), lock.read():
            assert lock.reader_count == 1

        assert lock.reader_count == 0

    def test_read_to_write_upgrade_rejected(self) -> None:
        """Read-to-write lock upgrade raises RuntimeError."""
        lock = RWLock()

        with lock.read(), pytest.raises(
            RuntimeError,
            match="Cannot upgrade read lock to write lock",
        ), lock.write():
            pass

    def test_write_to_write_reentry_rejected(self) -> None:
        """Write-to-write reentry raises RuntimeError."""
        lock = RWLock()

        with lock.write(), pytest.raises(
            RuntimeError,
            match="Cannot acquire write lock: already holding write lock",
        ), lock.write():
            pass

    def test_write_to_read_downgrade_rejected(self) -> None:
        """Write-to-read downgrade raises RuntimeError."""
        lock = RWLock()

        with lock.write(), pytest.raises(
            RuntimeError,
            match="Cannot acquire read lock while holding write lock",
        ), lock.read():
            pass

    def test_lock_usable_after_rejected_upgrade(self) -> None:
        """A rejected upgrade leaves the lock state intact."""
        lock = RWLock()

        with lock.read():
            with pytest.raises(RuntimeError), lock.write():
                pass
            assert lock.writers_waiting == 0

        with lock.write():
            assert lock.writer_active


class TestRWLockWriterPreference:
    """Test writer preference to prevent starvation."""

    def test_waiting_writer_blocks_new_readers(self) -> None:
        """Waiting writers prevent new readers (writer preference)."""
        lock = RWLock()
        reader1_acquired = threading.Event()
        reader1_release = threading.Event()
        order: list[str] = []
        order_lock = threading.Lock()

        def reader1() -> None:
            with lock.read():
                reader1_acquired.set()
                reader1_release.wait()

        def writer() -> None:
            with lock.write():
                with order_lock:
                    order.append("writer")

        def reader2() -> None:
            with lock.read():
                with order_lock:
                    order.append("reader2")

        thread_reader1 = threading.Thread(target=reader1)
        thread_reader1.start()
        reader1_acquired.wait()

        thread_writer = threading.Thread(target=writer)
        thread_writer.start()
        while lock.writers_waiting == 0:
            time.sleep(0.001)

        thread_reader2 = threading.Thread(target=reader2)
        thread_reader2.start()
        time.sleep(0.02)
        assert order == []

        reader1_release.set()
        thread_reader1.join()
        thread_writer.join()
        thread_reader2.join()

        assert order == ["writer", "reader2"]


class TestRWLockMonitoring:
    """Test point-in-time monitoring properties."""

    def test_idle_lock(self) -> None:
        """Fresh lock reports no activity."""
        lock = RWLock()

        assert lock.reader_count == 0
        assert lock.writer_active is False
        assert lock.writers_waiting == 0

    def test_writer_active_inside_write(self) -> None:
        """writer_active is True only inside a write section."""
        lock = RWLock()

        with lock.write():
            assert lock.writer_active is True
        assert lock.writer_active is False

    def test_reader_count_inside_read(self) -> None:
        """reader_count tracks the current thread."""
        lock = RWLock()

        with lock.read():
            assert lock.reader_count == 1
        assert lock.reader_count == 0


class TestRWLockConcurrency:
    """Test high-concurrency scenarios."""

    def test_stress_test(self) -> None:
        """Stress test with many readers and writers."""
        lock = RWLock()
        shared_value = 0
        read_count = 0
        count_lock = threading.Lock()

        def reader() -> None:
            nonlocal read_count
            with lock.read():
                _ = shared_value
                with count_lock:
                    read_count += 1

        def writer() -> None:
            nonlocal shared_value
            with lock.write():
                shared_value += 1

        with ThreadPoolExecutor(max_workers=50) as executor:
            futures = [executor.submit(reader) for _ in range(100)]
            futures.extend(executor.submit(writer) for _ in range(10))
            for future in futures:
                future.result()

        assert shared_value == 10
        assert read_count == 100


class TestRWLockErrors:
    """Test error handling."""

    def test_release_read_without_acquire_raises(self) -> None:
        """Releasing read lock without acquiring raises RuntimeError."""
        lock = RWLock()
        with pytest.raises(RuntimeError, match="does not hold read lock"):
            lock._release_read()

    def test_release_write_without_acquire_raises(self) -> None:
        """Releasing write lock without acquiring raises RuntimeError."""
        lock = RWLock()
        with pytest.raises(RuntimeError, match="does not hold write lock"):
            lock._release_write()

    def test_exception_inside_read_releases_lock(self) -> None:
        """Exceptions inside the read section release the lock."""
        lock = RWLock()

        with pytest.raises(KeyError), lock.read():
            raise KeyError("boom")

        assert lock.reader_count == 0
        with lock.write():
            pass
