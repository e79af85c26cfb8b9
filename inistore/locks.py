from __future__ import annotations

import contextlib
import logging
import os
import threading
import time
from pathlib import Path
from typing import IO, Iterator

if os.name == "nt":  # pragma: no cover - platform specific
    import msvcrt
else:  # pragma: no cover - platform specific
    import fcntl

from .errors import LockTimeout, StorageError
from .paths import ensure_dir, lock_path_for

logger = logging.getLogger(__name__)


class PathLockRegistry:
    """
    Provides a stable lock per normalized file path to avoid global contention.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def lock_for(self, path: Path) -> threading.Lock:
        key = os.path.normcase(str(path.resolve()))
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.Lock()
                self._locks[key] = lock
            return lock


GLOBAL_PATH_LOCKS = PathLockRegistry()


def _try_os_lock(fh: IO[str]) -> bool:
    if os.name == "nt":  # pragma: no cover - platform specific
        fh.seek(0)
        try:
            msvcrt.locking(fh.fileno(), msvcrt.LK_NBLCK, 1)
        except OSError:
            return False
        return True
    try:
        fcntl.flock(fh.fileno(), fcntl.LOCK_EX | fcntl.LOCK_NB)
    except BlockingIOError:
        return False
    return True


def _release_os_lock(fh: IO[str]) -> None:
    if os.name == "nt":  # pragma: no cover - platform specific
        fh.seek(0)
        msvcrt.locking(fh.fileno(), msvcrt.LK_UNLCK, 1)
    else:  # pragma: no cover - platform specific
        fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


def _remaining(deadline: float | None) -> float | None:
    if deadline is None:
        return None
    return max(0.0, deadline - time.monotonic())


@contextlib.contextmanager
def _os_file_lock(path: Path, deadline: float | None, poll_interval: float) -> Iterator[None]:
    lock_path = lock_path_for(path)
    try:
        ensure_dir(lock_path.parent)
        fh = lock_path.open("a")
    except OSError as e:
        raise StorageError(f"Cannot open lock file {lock_path}: {e}") from e

    with fh:
        while not _try_os_lock(fh):
            remaining = _remaining(deadline)
            if remaining is not None and remaining <= 0:
                logger.warning("INI LOCK: timed out waiting for %s", lock_path)
                raise LockTimeout(f"Timed out waiting for lock on {path}")
            time.sleep(poll_interval if remaining is None else min(poll_interval, remaining))
        try:
            yield
        finally:
            _release_os_lock(fh)


@contextlib.contextmanager
def exclusive_access(
    path: Path,
    *,
    timeout: float | None = 10.0,
    poll_interval: float = 0.05,
    use_lock_file: bool = True,
    registry: PathLockRegistry = GLOBAL_PATH_LOCKS,
) -> Iterator[None]:
    """
    Hold exclusive access to `path` for the duration of the block.

    Threads in this process serialize on a per-path lock; other processes are
    kept out by an advisory lock on a sidecar `<name>.lock` file. Both waits
    share one deadline. Raises LockTimeout when it passes.
    """
    deadline = None if timeout is None else time.monotonic() + timeout

    lock = registry.lock_for(path)
    acquired = lock.acquire() if timeout is None else lock.acquire(timeout=timeout)
    if not acquired:
        logger.warning("INI LOCK: timed out waiting for in-process lock on %s", path)
        raise LockTimeout(f"Timed out waiting for lock on {path}")

    try:
        logger.debug("INI LOCK: acquired %s", path)
        if use_lock_file:
            with _os_file_lock(path, deadline, poll_interval):
                yield
        else:
            yield
    finally:
        lock.release()
        logger.debug("INI LOCK: released %s", path)
