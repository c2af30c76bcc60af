"""
Identity Allocation Module

Issues monotonically increasing integer identifiers for accounts. Identifiers
are never reused and are not persisted: a new process starts counting again
from the configured start value.
"""

import logging
from threading import Lock
from typing import Optional

from .config import get_config


class AccountIdAllocator:
    """Monotonic id counter, optionally guarded by a lock"""

    def __init__(self, start: int = 0, thread_safe: bool = True):
        self._start = start
        self._current = start
        self._lock: Optional[Lock] = Lock() if thread_safe else None
        self.logger = logging.getLogger("bankalpy.identity")

    @property
    def thread_safe(self) -> bool:
        return self._lock is not None

    @property
    def current(self) -> int:
        """Last issued identifier (the start value before any allocation)"""
        return self._current

    @property
    def count(self) -> int:
        """Number of identifiers issued so far"""
        return self._current - self._start

    def allocate(self) -> int:
        """Issue the next identifier"""
        if self._lock is None:
            self._current += 1
            new_id = self._current
        else:
            with self._lock:
                self._current += 1
                new_id = self._current
        self.logger.debug(f"Allocated account id {new_id}")
        return new_id


# Process-wide allocator used when an Account is built without one
_default_allocator: Optional[AccountIdAllocator] = None
_default_allocator_lock = Lock()


def get_default_allocator() -> AccountIdAllocator:
    """Get the process-wide allocator, creating it from config on first use"""
    global _default_allocator
    with _default_allocator_lock:
        if _default_allocator is None:
            settings = get_config()
            _default_allocator = AccountIdAllocator(
                start=settings.account_id_start,
                thread_safe=settings.account_id_thread_safe
            )
        return _default_allocator


def set_default_allocator(allocator: AccountIdAllocator) -> None:
    """Replace the process-wide allocator"""
    global _default_allocator
    with _default_allocator_lock:
        _default_allocator = allocator
