"""In-memory cache whose entries age out after a per-entry retention.

Entries live on a singly-linked chain. Expiration is lazy: every public
call first sweeps the chain and unlinks expired entries, then does its own
work. There is no capacity limit and no background eviction.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Optional

from core.clock import SystemClock
from core.errors import ValidationError
from core.interfaces import TimeSource

logger = logging.getLogger(__name__)


class _Entry:
    __slots__ = ("key", "value", "retention", "created_at", "next")

    def __init__(self, key: Hashable, value: Any, retention: int, created_at: int) -> None:
        self.key = key
        self.value = value
        self.retention = retention
        self.created_at = created_at
        self.next: Optional[_Entry] = None

    def is_expired(self, now: int) -> bool:
        # Boundary instant counts as expired
        return now - self.created_at >= self.retention


def _check_retention(retention_millis: int) -> int:
    if isinstance(retention_millis, bool) or not isinstance(retention_millis, int):
        raise ValidationError(f"retention_millis must be an integer, got {type(retention_millis).__name__}")
    if retention_millis < 0:
        raise ValidationError(f"retention_millis must be >= 0, got {retention_millis}")
    return retention_millis


class AgedCache:
    """Key-value cache where each entry expires `retention` ms after its last put.

    Not thread-safe. Callers sharing one instance across threads must guard
    it with a single lock.
    """

    def __init__(self, time_source: Optional[TimeSource] = None) -> None:
        self._clock: TimeSource = time_source or SystemClock()
        self._head: Optional[_Entry] = None

    def put(self, key: Hashable, value: Any, retention_millis: int) -> None:
        """Insert or refresh `key`.

        An existing live entry is updated in place and its window restarts
        from now; the old window is not extended.

        Raises:
          ValidationError if retention_millis is negative or not an integer.
          Nothing is mutated in that case.
        """
        retention = _check_retention(retention_millis)
        self._remove_expired()

        now = self._clock.millis()
        curr = self._head
        while curr is not None:
            if curr.key == key:
                curr.value = value
                curr.retention = retention
                curr.created_at = now
                return
            curr = curr.next

        entry = _Entry(key, value, retention, now)
        entry.next = self._head
        self._head = entry

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the live value for `key`, or `default`.

        A key that was never stored and a key whose entry expired look the
        same. The stored object is returned as is, not copied.
        """
        self._remove_expired()
        entry = self._find(key)
        if entry is None or entry.is_expired(self._clock.millis()):
            return default
        return entry.value

    def size(self) -> int:
        self._remove_expired()
        count = 0
        curr = self._head
        while curr is not None:
            count += 1
            curr = curr.next
        return count

    def is_empty(self) -> bool:
        self._remove_expired()
        return self._head is None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        self._remove_expired()
        entry = self._find(key)
        return entry is not None and not entry.is_expired(self._clock.millis())

    def _find(self, key: object) -> Optional[_Entry]:
        curr = self._head
        while curr is not None:
            if curr.key == key:
                return curr
            curr = curr.next
        return None

    def _remove_expired(self) -> None:
        # Single forward pass; prev tracks the last surviving entry
        now = self._clock.millis()
        prev: Optional[_Entry] = None
        curr = self._head
        removed = 0
        while curr is not None:
            if curr.is_expired(now):
                if prev is None:
                    self._head = curr.next
                else:
                    prev.next = curr.next
                removed += 1
            else:
                prev = curr
            curr = curr.next

        if removed:
            logger.debug("Purged %d expired cache entries", removed)
