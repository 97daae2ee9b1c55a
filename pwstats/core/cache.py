"""
Statistics Cache
=================

Tri-slot memo store for the statistics engine. Each slot (``config``,
``entropy``, ``dictionary``) holds the last computed stats object and a
validity flag; a slot's stats are only meaningful while it is valid.

Slots are replaced wholesale, never mutated in place. Invalidation is
all-or-nothing: any change to the owning configuration can affect every
derived figure.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Optional

from pwstats.core.errors import CacheSlotError

SLOT_NAMES: tuple[str, ...] = ("config", "entropy", "dictionary")


@dataclass(slots=True)
class CacheSlot:
    """A single memoised result and whether it may be served."""

    stats: Optional[Any] = None
    valid: bool = False


class StatsCache:
    """Invalidatable cache with one slot per statistics domain.

    ``lock`` is re-entrant so a computation that fills one slot may read
    another (entropy stats depend on config stats) while the caller holds
    it across its whole check-compute-store sequence.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._slots: dict[str, CacheSlot] = {name: CacheSlot() for name in SLOT_NAMES}

    def slot(self, name: str) -> CacheSlot:
        try:
            return self._slots[name]
        except KeyError:
            raise CacheSlotError(name) from None

    def get(self, name: str) -> Optional[Any]:
        """Return the slot's stats if valid, else ``None``."""
        with self.lock:
            slot = self.slot(name)
            return slot.stats if slot.valid else None

    def is_valid(self, name: str) -> bool:
        with self.lock:
            return self.slot(name).valid

    def store(self, name: str, stats: Any) -> Any:
        """Replace the slot with *stats*, mark it valid and return *stats*."""
        with self.lock:
            self.slot(name)
            self._slots[name] = CacheSlot(stats=stats, valid=True)
            return stats

    def invalidate(self, *names: str) -> None:
        """Invalidate the named slots, or every slot when none are named."""
        with self.lock:
            for name in names or SLOT_NAMES:
                self.slot(name)
                self._slots[name] = CacheSlot()
