"""Single-slot metadata cache.

Holds the most recently extracted ``Metadata``.  Each successful
extraction overwrites it; nothing clears it implicitly.  All access goes
through a lock so concurrent extractions cannot interleave writes.
"""

from __future__ import annotations

import threading
from typing import Callable

from models import Metadata


class MetadataCache:
    """Thread-safe holder for at most one ``Metadata`` value."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._value: Metadata | None = None

    def get(self) -> Metadata | None:
        with self._lock:
            return self._value

    def store(self, metadata: Metadata) -> None:
        with self._lock:
            self._value = metadata

    def clear(self) -> None:
        with self._lock:
            self._value = None

    def update(self, producer: Callable[[], Metadata | None]) -> Metadata | None:
        """
        Run *producer* under the cache lock and store its result.

        A None result or an exception leaves the current value untouched.

        Returns:
            Whatever *producer* returned.
        """
        with self._lock:
            metadata = producer()
            if metadata is not None:
                self._value = metadata
            return metadata

    @property
    def variant(self) -> str | None:
        """Variant tag of the cached value, or None when empty."""
        value = self.get()
        return value.variant if value is not None else None
