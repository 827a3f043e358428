"""Selection statistics tracking."""

import threading
from collections import Counter
from typing import Dict

from shared_registry.domain.resource import ResourceId


class SelectionStats:
    """Thread-safe count of how often each resource was selected."""

    def __init__(self):
        self._counts: Counter = Counter()
        self._total = 0
        self._lock = threading.Lock()

    def record(self, resource: ResourceId) -> None:
        with self._lock:
            self._counts[resource.value] += 1
            self._total += 1

    @property
    def total(self) -> int:
        return self._total

    def count_for(self, name: str) -> int:
        with self._lock:
            return self._counts[name]

    def snapshot(self) -> Dict[str, int]:
        """Copy of the per-resource counts."""
        with self._lock:
            return dict(self._counts)
