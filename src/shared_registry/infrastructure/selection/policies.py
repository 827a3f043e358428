"""Resource selection policies."""

import random
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from shared_registry.config.schemas import SelectionAlgorithm
from shared_registry.domain.core.exceptions import EmptyResourceSetError
from shared_registry.domain.resource import ResourceId, ResourceSet


class SelectionPolicy(ABC):
    """
    Picks one resource from a resource set per call.

    Implementations keep their mutable state (counter or random source)
    private and update it under their own lock, so a single policy can be
    shared by any number of threads.
    """

    algorithm: SelectionAlgorithm

    def __init__(self):
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self.algorithm.value

    def select(self, resources: ResourceSet) -> ResourceId:
        """
        Select one resource.

        Raises:
            EmptyResourceSetError: If resources is empty
        """
        if resources.is_empty():
            raise EmptyResourceSetError()
        return self._select(resources)

    @abstractmethod
    def _select(self, resources: ResourceSet) -> ResourceId:
        """Select from a non-empty resource set."""


class RandomSelectionPolicy(SelectionPolicy):
    """Uniform random selection with replacement."""

    algorithm = SelectionAlgorithm.RANDOM

    def __init__(self, seed: Optional[int] = None):
        super().__init__()
        self._random = random.Random(seed)

    def _select(self, resources: ResourceSet) -> ResourceId:
        with self._lock:
            index = self._random.randrange(len(resources))
        return resources[index]


class RoundRobinSelectionPolicy(SelectionPolicy):
    """Cycles through the resources in configured order."""

    algorithm = SelectionAlgorithm.ROUND_ROBIN

    def __init__(self):
        super().__init__()
        self._counter = 0

    def _select(self, resources: ResourceSet) -> ResourceId:
        with self._lock:
            index = self._counter % len(resources)
            self._counter += 1
        return resources[index]


class WeightedRandomSelectionPolicy(SelectionPolicy):
    """Random selection proportional to per-resource weights.

    Resources without an explicit weight count as weight 1.
    """

    algorithm = SelectionAlgorithm.WEIGHTED_RANDOM

    def __init__(self, weights: Optional[Dict[str, int]] = None, seed: Optional[int] = None):
        super().__init__()
        for name, weight in (weights or {}).items():
            if weight <= 0:
                raise ValueError(f"Weight for '{name}' must be positive")
        self._weights = dict(weights or {})
        self._random = random.Random(seed)

    @property
    def weights(self) -> Dict[str, int]:
        return dict(self._weights)

    def _select(self, resources: ResourceSet) -> ResourceId:
        weights = [self._weights.get(name, 1) for name in resources.names]
        with self._lock:
            (chosen,) = self._random.choices(resources.items, weights=weights, k=1)
        return chosen
