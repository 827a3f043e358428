"""
Resource selection package.

Components:
- SelectionPolicy: Base class for selection algorithms
- RandomSelectionPolicy, RoundRobinSelectionPolicy, WeightedRandomSelectionPolicy:
  Available implementations
- SelectionStats: Per-resource selection counters
- create_selection_policy: Builds a policy from registry configuration
"""

from .factory import create_selection_policy
from .policies import (
    RandomSelectionPolicy,
    RoundRobinSelectionPolicy,
    SelectionPolicy,
    WeightedRandomSelectionPolicy,
)
from .stats import SelectionStats

__all__ = [
    "SelectionPolicy",
    "RandomSelectionPolicy",
    "RoundRobinSelectionPolicy",
    "WeightedRandomSelectionPolicy",
    "SelectionStats",
    "create_selection_policy",
]
