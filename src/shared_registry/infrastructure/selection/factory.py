"""Selection policy factory."""

from typing import Callable, Dict

from shared_registry.config.schemas import RegistryConfig, SelectionAlgorithm
from shared_registry.domain.core.exceptions import ConfigurationError
from shared_registry.infrastructure.logging import get_logger
from shared_registry.infrastructure.selection.policies import (
    RandomSelectionPolicy,
    RoundRobinSelectionPolicy,
    SelectionPolicy,
    WeightedRandomSelectionPolicy,
)

_POLICY_BUILDERS: Dict[SelectionAlgorithm, Callable[[RegistryConfig], SelectionPolicy]] = {
    SelectionAlgorithm.RANDOM: lambda config: RandomSelectionPolicy(seed=config.seed),
    SelectionAlgorithm.ROUND_ROBIN: lambda config: RoundRobinSelectionPolicy(),
    SelectionAlgorithm.WEIGHTED_RANDOM: lambda config: WeightedRandomSelectionPolicy(
        weights=config.weights, seed=config.seed
    ),
}


def create_selection_policy(config: RegistryConfig) -> SelectionPolicy:
    """
    Create the selection policy named by the registry configuration.

    Args:
        config: Registry configuration

    Returns:
        New selection policy instance

    Raises:
        ConfigurationError: If the algorithm has no registered policy
    """
    builder = _POLICY_BUILDERS.get(config.selection_policy)
    if builder is None:
        available = ", ".join(algorithm.value for algorithm in _POLICY_BUILDERS)
        raise ConfigurationError(
            f"Unsupported selection policy '{config.selection_policy}'. "
            f"Available policies: {available}"
        )
    policy = builder(config)
    get_logger(__name__).debug("Created selection policy", policy=policy.name)
    return policy
