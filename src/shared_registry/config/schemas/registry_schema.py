"""Registry configuration schemas."""
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


DEFAULT_RESOURCES = ["ServerI", "ServerII", "ServerIII", "ServerIV", "ServerV"]


class SelectionAlgorithm(str, Enum):
    """Available resource selection algorithms."""
    RANDOM = "random"
    ROUND_ROBIN = "round_robin"
    WEIGHTED_RANDOM = "weighted_random"


class RegistryConfig(BaseModel):
    """Shared registry configuration."""

    resources: List[str] = Field(
        default_factory=lambda: list(DEFAULT_RESOURCES),
        description="Ordered resource names available for selection",
    )
    selection_policy: SelectionAlgorithm = Field(
        SelectionAlgorithm.RANDOM, description="Algorithm used to pick the next resource"
    )
    weights: Dict[str, int] = Field(
        default_factory=dict, description="Per-resource weights for weighted selection"
    )
    seed: Optional[int] = Field(None, description="Seed for random selection policies")

    @field_validator("resources")
    @classmethod
    def validate_resources(cls, v: List[str]) -> List[str]:
        """Validate resource names."""
        names = []
        for name in v:
            if not name or not name.strip():
                raise ValueError("Resource name cannot be empty")
            names.append(name.strip())
        if len(names) != len(set(names)):
            raise ValueError("Resource names must be unique")
        return names

    @field_validator("selection_policy", mode="before")
    @classmethod
    def normalize_selection_policy(cls, v):
        """Accept policy names case-insensitively."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("weights")
    @classmethod
    def validate_weights(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Validate resource weights."""
        for name, weight in v.items():
            if weight <= 0:
                raise ValueError(f"Weight for '{name}' must be positive")
        return v

    @model_validator(mode="after")
    def validate_weight_targets(self) -> "RegistryConfig":
        """Weights may only refer to configured resources."""
        unknown = sorted(set(self.weights) - set(self.resources))
        if unknown:
            raise ValueError(f"Weights reference unknown resources: {unknown}")
        return self
