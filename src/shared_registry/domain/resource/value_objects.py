"""Resource value objects.

A resource is anything a caller can be dispatched to (typically a server
name). Resources carry no lifecycle of their own: they are created once when
the registry is built and never mutated afterwards.
"""

from typing import Iterable, Iterator, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from shared_registry.domain.core.exceptions import ConfigurationError


class ResourceId(BaseModel):
    """Opaque name of a selectable resource."""

    model_config = ConfigDict(frozen=True)

    value: str

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate resource name."""
        if not v or not v.strip():
            raise ValueError("Resource name cannot be empty")
        return v.strip()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def of(cls, name: str) -> "ResourceId":
        """Create a resource id from a plain name."""
        return cls(value=name)


class ResourceSet(BaseModel):
    """Ordered, immutable sequence of unique resource ids."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[ResourceId, ...] = ()

    @field_validator("items")
    @classmethod
    def validate_unique(cls, v: Tuple[ResourceId, ...]) -> Tuple[ResourceId, ...]:
        """Reject duplicate resource names."""
        seen = set()
        for item in v:
            if item.value in seen:
                raise ValueError(f"Duplicate resource name: {item.value}")
            seen.add(item.value)
        return v

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "ResourceSet":
        """
        Build a resource set from plain names.

        Args:
            names: Resource names in selection order

        Returns:
            ResourceSet preserving the given order

        Raises:
            ConfigurationError: If a name is empty or duplicated
        """
        try:
            return cls(items=tuple(ResourceId.of(name) for name in names))
        except ValueError as e:
            raise ConfigurationError(f"Invalid resource set: {e}") from e

    @property
    def names(self) -> Tuple[str, ...]:
        """Resource names in order."""
        return tuple(item.value for item in self.items)

    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ResourceId]:  # type: ignore[override]
        return iter(self.items)

    def __getitem__(self, index: int) -> ResourceId:
        return self.items[index]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self.names
        return item in self.items
