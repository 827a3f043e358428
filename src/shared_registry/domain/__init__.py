"""Domain layer: value objects, lifecycle states and domain errors."""
