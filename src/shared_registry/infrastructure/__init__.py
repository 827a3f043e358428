"""Infrastructure layer: logging, singleton patterns, selection and the registry."""
