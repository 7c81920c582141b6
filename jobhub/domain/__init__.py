"""Domain layer: entities and error kinds."""
