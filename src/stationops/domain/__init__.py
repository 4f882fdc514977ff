"""Domain layer: entities and business rules."""
