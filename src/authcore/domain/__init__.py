"""Domain layer - credential value objects with no framework dependencies."""
