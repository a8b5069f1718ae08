"""Domain layer: entities and errors shared across the application."""
