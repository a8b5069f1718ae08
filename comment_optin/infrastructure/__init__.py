"""Infrastructure layer: persistence, hooks and security helpers."""
