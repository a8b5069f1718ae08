"""Application layer orchestrating domain entities and repositories."""
