"""Read-only constants shared across the generator."""
