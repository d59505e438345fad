"""Service layer for documentation search."""
