"""Core business logic layer.

Subpackages:
- shopping: normalizing, aisle classification, grocery list building and export
- pantry: pantry and staple checks

Everything here is pure and synchronous; the API layer wraps it.
"""
__all__ = ["shopping", "pantry"]
