from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when generator arguments cannot describe a valid graph."""
