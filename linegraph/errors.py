from __future__ import annotations


class GraphDataError(ValueError):
    """Raised when graph input cannot be coerced into a numeric series."""
