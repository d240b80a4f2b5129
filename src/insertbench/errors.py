"""
Exceptions raised by the sorting engine.
"""

from __future__ import annotations

__all__ = ["InvalidArgumentError"]


class InvalidArgumentError(ValueError):
    """Raised when a sort entry point receives no array (``None``)."""
