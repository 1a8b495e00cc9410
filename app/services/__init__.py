"""Services wrapping the checker engine."""

from .checker import CheckerService

__all__ = ["CheckerService"]
