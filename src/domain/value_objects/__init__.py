"""Domain Value Objects - Immutable objects without identity."""

from .page import Page

__all__ = ["Page"]
