"""In-process implementations of domain ports."""

from .in_memory_series_repository import InMemorySeriesRepository

__all__ = ["InMemorySeriesRepository"]
