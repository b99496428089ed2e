"""Domain Repository Interfaces - Abstract definitions."""

from .series_repository import ISeriesRepository

__all__ = ["ISeriesRepository"]
