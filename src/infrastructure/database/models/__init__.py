"""SQLAlchemy ORM models."""

from .series_model import SeriesModel

__all__ = ["SeriesModel"]
