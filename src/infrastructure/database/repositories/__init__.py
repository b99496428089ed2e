"""Repository implementations."""

from .sqlalchemy_series_repository import SQLAlchemySeriesRepository

__all__ = ["SQLAlchemySeriesRepository"]
