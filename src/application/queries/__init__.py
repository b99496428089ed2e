"""Read-side queries."""

from .series_queries import (
    DEFAULT_PAGE_SIZE,
    FindAllSeriesQuery,
    FindSeriesByCodeQuery,
    FindSeriesByIdQuery,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FindAllSeriesQuery",
    "FindSeriesByCodeQuery",
    "FindSeriesByIdQuery",
]
