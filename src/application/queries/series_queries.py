"""Read-side queries for series."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from domain.exceptions import InvalidDataException

DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class FindAllSeriesQuery:
    """
    Request for one page of series.
    
    Attributes:
        page: Zero-based page number
        page_size: Number of series per page; None lets the listing use
            its configured default
    """

    page: int = 0
    page_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.page < 0:
            raise InvalidDataException("Page must not be negative", page=self.page)
        if self.page_size is not None and self.page_size < 1:
            raise InvalidDataException("Page size must be at least 1", page_size=self.page_size)

    @classmethod
    def from_one_based(
        cls, page: int, page_size: Optional[int] = None
    ) -> "FindAllSeriesQuery":
        """
        Build a query from a one-based page number.
        
        Pages below 1 are treated as the first page.
        """
        return cls(page=page - 1 if page > 0 else 0, page_size=page_size)


@dataclass(frozen=True)
class FindSeriesByCodeQuery:
    """Request for the series holding a code."""

    code: str


@dataclass(frozen=True)
class FindSeriesByIdQuery:
    """Request for the series with an identifier."""

    id: UUID
