"""Page value object for paginated reads."""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Immutable slice of a larger result set.
    
    Attributes:
        items: Items on this page
        page: Zero-based page number
        page_size: Requested page size
        total_items: Number of items across all pages
    """

    items: list[T] = field(default_factory=list)
    page: int = 0
    page_size: int = 50
    total_items: int = 0

    def __post_init__(self) -> None:
        """Validate paging constraints."""
        if self.page < 0:
            raise ValueError("Page number cannot be negative")
        if self.page_size < 1:
            raise ValueError("Page size must be at least 1")
        if self.total_items < 0:
            raise ValueError("Total items cannot be negative")

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_items / self.page_size)

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages

    def map(self, fn: Callable[[T], R]) -> "Page[R]":
        """Convert every item, keeping the paging metadata."""
        return Page(
            items=[fn(item) for item in self.items],
            page=self.page,
            page_size=self.page_size,
            total_items=self.total_items,
        )

    def __len__(self) -> int:
        return len(self.items)
