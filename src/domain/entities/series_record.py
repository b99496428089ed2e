"""Persistence-shaped projection of a series."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass
class SeriesRecord:
    """
    Stored representation of a Series.
    
    Mirrors the entity except for `expansions`, which holds the expansion
    codes flattened into one delimited string (None when there are none).
    `created_at` is None on update records; the store keeps the original.
    """

    code: str
    name: str
    release_year: int
    id: Optional[UUID] = None
    image_url: Optional[str] = None
    expansions: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __str__(self) -> str:
        return f"SeriesRecord(id={self.id}, code={self.code})"
