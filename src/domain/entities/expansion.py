"""Expansion reference attached to a series."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.exceptions import InvalidDataException


@dataclass(frozen=True)
class Expansion:
    """
    Immutable reference to an expansion of a series.
    
    Only `code` is kept by the stored representation, so an expansion read
    back from the store carries nothing else.
    """

    code: str
    id: Optional[UUID] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    released_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not self.code or not self.code.strip():
            raise InvalidDataException("Expansion code cannot be empty")

    def __str__(self) -> str:
        return self.code
