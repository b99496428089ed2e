"""Series entity - the aggregate root of the catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID

from domain.entities.expansion import Expansion


@dataclass
class Series:
    """
    Entity representing a collectible card series.
    
    The identifier stays None until the store assigns one on creation, so
    `id` alone tells a pending series apart from a persisted one.
    
    Attributes:
        id: Store-assigned identifier, None until persisted
        code: Unique short code (e.g. "SV01")
        name: Unique display name
        release_year: Year the series was released
        image_url: Optional image reference
        expansions: Expansions belonging to the series, in order
        created_at: Creation timestamp, set once
        updated_at: Timestamp of the last mutation
    """

    code: str
    name: str
    release_year: int
    id: Optional[UUID] = None
    image_url: Optional[str] = None
    expansions: list[Expansion] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_persisted(self) -> bool:
        """Check if the series has been stored."""
        return self.id is not None

    @property
    def expansion_codes(self) -> list[str]:
        return [expansion.code for expansion in self.expansions]

    def __str__(self) -> str:
        return f"Series(id={self.id}, code={self.code})"
