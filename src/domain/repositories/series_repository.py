"""Series repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from domain.entities import SeriesRecord
from domain.value_objects import Page


class ISeriesRepository(ABC):
    """
    Abstract repository interface for stored series.
    
    This interface defines the contract for series persistence.
    Concrete implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def exists_by_id(self, series_id: UUID) -> bool:
        """Check if a series with this identifier is stored."""
        pass

    @abstractmethod
    async def exists_by_code(self, code: str, exclude_id: Optional[UUID] = None) -> bool:
        """
        Check if a series holds this code.
        
        Args:
            code: Series code
            exclude_id: Identifier of a series to ignore in the lookup
            
        Returns:
            True if another series already holds the code
        """
        pass

    @abstractmethod
    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        """
        Check if a series holds this name.
        
        Args:
            name: Series name
            exclude_id: Identifier of a series to ignore in the lookup
            
        Returns:
            True if another series already holds the name
        """
        pass

    @abstractmethod
    async def find_by_id(self, series_id: UUID) -> Optional[SeriesRecord]:
        """Retrieve a stored series by identifier, None if missing."""
        pass

    @abstractmethod
    async def find_by_code(self, code: str) -> Optional[SeriesRecord]:
        """Retrieve a stored series by code, None if missing."""
        pass

    @abstractmethod
    async def find_all(self, page: int, page_size: int) -> Page[SeriesRecord]:
        """
        Retrieve one page of stored series.
        
        Args:
            page: Zero-based page number
            page_size: Maximum number of records on the page
            
        Returns:
            Page of SeriesRecord
        """
        pass

    @abstractmethod
    async def save(self, record: SeriesRecord) -> SeriesRecord:
        """
        Insert or update a stored series.
        
        A record without id is inserted and gets a fresh identifier.
        A record with id is upserted by that id, keeping the stored
        creation timestamp.
        
        Args:
            record: SeriesRecord to store
            
        Returns:
            The stored SeriesRecord
        """
        pass

    @abstractmethod
    async def delete_by_id(self, series_id: UUID) -> None:
        """Delete a stored series by identifier."""
        pass
