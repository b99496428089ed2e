"""Dict-backed series repository for tests and local wiring."""

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Optional
from uuid import UUID, uuid4

from domain.entities import SeriesRecord
from domain.repositories import ISeriesRepository
from domain.value_objects import Page


class InMemorySeriesRepository(ISeriesRepository):
    """
    ISeriesRepository kept in a dict, in insertion order.
    
    Records are copied on the way in and out so callers never share state
    with the store. Not safe for concurrent writers.
    """

    def __init__(self, id_factory: Callable[[], UUID] = uuid4):
        self._records: dict[UUID, SeriesRecord] = {}
        self._id_factory = id_factory

    async def exists_by_id(self, series_id: UUID) -> bool:
        return series_id in self._records

    async def exists_by_code(self, code: str, exclude_id: Optional[UUID] = None) -> bool:
        return any(
            record.code == code and record.id != exclude_id
            for record in self._records.values()
        )

    async def exists_by_name(self, name: str, exclude_id: Optional[UUID] = None) -> bool:
        return any(
            record.name == name and record.id != exclude_id
            for record in self._records.values()
        )

    async def find_by_id(self, series_id: UUID) -> Optional[SeriesRecord]:
        record = self._records.get(series_id)
        return replace(record) if record else None

    async def find_by_code(self, code: str) -> Optional[SeriesRecord]:
        for record in self._records.values():
            if record.code == code:
                return replace(record)
        return None

    async def find_all(self, page: int, page_size: int) -> Page[SeriesRecord]:
        records = list(self._records.values())
        start = page * page_size
        return Page(
            items=[replace(record) for record in records[start:start + page_size]],
            page=page,
            page_size=page_size,
            total_items=len(records),
        )

    async def save(self, record: SeriesRecord) -> SeriesRecord:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
        existing = self._records.get(record.id) if record.id is not None else None

        if existing is None:
            stored = replace(
                record,
                id=record.id or self._id_factory(),
                created_at=record.created_at or now,
                updated_at=record.updated_at or now,
            )
        else:
            stored = replace(
                record,
                created_at=existing.created_at,
                updated_at=record.updated_at or now,
            )

        self._records[stored.id] = stored
        return replace(stored)

    async def delete_by_id(self, series_id: UUID) -> None:
        self._records.pop(series_id, None)

    def __len__(self) -> int:
        return len(self._records)
