"""Unit tests for InMemorySeriesRepository."""

from datetime import datetime
from uuid import uuid4

import pytest
from domain.entities import SeriesRecord
from infrastructure.memory import InMemorySeriesRepository


def make_record(**overrides) -> SeriesRecord:
    fields = {"code": "SV01", "name": "Scarlet & Violet", "release_year": 2023}
    fields.update(overrides)
    return SeriesRecord(**fields)


class TestInMemorySeriesRepository:
    """Test the dict-backed store."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_from_factory(self):
        """Test the id factory is used for new records."""
        series_id = uuid4()
        repo = InMemorySeriesRepository(id_factory=lambda: series_id)

        saved = await repo.save(make_record())

        assert saved.id == series_id
        assert saved.created_at is not None

    @pytest.mark.asyncio
    async def test_upsert_keeps_created_at(self):
        """Test updates never rewrite the creation time."""
        repo = InMemorySeriesRepository()
        saved = await repo.save(make_record(created_at=datetime(2024, 1, 1)))

        updated = await repo.save(make_record(id=saved.id, code="NEW", created_at=None))

        assert updated.code == "NEW"
        assert updated.created_at == datetime(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self):
        """Test callers cannot mutate stored state."""
        repo = InMemorySeriesRepository()
        saved = await repo.save(make_record())
        saved.code = "MUTATED"

        assert (await repo.find_by_id(saved.id)).code == "SV01"

    @pytest.mark.asyncio
    async def test_exclude_id(self):
        """Test uniqueness lookups can ignore a record."""
        repo = InMemorySeriesRepository()
        saved = await repo.save(make_record())

        assert await repo.exists_by_code("SV01") is True
        assert await repo.exists_by_code("SV01", exclude_id=saved.id) is False
        assert await repo.exists_by_name("Scarlet & Violet", exclude_id=saved.id) is False

    @pytest.mark.asyncio
    async def test_delete_missing_is_ignored(self):
        """Test deleting an unknown id is a no-op."""
        repo = InMemorySeriesRepository()
        await repo.delete_by_id(uuid4())
        assert len(repo) == 0
