"""Unit tests for the read-side series use cases."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
from application.commands import CreateSeriesCommand
from application.queries import FindAllSeriesQuery, FindSeriesByCodeQuery, FindSeriesByIdQuery
from application.use_cases import FindAllSeriesUseCase
from domain.repositories import ISeriesRepository
from domain.value_objects import Page


async def _seed(use_cases, count: int) -> list:
    created = []
    for index in range(count):
        command = CreateSeriesCommand(
            code=f"S{index:02d}",
            name=f"Series {index}",
            release_year=2000 + index,
        )
        created.append(await use_cases.create.execute(command))
    return created


class TestFindAllSeriesUseCase:
    """Test paged listing."""

    @pytest.mark.asyncio
    async def test_returns_requested_page(self, use_cases):
        """Test the zero-based page slices in insertion order."""
        await _seed(use_cases, 5)

        page = await use_cases.find_all.execute(FindAllSeriesQuery(page=1, page_size=2))

        assert [series.code for series in page.items] == ["S02", "S03"]
        assert page.total_items == 5
        assert page.total_pages == 3
        assert page.is_last is False

    @pytest.mark.asyncio
    async def test_one_based_query_reads_first_page(self, use_cases):
        """Test that one-based page 1 is the first page."""
        await _seed(use_cases, 3)

        page = await use_cases.find_all.execute(FindAllSeriesQuery.from_one_based(1, 2))

        assert page.page == 0
        assert [series.code for series in page.items] == ["S00", "S01"]

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_page(self, use_cases):
        """Test listing with nothing stored."""
        page = await use_cases.find_all.execute(FindAllSeriesQuery())
        assert page.items == []
        assert page.total_items == 0

    @pytest.mark.asyncio
    async def test_page_size_is_capped(self, serializer):
        """Test the configured maximum page size is applied."""
        repository = AsyncMock(spec=ISeriesRepository)
        repository.find_all.return_value = Page(items=[], page=0, page_size=100, total_items=0)
        use_case = FindAllSeriesUseCase(repository, serializer, max_page_size=100)

        await use_case.execute(FindAllSeriesQuery(page=0, page_size=500))

        repository.find_all.assert_awaited_once_with(0, 100)

    @pytest.mark.asyncio
    async def test_configured_default_page_size_applies(self, serializer):
        """Test a query without a size uses the configured default."""
        repository = AsyncMock(spec=ISeriesRepository)
        repository.find_all.return_value = Page(items=[], page=0, page_size=20, total_items=0)
        use_case = FindAllSeriesUseCase(repository, serializer, default_page_size=20)

        await use_case.execute(FindAllSeriesQuery.from_one_based(1))

        repository.find_all.assert_awaited_once_with(0, 20)

    @pytest.mark.asyncio
    async def test_explicit_page_size_wins_over_default(self, serializer):
        """Test the default only fills in a missing size."""
        repository = AsyncMock(spec=ISeriesRepository)
        repository.find_all.return_value = Page(items=[], page=2, page_size=5, total_items=0)
        use_case = FindAllSeriesUseCase(repository, serializer, default_page_size=20)

        await use_case.execute(FindAllSeriesQuery(page=2, page_size=5))

        repository.find_all.assert_awaited_once_with(2, 5)


class TestFindSeriesByCodeUseCase:
    """Test lookup by code."""

    @pytest.mark.asyncio
    async def test_found(self, use_cases, create_command):
        """Test an existing code returns the series."""
        created = await use_cases.create.execute(create_command)

        series = await use_cases.find_by_code.execute(FindSeriesByCodeQuery(code="SV01"))

        assert series == created

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, use_cases):
        """Test that not found is not an error."""
        assert await use_cases.find_by_code.execute(FindSeriesByCodeQuery(code="NOPE")) is None


class TestFindSeriesByIdUseCase:
    """Test lookup by identifier."""

    @pytest.mark.asyncio
    async def test_found(self, use_cases, create_command):
        """Test an existing id returns the series."""
        created = await use_cases.create.execute(create_command)

        series = await use_cases.find_by_id.execute(FindSeriesByIdQuery(id=created.id))

        assert series.code == "SV01"
        assert series.expansion_codes == ["SVI", "PAL"]

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, use_cases):
        """Test that not found is not an error."""
        assert await use_cases.find_by_id.execute(FindSeriesByIdQuery(id=uuid4())) is None
