"""Use Case for looking up a series by code."""

from typing import Optional

from application.mappers import ExpansionSerializer, record_to_domain
from application.queries import FindSeriesByCodeQuery
from domain.entities import Series
from domain.repositories import ISeriesRepository


class FindSeriesByCodeUseCase:
    """Return the series holding a code, or None."""

    def __init__(self, repository: ISeriesRepository, serializer: ExpansionSerializer):
        self.repository = repository
        self.serializer = serializer

    async def execute(self, query: FindSeriesByCodeQuery) -> Optional[Series]:
        record = await self.repository.find_by_code(query.code)
        if record is None:
            return None
        return record_to_domain(record, self.serializer)
