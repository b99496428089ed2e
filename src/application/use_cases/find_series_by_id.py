"""Use Case for looking up a series by identifier."""

from typing import Optional

from application.mappers import ExpansionSerializer, record_to_domain
from application.queries import FindSeriesByIdQuery
from domain.entities import Series
from domain.repositories import ISeriesRepository


class FindSeriesByIdUseCase:
    """Return the series with an identifier, or None."""

    def __init__(self, repository: ISeriesRepository, serializer: ExpansionSerializer):
        self.repository = repository
        self.serializer = serializer

    async def execute(self, query: FindSeriesByIdQuery) -> Optional[Series]:
        record = await self.repository.find_by_id(query.id)
        if record is None:
            return None
        return record_to_domain(record, self.serializer)
