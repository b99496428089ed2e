"""Use Case for listing series page by page."""

from typing import Optional

from application.mappers import ExpansionSerializer, record_to_domain
from application.queries import DEFAULT_PAGE_SIZE, FindAllSeriesQuery
from domain.entities import Series
from domain.repositories import ISeriesRepository
from domain.value_objects import Page
from infrastructure.config import get_logger


class FindAllSeriesUseCase:
    """
    Return one page of series.
    
    Queries without a page size get `default_page_size`; sizes above
    `max_page_size` are capped.
    """

    def __init__(
        self,
        repository: ISeriesRepository,
        serializer: ExpansionSerializer,
        max_page_size: Optional[int] = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self.repository = repository
        self.serializer = serializer
        self.max_page_size = max_page_size
        self.default_page_size = default_page_size
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, query: FindAllSeriesQuery) -> Page[Series]:
        page_size = query.page_size or self.default_page_size
        if self.max_page_size is not None and page_size > self.max_page_size:
            self.logger.debug(f"Page size {page_size} capped to {self.max_page_size}")
            page_size = self.max_page_size

        records = await self.repository.find_all(query.page, page_size)
        return records.map(lambda record: record_to_domain(record, self.serializer))
