"""Dependency wiring for the series use cases."""

from dataclasses import dataclass
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from application.interfaces import IClock
from application.mappers import ExpansionSerializer
from application.queries import DEFAULT_PAGE_SIZE
from application.use_cases import (
    CreateSeriesUseCase,
    DeleteSeriesUseCase,
    FindAllSeriesUseCase,
    FindSeriesByCodeUseCase,
    FindSeriesByIdUseCase,
    UpdateSeriesUseCase,
)
from domain.repositories import ISeriesRepository
from domain.validation import ValidatorRegistry, build_series_validators
from infrastructure.clock import SystemClock
from infrastructure.config import Settings, get_settings
from infrastructure.database.repositories import SQLAlchemySeriesRepository


@dataclass(frozen=True)
class SeriesUseCases:
    """Every series use case, wired to the same repository."""

    create: CreateSeriesUseCase
    update: UpdateSeriesUseCase
    delete: DeleteSeriesUseCase
    find_all: FindAllSeriesUseCase
    find_by_code: FindSeriesByCodeUseCase
    find_by_id: FindSeriesByIdUseCase


def build_series_use_cases(
    repository: ISeriesRepository,
    clock: IClock,
    serializer: ExpansionSerializer,
    validators: Optional[ValidatorRegistry] = None,
    max_page_size: Optional[int] = None,
    default_page_size: int = DEFAULT_PAGE_SIZE,
) -> SeriesUseCases:
    """
    Wire the series use cases around one repository.
    
    Args:
        repository: Series store
        clock: Time source for created/updated timestamps
        serializer: Expansion serializer shared by all mappings
        validators: Validator sets; built from the repository when omitted
        max_page_size: Upper bound applied to page sizes on listing
        default_page_size: Page size for listings that do not ask for one
        
    Returns:
        SeriesUseCases bundle
    """
    if validators is None:
        validators = build_series_validators(repository)
    
    return SeriesUseCases(
        create=CreateSeriesUseCase(repository, validators, clock, serializer),
        update=UpdateSeriesUseCase(repository, validators, clock, serializer),
        delete=DeleteSeriesUseCase(repository, validators),
        find_all=FindAllSeriesUseCase(
            repository, serializer, max_page_size, default_page_size
        ),
        find_by_code=FindSeriesByCodeUseCase(repository, serializer),
        find_by_id=FindSeriesByIdUseCase(repository, serializer),
    )


def build_sqlalchemy_series_use_cases(
    session: AsyncSession,
    settings: Optional[Settings] = None,
) -> SeriesUseCases:
    """Wire the series use cases over a database session."""
    if settings is None:
        settings = get_settings()
    
    return build_series_use_cases(
        repository=SQLAlchemySeriesRepository(session),
        clock=SystemClock(),
        serializer=ExpansionSerializer(settings.expansion_separator),
        max_page_size=settings.max_page_size,
        default_page_size=settings.default_page_size,
    )
