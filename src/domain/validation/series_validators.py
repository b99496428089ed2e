"""Business rules guarding writes on the Series aggregate."""

from uuid import UUID

from domain.entities import Series
from domain.enums import OperationKind
from domain.exceptions import (
    InvalidDataException,
    SeriesAlreadyExistsException,
    SeriesNotFoundException,
)
from domain.repositories import ISeriesRepository
from domain.validation.base import SeriesValidator, ValidatorRegistry


class UniqueCodeValidator(SeriesValidator[Series]):
    """
    Reject a series whose code is already taken.
    
    With `exclude_self` the candidate's own stored record is ignored,
    so resubmitting an unchanged code on update passes.
    """

    def __init__(self, repository: ISeriesRepository, exclude_self: bool = False):
        self.repository = repository
        self.exclude_self = exclude_self

    async def validate(self, candidate: Series) -> None:
        exclude_id = candidate.id if self.exclude_self else None
        if await self.repository.exists_by_code(candidate.code, exclude_id=exclude_id):
            raise SeriesAlreadyExistsException(candidate.code)


class UniqueNameValidator(SeriesValidator[Series]):
    """Reject a series whose name is already taken."""

    def __init__(self, repository: ISeriesRepository, exclude_self: bool = False):
        self.repository = repository
        self.exclude_self = exclude_self

    async def validate(self, candidate: Series) -> None:
        exclude_id = candidate.id if self.exclude_self else None
        if await self.repository.exists_by_name(candidate.name, exclude_id=exclude_id):
            raise SeriesAlreadyExistsException(candidate.name)


class IdentifierPresentValidator(SeriesValidator[Series]):
    """Reject a candidate that carries no identifier."""

    async def validate(self, candidate: Series) -> None:
        if candidate.id is None:
            raise InvalidDataException("Invalid series id")


class SeriesExistsValidator(SeriesValidator[Series]):
    """Reject a candidate whose identifier is not stored."""

    def __init__(self, repository: ISeriesRepository):
        self.repository = repository

    async def validate(self, candidate: Series) -> None:
        # IdentifierPresentValidator runs first
        if not await self.repository.exists_by_id(candidate.id):
            raise SeriesNotFoundException(candidate.id)


class SeriesIdExistsValidator(SeriesValidator[UUID]):
    """Reject a bare identifier that is not stored."""

    def __init__(self, repository: ISeriesRepository):
        self.repository = repository

    async def validate(self, candidate: UUID) -> None:
        if not await self.repository.exists_by_id(candidate):
            raise SeriesNotFoundException(candidate)


def build_series_validators(repository: ISeriesRepository) -> ValidatorRegistry:
    """
    Build the validator sets for every write operation.
    
    Args:
        repository: Repository used for the read-only lookups
        
    Returns:
        Registry holding the create, update and delete sets
    """
    return ValidatorRegistry({
        OperationKind.CREATE: [
            UniqueCodeValidator(repository),
            UniqueNameValidator(repository),
        ],
        OperationKind.UPDATE: [
            IdentifierPresentValidator(),
            SeriesExistsValidator(repository),
            UniqueCodeValidator(repository, exclude_self=True),
            UniqueNameValidator(repository, exclude_self=True),
        ],
        OperationKind.DELETE: [
            SeriesIdExistsValidator(repository),
        ],
    })
