"""Use Case for updating an existing series."""

from uuid import UUID

from application.commands import UpdateSeriesCommand
from application.interfaces import IClock
from application.mappers import (
    ExpansionSerializer,
    record_to_domain,
    update_command_to_domain,
    update_command_to_record,
)
from domain.entities import Series
from domain.enums import OperationKind
from domain.exceptions import DomainException, InvalidDataException
from domain.repositories import ISeriesRepository
from domain.validation import ValidatorRegistry, run_validators
from infrastructure.config import get_logger


class UpdateSeriesUseCase:
    """
    Replace the fields of a stored series.
    
    The command may repeat the target id; when it does, the two must match.
    """

    def __init__(
        self,
        repository: ISeriesRepository,
        validators: ValidatorRegistry,
        clock: IClock,
        serializer: ExpansionSerializer,
    ):
        self.repository = repository
        self.validators = validators.for_operation(OperationKind.UPDATE)
        self.clock = clock
        self.serializer = serializer
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, series_id: UUID, command: UpdateSeriesCommand) -> Series:
        """
        Update a series.
        
        Args:
            series_id: Identifier of the series to update
            command: Validated update command
            
        Returns:
            The stored Series after the update
            
        Raises:
            InvalidDataException: If the command has no id or a different id,
                or an expansion code cannot be stored
            SeriesNotFoundException: If the series does not exist
            SeriesAlreadyExistsException: If another series holds the code or name
        """
        if command.id is not None and command.id != series_id:
            self.logger.warning(
                f"Update rejected: command id {command.id} does not match {series_id}"
            )
            raise InvalidDataException(
                "Series id does not match the update target",
                series_id=series_id,
                command_id=command.id,
            )

        now = self.clock.now()
        candidate = update_command_to_domain(command, now)

        try:
            record = update_command_to_record(command, series_id, now, self.serializer)
            await run_validators(self.validators, candidate)
        except DomainException as e:
            self.logger.warning(f"Update rejected for series {series_id}: {e}")
            raise

        saved = await self.repository.save(record)
        self.logger.info(f"✅ Series updated: {saved.code} ({saved.id})")
        return record_to_domain(saved, self.serializer)
