"""Use Case for creating a new series."""

from application.commands import CreateSeriesCommand
from application.interfaces import IClock
from application.mappers import (
    ExpansionSerializer,
    create_command_to_domain,
    create_command_to_record,
    record_to_domain,
)
from domain.entities import Series
from domain.enums import OperationKind
from domain.exceptions import DomainException
from domain.repositories import ISeriesRepository
from domain.validation import ValidatorRegistry, run_validators
from infrastructure.config import get_logger


class CreateSeriesUseCase:
    """Validate a new series against the create rules, then store it."""

    def __init__(
        self,
        repository: ISeriesRepository,
        validators: ValidatorRegistry,
        clock: IClock,
        serializer: ExpansionSerializer,
    ):
        self.repository = repository
        self.validators = validators.for_operation(OperationKind.CREATE)
        self.clock = clock
        self.serializer = serializer
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, command: CreateSeriesCommand) -> Series:
        """
        Create a series.
        
        Args:
            command: Validated create command
            
        Returns:
            The stored Series, with its assigned identifier
            
        Raises:
            InvalidDataException: If an expansion code cannot be stored
            SeriesAlreadyExistsException: If the code or name is taken
        """
        now = self.clock.now()
        candidate = create_command_to_domain(command, now)

        try:
            record = create_command_to_record(command, now, self.serializer)
            await run_validators(self.validators, candidate)
        except DomainException as e:
            self.logger.warning(f"Create rejected for series {command.code}: {e}")
            raise

        saved = await self.repository.save(record)
        self.logger.info(f"✅ Series created: {saved.code} ({saved.id})")
        return record_to_domain(saved, self.serializer)
