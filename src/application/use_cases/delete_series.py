"""Use Case for deleting a series."""

from application.commands import DeleteSeriesCommand
from domain.enums import OperationKind
from domain.exceptions import DomainException
from domain.repositories import ISeriesRepository
from domain.validation import ValidatorRegistry, run_validators
from infrastructure.config import get_logger


class DeleteSeriesUseCase:
    """Delete a series by identifier without loading it."""

    def __init__(self, repository: ISeriesRepository, validators: ValidatorRegistry):
        self.repository = repository
        self.validators = validators.for_operation(OperationKind.DELETE)
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, command: DeleteSeriesCommand) -> None:
        """
        Delete a series.
        
        Raises:
            SeriesNotFoundException: If the series does not exist
        """
        try:
            await run_validators(self.validators, command.id)
        except DomainException as e:
            self.logger.warning(f"Delete rejected: {e}")
            raise

        await self.repository.delete_by_id(command.id)
        self.logger.info(f"🗑️ Series deleted: {command.id}")
