"""Validator strategy contract and the operation-keyed registry."""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Generic, Iterable, Mapping, Sequence, TypeVar

from domain.enums import OperationKind

T = TypeVar("T")


class SeriesValidator(ABC, Generic[T]):
    """
    A single business rule checked before a write.
    
    Validators never mutate the candidate. They may query the repository
    but only through read-only lookups.
    """

    @abstractmethod
    async def validate(self, candidate: T) -> None:
        """
        Check the rule against the candidate.
        
        Raises:
            DomainException: If the rule is violated
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


async def run_validators(validators: Iterable[SeriesValidator[T]], candidate: T) -> None:
    """Run validators in order, stopping at the first failure."""
    for validator in validators:
        await validator.validate(candidate)


class ValidatorRegistry:
    """
    Ordered validator sets keyed by operation kind.
    
    Sets are frozen at construction and never mixed: a use case takes the
    whole set for its operation.
    """

    def __init__(self, validators: Mapping[OperationKind, Sequence[SeriesValidator[Any]]]):
        self._validators = MappingProxyType(
            {kind: tuple(rules) for kind, rules in validators.items()}
        )

    def for_operation(self, kind: OperationKind) -> tuple[SeriesValidator[Any], ...]:
        """
        Get the validator set registered for an operation.
        
        Raises:
            KeyError: If nothing is registered for the operation
        """
        try:
            return self._validators[kind]
        except KeyError:
            raise KeyError(f"No validators registered for operation '{kind}'") from None

    def __contains__(self, kind: object) -> bool:
        return kind in self._validators
