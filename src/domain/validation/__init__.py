"""Validator strategy sets for Series writes."""

from .base import SeriesValidator, ValidatorRegistry, run_validators
from .series_validators import (
    IdentifierPresentValidator,
    SeriesExistsValidator,
    SeriesIdExistsValidator,
    UniqueCodeValidator,
    UniqueNameValidator,
    build_series_validators,
)

__all__ = [
    "SeriesValidator",
    "ValidatorRegistry",
    "run_validators",
    "IdentifierPresentValidator",
    "SeriesExistsValidator",
    "SeriesIdExistsValidator",
    "UniqueCodeValidator",
    "UniqueNameValidator",
    "build_series_validators",
]
