"""Series use cases."""

from .create_series import CreateSeriesUseCase
from .delete_series import DeleteSeriesUseCase
from .find_all_series import FindAllSeriesUseCase
from .find_series_by_code import FindSeriesByCodeUseCase
from .find_series_by_id import FindSeriesByIdUseCase
from .update_series import UpdateSeriesUseCase

__all__ = [
    "CreateSeriesUseCase",
    "UpdateSeriesUseCase",
    "DeleteSeriesUseCase",
    "FindAllSeriesUseCase",
    "FindSeriesByCodeUseCase",
    "FindSeriesByIdUseCase",
]
