"""Write-side commands."""

from .series_commands import (
    CreateSeriesCommand,
    DeleteSeriesCommand,
    UpdateSeriesCommand,
)

__all__ = ["CreateSeriesCommand", "UpdateSeriesCommand", "DeleteSeriesCommand"]
