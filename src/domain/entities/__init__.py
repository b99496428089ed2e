"""Domain Entities - Objects with identity."""

from .expansion import Expansion
from .series import Series
from .series_record import SeriesRecord

__all__ = ["Expansion", "Series", "SeriesRecord"]
