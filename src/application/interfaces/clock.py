"""Clock interface so use cases never read the wall clock directly."""

from abc import ABC, abstractmethod
from datetime import datetime


class IClock(ABC):
    """
    Abstract source of the current time.
    
    Injected into use cases to stamp created/updated timestamps; tests pass
    a fixed clock to keep results deterministic.
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time."""
        pass
