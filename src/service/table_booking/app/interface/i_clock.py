from abc import ABC, abstractmethod
from datetime import date


class IClock(ABC):
    """Source of the reference day used by every date rule."""

    @abstractmethod
    def today(self) -> date:
        pass
