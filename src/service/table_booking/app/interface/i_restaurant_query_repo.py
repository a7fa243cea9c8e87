from abc import ABC, abstractmethod
from typing import List

from src.service.table_booking.domain.entity.restaurant_entity import Restaurant


class IRestaurantQueryRepo(ABC):
    @abstractmethod
    async def list_restaurants(self) -> List[Restaurant]:
        """All restaurants ordered by name, without hours or tables."""
        pass

    @abstractmethod
    async def get_with_details(self, *, restaurant_id: int) -> Restaurant | None:
        """Restaurant with its opening hours and tables loaded."""
        pass
