from abc import ABC, abstractmethod
from typing import List

from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.dto.booking_search import BookingPage, BookingSearchCriteria
from src.service.table_booking.domain.entity.customer_entity import Customer


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id_with_details(self, *, booking_id: int) -> BookingDetail | None:
        pass

    @abstractmethod
    async def find_customer_by_email(self, *, email: str) -> Customer | None:
        pass

    @abstractmethod
    async def list_by_customer(self, *, customer_id: int) -> List[BookingDetail]:
        """Bookings of one customer, latest booking date first."""
        pass

    @abstractmethod
    async def list_recent(self, *, limit: int) -> List[BookingDetail]:
        """Most recently created bookings first."""
        pass

    @abstractmethod
    async def search(self, *, criteria: BookingSearchCriteria) -> BookingPage:
        pass
