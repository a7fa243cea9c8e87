from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListBookingsUseCase:
    """A customer's booking history by email, or the latest bookings for staff."""

    def __init__(self, *, booking_query_repo: IBookingQueryRepo, recent_limit: int = 100) -> None:
        self.booking_query_repo = booking_query_repo
        self.recent_limit = recent_limit

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, recent_limit=settings.RECENT_BOOKINGS_LIMIT)

    @Logger.io
    async def list_bookings(self, *, email: Optional[str] = None) -> List[BookingDetail]:
        if not email:
            return await self.booking_query_repo.list_recent(limit=self.recent_limit)

        customer = await self.booking_query_repo.find_customer_by_email(email=email)
        if not customer:
            return []
        return await self.booking_query_repo.list_by_customer(
            customer_id=customer.id  # pyrefly: ignore[bad-argument-type]
        )
