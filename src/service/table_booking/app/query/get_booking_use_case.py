from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.interface.i_booking_query_repo import IBookingQueryRepo


class GetBookingUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking(self, *, booking_id: int) -> BookingDetail:
        detail = await self.booking_query_repo.get_by_id_with_details(booking_id=booking_id)
        if not detail:
            raise NotFoundError('Booking not found')
        return detail
