from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_clock import IClock
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.enum.booking_status import BookingStatus


class UpdateBookingStatusUseCase:
    """Administrative status change, validated against the lifecycle transition table."""

    def __init__(self, *, uow: AbstractUnitOfWork, clock: IClock) -> None:
        self.uow = uow
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(uow=uow, clock=clock)

    @Logger.io
    async def update_status(self, *, booking_id: int, status: str) -> Booking:
        target = BookingStatus.parse(status)

        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')

            updated = await self.uow.booking_command_repo.update(
                booking=booking.transition_to(target, today=self.clock.today())
            )
            await self.uow.commit()

        Logger.base.info(f'🔁 [BOOKING-STATUS] Booking {booking_id}: {booking.status} -> {target}')
        return updated
