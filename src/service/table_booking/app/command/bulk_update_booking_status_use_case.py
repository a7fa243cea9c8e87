from typing import Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.dto.bulk_operation_result import BulkOperationResult
from src.service.table_booking.app.interface.i_clock import IClock
from src.service.table_booking.domain.bulk_operation_coordinator import (
    normalize_booking_ids,
    plan_bulk_transition,
)
from src.service.table_booking.domain.enum.booking_status import BookingStatus


class BulkUpdateBookingStatusUseCase:
    """
    Move a batch of bookings to one status, all or nothing.

    Every booking is validated first; a single illegal transition, past-date
    cancellation or unknown id rejects the whole batch and nothing is written.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, clock: IClock, max_batch: int = 50) -> None:
        self.uow = uow
        self.clock = clock
        self.max_batch = max_batch

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        clock: IClock = Depends(Provide[Container.clock]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(uow=uow, clock=clock, max_batch=settings.BULK_MAX_BOOKINGS)

    @Logger.io
    async def bulk_update_status(
        self, *, booking_ids: Sequence[int], status: str
    ) -> BulkOperationResult:
        ids = normalize_booking_ids(booking_ids, max_batch=self.max_batch, verb='update')
        target = BookingStatus.parse(status)

        async with self.uow:
            bookings = await self.uow.booking_command_repo.list_by_ids(booking_ids=ids)
            plan_bulk_transition(ids, bookings, target, today=self.clock.today())
            updated = await self.uow.booking_command_repo.update_status_bulk(
                booking_ids=ids, status=target
            )
            await self.uow.commit()

        Logger.base.info(f'📦 [BULK-STATUS] {len(updated)} bookings -> {target}')
        return BulkOperationResult(
            message=f'Successfully updated {len(updated)} bookings', bookings=updated
        )
