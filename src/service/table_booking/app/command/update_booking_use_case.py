from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import (
    EMAIL_TAKEN_MESSAGE,
    AbstractUnitOfWork,
    get_unit_of_work,
)
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.keyed_lock import KeyedLockManager, customer_lock_key, slot_lock_key
from src.service.table_booking.app.dto.booking_update import BookingUpdate
from src.service.table_booking.app.interface.i_clock import IClock
from src.service.table_booking.domain.availability_rule_engine import (
    check_booking_window,
    check_opening_hours,
    check_party_size,
    check_table,
)
from src.service.table_booking.domain.booking_calendar import normalize_hhmm
from src.service.table_booking.domain.conflict_detector import find_conflict
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.domain.value_object.booking_policy import BookingPolicy


SLOT_TAKEN_ON_UPDATE = (
    'This table is already booked at this time. Please select a different time.'
)


class UpdateBookingUseCase:
    """
    Modify an existing booking.

    Only supplied fields are validated, each with the creation rule, using the
    stored values for anything omitted. The one-booking-per-day rule is not
    applied here.
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        clock: IClock,
        policy: BookingPolicy,
        lock_manager: KeyedLockManager,
    ) -> None:
        self.uow = uow
        self.clock = clock
        self.policy = policy
        self.lock_manager = lock_manager

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(get_unit_of_work),
        clock: IClock = Depends(Provide[Container.clock]),
        policy: BookingPolicy = Depends(Provide[Container.booking_policy]),
        lock_manager: KeyedLockManager = Depends(Provide[Container.lock_manager]),
    ) -> Self:
        return cls(uow=uow, clock=clock, policy=policy, lock_manager=lock_manager)

    async def _updated_customer(self, booking: Booking, changes: BookingUpdate) -> Customer | None:
        if not changes.touches_contact:
            return None
        customer = await self.uow.customer_command_repo.get_by_id(customer_id=booking.customer_id)
        if customer is None:
            raise NotFoundError('Customer not found')
        return customer.with_contact(
            name=changes.customer_name,
            email=changes.customer_email,
            phone=changes.customer_phone,
        )

    async def _ensure_email_free(self, customer: Customer) -> None:
        owner = await self.uow.customer_command_repo.find_by_email(email=customer.email)
        if owner and owner.id != customer.id:
            raise ConflictError(EMAIL_TAKEN_MESSAGE)

    @Logger.io
    async def update_booking(self, *, booking_id: int, changes: BookingUpdate) -> Booking:
        today = self.clock.today()

        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id(booking_id=booking_id)
            if not booking:
                raise NotFoundError('Booking not found')
            booking.ensure_modifiable()

            customer = await self._updated_customer(booking, changes)

            booking_date = changes.booking_date or booking.booking_date
            booking_time = (
                normalize_hhmm(changes.booking_time) if changes.booking_time else booking.booking_time
            )
            party_size = changes.party_size if changes.party_size is not None else booking.party_size
            table_id = changes.table_id if changes.table_id is not None else booking.table_id

            if changes.touches_schedule or changes.table_id is not None or changes.party_size is not None:
                restaurant = await self.uow.restaurant_query_repo.get_with_details(
                    restaurant_id=booking.restaurant_id
                )
                if not restaurant:
                    raise NotFoundError('Restaurant not found')

                if changes.touches_schedule:
                    check_booking_window(booking_date, today=today, policy=self.policy).raise_if_rejected()
                    check_opening_hours(
                        restaurant, booking_date, booking_time, policy=self.policy
                    ).raise_if_rejected()
                if changes.party_size is not None:
                    check_party_size(party_size, policy=self.policy).raise_if_rejected()

                table = restaurant.find_table(table_id)
                if not table:
                    raise NotFoundError('Table not found')
                # Capacity follows the effective party; active-ness only matters for a new table
                check_table(
                    table, party_size, require_active=changes.table_id is not None
                ).raise_if_rejected()

            lock_keys: list[str] = []
            if changes.touches_slot:
                lock_keys.append(
                    slot_lock_key(table_id=table_id, booking_date=booking_date, booking_time=booking_time)
                )
            if customer is not None and changes.customer_email is not None:
                lock_keys.append(customer_lock_key(customer_email=customer.email))
            async with self.lock_manager.hold(*lock_keys):
                if changes.touches_slot:
                    holder = await self.uow.booking_command_repo.find_confirmed_booking(
                        table_id=table_id, booking_date=booking_date, booking_time=booking_time
                    )
                    if find_conflict(
                        [holder] if holder else [],
                        table_id,
                        booking_date,
                        booking_time,
                        exclude_booking_id=booking.id,
                    ):
                        raise ConflictError(SLOT_TAKEN_ON_UPDATE)

                if customer is not None:
                    if changes.customer_email is not None:
                        await self._ensure_email_free(customer)
                    await self.uow.customer_command_repo.update_contact(customer=customer)

                special_requests = (
                    booking.special_requests
                    if changes.special_requests is None
                    else (changes.special_requests or None)
                )
                updated = await self.uow.booking_command_repo.update(
                    booking=booking.reschedule(
                        table_id=table_id,
                        booking_date=booking_date,
                        booking_time=booking_time,
                        party_size=party_size,
                        special_requests=special_requests,
                    )
                )
                await self.uow.commit()

        Logger.base.info(f'✏️ [UPDATE-BOOKING] Booking {booking_id} updated')
        return updated
