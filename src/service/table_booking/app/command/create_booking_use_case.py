from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork, get_unit_of_work
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.keyed_lock import (
    KeyedLockManager,
    customer_day_lock_key,
    customer_lock_key,
    slot_lock_key,
)
from src.service.table_booking.app.interface.i_clock import IClock
from src.service.table_booking.domain.availability_rule_engine import check_availability
from src.service.table_booking.domain.booking_calendar import normalize_hhmm
from src.service.table_booking.domain.conflict_detector import (
    find_conflict,
    find_customer_day_conflict,
)
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.domain.value_object.booking_policy import BookingPolicy


SLOT_TAKEN = 'Table is already booked at this time'
CUSTOMER_DAY_TAKEN = 'Customer already has a booking at this restaurant on this date'


class CreateBookingUseCase:
    """
    Create a confirmed booking.

    Flow:
    1. Validate contact details and run the availability rules
    2. Under the slot and customer locks: reject a taken slot, reject a
       second booking for the same customer at the same restaurant on the
       same day
    3. Find or create the customer, insert the booking, commit

    Nothing is written until every check has passed; a rejected request
    leaves neither a booking nor a new customer behind.
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

    @Logger.io
    async def create_booking(
        self,
        *,
        restaurant_id: int,
        table_id: int,
        customer_name: str,
        customer_email: str,
        customer_phone: str,
        booking_date: str,
        booking_time: str,
        party_size: int,
        special_requests: Optional[str] = None,
    ) -> Booking:
        contact = Customer.create(name=customer_name, email=customer_email, phone=customer_phone)
        booking_time = normalize_hhmm(booking_time)
        today = self.clock.today()

        async with self.uow:
            restaurant = await self.uow.restaurant_query_repo.get_with_details(
                restaurant_id=restaurant_id
            )
            if not restaurant:
                raise NotFoundError('Restaurant not found')
            table = restaurant.find_table(table_id)
            if not table:
                raise NotFoundError('Table not found')

            check_availability(
                restaurant,
                table,
                booking_date,
                booking_time,
                party_size,
                today=today,
                policy=self.policy,
            ).raise_if_rejected()

            async with self.lock_manager.hold(
                slot_lock_key(table_id=table_id, booking_date=booking_date, booking_time=booking_time),
                customer_day_lock_key(
                    customer_email=contact.email,
                    restaurant_id=restaurant_id,
                    booking_date=booking_date,
                ),
                customer_lock_key(customer_email=contact.email),
            ):
                holder = await self.uow.booking_command_repo.find_confirmed_booking(
                    table_id=table_id, booking_date=booking_date, booking_time=booking_time
                )
                if find_conflict([holder] if holder else [], table_id, booking_date, booking_time):
                    raise ConflictError(SLOT_TAKEN)

                customer = await self.uow.customer_command_repo.find_by_email(email=contact.email)
                if customer:
                    same_day = await self.uow.booking_command_repo.find_confirmed_booking_for_customer_day(
                        customer_id=customer.id,  # pyrefly: ignore[bad-argument-type]
                        restaurant_id=restaurant_id,
                        booking_date=booking_date,
                    )
                    if find_customer_day_conflict(
                        [same_day] if same_day else [],
                        customer.id,  # pyrefly: ignore[bad-argument-type]
                        restaurant_id,
                        booking_date,
                    ):
                        raise ConflictError(CUSTOMER_DAY_TAKEN)
                else:
                    customer = await self.uow.customer_command_repo.create(customer=contact)

                booking = await self.uow.booking_command_repo.create(
                    booking=Booking.create(
                        restaurant_id=restaurant_id,
                        table_id=table_id,
                        customer_id=customer.id,  # pyrefly: ignore[bad-argument-type]
                        booking_date=booking_date,
                        booking_time=booking_time,
                        party_size=party_size,
                        special_requests=special_requests,
                    )
                )
                await self.uow.commit()

        Logger.base.info(
            f'📝 [CREATE-BOOKING] Booking {booking.id} confirmed: table {table_id} '
            f'on {booking_date} {booking_time} for {party_size}'
        )
        return booking
