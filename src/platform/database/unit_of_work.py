"""
Unit of Work Pattern - one database session and transaction per business operation

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories obtain the shared session from the UoW
- Use cases coordinate several repositories through one UoW, so a booking
  and the customer it creates are committed (or discarded) together
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.database.orm_db_setting import get_async_session
from src.platform.exception.exceptions import ConflictError


if TYPE_CHECKING:
    from src.service.table_booking.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.table_booking.app.interface.i_customer_command_repo import (
        ICustomerCommandRepo,
    )
    from src.service.table_booking.app.interface.i_restaurant_query_repo import (
        IRestaurantQueryRepo,
    )


SLOT_UNIQUE_INDEX = 'uq_booking_confirmed_slot'
CUSTOMER_EMAIL_UNIQUE_INDEX = 'ix_customer_email'

SLOT_TAKEN_MESSAGE = 'Table is already booked at this time'
EMAIL_TAKEN_MESSAGE = 'Email is already used by another customer'


def conflict_from_integrity_error(e: IntegrityError) -> ConflictError | None:
    """Map a unique-constraint violation we know about to a 409, else None."""
    detail = str(e.orig)
    if SLOT_UNIQUE_INDEX in detail:
        return ConflictError(SLOT_TAKEN_MESSAGE)
    # postgres names the index, sqlite names the column
    if CUSTOMER_EMAIL_UNIQUE_INDEX in detail or 'customer.email' in detail:
        return ConflictError(EMAIL_TAKEN_MESSAGE)
    return None


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()

    Leaving the block without commit rolls back.
    """

    restaurant_query_repo: IRestaurantQueryRepo
    customer_command_repo: ICustomerCommandRepo
    booking_command_repo: IBookingCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self) -> AbstractUnitOfWork:
        from src.service.table_booking.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.table_booking.driven_adapter.repo.customer_command_repo_impl import (
            CustomerCommandRepoImpl,
        )
        from src.service.table_booking.driven_adapter.repo.restaurant_query_repo_impl import (
            RestaurantQueryRepoImpl,
        )

        # Repositories share the UoW session
        self.restaurant_query_repo = RestaurantQueryRepoImpl()
        self.restaurant_query_repo.session = self.session
        self.customer_command_repo = CustomerCommandRepoImpl()
        self.customer_command_repo.session = self.session
        self.booking_command_repo = BookingCommandRepoImpl()
        self.booking_command_repo.session = self.session

        return await super().__aenter__()

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            # Cross-process race on a slot or a new customer's email: the unique index rejected the loser
            if conflict := conflict_from_integrity_error(e):
                raise conflict from e
            raise

    async def rollback(self) -> None:
        await self.session.rollback()


def get_unit_of_work(
    session: AsyncSession = Depends(get_async_session),
) -> AbstractUnitOfWork:
    return SqlAlchemyUnitOfWork(session)
