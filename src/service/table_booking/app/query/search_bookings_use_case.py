from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.dto.booking_search import BookingPage, BookingSearchCriteria
from src.service.table_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.table_booking.domain.booking_calendar import parse_booking_date
from src.service.table_booking.domain.enum.booking_status import BookingStatus


class SearchBookingsUseCase:
    def __init__(
        self,
        *,
        booking_query_repo: IBookingQueryRepo,
        default_limit: int = 50,
        max_limit: int = 100,
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.default_limit = default_limit
        self.max_limit = max_limit

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        settings: Settings = Depends(Provide[Container.config_service]),
    ) -> Self:
        return cls(
            booking_query_repo=booking_query_repo,
            default_limit=settings.SEARCH_DEFAULT_LIMIT,
            max_limit=settings.SEARCH_MAX_LIMIT,
        )

    @Logger.io
    async def search(
        self,
        *,
        restaurant_id: Optional[int] = None,
        customer_email: Optional[str] = None,
        status: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        table_id: Optional[int] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> BookingPage:
        limit = self.default_limit if limit is None else limit
        if limit > self.max_limit:
            raise DomainError(f'Limit cannot exceed {self.max_limit}')
        if limit < 1:
            raise DomainError('Limit must be at least 1')
        if offset < 0:
            raise DomainError('Offset cannot be negative')
        for bound in (date_from, date_to):
            if bound is not None:
                parse_booking_date(bound)

        customer_id = None
        if customer_email:
            customer = await self.booking_query_repo.find_customer_by_email(email=customer_email)
            if not customer:
                return BookingPage.empty(limit=limit, offset=offset)
            customer_id = customer.id

        return await self.booking_query_repo.search(
            criteria=BookingSearchCriteria(
                restaurant_id=restaurant_id,
                customer_id=customer_id,
                status=BookingStatus.parse(status) if status else None,
                date_from=date_from,
                date_to=date_to,
                table_id=table_id,
                limit=limit,
                offset=offset,
            )
        )
