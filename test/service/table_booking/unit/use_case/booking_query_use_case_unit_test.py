"""
Unit tests for the read-side use cases

Repositories are AsyncMocks; these tests cover parameter handling and the
not-found paths, not SQL.
"""

from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.dto.booking_search import BookingPage, BookingSearchCriteria
from src.service.table_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.table_booking.app.query.get_restaurant_use_case import GetRestaurantUseCase
from src.service.table_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.table_booking.app.query.list_restaurants_use_case import ListRestaurantsUseCase
from src.service.table_booking.app.query.search_bookings_use_case import SearchBookingsUseCase
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.domain.enum.booking_status import BookingStatus
from test.service.table_booking.unit.test_helpers import make_restaurant


JANE = Customer(id=7, name='Jane Doe', email='jane@example.com', phone='0912345678')


def _detail(booking_id: int = 1) -> BookingDetail:
    restaurant = make_restaurant()
    return BookingDetail(
        booking=Booking(
            id=booking_id,
            restaurant_id=1,
            table_id=2,
            customer_id=7,
            booking_date='2026-11-02',
            booking_time='19:00',
            party_size=4,
        ),
        restaurant=restaurant,
        table=restaurant.find_table(2),
        customer=JANE,
    )


@pytest.fixture
def booking_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id_with_details = AsyncMock(return_value=_detail())
    repo.find_customer_by_email = AsyncMock(return_value=JANE)
    repo.list_by_customer = AsyncMock(return_value=[_detail(1), _detail(2)])
    repo.list_recent = AsyncMock(return_value=[_detail(3)])
    repo.search = AsyncMock(
        side_effect=lambda *, criteria: BookingPage(
            bookings=[_detail()], total=1, limit=criteria.limit, offset=criteria.offset
        )
    )
    return repo


@pytest.fixture
def restaurant_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.list_restaurants = AsyncMock(return_value=[make_restaurant()])
    repo.get_with_details = AsyncMock(return_value=make_restaurant())
    return repo


@pytest.mark.unit
class TestRestaurantQueries:
    @pytest.mark.asyncio
    async def test_list_restaurants(self, restaurant_query_repo: AsyncMock) -> None:
        use_case = ListRestaurantsUseCase(restaurant_query_repo=restaurant_query_repo)

        restaurants = await use_case.list_restaurants()

        assert [r.name for r in restaurants] == ['La Bella Italia']

    @pytest.mark.asyncio
    async def test_get_restaurant_with_hours_and_tables(
        self, restaurant_query_repo: AsyncMock
    ) -> None:
        use_case = GetRestaurantUseCase(restaurant_query_repo=restaurant_query_repo)

        restaurant = await use_case.get_restaurant(restaurant_id=1)

        assert len(restaurant.opening_hours) == 7
        assert len(restaurant.tables) == 3
        restaurant_query_repo.get_with_details.assert_awaited_once_with(restaurant_id=1)

    @pytest.mark.asyncio
    async def test_get_unknown_restaurant(self, restaurant_query_repo: AsyncMock) -> None:
        restaurant_query_repo.get_with_details.return_value = None
        use_case = GetRestaurantUseCase(restaurant_query_repo=restaurant_query_repo)

        with pytest.raises(NotFoundError, match='Restaurant not found'):
            await use_case.get_restaurant(restaurant_id=99)


@pytest.mark.unit
class TestBookingQueries:
    @pytest.mark.asyncio
    async def test_get_booking(self, booking_query_repo: AsyncMock) -> None:
        detail = await GetBookingUseCase(booking_query_repo=booking_query_repo).get_booking(
            booking_id=1
        )

        assert detail.customer == JANE

    @pytest.mark.asyncio
    async def test_get_unknown_booking(self, booking_query_repo: AsyncMock) -> None:
        booking_query_repo.get_by_id_with_details.return_value = None

        with pytest.raises(NotFoundError, match='Booking not found'):
            await GetBookingUseCase(booking_query_repo=booking_query_repo).get_booking(
                booking_id=404
            )

    @pytest.mark.asyncio
    async def test_list_by_email(self, booking_query_repo: AsyncMock) -> None:
        use_case = ListBookingsUseCase(booking_query_repo=booking_query_repo)

        details = await use_case.list_bookings(email='jane@example.com')

        assert [d.booking.id for d in details] == [1, 2]
        booking_query_repo.list_by_customer.assert_awaited_once_with(customer_id=7)

    @pytest.mark.asyncio
    async def test_list_by_unknown_email_is_empty(self, booking_query_repo: AsyncMock) -> None:
        booking_query_repo.find_customer_by_email.return_value = None
        use_case = ListBookingsUseCase(booking_query_repo=booking_query_repo)

        assert await use_case.list_bookings(email='ghost@example.com') == []
        booking_query_repo.list_by_customer.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_without_email_returns_recent(self, booking_query_repo: AsyncMock) -> None:
        use_case = ListBookingsUseCase(booking_query_repo=booking_query_repo, recent_limit=100)

        details = await use_case.list_bookings()

        assert [d.booking.id for d in details] == [3]
        booking_query_repo.list_recent.assert_awaited_once_with(limit=100)


@pytest.mark.unit
class TestSearchBookingsUseCase:
    @pytest.mark.asyncio
    async def test_defaults(self, booking_query_repo: AsyncMock) -> None:
        use_case = SearchBookingsUseCase(booking_query_repo=booking_query_repo)

        page = await use_case.search()

        assert (page.limit, page.offset, page.total, page.has_more) == (50, 0, 1, False)
        booking_query_repo.search.assert_awaited_once_with(criteria=BookingSearchCriteria())

    @pytest.mark.asyncio
    async def test_filters_are_passed_through(self, booking_query_repo: AsyncMock) -> None:
        use_case = SearchBookingsUseCase(booking_query_repo=booking_query_repo)

        await use_case.search(
            restaurant_id=1,
            customer_email='jane@example.com',
            status='confirmed',
            date_from='2026-11-01',
            date_to='2026-11-30',
            table_id=2,
            limit=10,
            offset=20,
        )

        booking_query_repo.search.assert_awaited_once_with(
            criteria=BookingSearchCriteria(
                restaurant_id=1,
                customer_id=7,
                status=BookingStatus.CONFIRMED,
                date_from='2026-11-01',
                date_to='2026-11-30',
                table_id=2,
                limit=10,
                offset=20,
            )
        )

    @pytest.mark.asyncio
    async def test_unknown_customer_email_yields_empty_page(
        self, booking_query_repo: AsyncMock
    ) -> None:
        booking_query_repo.find_customer_by_email.return_value = None
        use_case = SearchBookingsUseCase(booking_query_repo=booking_query_repo)

        page = await use_case.search(customer_email='ghost@example.com', limit=5)

        assert (page.bookings, page.total, page.limit) == ([], 0, 5)
        booking_query_repo.search.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'kwargs,message',
        [
            ({'limit': 101}, 'Limit cannot exceed 100'),
            ({'limit': 0}, 'Limit must be at least 1'),
            ({'offset': -1}, 'Offset cannot be negative'),
            ({'status': 'seated'}, 'Invalid status'),
        ],
    )
    async def test_invalid_paging_and_filters(
        self, booking_query_repo: AsyncMock, kwargs: dict, message: str
    ) -> None:
        use_case = SearchBookingsUseCase(booking_query_repo=booking_query_repo)

        with pytest.raises(DomainError, match=message):
            await use_case.search(**kwargs)

    @pytest.mark.asyncio
    async def test_malformed_date_bound(self, booking_query_repo: AsyncMock) -> None:
        use_case = SearchBookingsUseCase(booking_query_repo=booking_query_repo)

        with pytest.raises(ValueError, match='Invalid date format'):
            await use_case.search(date_from='11/01/2026')

    def test_has_more(self) -> None:
        assert BookingPage(bookings=[], total=120, limit=50, offset=50).has_more is True
        assert BookingPage(bookings=[], total=100, limit=50, offset=50).has_more is False
