"""
Unit tests for the Booking entity lifecycle

confirmed -> cancelled | completed | no_show; the three outcomes are terminal.
"""

from datetime import timedelta

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.domain.enum.booking_status import BookingStatus
from test.service.table_booking.unit.test_helpers import TODAY


FUTURE_DATE = (TODAY + timedelta(days=14)).isoformat()
PAST_DATE = (TODAY - timedelta(days=3)).isoformat()


def _booking(status: BookingStatus = BookingStatus.CONFIRMED, booking_date: str = FUTURE_DATE) -> Booking:
    return Booking(
        id=1,
        restaurant_id=1,
        table_id=2,
        customer_id=7,
        booking_date=booking_date,
        booking_time='19:00',
        party_size=4,
        status=status,
    )


class TestBookingCreate:
    def test_new_booking_is_confirmed(self) -> None:
        booking = Booking.create(
            restaurant_id=1,
            table_id=2,
            customer_id=7,
            booking_date=FUTURE_DATE,
            booking_time='19:00',
            party_size=4,
            special_requests='',
        )

        assert booking.status is BookingStatus.CONFIRMED
        assert booking.id is None
        assert booking.special_requests is None
        assert booking.created_at == booking.updated_at

    def test_status_is_coerced_from_string(self) -> None:
        booking = Booking(
            restaurant_id=1,
            table_id=2,
            customer_id=7,
            booking_date=FUTURE_DATE,
            booking_time='19:00',
            party_size=4,
            status='no_show',  # pyrefly: ignore[bad-argument-type]
        )

        assert booking.status is BookingStatus.NO_SHOW


class TestStatusTransitions:
    @pytest.mark.parametrize(
        'target', [BookingStatus.CANCELLED, BookingStatus.COMPLETED, BookingStatus.NO_SHOW]
    )
    def test_confirmed_may_move_anywhere(self, target: BookingStatus) -> None:
        updated = _booking().transition_to(target, today=TODAY)

        assert updated.status is target

    def test_transition_returns_a_new_booking(self) -> None:
        original = _booking()

        original.transition_to(BookingStatus.COMPLETED, today=TODAY)

        assert original.status is BookingStatus.CONFIRMED

    @pytest.mark.parametrize(
        'current', [BookingStatus.CANCELLED, BookingStatus.COMPLETED, BookingStatus.NO_SHOW]
    )
    def test_terminal_states_cannot_move(self, current: BookingStatus) -> None:
        with pytest.raises(DomainError, match=f'Cannot change status of {current} booking'):
            _booking(current).transition_to(BookingStatus.CONFIRMED, today=TODAY)

    def test_completed_cannot_be_cancelled(self) -> None:
        with pytest.raises(DomainError, match='Cannot change status of completed booking'):
            _booking(BookingStatus.COMPLETED).transition_to(BookingStatus.CANCELLED, today=TODAY)

    def test_reapplying_the_same_status_is_allowed(self) -> None:
        booking = _booking(BookingStatus.COMPLETED)

        assert booking.transition_to(BookingStatus.COMPLETED, today=TODAY).status is BookingStatus.COMPLETED

    def test_past_confirmed_booking_cannot_be_cancelled(self) -> None:
        booking = _booking(booking_date=PAST_DATE)

        assert booking.transition_problem(BookingStatus.CANCELLED, today=TODAY) == (
            'Cannot cancel past bookings'
        )
        # staff can still close it out
        assert booking.transition_to(BookingStatus.NO_SHOW, today=TODAY).status is BookingStatus.NO_SHOW

    def test_past_cancelled_booking_cannot_be_cancelled_again(self) -> None:
        booking = _booking(BookingStatus.CANCELLED, booking_date=PAST_DATE)

        with pytest.raises(DomainError, match='Cannot cancel past bookings'):
            booking.transition_to(BookingStatus.CANCELLED, today=TODAY)

    def test_future_cancelled_booking_may_reapply_cancelled(self) -> None:
        booking = _booking(BookingStatus.CANCELLED)

        assert booking.transition_to(BookingStatus.CANCELLED, today=TODAY).status is BookingStatus.CANCELLED

    def test_booking_for_today_can_be_cancelled(self) -> None:
        booking = _booking(booking_date=TODAY.isoformat())

        assert booking.cancel(today=TODAY).status is BookingStatus.CANCELLED


class TestCancel:
    def test_cancel_twice(self) -> None:
        with pytest.raises(DomainError, match='Booking is already cancelled'):
            _booking(BookingStatus.CANCELLED).cancel(today=TODAY)

    def test_cancel_completed(self) -> None:
        with pytest.raises(DomainError, match='Cannot change status of completed booking'):
            _booking(BookingStatus.COMPLETED).cancel(today=TODAY)

    def test_cancel_past(self) -> None:
        with pytest.raises(DomainError, match='Cannot cancel past bookings'):
            _booking(booking_date=PAST_DATE).cancel(today=TODAY)


class TestModify:
    def test_cancelled_booking_is_not_modifiable(self) -> None:
        with pytest.raises(DomainError, match='Cannot modify cancelled booking'):
            _booking(BookingStatus.CANCELLED).ensure_modifiable()

    def test_reschedule_keeps_identity_and_status(self) -> None:
        booking = _booking()

        moved = booking.reschedule(
            table_id=1,
            booking_date=FUTURE_DATE,
            booking_time='20:00',
            party_size=2,
            special_requests='Quiet corner',
        )

        assert (moved.id, moved.status, moved.customer_id) == (1, BookingStatus.CONFIRMED, 7)
        assert (moved.table_id, moved.booking_time, moved.party_size) == (1, '20:00', 2)
        assert moved.special_requests == 'Quiet corner'


class TestBookingStatusParse:
    def test_parse_known_status(self) -> None:
        assert BookingStatus.parse('no_show') is BookingStatus.NO_SHOW

    def test_parse_unknown_status(self) -> None:
        with pytest.raises(
            DomainError,
            match='Invalid status. Must be one of: confirmed, cancelled, completed, no_show',
        ):
            BookingStatus.parse('seated')


class TestCustomer:
    def test_create_trims_contact_details(self) -> None:
        customer = Customer.create(name='  Jane Doe ', email=' jane@example.com', phone='0912345678 ')

        assert (customer.name, customer.email, customer.phone) == (
            'Jane Doe',
            'jane@example.com',
            '0912345678',
        )

    @pytest.mark.parametrize(
        'field,value,message',
        [
            ('name', 'J', 'Name must be at least 2 characters'),
            ('email', 'jane.example.com', 'Invalid email address'),
            ('email', 'jane@example', 'Invalid email address'),
            ('phone', '12345', 'Phone number must be at least 10 characters'),
        ],
    )
    def test_create_rejects_invalid_contact(self, field: str, value: str, message: str) -> None:
        contact = {'name': 'Jane Doe', 'email': 'jane@example.com', 'phone': '0912345678'}
        contact[field] = value

        with pytest.raises(DomainError, match=message):
            Customer.create(**contact)

    def test_with_contact_only_changes_supplied_fields(self) -> None:
        customer = Customer(id=7, name='Jane Doe', email='jane@example.com', phone='0912345678')

        updated = customer.with_contact(phone='0987654321')

        assert updated.id == 7
        assert updated.name == 'Jane Doe'
        assert updated.phone == '0987654321'
