from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.dto.booking_search import BookingPage
from src.service.table_booking.app.dto.booking_update import BookingUpdate
from src.service.table_booking.app.dto.bulk_operation_result import BulkOperationResult
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.driving_adapter.http_controller.schema.restaurant_schema import (
    RestaurantResponse,
    TableResponse,
)


class BookingCreateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'restaurant_id': 1,
                'table_id': 2,
                'customer_name': 'Jane Doe',
                'customer_email': 'jane@example.com',
                'customer_phone': '0912345678',
                'booking_date': '2026-11-02',
                'booking_time': '19:00',
                'party_size': 4,
                'special_requests': 'Window seat please',
            }
        },
    }

    restaurant_id: int
    table_id: int
    customer_name: str
    customer_email: str
    customer_phone: str
    booking_date: str
    booking_time: str
    party_size: int
    special_requests: Optional[str] = None


class BookingUpdateRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'examples': [
                {'booking_time': '20:00', 'party_size': 2},
                {'special_requests': 'Birthday cake at dessert'},
            ]
        },
    }

    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    booking_date: Optional[str] = None
    booking_time: Optional[str] = None
    party_size: Optional[int] = None
    table_id: Optional[int] = None
    special_requests: Optional[str] = None

    def to_update(self) -> BookingUpdate:
        special_requests = self.special_requests
        # explicit null clears the note, an absent key keeps it
        if 'special_requests' in self.model_fields_set and special_requests is None:
            special_requests = ''
        return BookingUpdate(
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            customer_phone=self.customer_phone,
            booking_date=self.booking_date,
            booking_time=self.booking_time,
            party_size=self.party_size,
            table_id=self.table_id,
            special_requests=special_requests,
        )


class BookingStatusUpdateRequest(BaseModel):
    status: str

    model_config = {'json_schema_extra': {'example': {'status': 'completed'}}}


class BulkStatusUpdateRequest(BaseModel):
    booking_ids: List[int]
    status: str

    model_config = {'json_schema_extra': {'example': {'booking_ids': [1, 2, 3], 'status': 'completed'}}}


class BulkCancelRequest(BaseModel):
    booking_ids: List[int]

    model_config = {'json_schema_extra': {'example': {'booking_ids': [1, 2, 3]}}}


class CustomerResponse(BaseModel):
    id: Optional[int] = None
    name: str
    email: str
    phone: str

    @classmethod
    def from_entity(cls, customer: Customer) -> 'CustomerResponse':
        return cls(id=customer.id, name=customer.name, email=customer.email, phone=customer.phone)


class BookingResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 42,
                'restaurant_id': 1,
                'table_id': 2,
                'customer_id': 7,
                'booking_date': '2026-11-02',
                'booking_time': '19:00',
                'party_size': 4,
                'status': 'confirmed',
                'special_requests': None,
                'created_at': '2026-10-18T10:30:00',
                'updated_at': '2026-10-18T10:30:00',
            }
        },
    }

    id: int
    restaurant_id: int
    table_id: int
    customer_id: int
    booking_date: str
    booking_time: str
    party_size: int
    status: str
    special_requests: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id,  # pyrefly: ignore[bad-argument-type]
            restaurant_id=booking.restaurant_id,
            table_id=booking.table_id,
            customer_id=booking.customer_id,
            booking_date=booking.booking_date,
            booking_time=booking.booking_time,
            party_size=booking.party_size,
            status=booking.status.value,
            special_requests=booking.special_requests,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )


class BookingDetailResponse(BookingResponse):
    restaurant: Optional[RestaurantResponse] = None
    table: Optional[TableResponse] = None
    customer: Optional[CustomerResponse] = None

    @classmethod
    def from_detail(cls, detail: BookingDetail) -> 'BookingDetailResponse':
        return cls(
            **BookingResponse.from_entity(detail.booking).model_dump(),
            restaurant=RestaurantResponse.from_entity(detail.restaurant) if detail.restaurant else None,
            table=TableResponse.from_entity(detail.table) if detail.table else None,
            customer=CustomerResponse.from_entity(detail.customer) if detail.customer else None,
        )


class MessageWithBookingResponse(BaseModel):
    message: str
    booking: BookingResponse


class BulkOperationResponse(BaseModel):
    message: str
    count: int
    bookings: List[BookingResponse]

    @classmethod
    def from_result(cls, result: BulkOperationResult) -> 'BulkOperationResponse':
        return cls(
            message=result.message,
            count=result.count,
            bookings=[BookingResponse.from_entity(b) for b in result.bookings],
        )


class BookingSearchResponse(BaseModel):
    bookings: List[BookingDetailResponse]
    total: int
    limit: int
    offset: int
    has_more: bool

    @classmethod
    def from_page(cls, page: BookingPage) -> 'BookingSearchResponse':
        return cls(
            bookings=[BookingDetailResponse.from_detail(d) for d in page.bookings],
            total=page.total,
            limit=page.limit,
            offset=page.offset,
            has_more=page.has_more,
        )
