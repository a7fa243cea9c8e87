from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.command.bulk_cancel_bookings_use_case import (
    BulkCancelBookingsUseCase,
)
from src.service.table_booking.app.command.bulk_update_booking_status_use_case import (
    BulkUpdateBookingStatusUseCase,
)
from src.service.table_booking.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.table_booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.table_booking.app.command.update_booking_status_use_case import (
    UpdateBookingStatusUseCase,
)
from src.service.table_booking.app.command.update_booking_use_case import UpdateBookingUseCase
from src.service.table_booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.table_booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.table_booking.app.query.search_bookings_use_case import SearchBookingsUseCase
from src.service.table_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingDetailResponse,
    BookingResponse,
    BookingSearchResponse,
    BookingStatusUpdateRequest,
    BookingUpdateRequest,
    BulkCancelRequest,
    BulkOperationResponse,
    BulkStatusUpdateRequest,
    MessageWithBookingResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=BookingResponse)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.create_booking(
        restaurant_id=request.restaurant_id,
        table_id=request.table_id,
        customer_name=request.customer_name,
        customer_email=request.customer_email,
        customer_phone=request.customer_phone,
        booking_date=request.booking_date,
        booking_time=request.booking_time,
        party_size=request.party_size,
        special_requests=request.special_requests,
    )
    return BookingResponse.from_entity(booking)


@router.get('', response_model=List[BookingDetailResponse])
@Logger.io
async def list_bookings(
    email: Optional[str] = None,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingDetailResponse]:
    details = await use_case.list_bookings(email=email)
    return [BookingDetailResponse.from_detail(d) for d in details]


@router.get('/search', response_model=BookingSearchResponse)
@Logger.io
async def search_bookings(
    restaurant_id: Optional[int] = None,
    customer_email: Optional[str] = None,
    booking_status: Optional[str] = Query(default=None, alias='status'),
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    table_id: Optional[int] = None,
    limit: Optional[int] = None,
    offset: int = 0,
    use_case: SearchBookingsUseCase = Depends(SearchBookingsUseCase.depends),
) -> BookingSearchResponse:
    page = await use_case.search(
        restaurant_id=restaurant_id,
        customer_email=customer_email,
        status=booking_status,
        date_from=date_from,
        date_to=date_to,
        table_id=table_id,
        limit=limit,
        offset=offset,
    )
    return BookingSearchResponse.from_page(page)


@router.patch('/bulk', response_model=BulkOperationResponse)
@Logger.io
async def bulk_update_booking_status(
    request: BulkStatusUpdateRequest,
    use_case: BulkUpdateBookingStatusUseCase = Depends(BulkUpdateBookingStatusUseCase.depends),
) -> BulkOperationResponse:
    result = await use_case.bulk_update_status(
        booking_ids=request.booking_ids, status=request.status
    )
    return BulkOperationResponse.from_result(result)


@router.delete('/bulk', response_model=BulkOperationResponse)
@Logger.io
async def bulk_cancel_bookings(
    request: BulkCancelRequest,
    use_case: BulkCancelBookingsUseCase = Depends(BulkCancelBookingsUseCase.depends),
) -> BulkOperationResponse:
    result = await use_case.bulk_cancel(booking_ids=request.booking_ids)
    return BulkOperationResponse.from_result(result)


@router.get('/{booking_id}', response_model=BookingDetailResponse)
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingDetailResponse:
    detail = await use_case.get_booking(booking_id=booking_id)
    return BookingDetailResponse.from_detail(detail)


@router.put('/{booking_id}', response_model=BookingResponse)
@Logger.io
async def update_booking(
    booking_id: int,
    request: BookingUpdateRequest,
    use_case: UpdateBookingUseCase = Depends(UpdateBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.update_booking(booking_id=booking_id, changes=request.to_update())
    return BookingResponse.from_entity(booking)


@router.delete('/{booking_id}', response_model=MessageWithBookingResponse)
@Logger.io
async def cancel_booking(
    booking_id: int,
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> MessageWithBookingResponse:
    booking = await use_case.cancel_booking(booking_id=booking_id)
    return MessageWithBookingResponse(
        message='Booking cancelled successfully', booking=BookingResponse.from_entity(booking)
    )


@router.patch('/{booking_id}/status', response_model=MessageWithBookingResponse)
@Logger.io
async def update_booking_status(
    booking_id: int,
    request: BookingStatusUpdateRequest,
    use_case: UpdateBookingStatusUseCase = Depends(UpdateBookingStatusUseCase.depends),
) -> MessageWithBookingResponse:
    booking = await use_case.update_status(booking_id=booking_id, status=request.status)
    return MessageWithBookingResponse(
        message=f'Booking status updated to {booking.status}',
        booking=BookingResponse.from_entity(booking),
    )
