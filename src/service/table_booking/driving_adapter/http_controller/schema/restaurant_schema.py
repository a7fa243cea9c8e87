from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.service.table_booking.domain.entity.restaurant_entity import (
    OpeningHours,
    Restaurant,
    Table,
)


class OpeningHoursResponse(BaseModel):
    day_of_week: int
    open_time: str
    close_time: str
    is_closed: bool

    @classmethod
    def from_entity(cls, hours: OpeningHours) -> 'OpeningHoursResponse':
        return cls(
            day_of_week=hours.day_of_week,
            open_time=hours.open_time,
            close_time=hours.close_time,
            is_closed=hours.is_closed,
        )


class TableResponse(BaseModel):
    id: int
    table_number: str
    capacity: int
    is_active: bool

    @classmethod
    def from_entity(cls, table: Table) -> 'TableResponse':
        return cls(
            id=table.id,
            table_number=table.table_number,
            capacity=table.capacity,
            is_active=table.is_active,
        )


class RestaurantResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'name': 'La Bella Italia',
                'description': 'Authentic Italian cuisine in a cozy atmosphere',
                'address': '123 Main St, Downtown',
                'phone': '555-0101',
                'email': 'info@labellaitalia.com',
                'cuisine': 'Italian',
                'price_range': '$$$',
                'image_url': None,
                'created_at': '2026-01-10T10:30:00',
            }
        },
    }

    id: int
    name: str
    description: Optional[str] = None
    address: str
    phone: str
    email: Optional[str] = None
    cuisine: Optional[str] = None
    price_range: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, restaurant: Restaurant) -> 'RestaurantResponse':
        return cls(
            id=restaurant.id,
            name=restaurant.name,
            description=restaurant.description,
            address=restaurant.address,
            phone=restaurant.phone,
            email=restaurant.email,
            cuisine=restaurant.cuisine,
            price_range=restaurant.price_range,
            image_url=restaurant.image_url,
            created_at=restaurant.created_at,
        )


class RestaurantDetailResponse(RestaurantResponse):
    opening_hours: List[OpeningHoursResponse] = []
    tables: List[TableResponse] = []

    @classmethod
    def from_entity(cls, restaurant: Restaurant) -> 'RestaurantDetailResponse':
        return cls(
            **RestaurantResponse.from_entity(restaurant).model_dump(),
            opening_hours=[OpeningHoursResponse.from_entity(h) for h in restaurant.opening_hours],
            tables=[TableResponse.from_entity(t) for t in restaurant.tables],
        )
