#!/usr/bin/env python3
"""
Database Seed Script
Populate demo data into the database

Features:
1. Restaurants - 3 restaurants with weekly opening hours and tables
2. Customers - 3 demo customers
3. Bookings - one confirmed booking per restaurant, a week from today on an open day

Notes:
- Run after `alembic upgrade head` (or `python script/reset_database.py`)
- Existing rows are left alone; the script aborts if restaurants already exist
"""

import asyncio
from dataclasses import dataclass, field
from datetime import date, timedelta

from sqlalchemy import func, select

from src.platform.database.orm_db_setting import dispose_engine, get_session_maker
from src.service.table_booking.domain.booking_calendar import day_of_week
from src.service.table_booking.driven_adapter.model.booking_model import BookingModel
from src.service.table_booking.driven_adapter.model.customer_model import CustomerModel
from src.service.table_booking.driven_adapter.model.restaurant_model import (
    DiningTableModel,
    OpeningHoursModel,
    RestaurantModel,
)


@dataclass
class RestaurantSeed:
    name: str
    description: str
    address: str
    phone: str
    email: str
    cuisine: str
    price_range: str
    # index = day_of_week (0 = Sunday); None = closed
    weekly_hours: list[tuple[str, str] | None]
    tables: list[tuple[str, int]] = field(default_factory=list)


RESTAURANTS = [
    RestaurantSeed(
        name='The Italian Corner',
        description='Authentic Italian cuisine in a cozy atmosphere',
        address='123 Main St, San Francisco, CA 94102',
        phone='(415) 555-0101',
        email='info@italiancorner.com',
        cuisine='Italian',
        price_range='$$$',
        weekly_hours=[('11:00', '22:00')] * 4 + [('11:00', '23:00')] * 3,
        tables=[('T1', 2), ('T2', 2), ('T3', 4), ('T4', 4), ('T5', 6), ('T6', 8)],
    ),
    RestaurantSeed(
        name='Sushi Paradise',
        description='Fresh sushi and Japanese delicacies',
        address='456 Market St, San Francisco, CA 94103',
        phone='(415) 555-0102',
        email='hello@sushiparadise.com',
        cuisine='Japanese',
        price_range='$$$$',
        weekly_hours=[('12:00', '21:00'), None]
        + [('12:00', '22:00')] * 3
        + [('12:00', '23:00')] * 2,
        tables=[('S1', 2), ('S2', 2), ('S3', 4), ('S4', 4), ('S5', 6)],
    ),
    RestaurantSeed(
        name='The Burger Joint',
        description='Gourmet burgers and craft beers',
        address='789 Mission St, San Francisco, CA 94104',
        phone='(415) 555-0103',
        email='contact@burgerjoint.com',
        cuisine='American',
        price_range='$$',
        weekly_hours=[('10:00', '22:00')] * 4 + [('10:00', '23:00')] + [('10:00', '00:00')] * 2,
        tables=[('B1', 2), ('B2', 4), ('B3', 4), ('B4', 6), ('B5', 8)],
    ),
]

CUSTOMERS = [
    ('John Doe', 'john@example.com', '(555) 123-4567'),
    ('Jane Smith', 'jane@example.com', '(555) 234-5678'),
    ('Bob Johnson', 'bob@example.com', '(555) 345-6789'),
]

# (restaurant index, table index, customer index, time, party size, special requests)
BOOKINGS = [
    (0, 2, 0, '19:00', 4, 'Window seat please'),
    (1, 0, 1, '18:30', 2, 'Anniversary celebration'),
    (2, 3, 2, '20:00', 6, 'Kids menu needed'),
]


def _next_open_day(seed: RestaurantSeed, start: date) -> date:
    candidate = start
    while seed.weekly_hours[day_of_week(candidate)] is None:
        candidate += timedelta(days=1)
    return candidate


async def seed() -> None:
    async with get_session_maker()() as session:
        existing = await session.scalar(select(func.count()).select_from(RestaurantModel))
        if existing:
            print(f'⚠️  {existing} restaurants already present, skipping seed')
            return

        restaurants: list[RestaurantModel] = []
        for seed_item in RESTAURANTS:
            restaurant = RestaurantModel(
                name=seed_item.name,
                description=seed_item.description,
                address=seed_item.address,
                phone=seed_item.phone,
                email=seed_item.email,
                cuisine=seed_item.cuisine,
                price_range=seed_item.price_range,
            )
            session.add(restaurant)
            await session.flush()
            for dow, hours in enumerate(seed_item.weekly_hours):
                session.add(
                    OpeningHoursModel(
                        restaurant_id=restaurant.id,
                        day_of_week=dow,
                        open_time=hours[0] if hours else '00:00',
                        close_time=hours[1] if hours else '00:00',
                        is_closed=hours is None,
                    )
                )
            for table_number, capacity in seed_item.tables:
                session.add(
                    DiningTableModel(
                        restaurant_id=restaurant.id,
                        table_number=table_number,
                        capacity=capacity,
                        is_active=True,
                    )
                )
            restaurants.append(restaurant)
            print(f'   🍽️  {seed_item.name}: {len(seed_item.tables)} tables')
        await session.flush()

        customers = [CustomerModel(name=n, email=e, phone=p) for n, e, p in CUSTOMERS]
        session.add_all(customers)
        await session.flush()
        print(f'   👤 {len(customers)} customers')

        week_ahead = date.today() + timedelta(days=7)
        for r_idx, t_idx, c_idx, booking_time, party_size, note in BOOKINGS:
            tables = (
                await session.scalars(
                    select(DiningTableModel)
                    .where(DiningTableModel.restaurant_id == restaurants[r_idx].id)
                    .order_by(DiningTableModel.id)
                )
            ).all()
            session.add(
                BookingModel(
                    restaurant_id=restaurants[r_idx].id,
                    table_id=tables[t_idx].id,
                    customer_id=customers[c_idx].id,
                    booking_date=_next_open_day(RESTAURANTS[r_idx], week_ahead).isoformat(),
                    booking_time=booking_time,
                    party_size=party_size,
                    status='confirmed',
                    special_requests=note,
                )
            )
        await session.commit()
        print(f'   📅 {len(BOOKINGS)} bookings')


async def main() -> None:
    print('🌱 Seeding database...')
    try:
        await seed()
        print('✅ Seed completed')
    finally:
        await dispose_engine()


if __name__ == '__main__':
    asyncio.run(main())
