from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from src.platform.database.orm_db_setting import Base
from src.platform.database.unit_of_work import SLOT_UNIQUE_INDEX


if TYPE_CHECKING:
    from src.service.table_booking.driven_adapter.model.customer_model import CustomerModel
    from src.service.table_booking.driven_adapter.model.restaurant_model import (
        DiningTableModel,
        RestaurantModel,
    )


class BookingModel(Base):
    __tablename__ = 'booking'
    __table_args__ = (
        # At most one confirmed booking per slot
        Index(
            SLOT_UNIQUE_INDEX,
            'table_id',
            'booking_date',
            'booking_time',
            unique=True,
            postgresql_where=text("status = 'confirmed'"),
        ),
        Index('ix_booking_customer_restaurant_date', 'customer_id', 'restaurant_id', 'booking_date'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('restaurant.id'), nullable=False, index=True
    )
    table_id: Mapped[int] = mapped_column(Integer, ForeignKey('dining_table.id'), nullable=False)
    customer_id: Mapped[int] = mapped_column(Integer, ForeignKey('customer.id'), nullable=False)
    booking_date: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    booking_time: Mapped[str] = mapped_column(String(5), nullable=False)
    party_size: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='confirmed', nullable=False)
    special_requests: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    restaurant: Mapped['RestaurantModel'] = relationship(viewonly=True, lazy='raise')
    table: Mapped['DiningTableModel'] = relationship(viewonly=True, lazy='raise')
    customer: Mapped['CustomerModel'] = relationship(viewonly=True, lazy='raise')
