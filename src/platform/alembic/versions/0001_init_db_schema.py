"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Schema:
- restaurant: Restaurants (read-only for the booking engine)
- opening_hours: One row per restaurant and weekday (0 = Sunday)
- dining_table: Bookable tables with capacity and active flag
- customer: Customers keyed by unique email
- booking: Reservations; partial unique index keeps one confirmed booking per slot
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        'restaurant',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('cuisine', sa.String(100), nullable=True),
        sa.Column('price_range', sa.String(10), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )

    op.create_table(
        'opening_hours',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'restaurant_id',
            sa.Integer(),
            sa.ForeignKey('restaurant.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('day_of_week', sa.Integer(), nullable=False),
        sa.Column('open_time', sa.String(5), nullable=False),
        sa.Column('close_time', sa.String(5), nullable=False),
        sa.Column('is_closed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.UniqueConstraint('restaurant_id', 'day_of_week'),
        sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_opening_hours_day_of_week'),
    )
    op.create_index('ix_opening_hours_restaurant_id', 'opening_hours', ['restaurant_id'])

    op.create_table(
        'dining_table',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            'restaurant_id',
            sa.Integer(),
            sa.ForeignKey('restaurant.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('table_number', sa.String(20), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.CheckConstraint('capacity > 0', name='ck_dining_table_capacity_positive'),
    )
    op.create_index('ix_dining_table_restaurant_id', 'dining_table', ['restaurant_id'])

    op.create_table(
        'customer',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index('ix_customer_email', 'customer', ['email'], unique=True)

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('restaurant_id', sa.Integer(), sa.ForeignKey('restaurant.id'), nullable=False),
        sa.Column('table_id', sa.Integer(), sa.ForeignKey('dining_table.id'), nullable=False),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customer.id'), nullable=False),
        sa.Column('booking_date', sa.String(10), nullable=False),
        sa.Column('booking_time', sa.String(5), nullable=False),
        sa.Column('party_size', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='confirmed'),
        sa.Column('special_requests', sa.Text(), nullable=True),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.CheckConstraint('party_size > 0', name='ck_booking_party_size_positive'),
        sa.CheckConstraint(
            "status IN ('confirmed', 'cancelled', 'completed', 'no_show')",
            name='ck_booking_status',
        ),
    )
    op.create_index('ix_booking_restaurant_id', 'booking', ['restaurant_id'])
    op.create_index('ix_booking_booking_date', 'booking', ['booking_date'])
    op.create_index(
        'ix_booking_customer_restaurant_date',
        'booking',
        ['customer_id', 'restaurant_id', 'booking_date'],
    )
    op.create_index(
        'uq_booking_confirmed_slot',
        'booking',
        ['table_id', 'booking_date', 'booking_time'],
        unique=True,
        postgresql_where=sa.text("status = 'confirmed'"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('booking')
    op.drop_table('customer')
    op.drop_table('dining_table')
    op.drop_table('opening_hours')
    op.drop_table('restaurant')
