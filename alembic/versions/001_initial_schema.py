"""Initial schema: customer, flight, booking, travel_agent_booking

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-17

Every table carries a UNIQUE constraint on its natural key. Bookings keep the
client supplied customer_id and an owner_id foreign key that cascades deletes
from customer.
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'customer',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(25), nullable=False),
        sa.Column('last_name', sa.String(25), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone_number', sa.String(11), nullable=False),
        sa.UniqueConstraint('email', name='uq_customer_email'),
    )

    op.create_table(
        'flight',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('flight_number', sa.String(5), nullable=False),
        sa.Column('departure', sa.String(3), nullable=False),
        sa.Column('destination', sa.String(3), nullable=False),
        sa.UniqueConstraint('flight_number', name='uq_flight_flight_number'),
    )

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('flight_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('order_date', sa.Date(), nullable=False),
        sa.Column(
            'owner_id', sa.Integer(),
            sa.ForeignKey('customer.id', ondelete='CASCADE'),
            nullable=True,
        ),
        sa.UniqueConstraint('flight_id', 'order_date', name='uq_booking_flight_order_date'),
    )
    op.create_index('ix_booking_customer_id', 'booking', ['customer_id'])

    op.create_table(
        'travel_agent_booking',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('flight_id', sa.Integer(), nullable=False),
        sa.Column('taxi_id', sa.Integer(), nullable=False),
        sa.Column('hotel_id', sa.Integer(), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('order_date', sa.Date(), nullable=False),
        sa.Column(
            'owner_id', sa.Integer(),
            sa.ForeignKey('customer.id', ondelete='CASCADE'),
            nullable=True,
        ),
        sa.UniqueConstraint(
            'flight_id', 'order_date', name='uq_travel_agent_booking_flight_order_date'
        ),
    )
    op.create_index(
        'ix_travel_agent_booking_customer_id', 'travel_agent_booking', ['customer_id']
    )


def downgrade() -> None:
    op.drop_index('ix_travel_agent_booking_customer_id', table_name='travel_agent_booking')
    op.drop_table('travel_agent_booking')
    op.drop_index('ix_booking_customer_id', table_name='booking')
    op.drop_table('booking')
    op.drop_table('flight')
    op.drop_table('customer')
