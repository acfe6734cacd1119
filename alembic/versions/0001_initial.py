"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import expression

revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

ACTIVE_BOOKING_FILTER = sa.text("status != 'cancelled'")


def upgrade():
    op.create_table(
        'services',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('duration_minutes', sa.Integer, nullable=False),
        sa.Column('price', sa.Float, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=expression.true()),
        sa.Column('created_at', sa.Text, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('duration_minutes BETWEEN 5 AND 480', name='ck_services_duration'),
        sa.CheckConstraint('price >= 0', name='ck_services_price'),
    )

    op.create_table(
        'working_hours',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('day_of_week', sa.Integer, nullable=False, unique=True),
        sa.Column('start_time', sa.Text, nullable=False),
        sa.Column('end_time', sa.Text, nullable=False),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=expression.true()),
        sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_working_hours_day'),
        sa.CheckConstraint('start_time < end_time', name='ck_working_hours_order'),
    )

    op.create_table(
        'break_periods',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column(
            'working_hour_id',
            sa.Integer,
            sa.ForeignKey('working_hours.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('start_time', sa.Text, nullable=False),
        sa.Column('end_time', sa.Text, nullable=False),
        sa.Column('name', sa.Text),
        sa.Column('is_active', sa.Boolean, nullable=False, server_default=expression.true()),
        sa.UniqueConstraint('working_hour_id', 'start_time', 'end_time'),
        sa.CheckConstraint('start_time < end_time', name='ck_break_periods_order'),
    )

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer, primary_key=True),
        sa.Column('service_id', sa.Integer, sa.ForeignKey('services.id'), nullable=False),
        sa.Column('client_email', sa.Text, nullable=False),
        sa.Column('booking_date', sa.Text, nullable=False),
        sa.Column('start_time', sa.Text, nullable=False),
        sa.Column('end_time', sa.Text, nullable=False),
        sa.Column(
            'status',
            sa.Enum('pending', 'confirmed', 'cancelled', name='booking_status'),
            nullable=False,
            server_default=sa.text("'pending'"),
        ),
        sa.Column('created_at', sa.Text, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.Column('updated_at', sa.Text, server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('start_time < end_time', name='ck_bookings_order'),
    )
    op.create_index('ix_bookings_date', 'bookings', ['booking_date'])
    op.create_index(
        'uq_bookings_active_start',
        'bookings',
        ['booking_date', 'start_time'],
        unique=True,
        sqlite_where=ACTIVE_BOOKING_FILTER,
        postgresql_where=ACTIVE_BOOKING_FILTER,
    )


def downgrade():
    op.drop_index('uq_bookings_active_start', table_name='bookings')
    op.drop_index('ix_bookings_date', table_name='bookings')
    op.drop_table('bookings')
    op.drop_table('break_periods')
    op.drop_table('working_hours')
    op.drop_table('services')
    sa.Enum(name='booking_status').drop(op.get_bind(), checkfirst=True)
