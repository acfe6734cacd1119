from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import expression

Base = declarative_base()
metadata = Base.metadata

BOOKING_STATUSES = ("pending", "confirmed", "cancelled")
ACTIVE_BOOKING_FILTER = "status != 'cancelled'"


class Services(Base):
    __tablename__ = 'services'
    __table_args__ = (
        CheckConstraint('duration_minutes BETWEEN 5 AND 480', name='ck_services_duration'),
        CheckConstraint('price >= 0', name='ck_services_price'),
    )

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    is_active = Column(Boolean, nullable=False, server_default=expression.true())
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    bookings = relationship('Bookings', back_populates='service')


class WorkingHours(Base):
    __tablename__ = 'working_hours'
    __table_args__ = (
        CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_working_hours_day'),
        CheckConstraint('start_time < end_time', name='ck_working_hours_order'),
    )

    id = Column(Integer, primary_key=True)
    day_of_week = Column(Integer, nullable=False, unique=True)  # 0 = Sunday
    start_time = Column(Text, nullable=False)  # "HH:MM"
    end_time = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, server_default=expression.true())

    break_periods = relationship(
        'BreakPeriods',
        back_populates='working_hour',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='BreakPeriods.start_time',
    )


class BreakPeriods(Base):
    __tablename__ = 'break_periods'
    __table_args__ = (
        UniqueConstraint('working_hour_id', 'start_time', 'end_time'),
        CheckConstraint('start_time < end_time', name='ck_break_periods_order'),
    )

    id = Column(Integer, primary_key=True)
    working_hour_id = Column(
        ForeignKey('working_hours.id', ondelete='CASCADE'), nullable=False
    )
    start_time = Column(Text, nullable=False)
    end_time = Column(Text, nullable=False)
    name = Column(Text)
    is_active = Column(Boolean, nullable=False, server_default=expression.true())

    working_hour = relationship('WorkingHours', back_populates='break_periods')


class Bookings(Base):
    __tablename__ = 'bookings'
    __table_args__ = (
        CheckConstraint('start_time < end_time', name='ck_bookings_order'),
        # Race backstop: two live bookings can never share a start on one date
        Index(
            'uq_bookings_active_start',
            'booking_date',
            'start_time',
            unique=True,
            sqlite_where=text(ACTIVE_BOOKING_FILTER),
            postgresql_where=text(ACTIVE_BOOKING_FILTER),
        ),
        Index('ix_bookings_date', 'booking_date'),
    )

    id = Column(Integer, primary_key=True)
    service_id = Column(ForeignKey('services.id'), nullable=False)
    client_email = Column(Text, nullable=False)
    booking_date = Column(Text, nullable=False)  # "YYYY-MM-DD"
    start_time = Column(Text, nullable=False)  # "HH:MM"
    end_time = Column(Text, nullable=False)
    status = Column(
        Enum(*BOOKING_STATUSES, name='booking_status'),
        nullable=False,
        server_default=text("'pending'"),
    )
    created_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))
    updated_at = Column(Text, server_default=text('CURRENT_TIMESTAMP'))

    service = relationship('Services', back_populates='bookings')
