# appointments/services/catalog.py
"""Service catalogue lookups."""

from sqlalchemy.orm import Session

from ..errors import NotFoundError
from ..models import Services


def get_service(db: Session, service_id: int) -> Services:
    """
    Active service by ID.

    Deleted services are soft-deleted (is_active = False) and are treated
    as unknown for new slots and bookings.
    """
    service = (
        db.query(Services)
        .filter(Services.id == service_id, Services.is_active.is_(True))
        .first()
    )
    if not service:
        raise NotFoundError(f"Service {service_id} not found")
    return service


def list_active_services(db: Session) -> list[Services]:
    return (
        db.query(Services)
        .filter(Services.is_active.is_(True))
        .order_by(Services.name)
        .all()
    )
