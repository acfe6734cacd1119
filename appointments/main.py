import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from .config import settings
from .database import SessionLocal
from .errors import ConflictError, NotFoundError, ValidationError
from .redis_client import redis_client
from .routers import admin_bookings, bookings, break_periods, services, slots, working_hours
from .services.bookings.locks import LockTimeout

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Appointments API")

app.include_router(services.router)
app.include_router(slots.router)
app.include_router(bookings.router)
app.include_router(services.admin_router)
app.include_router(admin_bookings.router)
app.include_router(working_hours.router)
app.include_router(break_periods.router)


# ===== Error mapping =====

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "errors": exc.errors},
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})


@app.exception_handler(LockTimeout)
async def lock_timeout_handler(request: Request, exc: LockTimeout):
    logger.error(f"Admission lock timeout on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Booking is busy, please try again"},
    )


@app.get("/health")
def health():
    db = SessionLocal()
    try:
        db_ok = db.execute(text("SELECT 1")).scalar() == 1
    finally:
        db.close()
    return {
        "db": db_ok,
        "redis": redis_client.ping() if redis_client is not None else None,
    }
