from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from .config import settings


def build_engine(url: str):
    """Create an engine; SQLite gets thread sharing and foreign keys enabled."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True)

    # sessions are used from the FastAPI threadpool
    engine = create_engine(url, connect_args={"check_same_thread": False})

    # ON DELETE CASCADE for break periods depends on this
    @event.listens_for(engine, "connect")
    def enable_sqlite_fk(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


engine = build_engine(settings.resolved_database_url)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


# FastAPI dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
