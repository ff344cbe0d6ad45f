from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from .base import Base
from core.config import settings


def build_engine(database_url: str, echo: bool = False):
    """Create an engine, enabling foreign keys when the backend is SQLite"""
    is_sqlite = database_url.startswith("sqlite")
    options = {"echo": echo}
    if is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            options["poolclass"] = StaticPool
    else:
        options["pool_pre_ping"] = True

    new_engine = create_engine(database_url, **options)

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# Create database engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create all tables
def create_tables(bind=None):
    from models import category, product  # noqa: F401  registers mapped classes
    Base.metadata.create_all(bind=bind or engine)

# Dependency to get database session
def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
