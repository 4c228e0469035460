"""SQLAlchemy engine, session factory and declarative base."""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from eventboard.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db(bind=None) -> None:
    """Create all tables (for SQLite dev mode and tests)."""
    # Import all models so Base.metadata knows about them
    import eventboard.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """Yield a session from SessionLocal, closing it when the caller is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
