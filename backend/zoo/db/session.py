"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker, Session
from zoo.core.config import settings
from zoo.core.exceptions import ConflictError
from zoo.db.base import Base


def _connect_args(database_url: str) -> dict:
    """SQLite connections are shared across the threadpool FastAPI runs sync code in."""
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Import models so their tables are registered on Base.metadata
    import zoo.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def commit_or_conflict(db: Session, detail: str) -> None:
    """
    Commit the current unit of work.

    A unique-constraint violation at commit time (duplicate name, or a
    habitat claimed by a concurrent move) is rolled back and reported as
    a ConflictError.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ConflictError(detail) from e
