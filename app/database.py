from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker, DeclarativeBase, Session
from sqlalchemy.pool import QueuePool
from app.config import settings
from app.utils.exceptions import DuplicateEntryException
import logging

logger = logging.getLogger(__name__)


# ─── Engine ────────────────────────────────────────────────────────────────────
def enable_sqlite_foreign_keys(target: Engine) -> None:
    """SQLite ships with FK enforcement off; ON DELETE CASCADE needs it on."""

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(
    settings.DATABASE_URL,
    poolclass=QueuePool,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
    pool_timeout=settings.DATABASE_POOL_TIMEOUT,
    pool_pre_ping=True,          # Detect stale connections before using them
    echo=settings.DATABASE_ECHO,
    connect_args={"check_same_thread": False} if settings.is_sqlite else {},
)

if settings.is_sqlite:
    enable_sqlite_foreign_keys(engine)


# ─── Session Factory ───────────────────────────────────────────────────────────
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,      # Avoid DetachedInstanceError after commit
)


# ─── Base Model ────────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.
    All models in app/models/ should inherit from this class.
    """
    pass


# ─── Dependency Injection ──────────────────────────────────────────────────────
def get_db():
    """
    FastAPI dependency that provides a database session per request.
    Rolls back on any error and always closes the session, so reads that
    never commit leave no transaction open.

    Usage:
        @router.get("/items")
        def get_items(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# ─── Unit of Work ──────────────────────────────────────────────────────────────
def commit_or_conflict(db: Session, message: str, field: str | None = None) -> None:
    """
    Commit the pending unit of work.

    The unique indexes are the final word on uniqueness: if a concurrent
    writer slipped past the service pre-check, the commit fails here, the
    whole unit is rolled back and the caller sees the same 409 as the
    pre-check would have raised.
    """
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Commit rejected by constraint: {e.orig}")
        raise DuplicateEntryException(message, field=field) from e


# ─── Health Check ──────────────────────────────────────────────────────────────
def check_db_connection(target: Engine | None = None) -> bool:
    """Verify database is reachable. Used at startup and by /health."""
    try:
        with (target or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
