from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, event, func, insert, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import QueuePool
from .config import Settings, settings
import logging

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# STORE CLIENT
# =============================================================================

class Store:
    """
    Owns the SQLAlchemy engine and its connection pool.

    Built once at startup and handed to every gateway. Connections are only
    ever taken through `connect()` / `begin()`, which give them back to the
    pool on every path, errors included.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, **engine_kwargs)
        event.listen(self.engine, "checkout", _receive_checkout)

    @classmethod
    def from_settings(cls, config: Settings = settings) -> "Store":
        engine_kwargs = dict(
            # Connection pool settings
            poolclass=QueuePool,
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            pool_recycle=config.DB_POOL_RECYCLE,
            # None blocks until a connection frees up
            pool_timeout=config.DB_POOL_TIMEOUT,

            # Test connection before using (detect disconnects)
            pool_pre_ping=True,

            echo=config.DB_ECHO_SQL,
        )
        if config.DATABASE_URL.startswith("mysql"):
            engine_kwargs["connect_args"] = {"connect_timeout": 10}
        return cls(config.DATABASE_URL, **engine_kwargs)

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Connection for read-only statements."""
        with self.engine.connect() as connection:
            yield connection

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Connection whose single statement is committed on exit."""
        with self.engine.begin() as connection:
            yield connection

    def check_connection(self) -> bool:
        try:
            with self.connect() as connection:
                connection.execute(select(1))
            logger.info("Database connection successful")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def _receive_checkout(dbapi_conn, connection_record, connection_proxy):
    """
    Event listener when connection is retrieved from pool.
    """
    logger.debug("Connection checked out from pool")


# =============================================================================
# INITIALIZATION
# =============================================================================

def seed_default_courses(store: Store) -> None:
    """Insert the default catalog when the courses table is empty."""
    from app.models.course import Course, DEFAULT_COURSES, DEFAULT_COURSE_DESCRIPTION

    courses = Course.__table__
    try:
        with store.begin() as connection:
            count = connection.execute(
                select(func.count()).select_from(courses)
            ).scalar_one()
            if count:
                return
            connection.execute(
                insert(courses),
                [{"name": name, "description": DEFAULT_COURSE_DESCRIPTION} for name in DEFAULT_COURSES],
            )
        logger.info(f"Seeded {len(DEFAULT_COURSES)} default courses")
    except SQLAlchemyError as e:
        logger.error(f"Seeding default courses failed: {e}")


def init_db(store: Store) -> None:
    """
    Create the four tables if absent, then seed courses.

    A table that fails to create is logged and skipped; startup goes on.
    """
    from app.models.admin import Admin
    from app.models.assignment import Assignment
    from app.models.course import Course
    from app.models.student import Student

    for model in (Student, Admin, Course, Assignment):
        table = model.__table__
        label = table.name.capitalize()
        try:
            table.create(bind=store.engine, checkfirst=True)
        except SQLAlchemyError as e:
            logger.error(f"{label} table creation failed: {e}")
            continue
        logger.info(f"{label} table ready")
        if model is Course:
            seed_default_courses(store)
