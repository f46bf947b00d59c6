# database.py
"""
SQLAlchemy database connection, session and transaction management.

This module provides:
- Engine configuration (Azure SQL through pymssql in production, SQLite locally)
- Session factory for dependency injection
- Transaction scope used by every multi-row mutation

Usage:
     from database import get_session, transaction

     @router.post("/items")
     def create_item(db: Session = Depends(get_session)):
          with transaction(db):
               db.add(Item(...))
"""
import logging
from contextlib import contextmanager
from typing import Callable, Generator, TypeVar

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

from config import DATABASE_URL, SQL_ECHO

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_engine(url: str, **kwargs) -> Engine:
     """
     Create an engine for `url`.

     Non-SQLite URLs get a bounded connection pool; SQLite connections are
     opened with foreign key enforcement switched on.
     """
     if url.startswith("sqlite"):
          connect_args = kwargs.pop("connect_args", {})
          connect_args.setdefault("check_same_thread", False)
          engine = create_engine(url, connect_args=connect_args, echo=SQL_ECHO, **kwargs)

          @event.listens_for(engine, "connect")
          def _enable_foreign_keys(dbapi_connection, connection_record):
               cursor = dbapi_connection.cursor()
               cursor.execute("PRAGMA foreign_keys=ON")
               cursor.close()

          return engine

     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          echo=SQL_ECHO,
          **kwargs,
     )


engine = build_engine(DATABASE_URL)

# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
     finally:
          session.close()


@contextmanager
def transaction(db: Session) -> Generator[Session, None, None]:
     """
     Run a block of writes as one unit of work.

     Commits when the block exits normally; rolls back and re-raises when it
     raises. Blob store calls made inside the block are not undone.
     """
     try:
          yield db
          db.commit()
     except Exception:
          db.rollback()
          raise


def run_in_transaction(db: Session, fn: Callable[[Session], T]) -> T:
     """Call `fn` with the session inside a transaction and return its result."""
     with transaction(db):
          return fn(db)


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               users = db.query(User).all()
     """
     session = SessionLocal()
     try:
          with transaction(session):
               yield session
     finally:
          session.close()


def init_db(bind: Engine = None) -> None:
     """
     Create all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=bind or engine)


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception:
          logger.exception("Database connection failed")
          return False
