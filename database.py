# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (SQLite by default, MS SQL Server via DB_* settings)
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @app.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
     """
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool

import config
from utils.logger import get_logger

logger = get_logger(__name__)


def build_engine(url: str, **kwargs) -> Engine:
     """
     Create an engine for the given URL.

     SQLite engines get foreign key enforcement and case-sensitive LIKE
     switched on for every new connection; other backends use a QueuePool.
     """
     if url.startswith("sqlite"):
          kwargs.setdefault("connect_args", {"check_same_thread": False})
          new_engine = create_engine(url, echo=config.SQL_ECHO, **kwargs)
          event.listen(new_engine, "connect", _sqlite_on_connect)
          return new_engine

     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          echo=config.SQL_ECHO,
          **kwargs,
     )


def _sqlite_on_connect(dbapi_connection, connection_record) -> None:
     cursor = dbapi_connection.cursor()
     cursor.execute("PRAGMA foreign_keys=ON")
     cursor.execute("PRAGMA case_sensitive_like=ON")
     cursor.close()


# Create SQLAlchemy engine
engine = build_engine(config.DATABASE_URL)

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
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               owners = OwnerService.get_all(db)

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db(bind: Engine = None) -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=bind or engine)


def check_connection(bind: Engine = None) -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with (bind or engine).connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception as e:
          logger.error(f"Database connection failed: {e}")
          return False
