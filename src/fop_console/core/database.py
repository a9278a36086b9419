"""
Database Connection and Session Management

SQLAlchemy database connection, session management, and schema creation
for the shop database.
"""

from typing import Optional, Generator
from contextlib import contextmanager
from sqlalchemy import create_engine, Engine, inspect
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from fop_console.core.config import get_config
from fop_console.core.exceptions import DatabaseError, FopConsoleException
from fop_console.utils.logging import get_logger

logger = get_logger(__name__)

# SQLAlchemy declarative base for ORM models
Base = declarative_base()

# Global engine and session factory
_engine: Optional[Engine] = None
SessionFactory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Get or create the SQLAlchemy engine."""
    global _engine

    if _engine is None:
        config = get_config()
        logger.info(f"Creating database engine with URL: {config.database.url}")

        try:
            if config.database.url.startswith('sqlite:'):
                _engine = _create_sqlite_engine(config)
            else:
                _engine = _create_generic_engine(config)
        except Exception as e:
            raise DatabaseError(
                f"Failed to create database engine: {str(e)}",
                operation="create_engine",
                url=config.database.url
            ) from e

    return _engine


def _create_sqlite_engine(config) -> Engine:
    """Create a SQLAlchemy engine for SQLite databases."""
    return create_engine(
        config.database.url,
        echo=config.database.echo,
        poolclass=StaticPool,
        connect_args={
            'check_same_thread': False,
            'timeout': 20,
        }
    )


def _create_generic_engine(config) -> Engine:
    """Create a SQLAlchemy engine for server databases (MySQL, PostgreSQL...)."""
    return create_engine(
        config.database.url,
        echo=config.database.echo,
        pool_size=config.database.pool_size,
    )


def get_session_factory() -> sessionmaker:
    """Get or create the SQLAlchemy session factory."""
    global SessionFactory

    if SessionFactory is None:
        SessionFactory = sessionmaker(bind=get_engine())

    return SessionFactory


def create_tables() -> None:
    """Create all database tables registered on the declarative base."""
    try:
        engine = get_engine()

        # Import models to register them with Base metadata
        from fop_console.storage.models import Configuration  # noqa: F401

        Base.metadata.create_all(engine)

        expected = set(Base.metadata.tables.keys())
        missing = expected - set(inspect(engine).get_table_names())
        if missing:
            raise DatabaseError(f"Failed to create required tables: {sorted(missing)}")

        logger.info(f"Tables available: {sorted(expected)}")

    except DatabaseError:
        raise
    except Exception as e:
        raise DatabaseError(
            f"Failed to create database tables: {str(e)}",
            operation="create_tables"
        ) from e


def drop_tables() -> None:
    """Drop all database tables (useful for testing)."""
    try:
        Base.metadata.drop_all(get_engine())
    except Exception as e:
        raise DatabaseError(
            f"Failed to drop database tables: {str(e)}",
            operation="drop_tables"
        ) from e


@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except FopConsoleException:
        session.rollback()
        raise
    except Exception as e:
        session.rollback()
        raise DatabaseError(
            f"Database session error: {str(e)}",
            operation="session_transaction"
        ) from e
    finally:
        session.close()


def close_connections() -> None:
    """Close all database connections (useful for testing and cleanup)."""
    global _engine, SessionFactory

    if _engine:
        _engine.dispose()
        _engine = None

    SessionFactory = None
