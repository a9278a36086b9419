"""
Configuration Repository

Repository class for reading and writing global configuration values.
"""

from typing import Dict, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from fop_console.core.exceptions import DatabaseError
from fop_console.storage.models import Configuration
from fop_console.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigurationRepository:
    """Repository for global (non multishop) configuration values."""

    def __init__(self, session: Session):
        """Initialize repository with a session."""
        self.session = session

    def _global_query(self):
        return select(Configuration).where(
            Configuration.id_shop_group.is_(None),
            Configuration.id_shop.is_(None)
        )

    def _find(self, name: str) -> Optional[Configuration]:
        return self.session.scalars(
            self._global_query().where(Configuration.name == name)
        ).first()

    def has(self, name: str) -> bool:
        """Tell whether a global configuration key exists."""
        try:
            return self._find(name) is not None
        except Exception as e:
            raise DatabaseError(
                f"Failed to look up configuration {name}: {str(e)}",
                operation="get",
                table=Configuration.__tablename__
            ) from e

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a global configuration value, or ``default`` when the key is missing."""
        try:
            configuration = self._find(name)
        except Exception as e:
            raise DatabaseError(
                f"Failed to get configuration {name}: {str(e)}",
                operation="get",
                table=Configuration.__tablename__
            ) from e

        return configuration.value if configuration is not None else default

    def get_like(self, term: str) -> Dict[str, Optional[str]]:
        """
        Get every configuration whose name matches a SQL ``LIKE`` term.

        Args:
            term: LIKE expression, e.g. ``PSGDPR_%``

        Returns:
            Mapping of name to value, ordered by name
        """
        try:
            rows = self.session.scalars(
                self._global_query()
                .where(Configuration.name.like(term))
                .order_by(Configuration.name)
            ).all()
        except Exception as e:
            raise DatabaseError(
                f"Failed to query configurations like {term}: {str(e)}",
                operation="query",
                table=Configuration.__tablename__
            ) from e

        logger.debug(f"{len(rows)} configuration(s) match '{term}'")
        return {row.name: row.value for row in rows}

    def set(self, name: str, value: Optional[str]) -> Configuration:
        """Update a global configuration value, creating the key if needed."""
        try:
            configuration = self._find(name)
            if configuration is None:
                configuration = Configuration(name=name, value=value)
                self.session.add(configuration)
            else:
                configuration.value = value

            self.session.flush()
            return configuration

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(
                f"Failed to save configuration {name}: {str(e)}",
                operation="save",
                table=Configuration.__tablename__
            ) from e
