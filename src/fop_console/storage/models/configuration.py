"""
Configuration Model

SQLAlchemy ORM model for the shop's configuration table.
"""

from typing import Optional
from sqlalchemy import String, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from fop_console.core.database import Base
from .mixins import DateAddUpdMixin


class Configuration(Base, DateAddUpdMixin):
    """A configuration key/value pair. Global values have no shop or shop group."""

    __tablename__ = "ps_configuration"
    __table_args__ = {'extend_existing': True}

    id_configuration: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id_shop_group: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    id_shop: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    name: Mapped[str] = mapped_column(String(254), nullable=False, index=True)
    value: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Configuration(id={self.id_configuration}, name='{self.name}', value={self.value!r})>"
