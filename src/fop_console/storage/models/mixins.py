"""
Database Model Mixins

Shared mixin classes for SQLAlchemy models.
"""

from datetime import datetime
from sqlalchemy import DateTime
from sqlalchemy.orm import Mapped, mapped_column


class DateAddUpdMixin:
    """Mixin for shop tables carrying ``date_add``/``date_upd`` columns."""

    date_add: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now)
    date_upd: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)
