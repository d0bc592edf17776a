"""Base model and mixins for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- RecordMixin: Adds a store-assigned string id, creation timestamp and an
  open map for pass-through fields

Every catalog model inherits from Base and includes RecordMixin. Rows are
listed in created_at order, which is the store order of a collection.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all catalog models."""
    pass


class RecordMixin:
    """Mixin providing identity, audit column and pass-through fields.

    Adds:
    - id: UUID4 string primary key (assigned on insert, never updated)
    - created_at: Timestamp set on insert
    - extra: JSON map of submitted fields the model does not declare
    """

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True,
    )
    extra: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )

    def _record(self, **known: Any) -> dict[str, Any]:
        """Flatten pass-through fields under the declared ones."""
        return {
            **(self.extra or {}),
            "id": self.id,
            **known,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
