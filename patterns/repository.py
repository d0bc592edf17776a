"""Async repository pattern for database access.

Provides a generic base repository with CRUD operations over one table,
open-map pass-through fields, and uniform error mapping. Verticals subclass
this and declare the Pydantic model that coerces their known fields.

Example: BookRepository extending BaseRepository.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.errors import RecordNotFoundError, StoreError
from core.models.base import Base

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type variable for model classes
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT", bound=Base)

# Never written from submitted fields
PROTECTED_FIELDS = ("id", "created_at", "extra")


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class BaseRepository(Generic[ModelT]):
    """Generic async repository with CRUD + pass-through fields.

    Subclass and set `model`, `fields` and `kind`::

        class CategoryRepository(BaseRepository[Category]):
            model = Category
            fields = CategoryFields
            kind = "categories"

    `fields` is a Pydantic model with ``extra="allow"``: its declared
    attributes are written to columns, anything else lands in `extra`.
    Every mutation commits before returning.
    """

    model: type[ModelT]
    fields: type[BaseModel]
    kind: str

    def __init__(self, session: AsyncSession):
        self.session = session

    # -- Field split --

    def _split(self, data: dict[str, Any], operation: str) -> tuple[dict, dict]:
        """Coerce known fields and separate the pass-through ones."""
        try:
            parsed = self.fields.model_validate(data)
        except ValidationError as e:
            raise StoreError(f"invalid {self.kind} fields: {e.error_count()} error(s)", operation) from e
        # Declared columns only; model_dump would also return the extras
        known = parsed.model_dump(include=set(self.fields.model_fields), exclude_unset=True)
        extra = {
            k: v for k, v in (parsed.model_extra or {}).items()
            if k not in PROTECTED_FIELDS
        }
        return known, extra

    @asynccontextmanager
    async def _storage(self, operation: str) -> AsyncIterator[None]:
        """Roll back and re-raise SQLAlchemy failures as StoreError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"{self.kind} {operation} failed: {e}",
                extra={"kind": self.kind},
            )
            raise StoreError(str(e.__class__.__name__), operation) from e

    async def _load(self, item_id: str) -> ModelT | None:
        return await self.session.get(self.model, item_id)

    # -- List --

    async def list(self) -> list[dict]:
        """All items in store (insertion) order."""
        async with self._storage("list"):
            stmt = select(self.model).order_by(self.model.created_at)
            result = await self.session.execute(stmt)
            return [row.to_dict() for row in result.scalars().all()]

    # -- Get by ID --

    async def find(self, item_id: str) -> dict | None:
        """Get a single item by ID, or None if absent."""
        async with self._storage("get"):
            row = await self._load(item_id)
            return row.to_dict() if row else None

    async def get(self, item_id: str) -> dict:
        """Get a single item by ID. Raises RecordNotFoundError if absent."""
        item = await self.find(item_id)
        if item is None:
            raise RecordNotFoundError(self.kind, item_id)
        return item

    # -- Create --

    async def create(self, data: dict[str, Any]) -> str:
        """Create a new item and return its assigned id."""
        known, extra = self._split(data, "create")
        async with self._storage("create"):
            item = self.model(**known, extra=extra)
            self.session.add(item)
            await self.session.commit()
            return item.id

    # -- Update --

    async def update(self, item_id: str, data: dict[str, Any]) -> None:
        """Replace the supplied fields of an existing item."""
        known, extra = self._split(data, "update")
        async with self._storage("update"):
            item = await self._load(item_id)
            if item is None:
                raise RecordNotFoundError(self.kind, item_id)

            for key, value in known.items():
                setattr(item, key, value)
            if extra:
                # Reassign so the JSON column is flagged dirty
                item.extra = {**(item.extra or {}), **extra}

            await self.session.commit()

    # -- Delete --

    async def delete(self, item_id: str) -> None:
        """Delete an item. Raises RecordNotFoundError if absent."""
        async with self._storage("delete"):
            item = await self._load(item_id)
            if item is None:
                raise RecordNotFoundError(self.kind, item_id)

            await self.session.delete(item)
            await self.session.commit()
