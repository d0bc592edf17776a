"""Biblioteca repositories — async database access for books and categories.

Extends BaseRepository with the two catalog collections and wraps them in
CatalogStore, the per-request store handle handlers receive. CatalogStore
dispatches on Kind so callers can address either collection uniformly.
"""

from enum import Enum
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import get_session
from patterns.repository import BaseRepository
from verticals.biblioteca.models.db_models import Book, Category
from verticals.biblioteca.models.schemas import BookFields, CategoryFields


class Kind(str, Enum):
    BOOKS = "books"
    CATEGORIES = "categories"


# ---------------------------------------------------------------------------
# Collection repositories
# ---------------------------------------------------------------------------

class BookRepository(BaseRepository[Book]):
    """Repository for book CRUD."""

    model = Book
    fields = BookFields
    kind = Kind.BOOKS.value


class CategoryRepository(BaseRepository[Category]):
    """Repository for category CRUD."""

    model = Category
    fields = CategoryFields
    kind = Kind.CATEGORIES.value


# ---------------------------------------------------------------------------
# Store handle
# ---------------------------------------------------------------------------

class CatalogStore:
    """Both collections behind one session.

    Usage::

        store = CatalogStore(session)
        category_id = await store.create(Kind.CATEGORIES, {"name": "Fiction"})
        book = await store.get_by_id(Kind.BOOKS, book_id)
    """

    def __init__(self, session: AsyncSession):
        self.books = BookRepository(session)
        self.categories = CategoryRepository(session)

    def repository(self, kind: Kind) -> BaseRepository:
        return self.books if Kind(kind) is Kind.BOOKS else self.categories

    async def create(self, kind: Kind, fields: dict[str, Any]) -> str:
        return await self.repository(kind).create(fields)

    async def list(self, kind: Kind) -> list[dict]:
        return await self.repository(kind).list()

    async def get_by_id(self, kind: Kind, record_id: str) -> dict:
        return await self.repository(kind).get(record_id)

    async def find(self, kind: Kind, record_id: str) -> dict | None:
        return await self.repository(kind).find(record_id)

    async def update(self, kind: Kind, record_id: str, fields: dict[str, Any]) -> None:
        await self.repository(kind).update(record_id, fields)

    async def delete(self, kind: Kind, record_id: str) -> None:
        await self.repository(kind).delete(record_id)


# ---------------------------------------------------------------------------
# FastAPI dependency factory
# ---------------------------------------------------------------------------

def get_catalog_store(
    session: AsyncSession = Depends(get_session),
) -> CatalogStore:
    """FastAPI dependency for CatalogStore."""
    return CatalogStore(session)
