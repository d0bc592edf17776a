"""Request handlers for books and categories.

One coroutine per (verb, path). Each takes the store handle plus path
parameters and submitted fields, and returns an Outcome. Any CatalogError,
whether a missing record or a storage failure, is logged with its cause and
reported as the same generic Failure for that path.
"""

import logging
from typing import Any

from core.engine.template_engine import fmt_date
from core.errors import CatalogError
from verticals.biblioteca.models.views import Failure, Outcome, Redirect, View
from verticals.biblioteca.repository import CatalogStore, Kind
from verticals.biblioteca.resolver import (
    list_books_unresolved,
    list_books_with_category,
)

logger = logging.getLogger(__name__)

BOOK_LIST = "/libros/list"
CATEGORY_LIST = "/categorias/list"


def _fail(message: str, exc: CatalogError) -> Failure:
    logger.error(f"{message}: {exc.message}", exc_info=exc, extra=exc.to_log_extra())
    return Failure(message)


# ============================================================================
# Books
# ============================================================================

async def list_books(store: CatalogStore, resolve: bool = True) -> Outcome:
    """GET / (unresolved) and GET /libros/list (joined with categories)."""
    try:
        if resolve:
            libros = await list_books_with_category(store)
        else:
            libros = await list_books_unresolved(store)
    except CatalogError as e:
        return _fail("Error al obtener los libros", e)
    return View("libros/list.html", {"libros": libros})


async def show_add_book(store: CatalogStore) -> Outcome:
    try:
        categorias = await store.list(Kind.CATEGORIES)
    except CatalogError as e:
        return _fail("Error al obtener las categorías", e)
    return View("libros/add.html", {"categorias": categorias})


async def add_book(store: CatalogStore, fields: dict[str, Any]) -> Outcome:
    try:
        await store.create(Kind.BOOKS, fields)
    except CatalogError as e:
        return _fail("Error al añadir el libro", e)
    return Redirect(BOOK_LIST)


async def show_edit_book(store: CatalogStore, book_id: str) -> Outcome:
    """Book plus categories for the edit form, with the date as YYYY-MM-DD."""
    try:
        libro = await store.get_by_id(Kind.BOOKS, book_id)
        categorias = await store.list(Kind.CATEGORIES)
    except CatalogError as e:
        return _fail("Error al obtener el libro para editar", e)

    # Display copy only; the stored value keeps its type
    libro = {**libro, "publication_date": fmt_date(libro.get("publication_date"))}
    return View("libros/edit.html", {"libro": libro, "categorias": categorias})


async def edit_book(store: CatalogStore, book_id: str, fields: dict[str, Any]) -> Outcome:
    try:
        await store.update(Kind.BOOKS, book_id, fields)
    except CatalogError as e:
        return _fail("Error al actualizar el libro", e)
    return Redirect(BOOK_LIST)


async def delete_book(store: CatalogStore, book_id: str) -> Outcome:
    try:
        await store.delete(Kind.BOOKS, book_id)
    except CatalogError as e:
        return _fail("Error al eliminar el libro", e)
    return Redirect(BOOK_LIST)


# ============================================================================
# Categories
# ============================================================================

async def list_categories(store: CatalogStore) -> Outcome:
    try:
        categorias = await store.list(Kind.CATEGORIES)
    except CatalogError as e:
        return _fail("Error al obtener las categorías", e)
    return View("categorias/list.html", {"categorias": categorias})


async def show_add_category() -> Outcome:
    return View("categorias/add.html")


async def add_category(store: CatalogStore, fields: dict[str, Any]) -> Outcome:
    try:
        await store.create(Kind.CATEGORIES, fields)
    except CatalogError as e:
        return _fail("Error al añadir la categoría", e)
    return Redirect(CATEGORY_LIST)


async def show_edit_category(store: CatalogStore, category_id: str) -> Outcome:
    try:
        categoria = await store.get_by_id(Kind.CATEGORIES, category_id)
    except CatalogError as e:
        return _fail("Error al obtener la categoría para editar", e)
    return View("categorias/edit.html", {"categoria": categoria})


async def edit_category(
    store: CatalogStore, category_id: str, fields: dict[str, Any]
) -> Outcome:
    try:
        await store.update(Kind.CATEGORIES, category_id, fields)
    except CatalogError as e:
        return _fail("Error al actualizar la categoría", e)
    return Redirect(CATEGORY_LIST)


async def delete_category(store: CatalogStore, category_id: str) -> Outcome:
    try:
        await store.delete(Kind.CATEGORIES, category_id)
    except CatalogError as e:
        return _fail("Error al eliminar la categoría", e)
    return Redirect(CATEGORY_LIST)
