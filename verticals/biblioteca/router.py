"""Biblioteca router — server-rendered CRUD for books and categories.

Every route is a thin adapter:
- Read the form body (any submitted key is kept)
- Call the matching handler with the injected CatalogStore
- Turn the handler's outcome into a page, a 302 or a plain-text 500
"""

from typing import Any

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from verticals.biblioteca import handlers
from verticals.biblioteca.renderer import render_outcome
from verticals.biblioteca.repository import CatalogStore, get_catalog_store

router = APIRouter()


async def _form_fields(request: Request) -> dict[str, Any]:
    form = await request.form()
    return dict(form)


# ============================================================================
# Book Endpoints
# ============================================================================

@router.get("/")
async def index(request: Request, store: CatalogStore = Depends(get_catalog_store)) -> Response:
    return render_outcome(request, await handlers.list_books(store, resolve=False))


@router.get("/libros/list")
async def list_books(
    request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    """List books joined with their categories."""
    return render_outcome(request, await handlers.list_books(store))


@router.get("/libros/add")
async def show_add_book(
    request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.show_add_book(store))


@router.post("/libros/add")
async def add_book(
    request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    fields = await _form_fields(request)
    return render_outcome(request, await handlers.add_book(store, fields))


@router.get("/libros/edit/{book_id}")
async def show_edit_book(
    book_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.show_edit_book(store, book_id))


@router.post("/libros/edit/{book_id}")
async def edit_book(
    book_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    fields = await _form_fields(request)
    return render_outcome(request, await handlers.edit_book(store, book_id, fields))


@router.post("/libros/delete/{book_id}")
async def delete_book(
    book_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.delete_book(store, book_id))


# ============================================================================
# Category Endpoints
# ============================================================================

@router.get("/categorias/list")
async def list_categories(
    request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.list_categories(store))


@router.get("/categorias/add")
async def show_add_category(request: Request) -> Response:
    """Empty form; touches no data."""
    return render_outcome(request, await handlers.show_add_category())


@router.post("/categorias/add")
async def add_category(
    request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    fields = await _form_fields(request)
    return render_outcome(request, await handlers.add_category(store, fields))


@router.get("/categorias/edit/{category_id}")
async def show_edit_category(
    category_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.show_edit_category(store, category_id))


@router.post("/categorias/edit/{category_id}")
async def edit_category(
    category_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    fields = await _form_fields(request)
    return render_outcome(request, await handlers.edit_category(store, category_id, fields))


@router.post("/categorias/delete/{category_id}")
async def delete_category(
    category_id: str, request: Request, store: CatalogStore = Depends(get_catalog_store)
) -> Response:
    return render_outcome(request, await handlers.delete_category(store, category_id))
