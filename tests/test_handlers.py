"""Test request handler outcomes and failure collapsing."""
from datetime import date

import pytest

from core.errors import RecordNotFoundError, StoreError
from verticals.biblioteca import handlers
from verticals.biblioteca.models.views import Failure, Redirect, View
from verticals.biblioteca.repository import Kind


class BrokenStore:
    """Store double whose every call fails with the given error."""

    def __init__(self, error):
        self.error = error
        self.calls = []

    def _fail(self, name):
        async def method(*args, **kwargs):
            self.calls.append(name)
            raise self.error
        return method

    def __getattr__(self, name):
        return self._fail(name)


def store_failure():
    return BrokenStore(StoreError("connection lost", "execute"))


def not_found():
    return BrokenStore(RecordNotFoundError("books", "x"))


# -- Success paths --

@pytest.mark.asyncio
async def test_add_book_redirects_to_list(store):
    outcome = await handlers.add_book(store, {"title": "Dune", "author": "Herbert"})
    assert outcome == Redirect("/libros/list")
    assert len(await store.list(Kind.BOOKS)) == 1


@pytest.mark.asyncio
async def test_show_add_book_lists_categories(store):
    await store.create(Kind.CATEGORIES, {"name": "Fiction"})
    outcome = await handlers.show_add_book(store)
    assert isinstance(outcome, View)
    assert outcome.template == "libros/add.html"
    assert [c["name"] for c in outcome.context["categorias"]] == ["Fiction"]


@pytest.mark.asyncio
async def test_show_edit_book_formats_date_on_a_copy(store):
    book_id = await store.create(
        Kind.BOOKS,
        {"title": "Dune", "author": "Herbert", "publication_date": "1965-08-01"},
    )
    outcome = await handlers.show_edit_book(store, book_id)
    assert outcome.template == "libros/edit.html"
    assert outcome.context["libro"]["publication_date"] == "1965-08-01"
    assert outcome.context["categorias"] == []

    stored = await store.get_by_id(Kind.BOOKS, book_id)
    assert stored["publication_date"] == date(1965, 8, 1)


@pytest.mark.asyncio
async def test_show_edit_book_without_date(store):
    book_id = await store.create(Kind.BOOKS, {"title": "Dune", "author": "Herbert"})
    outcome = await handlers.show_edit_book(store, book_id)
    assert outcome.context["libro"]["publication_date"] is None


@pytest.mark.asyncio
async def test_list_books_resolved_and_unresolved(store):
    c1 = await store.create(Kind.CATEGORIES, {"name": "Fiction"})
    await store.create(Kind.BOOKS, {"title": "Dune", "author": "Herbert", "category_ref": c1})

    joined = await handlers.list_books(store)
    raw = await handlers.list_books(store, resolve=False)
    assert joined.context["libros"][0].category["name"] == "Fiction"
    assert raw.context["libros"][0].category is None


@pytest.mark.asyncio
async def test_category_lifecycle(store):
    assert await handlers.add_category(store, {"name": "Fiction"}) == Redirect("/categorias/list")
    listing = await handlers.list_categories(store)
    category_id = listing.context["categorias"][0]["id"]

    edit_form = await handlers.show_edit_category(store, category_id)
    assert edit_form.context["categoria"]["name"] == "Fiction"

    assert await handlers.edit_category(store, category_id, {"name": "Ficción"}) == Redirect("/categorias/list")
    assert (await store.get_by_id(Kind.CATEGORIES, category_id))["name"] == "Ficción"

    assert await handlers.delete_category(store, category_id) == Redirect("/categorias/list")
    assert await store.list(Kind.CATEGORIES) == []


@pytest.mark.asyncio
async def test_show_add_category_touches_no_data():
    outcome = await handlers.show_add_category()
    assert outcome == View("categorias/add.html")


# -- Failure collapsing --

@pytest.mark.asyncio
@pytest.mark.parametrize("make_store", [store_failure, not_found])
@pytest.mark.parametrize("call, message", [
    (lambda s: handlers.list_books(s), "Error al obtener los libros"),
    (lambda s: handlers.list_books(s, resolve=False), "Error al obtener los libros"),
    (lambda s: handlers.show_add_book(s), "Error al obtener las categorías"),
    (lambda s: handlers.add_book(s, {"title": "x"}), "Error al añadir el libro"),
    (lambda s: handlers.show_edit_book(s, "id"), "Error al obtener el libro para editar"),
    (lambda s: handlers.edit_book(s, "id", {}), "Error al actualizar el libro"),
    (lambda s: handlers.delete_book(s, "id"), "Error al eliminar el libro"),
    (lambda s: handlers.list_categories(s), "Error al obtener las categorías"),
    (lambda s: handlers.add_category(s, {}), "Error al añadir la categoría"),
    (lambda s: handlers.show_edit_category(s, "id"), "Error al obtener la categoría para editar"),
    (lambda s: handlers.edit_category(s, "id", {}), "Error al actualizar la categoría"),
    (lambda s: handlers.delete_category(s, "id"), "Error al eliminar la categoría"),
])
async def test_store_errors_become_generic_failure(make_store, call, message):
    broken = make_store()
    outcome = await call(broken)
    assert outcome == Failure(message)
    assert len(broken.calls) == 1


@pytest.mark.asyncio
async def test_missing_book_on_edit_is_generic_failure(store):
    outcome = await handlers.show_edit_book(store, "does-not-exist")
    assert outcome == Failure("Error al obtener el libro para editar")


@pytest.mark.asyncio
async def test_failure_is_logged_with_cause(store, caplog):
    with caplog.at_level("ERROR"):
        await handlers.delete_book(store, "does-not-exist")
    record = caplog.records[-1]
    assert record.error_code == "RECORD_NOT_FOUND"
    assert record.record_id == "does-not-exist"
