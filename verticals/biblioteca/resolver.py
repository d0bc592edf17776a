"""Book → Category reference resolution for display.

This is the only cross-collection read. Each book's category_ref is looked
up individually; an unset or dangling reference resolves to None instead of
failing the listing.
"""

from dataclasses import dataclass

from verticals.biblioteca.repository import CatalogStore, Kind


@dataclass(frozen=True)
class BookListing:
    """A book paired with its category, as shown in the list view."""

    book: dict
    category: dict | None = None
    resolved: bool = True


async def list_books_with_category(store: CatalogStore) -> list[BookListing]:
    """Every book in store order, joined with its referenced category."""
    listings = []
    for book in await store.list(Kind.BOOKS):
        ref = book.get("category_ref")
        category = await store.find(Kind.CATEGORIES, ref) if ref else None
        listings.append(BookListing(book=book, category=category))
    return listings


async def list_books_unresolved(store: CatalogStore) -> list[BookListing]:
    """Every book in store order, with the raw reference left for display."""
    return [
        BookListing(book=book, resolved=False)
        for book in await store.list(Kind.BOOKS)
    ]
