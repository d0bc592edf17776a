"""Biblioteca vertical — book and category catalog.

Demonstrates the catalog patterns working together in one domain:
- SQLAlchemy models with RecordMixin and pass-through fields
- Async repositories behind a single CatalogStore handle
- Book → Category reference resolution
- Outcome-returning request handlers
- FastAPI router rendering Jinja2 views
- Dataclass configuration
"""
