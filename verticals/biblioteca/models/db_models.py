"""SQLAlchemy models for the biblioteca vertical.

Each model inherits from Base and uses RecordMixin for identity and
pass-through fields. The to_dict() method provides the record shape used by
repositories, handlers and views.

Book.category_ref names a Category id but is not a foreign key: the store
accepts references to categories that do not (or no longer) exist.
"""

from datetime import date

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from core.models.base import Base, RecordMixin


class Category(RecordMixin, Base):
    """A category books can be filed under."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    def to_dict(self) -> dict:
        return self._record(name=self.name)


class Book(RecordMixin, Base):
    """A book in the catalog."""

    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    author: Mapped[str] = mapped_column(String(200), nullable=False)
    publication_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    category_ref: Mapped[str | None] = mapped_column(
        String(36), nullable=True, index=True
    )

    def to_dict(self) -> dict:
        return self._record(
            title=self.title,
            author=self.author,
            publication_date=self.publication_date,
            category_ref=self.category_ref,
        )
