"""Pydantic models for submitted form fields.

Forms are mapped straight onto records with no allow-list, so these models
accept any extra key. Declared attributes are the typed columns; every field
is optional because the same model serves both add and edit (required-ness
is enforced by the table itself).
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _blank_to_none(value: Any) -> Any:
    # HTML forms submit "" for untouched inputs
    if isinstance(value, str) and not value.strip():
        return None
    return value


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class CategoryFields(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None


class BookFields(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    author: Optional[str] = None
    publication_date: Optional[date] = None
    category_ref: Optional[str] = None

    @field_validator("category_ref", mode="before")
    @classmethod
    def blank_category(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("publication_date", mode="before")
    @classmethod
    def parse_publication_date(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str):
            # Accept full timestamps as well as plain dates
            return datetime.fromisoformat(v.strip()).date()
        return v
