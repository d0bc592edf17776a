"""Template Engine — renders view-models into HTML pages.

Wraps Jinja2 (via Starlette's Jinja2Templates) with a helper registry. Each
vertical registers the helpers its views need; the engine installs every
registered helper as a Jinja filter when it is created and whenever a helper
is registered later.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable, Dict

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import HTMLResponse


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _ymd(value: date) -> str:
    # strftime("%Y") does not zero-pad years before 1000 on every platform
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def fmt_date(value: Any) -> Any:
    """Format a calendar date as YYYY-MM-DD.

    Accepts date/datetime objects and ISO-8601 strings. Anything that is not
    a valid date (including None) is returned unchanged.
    """
    if isinstance(value, date):
        return _ymd(value)
    if isinstance(value, str):
        try:
            return _ymd(datetime.fromisoformat(value.strip()))
        except ValueError:
            return value
    return value


# ---------------------------------------------------------------------------
# Helper registry
# ---------------------------------------------------------------------------

ViewHelper = Callable[..., Any]

_VIEW_HELPERS: Dict[str, ViewHelper] = {}
_ENGINES: list["TemplateEngine"] = []


def register_helper(name: str, helper: ViewHelper) -> None:
    """Register a view helper, available in templates as a filter.

    Example::

        register_helper("format_date", fmt_date)

        {{ libro.publication_date | format_date }}
    """
    _VIEW_HELPERS[name] = helper
    for engine in _ENGINES:
        engine.templates.env.filters[name] = helper


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------

class TemplateEngine:
    """Renders named templates with a context dict.

    Usage::

        engine = TemplateEngine(Path(__file__).parent / "templates")
        response = engine.render(request, "libros/list.html", {"libros": [...]})
    """

    def __init__(self, directory: str | Path):
        self.templates = Jinja2Templates(directory=str(directory))
        self.templates.env.filters.update(_VIEW_HELPERS)
        _ENGINES.append(self)

    def render(
        self,
        request: Request,
        template: str,
        context: Dict[str, Any] | None = None,
    ) -> HTMLResponse:
        return self.templates.TemplateResponse(request, template, context or {})

    @staticmethod
    def list_helpers() -> list[str]:
        """Return names of registered view helpers."""
        return list(_VIEW_HELPERS.keys())
