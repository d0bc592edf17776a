"""Template engine renderer for the biblioteca vertical.

Registers the view helpers the biblioteca templates use and converts
handler outcomes into HTTP responses: a rendered page, a 302 redirect, or a
plain-text 500.
"""

from pathlib import Path

from fastapi import Request, status
from starlette.responses import PlainTextResponse, RedirectResponse, Response

from core.engine.template_engine import TemplateEngine, fmt_date, register_helper
from verticals.biblioteca.models.views import Failure, Outcome, Redirect, View

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

engine = TemplateEngine(TEMPLATES_DIR)


def render_outcome(request: Request, outcome: Outcome) -> Response:
    """Map a handler outcome onto its response."""
    if isinstance(outcome, View):
        return engine.render(request, outcome.template, outcome.context)
    if isinstance(outcome, Redirect):
        return RedirectResponse(outcome.location, status_code=status.HTTP_302_FOUND)
    if isinstance(outcome, Failure):
        return PlainTextResponse(
            outcome.message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    raise TypeError(f"Unknown handler outcome: {outcome!r}")


# Auto-register on import
register_helper("format_date", fmt_date)
