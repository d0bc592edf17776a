"""Handler outcomes.

Handlers never build HTTP responses. They return one of these and the
router turns it into a rendered page, a 302, or a plain-text 500.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class View:
    """Render `template` with `context`."""

    template: str
    context: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class Failure:
    """Generic server error with a human-readable message."""

    message: str


Outcome = Union[View, Redirect, Failure]
