from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

FieldErrors = Dict[str, List[str]]


@dataclass(frozen=True)
class ViewResult:
    """Render `view_name` with `model`; `errors` are keyed by field name."""

    view_name: str
    model: Any = None
    errors: FieldErrors = field(default_factory=dict)


@dataclass(frozen=True)
class RedirectResult:
    """Redirect to another action of the same controller."""

    action: str


ActionResult = Union[ViewResult, RedirectResult]


def add_error(errors: FieldErrors, field_name: str, message: str) -> None:
    messages = errors.setdefault(field_name, [])
    if message not in messages:
        messages.append(message)
