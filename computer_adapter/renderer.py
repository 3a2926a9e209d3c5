"""
renderer.py

Responsibility: render the session's computers for display.

Rules:
- Computers are rendered in the order given (session insertion order).
- Each computer appears via its own `__str__` rendering.
- Undefined template variables are errors, never silently blank.

This module intentionally does NOT know about prompts, input, or the session.
"""

from __future__ import annotations

from collections.abc import Iterable

from jinja2 import Environment, StrictUndefined, TemplateError

from computer_adapter.models import Computer


class RenderError(RuntimeError):
    pass


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def render_listing(template_text: str, computers: Iterable[Computer]) -> str:
    """
    Render `computers` through the Jinja2 `template_text`.

    The template receives `computers` (a list) and `count`. Trailing newlines
    are stripped so callers can print the result as a single block.
    """
    items = list(computers)
    try:
        template = _env.from_string(template_text)
        out = template.render(computers=items, count=len(items))
    except TemplateError as e:
        raise RenderError("Failed rendering computer listing") from e
    return out.rstrip("\n")
