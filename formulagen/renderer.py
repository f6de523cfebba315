"""
renderer.py

Responsibility: Deterministically render formula template text.

Rules:
- Templates use ERB-style markers: `<%= expr %>`, `<% stmt %>`, `<%# comment %>`.
- Lines holding only a statement leave no blank line behind (trim_blocks/lstrip_blocks).
- `<%-` / `-%>` follow ERB trim mode "-": the directive line goes, its neighbours
  keep their newlines and indentation. `<%= expr -%>` swallows the newline after it.
- Referencing a name missing from the context is an error, not an empty string.

This module intentionally does NOT know about files, environment variables or the CLI.
"""

from __future__ import annotations

import logging
import re
from typing import Any

from jinja2 import Environment, StrictUndefined

logger = logging.getLogger(__name__)

_EXPR_TRIM_RE = re.compile(r"(<%=(?:(?!%>).)*?)-%>\n")


class RenderError(RuntimeError):
    pass


def _normalize_trim_markers(text: str) -> str:
    # ERB "-" markers; trim_blocks/lstrip_blocks already drop statement-only lines.
    text = _EXPR_TRIM_RE.sub(r"\1%>", text)
    return text.replace("<%-", "<%").replace("-%>", "%>")


def _build_environment() -> Environment:
    return Environment(
        block_start_string="<%",
        block_end_string="%>",
        variable_start_string="<%=",
        variable_end_string="%>",
        comment_start_string="<%#",
        comment_end_string="%>",
        trim_blocks=True,
        lstrip_blocks=True,
        autoescape=False,
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def render_text(text: str, context: dict[str, Any]) -> str:
    """
    Render template `text` with `context`.

    Output uses `\\n` line endings regardless of the template's.
    """
    env = _build_environment()
    try:
        template = env.from_string(_normalize_trim_markers(text.replace("\r\n", "\n")))
        out = template.render(**context)
    except Exception as e:  # noqa: BLE001 - surface as RenderError
        raise RenderError(f"Failed rendering template: {e}") from e
    logger.debug("Rendered template (%d chars) with keys %s", len(out), sorted(context))
    return out
