"""
Jinja2 templates for TypeScript declarations.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import jinja2

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates" / "typescript"
FILE_EXTENSION = "ts"


@lru_cache(maxsize=1)
def get_environment() -> jinja2.Environment:
    """Return the shared Jinja2 environment for the TypeScript templates."""
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
    )


def get_template(name: str) -> jinja2.Template:
    """Load a template by its short name (e.g. "enum")."""
    return get_environment().get_template(f"{name}.{FILE_EXTENSION}.jinja2")


def render_comment(comment: str) -> str:
    """
    Render a doc comment block.

    Args:
        comment: Comment text, possibly spanning several lines

    Returns:
        A ``/** ... */`` block with one `` * `` line per input line
    """
    return get_template("comment").render(lines=comment.split("\n"))
