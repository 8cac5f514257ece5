"""Rendering of Steam workshop records into embed documents."""

from reika.render.embed import is_eligible, parse_author, parse_item, render_item
from reika.render.text import escape_backticks, sanitize_description, truncate

__all__ = [
    "escape_backticks",
    "is_eligible",
    "parse_author",
    "parse_item",
    "render_item",
    "sanitize_description",
    "truncate",
]
