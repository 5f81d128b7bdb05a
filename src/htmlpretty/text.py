"""Escaping and whitespace collapsing for text and attribute values."""

from __future__ import annotations

import re

from .constants import ASCII_WHITESPACE
from .tags import is_inline

# Runs of ASCII whitespace as HTML defines it (tab, LF, FF, CR, space).
WHITESPACE_RE = re.compile(r"[\t\n\f\r ]+")


def escape_text(text: str | None) -> str:
    """Escape ``&``, ``<`` and ``>``. Quotes are left alone outside attributes."""
    if not text:
        return ""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attribute(value: str | None) -> str:
    # TODO: Ambiguous ampersands (&name; inside values) should be escaped too.
    if not value:
        return ""
    return value.replace('"', "&quot;")


def collapse_class(value: str) -> str:
    """Normalize the whitespace separating class names."""
    return WHITESPACE_RE.sub(" ", value).strip(" ")


def collapse_whitespace(text: str, previous_sibling=None, next_sibling=None, parent=None) -> str:
    """Collapse whitespace roughly the way an inline formatting context does.

    Every run of ASCII whitespace becomes one space. A leading space is then
    dropped unless the parent or the previous sibling is inline, and a
    trailing space is dropped unless the parent or the next sibling is
    inline: next to block boundaries the printer's own line breaks stand in
    for it.

    This can't be exact. Knowing what is safe requires each element's
    computed ``display``, which requires CSS.
    """
    text = WHITESPACE_RE.sub(" ", text)
    if not is_inline(parent):
        if not is_inline(previous_sibling):
            text = text.lstrip(" ")
        if not is_inline(next_sibling):
            text = text.rstrip(" ")
    return text


def collapse_node_text(node) -> str:
    """Escape and collapse the text of ``node`` using its own neighbors.

    Comments are skipped: they are not printed, so they separate nothing.
    """
    return collapse_whitespace(
        escape_text(node.text_content),
        node.previous_non_comment,
        node.next_non_comment,
        node.parent,
    )


def ends_with_whitespace(text: str) -> bool:
    return bool(text) and text[-1] in ASCII_WHITESPACE
