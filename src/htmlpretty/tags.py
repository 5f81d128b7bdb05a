"""Tag classification for the pretty-printer.

``classify`` maps a tag name to the behaviors the printer applies to it. Tags
that are in none of the tables are ordinary block elements. The tables
describe HTML elements; inside SVG and MathML only the ``<svg>`` root itself
is looked up, everything below it is a block element whose text is escaped
like any other.
"""

from __future__ import annotations

from enum import Flag

from .constants import (
    INLINE_ELEMENTS,
    KEEP_SPACE_ELEMENTS,
    LIST_ELEMENTS,
    LITERAL_ELEMENTS,
    OMIT_CLOSE_ELEMENTS,
    VOID_ELEMENTS,
)
from .errors import TagTableError


class Category(Flag):
    BLOCK = 0
    VOID = 1
    INLINE = 2
    LIST = 4
    OMIT_CLOSE = 8
    LITERAL = 16
    KEEP_SPACE = 32


_TABLES = (
    (Category.VOID, VOID_ELEMENTS),
    (Category.INLINE, INLINE_ELEMENTS),
    (Category.LIST, LIST_ELEMENTS),
    (Category.OMIT_CLOSE, OMIT_CLOSE_ELEMENTS),
    (Category.LITERAL, LITERAL_ELEMENTS),
    (Category.KEEP_SPACE, KEEP_SPACE_ELEMENTS),
)


def classify(tag_name: str, namespace: str | None = None) -> Category:
    """Return the category flags for ``tag_name`` in ``namespace`` (None for HTML)."""
    category = Category.BLOCK
    # Foreign content: only the root element of the namespace is in the tables.
    if namespace is not None and tag_name != namespace:
        return category
    for flag, tags in _TABLES:
        if tag_name in tags:
            category |= flag
    return category


def node_category(node) -> Category:
    """Category flags of an element node; BLOCK for anything else, or None."""
    if node is None or not node.is_element:
        return Category.BLOCK
    return classify(node.tag_name, node.namespace)


def is_inline(node) -> bool:
    return Category.INLINE in node_category(node)


def check_consistency(tag_name: str, category: Category) -> None:
    """Raise TagTableError if ``category`` combines incompatible behaviors."""
    if Category.LITERAL in category and Category.KEEP_SPACE in category:
        msg = f"<{tag_name}> is both literal and keep-space"
        raise TagTableError(msg)
    if Category.VOID in category and category & (Category.LITERAL | Category.KEEP_SPACE):
        msg = f"<{tag_name}> is both literal/keep-space and void"
        raise TagTableError(msg)


def validate_tables() -> None:
    """Check every tag in the vocabulary for contradictory classifications."""
    vocabulary = set()
    for _, tags in _TABLES:
        vocabulary |= tags
    for tag_name in sorted(vocabulary):
        check_consistency(tag_name, classify(tag_name))


validate_tables()
