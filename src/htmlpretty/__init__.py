from .errors import ParseError, PrintError, StrictModeError, TagTableError
from .node import Node
from .serialize import DEFAULT_INDENT, DEFAULT_WRAP, Printer, pretty_print, to_html
from .tags import Category, classify
from .treebuilder import parse

__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_WRAP",
    "Category",
    "Node",
    "ParseError",
    "PrintError",
    "Printer",
    "StrictModeError",
    "TagTableError",
    "classify",
    "parse",
    "pretty_print",
    "to_html",
]
