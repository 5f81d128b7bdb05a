"""Pretty-printing serializer for parsed HTML5 documents.

The printer walks the tree once, top to bottom, and decides for every node
whether it starts a new line, how far it is indented, whether its text is
collapsed, escaped or copied verbatim, and where long lines are wrapped.
It only changes how the markup looks, never what a browser would render:
line breaks are only introduced where whitespace already was or where it
does not matter (next to block elements).
"""

from __future__ import annotations

import io
import sys

from .constants import ASCII_WHITESPACE
from .errors import PrintError
from .tags import Category, check_consistency, is_inline, node_category
from .text import (
    collapse_class,
    collapse_node_text,
    collapse_whitespace,
    ends_with_whitespace,
    escape_attribute,
    escape_text,
)
from .writer import LineWriter, text_width

DEFAULT_INDENT = "  "
DEFAULT_WRAP = 120

VERBATIM = Category.LITERAL | Category.KEEP_SPACE


def pretty_print(out, root, indent=DEFAULT_INDENT, wrap=DEFAULT_WRAP, *, debug=False):
    """Pretty-print the ``#document`` node ``root`` to the text stream ``out``.

    ``indent`` is written once per nesting level. If ``wrap`` is positive,
    lines are wrapped at that many bytes where possible.
    """
    Printer(out, indent, wrap, debug=debug).print_document(root)


def to_html(root, indent=DEFAULT_INDENT, wrap=DEFAULT_WRAP, *, debug=False):
    """Return the pretty-printed document as a string."""
    out = io.StringIO()
    pretty_print(out, root, indent, wrap, debug=debug)
    return out.getvalue()


def close_tag(node):
    """Closing tag for ``node``, or "" if it is void or omits its closing tag."""
    if not node.is_element or node_category(node) & (Category.VOID | Category.OMIT_CLOSE):
        return ""
    return f"</{node.tag_name}>"


def open_tag_tokens(node):
    """Split the opening tag into wrappable tokens: ``<a``, `` b``, `` c="d">``.

    The closing bracket stays on the last token so it never lands on a line
    of its own.
    """
    tokens = ["<" + node.tag_name]
    for key, value in node.attributes.items():
        token = " " + key
        # https://html.spec.whatwg.org/multipage/dom.html#global-attributes:classes-2
        if key == "class":
            value = collapse_class(value)
        if value:
            token += f'="{escape_attribute(value)}"'
        tokens.append(token)
    tokens[-1] += ">"
    return tokens


class Printer:
    __slots__ = ("env_debug", "writer")

    def __init__(self, out, indent=DEFAULT_INDENT, wrap=DEFAULT_WRAP, *, debug=False):
        self.writer = LineWriter(out, indent, wrap)
        self.env_debug = bool(debug)

    def debug(self, message, indent=4):
        if self.env_debug:
            print(f"{' ' * indent}{message}", file=sys.stderr)

    def print_document(self, root):
        """Print ``root`` and re-raise the first error the output stream raised."""
        self.document(root)
        if self.writer.error is not None:
            raise self.writer.error

    def document(self, node):
        if not node.is_document:
            msg = f"root node has non-document type {node.tag_name!r}"
            raise PrintError(msg, node)
        w = self.writer
        for child in node.children:
            if child.is_doctype:
                w.write(f"<!DOCTYPE {child.text_content}>")
                w.end_line()
            elif child.is_element:
                self.element(child)
            else:
                msg = f"unhandled document child {child!r}"
                raise PrintError(msg, child)

    def printed_children(self, node, category):
        """Children of ``node`` that produce output.

        Comments are never printed. Inside list-like elements every child
        element ends its line, so blank text between them is dropped too.
        """
        children = [child for child in node.children if not child.is_comment]
        if Category.LIST in category and not self.writer.verbatim:
            children = [child for child in children if not child.is_text or child.text_content.strip(ASCII_WHITESPACE)]
        return children

    def element(self, node):
        w = self.writer
        tag = node.tag_name
        category = node_category(node)
        check_consistency(tag, category)
        children = self.printed_children(node, category)

        inline = Category.INLINE in category
        if self.open_tag(node, category, children):
            inline = True

        if Category.VOID in category:
            return

        literal = Category.LITERAL in category
        keep_space = Category.KEEP_SPACE in category
        if literal:
            w.literal_depth += 1
        if keep_space:
            w.keep_space_depth += 1
            # The parser drops a newline right after <pre>; repeat it so a
            # leading newline of the content survives.
            if children and children[0].is_text and children[0].text_content.startswith("\n"):
                w.write("\n")

        list_children = Category.LIST in category
        omit_close = Category.OMIT_CLOSE in category
        # Childless block elements still nest so a closing tag never trails
        # wrapped attributes; inline list elements only nest real children.
        nested = not inline or (list_children and bool(children))

        if self.env_debug:
            self.debug(f"open <{tag}> {category} inline={inline} nested={nested} level={w.level}")

        if nested:
            if not omit_close:
                w.end_line()
            w.level += 1

        for child in children:
            if child.is_element:
                self.element(child)
                if list_children:
                    w.end_line()
            elif child.is_text:
                self.text(child)
            else:
                msg = f"unexpected node {child!r} in <{tag}>"
                raise PrintError(msg, child)

        if nested:
            w.level -= 1
            w.end_line()

        # The closing tag is never wrapped.
        if not omit_close:
            w.indent()
            w.write(close_tag(node))
        if literal:
            w.literal_depth -= 1
        if keep_space:
            w.keep_space_depth -= 1
        if not inline:
            w.end_line()

    def open_tag(self, node, category, children):
        """Write the opening tag of ``node``.

        Returns True if the whole element fits on the current line and should
        be laid out inline.
        """
        w = self.writer
        tokens = open_tag_tokens(node)
        tag_width = sum(text_width(token) for token in tokens)

        # Block elements start on a new line. Inline elements only do when
        # they'd be wrapped anyway and nothing glues them to what precedes
        # them: a newline there would render as a space that wasn't in the
        # source.
        inline = Category.INLINE in category
        prev = node.previous_non_comment
        prev_text_not_space = prev is not None and prev.is_text and not ends_with_whitespace(prev.text_content)
        start_space_matters = is_inline(prev) or is_inline(node.parent) or prev_text_not_space
        if not inline or (w.would_overflow(tag_width) and not start_space_matters):
            w.end_line()

        started_line = w.line_start
        w.indent()

        force_inline = False
        if not w.verbatim and not category & VERBATIM:
            child_width = -1
            if not children:
                child_width = 0
            elif len(children) == 1 and children[0].is_text:
                child_width = text_width(collapse_node_text(children[0]))
            if child_width >= 0 and (
                w.wrap_width <= 0
                or w.line_width + tag_width + child_width + text_width(close_tag(node)) < w.wrap_width
            ):
                force_inline = True
                if self.env_debug and not inline:
                    self.debug(f"<{node.tag_name}> fits on one line, printing inline")

        unwrapped = 0
        continuation = ""
        if started_line:
            # Wrapped attributes get two extra levels of indentation.
            continuation = w.indent_unit * 2
            unwrapped = 1
            # A first token shorter than the continuation indent would leave
            # a mostly empty line, so keep the second one with it.
            if text_width(tokens[0]) < text_width(continuation):
                unwrapped = 2
        elif (inline or force_inline) and start_space_matters:
            unwrapped = 1

        for i, token in enumerate(tokens):
            if i < unwrapped:
                w.write(token)
            else:
                w.wrap(token, continuation)
        return force_inline

    def text(self, node):
        w = self.writer
        data = node.text_content
        if not data:
            return

        if w.in_literal:
            w.write(data)
            return

        text = escape_text(data)
        if w.in_keep_space:
            w.write(text)
            return

        text = collapse_whitespace(text, node.previous_non_comment, node.next_non_comment, node.parent)
        if not text:
            return

        w.indent()

        # A lone space between inline elements must survive; the word loop
        # below would drop it.
        if text == " ":
            w.write(text)
            return

        start_space = text[0] == " "
        end_space = text[-1] == " "

        # Text glued to a preceding inline element keeps its first word on
        # the same line: "(<a>link</a>)" must not become "(<a>link</a>\n)".
        wrap_start = 0
        if (is_inline(node.previous_non_comment) or is_inline(node.parent)) and not start_space:
            wrap_start = 1

        words = text.strip(" ").split(" ")
        last = len(words) - 1
        for i, word in enumerate(words):
            if i > 0 or start_space:
                word = " " + word
            if i == last and end_space:
                word += " "
            if i < wrap_start:
                w.write(word)
            else:
                w.wrap(word)
