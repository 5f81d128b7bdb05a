"""Build printer trees with the html5lib parser.

html5lib does the actual HTML5 parsing into a minidom document; this module
converts that document into :class:`~htmlpretty.node.Node` objects, merging
the runs of adjacent text nodes html5lib leaves behind (one per character
token) into single text nodes, as a browser DOM has them.
"""

from __future__ import annotations

from xml.dom import Node as DomNode

import html5lib
from html5lib.constants import namespaces
from html5lib.html5parser import ParseError as HTML5LibParseError

from .errors import ParseError, StrictModeError
from .node import Node

# Namespace URI -> the short name stored on Node.namespace (None for HTML)
NAMESPACE_NAMES = {
    None: None,
    namespaces["html"]: None,
    namespaces["svg"]: "svg",
    namespaces["mathml"]: "math",
}


def parse(html, *, strict=False, scripting=True, encoding=None):
    """Parse ``html`` (str or bytes) and return the ``#document`` Node.

    With ``scripting`` enabled ``<noscript>`` content is raw text, as in a
    browser that runs scripts. Bytes are decoded as ``encoding`` if given,
    otherwise as UTF-8 unless a BOM or ``<meta charset>`` says otherwise.
    ``strict`` raises StrictModeError on the first parse error.
    """
    parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder("dom"), strict=strict)
    kwargs = {"scripting": scripting}
    if isinstance(html, (bytes, bytearray)):
        if encoding is not None:
            kwargs["override_encoding"] = encoding
        else:
            kwargs["likely_encoding"] = "utf-8"
    try:
        dom = parser.parse(html, **kwargs)
    except HTML5LibParseError as exc:
        raise StrictModeError(ParseError.from_html5lib(parser.errors[-1])) from exc
    return build_tree(dom)


def build_tree(dom):
    """Convert a minidom Document produced by html5lib into Nodes."""
    root = Node("#document")
    _append_children(root, dom)
    return root


def _append_children(parent, dom_node):
    for child in dom_node.childNodes:
        node_type = child.nodeType
        if node_type == DomNode.TEXT_NODE:
            last = parent.last_child
            if last is not None and last.is_text:
                last.text_content += child.data
            else:
                parent.append_child(Node("#text", text_content=child.data))
        elif node_type == DomNode.ELEMENT_NODE:
            element = Node(
                child.tagName,
                attributes=child.attributes.items(),
                namespace=NAMESPACE_NAMES.get(child.namespaceURI, child.namespaceURI),
            )
            parent.append_child(element)
            _append_children(element, child)
        elif node_type == DomNode.COMMENT_NODE:
            parent.append_child(Node("#comment", text_content=child.data))
        elif node_type == DomNode.DOCUMENT_TYPE_NODE:
            parent.append_child(Node("!doctype", text_content=child.name or ""))
