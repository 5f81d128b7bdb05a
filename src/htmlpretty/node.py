class Node:
    """Represents a DOM-like node.
    - tag_name: e.g., 'div', 'p', etc. Use '#text' for text nodes, '#comment' for
      comments, '!doctype' for the doctype and '#document' for the root.
    - attributes: dict of tag attributes in source order
    - children: list of child Nodes
    - parent: reference to parent Node (or None for root)
    - next_sibling/previous_sibling: references to adjacent nodes in the tree.
    """

    __slots__ = (
        "attributes",
        "children",
        "namespace",
        "next_sibling",
        "parent",
        "previous_sibling",
        "tag_name",
        "text_content",
    )

    def __init__(self, tag_name, attributes=None, text_content=None, namespace=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Node constructor"
            raise ValueError(msg)

        self.tag_name = tag_name
        self.namespace = namespace  # None for HTML, "svg" or "math" for foreign elements
        self.attributes = dict(attributes) if attributes else {}
        self.children = []
        self.parent = None
        # For text, comment and doctype nodes; unused for elements
        self.text_content = text_content if text_content is not None else ""
        self.next_sibling = None
        self.previous_sibling = None

    @property
    def is_document(self):
        return self.tag_name == "#document"

    @property
    def is_doctype(self):
        return self.tag_name == "!doctype"

    @property
    def is_text(self):
        return self.tag_name == "#text"

    @property
    def is_comment(self):
        return self.tag_name == "#comment"

    @property
    def is_element(self):
        return self.tag_name[0] not in "#!"

    @property
    def last_child(self):
        return self.children[-1] if self.children else None

    @property
    def previous_non_comment(self):
        """Closest previous sibling that is not a comment."""
        node = self.previous_sibling
        while node is not None and node.is_comment:
            node = node.previous_sibling
        return node

    @property
    def next_non_comment(self):
        node = self.next_sibling
        while node is not None and node.is_comment:
            node = node.next_sibling
        return node

    def append_child(self, child):
        if child.parent is not None:
            msg = f"{child!r} already has a parent"
            raise ValueError(msg)

        if self.children:
            self.children[-1].next_sibling = child
            child.previous_sibling = self.children[-1]
        else:
            child.previous_sibling = None

        child.parent = self
        child.next_sibling = None
        self.children.append(child)
        return child

    def __repr__(self):
        if self.tag_name == "#text":
            return f"Node(#text='{self.text_content[:30]}')"
        if self.tag_name == "#comment":
            return f"Node(#comment='{self.text_content[:30]}')"
        if self.tag_name == "!doctype":
            return f"Node(!doctype='{self.text_content}')"
        return f"Node(<{self.tag_name}>, children={len(self.children)})"
