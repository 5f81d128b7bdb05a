import unittest

from htmlpretty import Node, parse


def find(node, tag_name):
    if node.tag_name == tag_name:
        return node
    for child in node.children:
        found = find(child, tag_name)
        if found is not None:
            return found
    return None


class TestParse(unittest.TestCase):
    def test_document_shape(self):
        root = parse("<!DOCTYPE html><title>x</title>")
        assert root.is_document
        assert [c.tag_name for c in root.children] == ["!doctype", "html"]
        assert root.children[0].text_content == "html"
        html = root.children[1]
        assert [c.tag_name for c in html.children] == ["head", "body"]

    def test_adjacent_text_is_merged(self):
        root = parse("<body>one &amp; two\n  three</body>\n\n")
        body = find(root, "body")
        assert len(body.children) == 1
        assert body.children[0].is_text
        assert body.children[0].text_content == "one & two\n  three\n\n"

    def test_attributes_keep_source_order(self):
        root = parse('<div id="a" class="b" hidden data-z="c"></div>')
        div = find(root, "div")
        assert list(div.attributes.items()) == [("id", "a"), ("class", "b"), ("hidden", ""), ("data-z", "c")]

    def test_duplicate_attribute_keeps_first(self):
        div = find(parse('<div a="1" a="2"></div>'), "div")
        assert div.attributes == {"a": "1"}

    def test_sibling_links(self):
        p = find(parse("<p>a<b>b</b>c</p>"), "p")
        first, bold, last = p.children
        assert first.next_sibling is bold
        assert bold.previous_sibling is first
        assert bold.next_sibling is last
        assert last.next_sibling is None
        assert bold.parent is p

    def test_comments_are_kept(self):
        body = find(parse("<body><!-- note --><p>x</p></body>"), "body")
        assert body.children[0].is_comment
        assert body.children[0].text_content == " note "

    def test_foreign_namespaces(self):
        root = parse("<svg><circle r=1></circle></svg><math><mi>x</mi></math>")
        assert find(root, "svg").namespace == "svg"
        assert find(root, "circle").namespace == "svg"
        assert find(root, "mi").namespace == "math"
        assert find(root, "body").namespace is None

    def test_noscript_is_text_with_scripting(self):
        noscript = find(parse("<body><noscript><b>on</b></noscript>"), "noscript")
        assert [c.tag_name for c in noscript.children] == ["#text"]
        assert noscript.children[0].text_content == "<b>on</b>"

    def test_noscript_is_markup_without_scripting(self):
        noscript = find(parse("<body><noscript><b>on</b></noscript>", scripting=False), "noscript")
        assert [c.tag_name for c in noscript.children] == ["b"]

    def test_bytes_input_with_encoding(self):
        root = parse("<p>caf\xe9</p>".encode("latin-1"), encoding="latin-1")
        assert find(root, "p").children[0].text_content == "caf\xe9"

    def test_bytes_input_defaults_to_utf8(self):
        root = parse("<p>caf\xe9 \u2603</p>".encode())
        assert find(root, "p").children[0].text_content == "caf\xe9 \u2603"

    def test_bytes_input_meta_charset(self):
        root = parse('<meta charset="utf-8"><p>caf\xe9</p>'.encode())
        assert find(root, "p").children[0].text_content == "caf\xe9"


class TestNode(unittest.TestCase):
    def test_empty_tag_name_is_rejected(self):
        with self.assertRaises(ValueError):
            Node("")

    def test_append_child_twice_is_rejected(self):
        parent = Node("div")
        child = parent.append_child(Node("span"))
        with self.assertRaises(ValueError):
            Node("p").append_child(child)

    def test_kinds(self):
        assert Node("div").is_element
        assert Node("my-element").is_element
        assert not Node("#text").is_element
        assert not Node("!doctype").is_element
        assert Node("#comment").is_comment

    def test_child_accessors(self):
        div = Node("div")
        assert div.last_child is None
        a = div.append_child(Node("a"))
        assert div.last_child is a
        b = div.append_child(Node("b"))
        assert div.last_child is b

    def test_siblings_skip_comments(self):
        p = Node("p")
        a = p.append_child(Node("#text", text_content="a"))
        p.append_child(Node("#comment", text_content="x"))
        p.append_child(Node("#comment", text_content="y"))
        b = p.append_child(Node("b"))
        assert a.next_non_comment is b
        assert b.previous_non_comment is a
        assert b.next_non_comment is None

    def test_repr(self):
        assert repr(Node("#text", text_content="hello")) == "Node(#text='hello')"
        assert repr(Node("div")) == "Node(<div>, children=0)"


if __name__ == "__main__":
    unittest.main()
