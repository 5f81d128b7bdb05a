import unittest
from unittest import mock

from htmlpretty import tags
from htmlpretty.constants import (
    INLINE_ELEMENTS,
    KEEP_SPACE_ELEMENTS,
    LITERAL_ELEMENTS,
    VOID_ELEMENTS,
)
from htmlpretty.errors import PrintError, TagTableError
from htmlpretty.node import Node
from htmlpretty.tags import Category, check_consistency, classify, node_category, validate_tables


class TestClassify(unittest.TestCase):
    def test_unknown_tag_is_block(self):
        assert classify("my-widget") == Category.BLOCK
        assert classify("div") == Category.BLOCK

    def test_void(self):
        assert classify("br") == Category.VOID
        assert classify("meta") == Category.VOID

    def test_inline_void(self):
        assert classify("img") == Category.VOID | Category.INLINE

    def test_list_override_on_inline_tag(self):
        assert classify("picture") == Category.INLINE | Category.LIST
        assert classify("ul") == Category.LIST

    def test_literal_keep_space_and_omit_close(self):
        assert classify("script") == Category.LITERAL
        assert classify("noscript") == Category.LITERAL
        assert classify("pre") == Category.KEEP_SPACE
        assert classify("li") == Category.OMIT_CLOSE

    def test_tables_do_not_contradict(self):
        assert not LITERAL_ELEMENTS & KEEP_SPACE_ELEMENTS
        assert not VOID_ELEMENTS & (LITERAL_ELEMENTS | KEEP_SPACE_ELEMENTS)
        validate_tables()


class TestNodeHelpers(unittest.TestCase):
    def test_is_inline(self):
        assert tags.is_inline(Node("a"))
        assert not tags.is_inline(Node("div"))
        assert not tags.is_inline(None)

    def test_text_named_like_inline_tag_is_not_inline(self):
        for name in INLINE_ELEMENTS:
            assert not tags.is_inline(Node("#text", text_content=name))

    def test_node_category(self):
        assert node_category(Node("pre")) == Category.KEEP_SPACE
        assert node_category(Node("#text", text_content="pre")) == Category.BLOCK
        assert node_category(None) == Category.BLOCK


class TestForeignContent(unittest.TestCase):
    def test_svg_root_uses_tables(self):
        assert classify("svg", "svg") == Category.INLINE | Category.LIST

    def test_svg_children_are_block(self):
        assert classify("a", "svg") == Category.BLOCK
        assert classify("style", "svg") == Category.BLOCK
        assert not tags.is_inline(Node("a", namespace="svg"))

    def test_math_is_block(self):
        assert classify("math", "math") == Category.BLOCK
        assert classify("mi", "math") == Category.BLOCK


class TestConsistency(unittest.TestCase):
    def test_void_literal_is_rejected(self):
        with self.assertRaises(TagTableError):
            check_consistency("x", Category.VOID | Category.LITERAL)

    def test_void_keep_space_is_rejected(self):
        with self.assertRaises(TagTableError):
            check_consistency("x", Category.VOID | Category.KEEP_SPACE)

    def test_literal_keep_space_is_rejected(self):
        with self.assertRaises(TagTableError):
            check_consistency("x", Category.LITERAL | Category.KEEP_SPACE)

    def test_table_error_is_not_a_print_error(self):
        assert not issubclass(TagTableError, PrintError)

    def test_validate_tables_finds_contradiction(self):
        bad = (
            (Category.VOID, frozenset({"br", "script"})),
            (Category.LITERAL, frozenset({"script"})),
        )
        with mock.patch.object(tags, "_TABLES", bad), self.assertRaises(TagTableError):
            validate_tables()


if __name__ == "__main__":
    unittest.main()
