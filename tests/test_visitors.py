"""Tests for the visitor implementations and output sinks."""

import io

import pytest

from treewalk import (
    ASCII_GLYPHS,
    BinaryNode,
    CollectingVisitor,
    DirectoryVisitor,
    GlyphSet,
    LinkedNode,
    PlainVisitor,
    StreamSink,
    StringSink,
    UnsupportedOperationError,
    Visitor,
    VisitorStateError,
    breadth_first,
    in_order,
    post_order,
    sibling_pre_order,
)
from treewalk.testing import SAMPLE_BOOK_RENDERING, build_sample_binary_tree, build_sample_book


class TestSinks:
    """Test the output sinks visitors write to."""

    def test_string_sink(self):
        sink = StringSink()
        sink.write("a")
        sink.write_line("b")
        sink.write_line()

        assert sink.getvalue() == "ab\n\n"
        assert str(sink) == "ab\n\n"

    def test_string_sink_clear(self):
        sink = StringSink()
        sink.write("junk")
        sink.clear()
        sink.write("x")

        assert sink.getvalue() == "x"

    def test_stream_sink_explicit_stream(self):
        stream = io.StringIO()
        StreamSink(stream).write_line("hello")

        assert stream.getvalue() == "hello\n"

    def test_stream_sink_defaults_to_stdout(self, capsys):
        StreamSink().write_line("to stdout")

        assert capsys.readouterr().out == "to stdout\n"


class TestPlainVisitor:
    """Test the flat listing visitor."""

    def test_breadth_first_listing(self):
        sink = StringSink()
        breadth_first(build_sample_binary_tree(), PlainVisitor(sink))

        assert sink.getvalue() == "a b c d e f g h "

    def test_custom_separator(self):
        sink = StringSink()
        post_order(BinaryNode("p", BinaryNode("l"), BinaryNode("r")), PlainVisitor(sink, separator=","))

        assert sink.getvalue() == "l,r,p,"

    def test_ignores_levels(self):
        sink = StringSink()
        visitor = PlainVisitor(sink)
        visitor.enter_level()
        visitor.leave_level()
        visitor.leave_level()

        assert sink.getvalue() == ""

    def test_prints_to_stdout_by_default(self, capsys):
        in_order(BinaryNode("b", BinaryNode("a"), BinaryNode("c")), PlainVisitor())

        assert capsys.readouterr().out == "a b c "


class TestCollectingVisitor:
    """Test the recording visitor used by the high-level API."""

    def test_records_visits_and_events(self):
        visitor = CollectingVisitor()
        sibling_pre_order(LinkedNode("root", LinkedNode("leaf")), visitor)

        assert visitor.visited == ["root", "leaf"]
        assert visitor.events == [
            ("visit", "root"),
            ("enter",),
            ("visit", "leaf"),
            ("enter",),
            ("leave",),
            ("leave",),
        ]


class TestDirectoryVisitor:
    """Test the directory-style rendering visitor."""

    def render(self, root, glyphs=None):
        sink = StringSink()
        visitor = DirectoryVisitor(sink) if glyphs is None else DirectoryVisitor(sink, glyphs=glyphs)
        sibling_pre_order(root, visitor)
        return sink.getvalue(), visitor

    def test_simple_tree(self):
        tree = LinkedNode("a", LinkedNode("b", LinkedNode("d")), LinkedNode("c"))
        output, visitor = self.render(tree)

        assert output == "a\n┣b\n┃┗d\n┗c\n"
        assert visitor.is_balanced
        assert visitor.prefix == ""

    def test_last_child_subtree_is_blank_indented(self):
        tree = LinkedNode("a", LinkedNode("b"), LinkedNode("c", LinkedNode("d")))
        output, _ = self.render(tree)

        assert output == "a\n┣b\n┗c\n ┗d\n"

    def test_single_node(self):
        output, visitor = self.render(LinkedNode("alone"))

        assert output == "alone\n"
        assert visitor.depth == 0

    def test_sample_book(self):
        output, visitor = self.render(build_sample_book())

        assert output == SAMPLE_BOOK_RENDERING
        assert visitor.is_balanced
        assert visitor.prefix == ""

    def test_custom_glyphs(self):
        tree = LinkedNode("a", LinkedNode("b", LinkedNode("d")), LinkedNode("c"))
        output, _ = self.render(tree, glyphs=ASCII_GLYPHS)

        assert output == "a\n+b\n|`d\n`c\n"

    def test_multi_character_glyphs(self):
        tree = LinkedNode("r", LinkedNode("a", LinkedNode("b", LinkedNode("c"))), LinkedNode("z"))
        output, visitor = self.render(tree, glyphs=GlyphSet(pipe="||"))

        assert output == "r\n┣a\n||┗b\n|| ┗c\n┗z\n"
        assert visitor.prefix == ""

    def test_multi_character_blank(self):
        tree = LinkedNode("r", LinkedNode("a", LinkedNode("b", LinkedNode("c"))), LinkedNode("z"))
        output, _ = self.render(tree, glyphs=GlyphSet(pipe="||", blank=".."))

        assert output == "r\n┣a\n||┗b\n||..┗c\n┗z\n"

    def test_prefix_tracks_depth(self):

        """After each visit, the prefix holds one glyph per level below the root's children."""

        class CheckingVisitor(DirectoryVisitor):
            def visit_node(self, node):
                super().visit_node(node)
                assert len(self.prefix) == max(self.depth - 1, 0)

        visitor = CheckingVisitor(StringSink())
        sibling_pre_order(build_sample_book(), visitor)

        assert visitor.is_balanced

    def test_manual_prefix_stack(self):
        visitor = DirectoryVisitor(StringSink())
        visitor.visit_node(LinkedNode("root"))
        visitor.enter_level()
        assert (visitor.depth, visitor.prefix) == (1, "")

        first, second = LinkedNode("x"), LinkedNode("y")
        LinkedNode("parent", first, second)
        visitor.visit_node(first)
        visitor.enter_level()
        assert (visitor.depth, visitor.prefix) == (2, "┃")

        visitor.visit_node(LinkedNode("z"))
        visitor.enter_level()
        assert (visitor.depth, visitor.prefix) == (3, "┃ ")

        visitor.leave_level()
        assert visitor.prefix == "┃"
        visitor.leave_level()
        assert visitor.prefix == ""
        visitor.leave_level()
        assert visitor.is_balanced

    def test_unbalanced_leave_raises(self):
        visitor = DirectoryVisitor(StringSink())

        with pytest.raises(VisitorStateError):
            visitor.leave_level()

    def test_reset(self):
        visitor = DirectoryVisitor(StringSink())
        visitor.visit_node(LinkedNode("root"))
        visitor.enter_level()
        visitor.enter_level()
        visitor.reset()

        assert visitor.depth == 0
        assert visitor.prefix == ""
        assert not visitor.last_was_last_child

    def test_reuse_for_second_tree(self):
        sink = StringSink()
        visitor = DirectoryVisitor(sink)
        sibling_pre_order(LinkedNode("one", LinkedNode("a")), visitor)
        sibling_pre_order(LinkedNode("two", LinkedNode("b")), visitor)

        assert sink.getvalue() == "one\n┗a\ntwo\n┗b\n"

    def test_binary_nodes_unsupported(self):
        """Binary nodes cannot say whether they are the last child."""
        visitor = DirectoryVisitor(StringSink())

        with pytest.raises(UnsupportedOperationError):
            visitor.visit_node(BinaryNode("a"))


class TestGlyphSet:
    """Test glyph validation."""

    def test_default_is_valid(self):
        assert GlyphSet().validate() == []

    def test_default_values(self):
        glyphs = GlyphSet()
        assert (glyphs.last, glyphs.branch, glyphs.pipe, glyphs.blank) == ("┗", "┣", "┃", " ")

    def test_multi_character_indent_accepted(self):
        assert GlyphSet(pipe="||", blank="  ").validate() == []

    def test_empty_indent_rejected(self):
        errors = GlyphSet(pipe="", blank="").validate()

        assert errors == ["pipe glyph cannot be empty", "blank glyph cannot be empty"]


    def test_empty_branch_rejected(self):
        errors = GlyphSet(last="").validate()

        assert errors == ["last glyph cannot be empty"]


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()
