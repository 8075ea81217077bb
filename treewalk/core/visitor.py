"""Visitor abstraction for treewalk.

Traversal strategies decide the order in which nodes are reached; visitors
decide what happens when they are. A strategy calls three hooks:

- visit_node(node) once per visited node
- enter_level() before descending into a node's children
- leave_level() after all of those children have been processed

enter_level/leave_level calls nest like a stack. Visitors that track depth
rely on that pairing.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

from .errors import VisitorStateError
from .node import TreeNode
from .sink import StreamSink, TextSink
from ..config import DEFAULT_GLYPHS, GlyphSet


class Visitor(ABC):
    """Abstract base class for traversal visitors.

    A visitor may keep mutable state across calls but must only change it
    inside the three hook methods. Visitor state is not reentrant: finish one
    traversal before starting another with the same instance.
    """

    @abstractmethod
    def visit_node(self, node: TreeNode) -> None:
        """Observe one node.

        Args:
            node: The node being visited
        """
        pass

    @abstractmethod
    def enter_level(self) -> None:
        """Called before the children of the current node are walked."""
        pass

    @abstractmethod
    def leave_level(self) -> None:
        """Called after the children of the current node have been walked."""
        pass


class PlainVisitor(Visitor):
    """Emits each node's data followed by a separator.

    Level brackets are ignored, so the output is a flat listing in
    visitation order.
    """

    def __init__(self, sink: Optional[TextSink] = None, separator: str = " "):
        """Initialize with an output sink.

        Args:
            sink: Where to write (defaults to standard output)
            separator: Text written after each node's data
        """
        self.sink = sink if sink is not None else StreamSink()
        self.separator = separator

    def visit_node(self, node: TreeNode) -> None:
        self.sink.write(f"{node.get_data()}{self.separator}")

    def enter_level(self) -> None:
        pass

    def leave_level(self) -> None:
        pass


class DirectoryVisitor(Visitor):
    """Renders a tree as indented lines, like a directory listing.

    Every node below the root is drawn with a branch glyph and an indent
    prefix made of one glyph per ancestor level: a pipe under an ancestor
    that still has siblings to come, a blank under one that was the last
    child. The visitor rebuilds this prefix from the enter/leave brackets and
    from whether the most recently visited node was a last child.

    With the default glyphs, the tree a(b(d), c) renders as::

        a
        ┣b
        ┃┗d
        ┗c

    Only node shapes that answer is_last_child() can be rendered, which in
    practice means LinkedNode trees walked with sibling_pre_order.
    """

    def __init__(self, sink: Optional[TextSink] = None, glyphs: GlyphSet = DEFAULT_GLYPHS):
        """Initialize with an output sink and glyph set.

        Args:
            sink: Where to write (defaults to standard output)
            glyphs: Characters used for branches and indentation
        """
        self.sink = sink if sink is not None else StreamSink()
        self.glyphs = glyphs
        self.reset()

    def reset(self) -> None:
        """Restore the initial state so the visitor can render another tree."""
        self.depth = 0
        self.last_was_last_child = False
        self._segments: List[str] = []

    @property
    def prefix(self) -> str:
        """Indent drawn before the branch glyph of the next visited node."""
        return "".join(self._segments)

    @property
    def is_balanced(self) -> bool:
        """True when every enter_level has been matched by a leave_level."""
        return self.depth == 0

    def visit_node(self, node: TreeNode) -> None:
        is_last = node.is_last_child()

        self.sink.write(self.prefix)
        if self.depth > 0:
            self.sink.write(self.glyphs.last if is_last else self.glyphs.branch)
        self.sink.write_line(str(node.get_data()))

        self.last_was_last_child = is_last

    def enter_level(self) -> None:
        # The root's children hang directly off column 0
        if self.depth > 0:
            self._segments.append(self.glyphs.blank if self.last_was_last_child else self.glyphs.pipe)
        self.depth += 1

    def leave_level(self) -> None:
        if self.depth == 0:
            raise VisitorStateError("leave_level() called without a matching enter_level()")

        self.depth -= 1
        if self.depth == 0:
            self._segments.clear()
        else:
            self._segments.pop()


class CollectingVisitor(Visitor):
    """Records visited data and every hook call without emitting output.

    Attributes:
        visited: Data of each visited node, in visitation order
        events: Every hook call as ("visit", data), ("enter",) or ("leave",)
    """

    def __init__(self):
        self.visited: List[Any] = []
        self.events: List[Tuple[Any, ...]] = []

    def visit_node(self, node: TreeNode) -> None:
        data = node.get_data()
        self.visited.append(data)
        self.events.append(("visit", data))

    def enter_level(self) -> None:
        self.events.append(("enter",))

    def leave_level(self) -> None:
        self.events.append(("leave",))
