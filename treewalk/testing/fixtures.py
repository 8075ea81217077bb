"""Test fixtures for treewalk consumers.

Sample trees used across the test suite and the demo, plus a visitor that
records depth alongside each hook call so tests can check bracket nesting.
"""

from typing import Any, List, Tuple

from ..core.node import BinaryNode, LinkedNode, TreeNode
from ..core.visitor import Visitor


def build_sample_binary_tree() -> BinaryNode:
    """Build the binary tree a(b(d, -), c(e, f(g(-, h), -))).

    Expected orders:
        pre-order:     a b d c e f g h
        post-order:    d b e h g f c a
        in-order:      d b a e c g h f
        breadth-first: a b c d e f g h
    """
    d = BinaryNode("d")
    e = BinaryNode("e")
    g = BinaryNode("g", None, BinaryNode("h"))
    f = BinaryNode("f", g, None)
    c = BinaryNode("c", e, f)
    b = BinaryNode("b", d, None)
    return BinaryNode("a", b, c)


def build_sample_book() -> LinkedNode:
    """Build a small book outline as a first-child / next-sibling tree."""
    return LinkedNode(
        "My Book",
        LinkedNode(
            "Ch1",
            LinkedNode(
                "Section 1",
                LinkedNode("This is text stored in this silly book :)"),
            ),
            LinkedNode(
                "Section 2",
                LinkedNode(":)"),
                LinkedNode(">.<"),
            ),
        ),
        LinkedNode(
            "Ch2",
            LinkedNode("Section 3"),
            LinkedNode("Section 4"),
            LinkedNode("Section 5"),
        ),
        LinkedNode(
            "Ch3",
            LinkedNode("Section 6"),
        ),
        LinkedNode("Ch4"),
    )


SAMPLE_BOOK_RENDERING = (
    "My Book\n"
    "┣Ch1\n"
    "┃┣Section 1\n"
    "┃┃┗This is text stored in this silly book :)\n"
    "┃┗Section 2\n"
    "┃ ┣:)\n"
    "┃ ┗>.<\n"
    "┣Ch2\n"
    "┃┣Section 3\n"
    "┃┣Section 4\n"
    "┃┗Section 5\n"
    "┣Ch3\n"
    "┃┗Section 6\n"
    "┗Ch4\n"
)


class RecordingVisitor(Visitor):
    """Visitor that records (event, data, depth) for every hook call.

    depth is the number of open levels at the time of the call. The visitor
    also tracks the deepest nesting reached and whether any leave_level
    arrived without a matching enter_level.
    """

    def __init__(self):
        self.events: List[Tuple[str, Any, int]] = []
        self.depth = 0
        self.max_depth = 0
        self.underflow = False

    @property
    def is_balanced(self) -> bool:
        return self.depth == 0 and not self.underflow

    @property
    def visited(self) -> List[Any]:
        return [data for event, data, _ in self.events if event == "visit"]

    def depth_of(self, data: Any) -> int:
        """Return the depth at which the node with this data was visited."""
        for event, event_data, depth in self.events:
            if event == "visit" and event_data == data:
                return depth
        raise KeyError(data)

    def visit_node(self, node: TreeNode) -> None:
        self.events.append(("visit", node.get_data(), self.depth))

    def enter_level(self) -> None:
        self.events.append(("enter", None, self.depth))
        self.depth += 1
        self.max_depth = max(self.max_depth, self.depth)

    def leave_level(self) -> None:
        if self.depth == 0:
            self.underflow = True
        self.depth -= 1
        self.events.append(("leave", None, self.depth))
