"""High-level API for treewalk.

This module provides simple, functional interfaces for common traversal
tasks. These functions wrap the ExecutionPlan and visitor classes for ease
of use in simple cases.
"""

from typing import Any, List, Optional, TextIO, Union

from .config import DEFAULT_GLYPHS, GlyphSet, TraversalConfig, TraversalStrategy
from .core.node import LinkedNode, TreeNode
from .core.sink import StreamSink, StringSink, TextSink
from .core.traverser import parse_strategy
from .core.visitor import CollectingVisitor, DirectoryVisitor, PlainVisitor, Visitor
from .planning import ExecutionPlan


def traverse(
    root: Optional[TreeNode],
    visitor: Visitor,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    require_balanced: bool = True,
) -> int:
    """Walk a tree with the given strategy, driving a visitor.

    This is the primary high-level function. It validates that the strategy
    fits the tree before any hook is called.

    Args:
        root: Root node (None for an empty tree)
        visitor: Visitor receiving hook calls
        strategy: Traversal strategy, as an enum member or alias
            (bfs, pre, iterative_pre, post, in, sibling)
        require_balanced: Fail if a depth-tracking visitor ends unbalanced

    Returns:
        Number of nodes visited

    Raises:
        CapabilityMismatchError: If the strategy cannot walk this tree
        ValueError: If the strategy name is not recognized

    Example:
        >>> tree = BinaryNode("a", BinaryNode("b"), BinaryNode("c"))
        >>> traverse(tree, PlainVisitor(), strategy="bfs")
        a b c 3
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        require_balanced=require_balanced,
    )
    plan = ExecutionPlan(config, root)
    return plan.execute(visitor)


def collect(
    root: Optional[TreeNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
) -> List[Any]:
    """Return node data in visitation order.

    Args:
        root: Root node (None for an empty tree)
        strategy: Traversal strategy, as an enum member or alias

    Returns:
        List of node payloads in the order they were visited
    """
    visitor = CollectingVisitor()
    traverse(root, visitor, strategy)
    return visitor.visited


def render_flat(
    root: Optional[TreeNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.BREADTH_FIRST,
    separator: str = " ",
) -> str:
    """Render node data as one flat line in visitation order.

    Args:
        root: Root node (None for an empty tree)
        strategy: Traversal strategy, as an enum member or alias
        separator: Text written after each node's data

    Returns:
        The rendered listing
    """
    sink = StringSink()
    traverse(root, PlainVisitor(sink, separator=separator), strategy)
    return sink.getvalue()


def _directory_strategy(root: Optional[TreeNode]) -> TraversalStrategy:
    if isinstance(root, LinkedNode):
        return TraversalStrategy.SIBLING_PRE_ORDER
    return TraversalStrategy.PRE_ORDER


def write_tree(
    root: Optional[TreeNode],
    sink: TextSink,
    glyphs: GlyphSet = DEFAULT_GLYPHS,
) -> int:
    """Render a tree directory-style into a sink.

    Linked trees are walked with sibling-chain pre-order, anything else with
    generic pre-order. The node shape must support is_last_child().

    Args:
        root: Root node (None for an empty tree)
        sink: Destination for the rendered lines
        glyphs: Characters used for branches and indentation

    Returns:
        Number of nodes rendered
    """
    config = TraversalConfig(strategy=_directory_strategy(root), glyphs=glyphs)
    plan = ExecutionPlan(config, root)
    return plan.execute(DirectoryVisitor(sink, glyphs=config.glyphs))


def render_tree(root: Optional[TreeNode], glyphs: GlyphSet = DEFAULT_GLYPHS) -> str:
    """Render a tree directory-style and return the text.

    Example:
        >>> book = LinkedNode("Ch2", LinkedNode("S3"), LinkedNode("S4"))
        >>> print(render_tree(book), end="")
        Ch2
        ┣S3
        ┗S4
    """
    sink = StringSink()
    write_tree(root, sink, glyphs)
    return sink.getvalue()


def print_tree(
    root: Optional[TreeNode],
    glyphs: GlyphSet = DEFAULT_GLYPHS,
    stream: Optional[TextIO] = None,
) -> None:
    """Render a tree directory-style to a stream (standard output by default)."""
    write_tree(root, StreamSink(stream), glyphs)
