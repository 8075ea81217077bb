"""Tree traversal strategies for treewalk.

Each strategy is a plain function taking a root node and a visitor. The
strategy walks the tree and calls the visitor's hooks at well-defined
points; the visitor never drives the walk itself.

Passing None as the root is always a no-op. Cyclic structures are not
detected: the node types cannot form cycles when built through their
constructors.
"""

from collections import deque
from typing import Callable, Deque, Dict, List, Optional, Union

from .node import BinaryNode, LinkedNode, TreeNode
from .visitor import Visitor
from ..config import TraversalStrategy

Traversal = Callable[[Optional[TreeNode], Visitor], None]


def breadth_first(root: Optional[TreeNode], visitor: Visitor) -> None:
    """Visit nodes level by level using a FIFO queue.

    Every node at depth N is visited before any node at depth N+1, and
    siblings are visited left to right. Level brackets are never called.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node calls
    """
    if root is None:
        return

    queue: Deque[TreeNode] = deque([root])

    while queue:
        node = queue.popleft()

        for child in node.get_children():
            if child is not None:
                queue.append(child)

        visitor.visit_node(node)


def pre_order(root: Optional[TreeNode], visitor: Visitor) -> None:
    """Visit a node, then each of its children's subtrees in order.

    Children are reached through get_children(), so this strategy treats a
    LinkedNode as a leaf; use sibling_pre_order for linked trees.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node and level bracket calls
    """
    if root is None:
        return

    visitor.visit_node(root)
    visitor.enter_level()
    for child in root.get_children():
        if child is not None:
            pre_order(child, visitor)
    visitor.leave_level()


def iterative_pre_order(root: Optional[BinaryNode], visitor: Visitor) -> None:
    """Pre-order walk of a binary tree without recursion.

    Walks down each left spine, visiting as it goes and pushing pending
    right subtrees onto a stack. The visit order is identical to pre_order
    on the same tree. Because no recursion depth is tracked, the level
    brackets are never called.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node calls
    """
    pending: List[BinaryNode] = [root] if root is not None else []

    while pending:
        node = pending.pop()
        while node is not None:
            visitor.visit_node(node)
            if node.right is not None:
                pending.append(node.right)
            node = node.left


def post_order(root: Optional[TreeNode], visitor: Visitor) -> None:
    """Visit each child's subtree in order, then the node itself.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node and level bracket calls
    """
    if root is None:
        return

    visitor.enter_level()
    for child in root.get_children():
        if child is not None:
            post_order(child, visitor)
    visitor.leave_level()

    visitor.visit_node(root)


def in_order(root: Optional[BinaryNode], visitor: Visitor) -> None:
    """Visit the left subtree, then the node, then the right subtree.

    Each side gets its own enter/leave bracket, emitted even when that child
    is absent.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node and level bracket calls
    """
    if root is None:
        return

    visitor.enter_level()
    in_order(root.left, visitor)
    visitor.leave_level()

    visitor.visit_node(root)

    visitor.enter_level()
    in_order(root.right, visitor)
    visitor.leave_level()


def sibling_pre_order(root: Optional[LinkedNode], visitor: Visitor) -> None:
    """Pre-order walk of a first-child / next-sibling tree.

    Follows first_child and then the next_sibling chain directly instead of
    going through get_children(), which is empty for linked nodes.

    Args:
        root: Starting node (None for an empty tree)
        visitor: Receives visit_node and level bracket calls
    """
    if root is None:
        return

    visitor.visit_node(root)
    visitor.enter_level()
    child = root.first_child
    while child is not None:
        sibling_pre_order(child, visitor)
        child = child.next_sibling
    visitor.leave_level()


TRAVERSALS: Dict[TraversalStrategy, Traversal] = {
    TraversalStrategy.BREADTH_FIRST: breadth_first,
    TraversalStrategy.PRE_ORDER: pre_order,
    TraversalStrategy.ITERATIVE_PRE_ORDER: iterative_pre_order,
    TraversalStrategy.POST_ORDER: post_order,
    TraversalStrategy.IN_ORDER: in_order,
    TraversalStrategy.SIBLING_PRE_ORDER: sibling_pre_order,
}

_ALIASES: Dict[str, TraversalStrategy] = {
    'bfs': TraversalStrategy.BREADTH_FIRST,
    'breadth_first': TraversalStrategy.BREADTH_FIRST,
    'pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'iterative_pre': TraversalStrategy.ITERATIVE_PRE_ORDER,
    'iterative_pre_order': TraversalStrategy.ITERATIVE_PRE_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'sibling': TraversalStrategy.SIBLING_PRE_ORDER,
    'sibling_pre_order': TraversalStrategy.SIBLING_PRE_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Resolve a strategy enum member or name.

    Args:
        strategy: TraversalStrategy member or a case-insensitive alias

    Returns:
        The matching TraversalStrategy

    Raises:
        ValueError: If strategy name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower()
    if strategy_lower not in _ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(_ALIASES.keys())}"
        )

    return _ALIASES[strategy_lower]


def get_traversal(strategy: Union[TraversalStrategy, str]) -> Traversal:
    """Look up the traversal function for a strategy.

    Args:
        strategy: TraversalStrategy member or a case-insensitive alias

    Returns:
        Traversal function taking (root, visitor)

    Raises:
        ValueError: If strategy name is not recognized
    """
    return TRAVERSALS[parse_strategy(strategy)]
