"""TreeNode abstraction for treewalk.

A TreeNode is a small, immutable container: a data payload plus references
to its children. Traversal strategies only ever walk downward, so nodes keep
no parent pointers.

Two shapes are provided:

- BinaryNode: exactly two child slots (left, right), either may be empty.
- LinkedNode: an arbitrary-arity tree encoded as first-child / next-sibling
  pointers.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from .errors import UnsupportedOperationError


class TreeNode(ABC):
    """Abstract base class for nodes in any tree shape.

    Concrete shapes must answer four questions about a node without side
    effects. Child sequences may contain holes (None entries) at structurally
    valid positions; traversal code skips them and never dereferences them.
    """

    @abstractmethod
    def get_data(self) -> Any:
        """Return the payload stored in this node.

        Returns:
            The opaque node payload (a string label in most trees)
        """
        pass

    @abstractmethod
    def get_children(self) -> List[Optional['TreeNode']]:
        """Return the ordered child slots of this node.

        The returned list is a fresh copy in a stable order. Entries may be
        None when a child slot is empty.

        Returns:
            List of child nodes, holes preserved
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if every child slot of this node is empty.

        Returns:
            True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def is_last_child(self) -> bool:
        """Check if this node is the final sibling under its parent.

        Returns:
            True if no later sibling exists

        Raises:
            UnsupportedOperationError: If the shape has no sibling order
        """
        pass

    def __str__(self) -> str:
        """String representation defaults to the payload."""
        return str(self.get_data())

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.get_data()!r})"


class BinaryNode(TreeNode):
    """Node of a generic binary tree.

    The two child slots are order-sensitive: left is always reported before
    right, and an empty slot is kept as a hole rather than collapsed.

    Example:
        >>> tree = BinaryNode("a", BinaryNode("b"), BinaryNode("c"))
        >>> [str(child) for child in tree.get_children()]
        ['b', 'c']
    """

    __slots__ = ('_data', '_left', '_right')

    def __init__(self,
                 data: Any,
                 left: Optional['BinaryNode'] = None,
                 right: Optional['BinaryNode'] = None):
        """Create a binary node.

        Args:
            data: Payload for this node
            left: Left subtree (None for an empty slot)
            right: Right subtree (None for an empty slot)
        """
        self._data = data
        self._left = left
        self._right = right

    @property
    def left(self) -> Optional['BinaryNode']:
        return self._left

    @property
    def right(self) -> Optional['BinaryNode']:
        return self._right

    def get_data(self) -> Any:
        return self._data

    def get_children(self) -> List[Optional[TreeNode]]:
        return [self._left, self._right]

    def is_leaf(self) -> bool:
        return self._left is None and self._right is None

    def is_last_child(self) -> bool:
        """Binary nodes have no sibling order to report on."""
        raise UnsupportedOperationError(
            f"{self.__class__.__name__} does not track sibling order"
        )


class LinkedNode(TreeNode):
    """Node of a multi-way tree stored as first-child / next-sibling links.

    A parent references only its first child; each child references the
    sibling that follows it. The constructor wires up the sibling chain from
    the children it is given.

    get_children() deliberately returns an empty list for this shape. The
    sibling-chain traversal walks first_child / next_sibling directly, and
    the generic strategies must not be used on linked trees.

    Example:
        >>> chapter = LinkedNode("Ch2", LinkedNode("S3"), LinkedNode("S4"))
        >>> [str(child) for child in chapter.iter_children()]
        ['S3', 'S4']
    """

    __slots__ = ('_data', '_first_child', '_next_sibling')

    def __init__(self, data: Any, *children: 'LinkedNode'):
        """Create a linked node and chain its children together.

        Args:
            data: Payload for this node
            *children: Already-built child nodes, in order
        """
        self._data = data
        self._first_child: Optional[LinkedNode] = children[0] if children else None
        self._next_sibling: Optional[LinkedNode] = None

        for previous, current in zip(children, children[1:]):
            previous._next_sibling = current

    @property
    def first_child(self) -> Optional['LinkedNode']:
        return self._first_child

    @property
    def next_sibling(self) -> Optional['LinkedNode']:
        return self._next_sibling

    def iter_children(self) -> Iterator['LinkedNode']:
        """Yield the children of this node by following the sibling chain."""
        child = self._first_child
        while child is not None:
            yield child
            child = child._next_sibling

    def get_data(self) -> Any:
        return self._data

    def get_children(self) -> List[Optional[TreeNode]]:
        # Linked trees are walked through first_child/next_sibling.
        return []

    def is_leaf(self) -> bool:
        return self._first_child is None

    def is_last_child(self) -> bool:
        return self._next_sibling is None
