"""Binary search tree over integers.

A small mutable ordered set, kept separate from the immutable traversal
node types. Keys are unique: inserting a key that is already present raises
DuplicateKeyError and leaves the tree unchanged.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from .core.errors import DuplicateKeyError
from .core.sink import StreamSink, TextSink

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: int):
        self.value = value
        self.left: Optional['_Node'] = None
        self.right: Optional['_Node'] = None


class BinarySearchTree:
    """Unbalanced binary search tree of unique integers.

    Example:
        >>> tree = BinarySearchTree.from_iterable([1, 0, 8, 6])
        >>> list(tree)
        [0, 1, 6, 8]
        >>> tree.to_list()
        [1, 0, 8, 6]
    """

    def __init__(self):
        self._root: Optional[_Node] = None
        self._size = 0

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> 'BinarySearchTree':
        """Build a tree by inserting values in iteration order.

        Raises:
            DuplicateKeyError: If values contains the same key twice
        """
        tree = cls()
        for value in values:
            tree.insert(value)
        return tree

    def insert(self, value: int) -> None:
        """Insert a key.

        Args:
            value: Key to insert

        Raises:
            DuplicateKeyError: If the key is already in the tree
        """
        if self._root is None:
            self._root = _Node(value)
        else:
            node = self._root
            while True:
                if value < node.value:
                    if node.left is None:
                        node.left = _Node(value)
                        break
                    node = node.left
                elif node.value < value:
                    if node.right is None:
                        node.right = _Node(value)
                        break
                    node = node.right
                else:
                    raise DuplicateKeyError(value)

        self._size += 1
        logger.debug("Inserted %r (size=%d)", value, self._size)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._root is not None

    def __iter__(self) -> Iterator[int]:
        """Yield keys in ascending order."""
        stack: List[_Node] = []
        node = self._root

        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def to_list(self) -> List[int]:
        """Serialize keys in pre-order.

        Inserting the returned keys into an empty tree, in order, rebuilds
        a tree of the same shape.

        Returns:
            Keys in root-first, left-before-right order
        """
        result: List[int] = []
        pending: List[_Node] = [self._root] if self._root is not None else []

        while pending:
            node = pending.pop()
            while node is not None:
                result.append(node.value)
                if node.right is not None:
                    pending.append(node.right)
                node = node.left

        return result

    def print(self, sink: Optional[TextSink] = None) -> None:
        """Write keys one per line in ascending order.

        Args:
            sink: Where to write (defaults to standard output)
        """
        sink = sink if sink is not None else StreamSink()
        for value in self:
            sink.write_line(str(value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"
