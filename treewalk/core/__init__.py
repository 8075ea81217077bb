"""Core components of treewalk: nodes, visitors, sinks and traversals."""

from .errors import (
    TreeWalkError,
    UnsupportedOperationError,
    VisitorStateError,
    DuplicateKeyError,
)
from .node import TreeNode, BinaryNode, LinkedNode
from .sink import TextSink, StreamSink, StringSink
from .visitor import Visitor, PlainVisitor, DirectoryVisitor, CollectingVisitor
from .traverser import (
    breadth_first,
    pre_order,
    iterative_pre_order,
    post_order,
    in_order,
    sibling_pre_order,
    get_traversal,
    parse_strategy,
    TRAVERSALS,
)

__all__ = [
    'TreeWalkError',
    'UnsupportedOperationError',
    'VisitorStateError',
    'DuplicateKeyError',
    'TreeNode',
    'BinaryNode',
    'LinkedNode',
    'TextSink',
    'StreamSink',
    'StringSink',
    'Visitor',
    'PlainVisitor',
    'DirectoryVisitor',
    'CollectingVisitor',
    'breadth_first',
    'pre_order',
    'iterative_pre_order',
    'post_order',
    'in_order',
    'sibling_pre_order',
    'get_traversal',
    'parse_strategy',
    'TRAVERSALS',
]
