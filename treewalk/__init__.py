"""treewalk - Tree shapes and visitor-driven traversal strategies.

treewalk pairs a few small tree shapes with traversal algorithms that drive
a pluggable visitor. Visitors observe the walk through three hooks
(visit_node, enter_level, leave_level) and can render a tree flat or as an
indented, directory-style listing.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treewalk import BinaryNode, collect
    collect(BinaryNode("a", BinaryNode("b")), strategy="post")

    from treewalk import LinkedNode, render_tree
    print(render_tree(LinkedNode("root", LinkedNode("child"))))
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.errors import (
    TreeWalkError,
    UnsupportedOperationError,
    VisitorStateError,
    DuplicateKeyError,
)
from .core.node import TreeNode, BinaryNode, LinkedNode
from .core.sink import TextSink, StreamSink, StringSink
from .core.visitor import Visitor, PlainVisitor, DirectoryVisitor, CollectingVisitor
from .core.traverser import (
    breadth_first,
    pre_order,
    iterative_pre_order,
    post_order,
    in_order,
    sibling_pre_order,
    get_traversal,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalStrategy,
    GlyphSet,
    DEFAULT_GLYPHS,
    ASCII_GLYPHS,
)
from .planning import ExecutionPlan, CapabilityMismatchError

# High-level API
from .api import (
    traverse,
    collect,
    render_flat,
    render_tree,
    write_tree,
    print_tree,
)

# Ordered set kept outside the traversal core
from .bst import BinarySearchTree

__all__ = [
    "__version__",
    # Errors
    'TreeWalkError',
    'UnsupportedOperationError',
    'VisitorStateError',
    'DuplicateKeyError',
    'CapabilityMismatchError',
    # Core
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
    # Config
    'TraversalConfig',
    'TraversalStrategy',
    'GlyphSet',
    'DEFAULT_GLYPHS',
    'ASCII_GLYPHS',
    'ExecutionPlan',
    # API
    'traverse',
    'collect',
    'render_flat',
    'render_tree',
    'write_tree',
    'print_tree',
    'BinarySearchTree',
]
