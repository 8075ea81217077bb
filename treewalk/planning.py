"""Execution planning for treewalk.

The ExecutionPlan validates that a TraversalConfig can be applied to a given
root node and coordinates the actual traversal.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import (
    BINARY_ONLY_STRATEGIES,
    LINKED_ONLY_STRATEGIES,
    TraversalConfig,
    TraversalStrategy,
)
from .core.errors import TreeWalkError, VisitorStateError
from .core.node import BinaryNode, LinkedNode, TreeNode
from .core.traverser import Traversal, get_traversal
from .core.visitor import Visitor

logger = logging.getLogger(__name__)


class CapabilityMismatchError(TreeWalkError):
    """Raised when a configuration can't be applied to the given tree."""
    pass


class _CountingVisitor(Visitor):
    """Forwards every hook to another visitor and counts visited nodes."""

    def __init__(self, inner: Visitor):
        self.inner = inner
        self.count = 0

    def visit_node(self, node: TreeNode) -> None:
        self.count += 1
        self.inner.visit_node(node)

    def enter_level(self) -> None:
        self.inner.enter_level()

    def leave_level(self) -> None:
        self.inner.leave_level()


class ExecutionPlan:
    """Validated execution plan for one tree traversal.

    The plan is the bridge between user intent (TraversalConfig) and
    execution. It checks that the requested strategy can actually walk the
    root's node shape before any visitor is called, so that a mismatch fails
    loudly instead of producing a truncated walk.
    """

    def __init__(self, config: TraversalConfig, root: Optional[TreeNode]):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            root: Root of the tree to walk (None for an empty tree)

        Raises:
            CapabilityMismatchError: If the config is invalid or the strategy
                cannot walk this kind of tree
        """
        self.config = config
        self.root = root

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Strategy limitations: {'; '.join(capability_issues)}"
            )

        self.traversal: Traversal = get_traversal(config.strategy)

        # Track execution state
        self.nodes_visited = 0

        logger.debug(
            "Planned %s traversal over %s",
            config.strategy.value, type(root).__name__,
        )

    def _validate_capabilities(self) -> List[str]:
        """Validate that the strategy fits the root's node shape.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []
        strategy = self.config.strategy
        root = self.root

        if root is None:
            return issues

        if strategy in BINARY_ONLY_STRATEGIES and not isinstance(root, BinaryNode):
            issues.append(
                f"{strategy.value} traversal requires a BinaryNode root, "
                f"got {type(root).__name__}"
            )

        if strategy in LINKED_ONLY_STRATEGIES and not isinstance(root, LinkedNode):
            issues.append(
                f"{strategy.value} traversal requires a LinkedNode root, "
                f"got {type(root).__name__}"
            )

        # Generic strategies see linked trees through the empty get_children()
        if (strategy not in LINKED_ONLY_STRATEGIES
                and isinstance(root, LinkedNode)
                and not root.is_leaf()):
            issues.append(
                f"{strategy.value} traversal cannot see the children of a "
                f"LinkedNode; use {TraversalStrategy.SIBLING_PRE_ORDER.value}"
            )

        return issues

    def execute(self, visitor: Visitor) -> int:
        """Execute the traversal plan.

        Args:
            visitor: Visitor receiving the traversal's hook calls

        Returns:
            Number of nodes visited

        Raises:
            VisitorStateError: If require_balanced is set and the visitor
                reports open levels once the walk is done
        """
        counter = _CountingVisitor(visitor)
        self.traversal(self.root, counter)
        self.nodes_visited = counter.count

        if self.config.require_balanced and not getattr(visitor, 'is_balanced', True):
            raise VisitorStateError(
                f"{type(visitor).__name__} finished {self.config.strategy.value} "
                f"traversal with unbalanced levels"
            )

        logger.debug(
            "Executed %s traversal: %d nodes visited",
            self.config.strategy.value, self.nodes_visited,
        )
        return self.nodes_visited

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'root': type(self.root).__name__,
            'traversal': self.traversal.__name__,
            'require_balanced': self.config.require_balanced,
            'nodes_visited': self.nodes_visited,
        }
