"""Configuration system for treewalk.

This module defines how users specify a traversal: which strategy walks the
tree, which glyphs the directory-style renderer draws with, and whether the
visitor's level brackets must balance once the walk is done.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class TraversalStrategy(Enum):
    """How to walk the tree.

    Some strategies only apply to one node shape; ExecutionPlan checks this
    before the walk starts.
    """
    BREADTH_FIRST = "bfs"                    # Level by level, no brackets
    PRE_ORDER = "pre"                        # Parent before children
    ITERATIVE_PRE_ORDER = "iterative_pre"    # Explicit stack, binary only
    POST_ORDER = "post"                      # Children before parent
    IN_ORDER = "in"                          # Left, parent, right; binary only
    SIBLING_PRE_ORDER = "sibling"            # First-child/next-sibling chains


# Strategies that only make sense on a given node shape
BINARY_ONLY_STRATEGIES = frozenset({
    TraversalStrategy.ITERATIVE_PRE_ORDER,
    TraversalStrategy.IN_ORDER,
})
LINKED_ONLY_STRATEGIES = frozenset({
    TraversalStrategy.SIBLING_PRE_ORDER,
})


@dataclass(frozen=True)
class GlyphSet:
    """Characters used by the directory-style renderer.

    Any non-empty string works for each glyph. DirectoryVisitor appends one
    indent glyph per level and removes that same glyph when it leaves, so
    multi-character indents line up.
    """

    last: str = "┗"      # branch to the final sibling
    branch: str = "┣"    # branch to a sibling with more to follow
    pipe: str = "┃"      # indent under a continuing sibling
    blank: str = " "     # indent under a last sibling

    def validate(self) -> List[str]:
        """Validate glyphs for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for name in ('last', 'branch', 'pipe', 'blank'):
            if not getattr(self, name):
                errors.append(f"{name} glyph cannot be empty")

        return errors


DEFAULT_GLYPHS = GlyphSet()

ASCII_GLYPHS = GlyphSet(last="`", branch="+", pipe="|", blank=" ")


@dataclass
class TraversalConfig:
    """Complete configuration for one traversal.

    The ExecutionPlan validates this configuration against the shape of the
    root node before anything is visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER

    # Rendering
    glyphs: GlyphSet = field(default_factory=GlyphSet)

    # Fail if a depth-tracking visitor ends the walk with open levels
    require_balanced: bool = True

    @classmethod
    def directory(cls, glyphs: GlyphSet = DEFAULT_GLYPHS) -> 'TraversalConfig':
        """Create config for directory-style rendering of a linked tree.

        Args:
            glyphs: Glyphs to draw the tree with

        Returns:
            TraversalConfig using sibling-chain pre-order
        """
        return cls(
            strategy=TraversalStrategy.SIBLING_PRE_ORDER,
            glyphs=glyphs,
        )

    @classmethod
    def flat(cls, strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST) -> 'TraversalConfig':
        """Create config for a flat listing of node data.

        Args:
            strategy: Order in which nodes are listed

        Returns:
            TraversalConfig for flat output
        """
        return cls(strategy=strategy)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        errors.extend(self.glyphs.validate())

        return errors
