"""Exception types for treewalk.

Every error raised by the library derives from TreeWalkError, so callers can
catch library failures with a single except clause. Each subclass also
derives from the closest built-in exception so existing handlers keep
working.
"""


class TreeWalkError(Exception):
    """Base class for all treewalk errors."""
    pass


class UnsupportedOperationError(TreeWalkError, NotImplementedError):
    """Raised when a node shape does not support a capability.

    For example, a BinaryNode has no notion of sibling order, so asking it
    whether it is the last child is a programming error.
    """
    pass


class VisitorStateError(TreeWalkError, RuntimeError):
    """Raised when enter_level/leave_level calls do not nest correctly."""
    pass


class DuplicateKeyError(TreeWalkError, ValueError):
    """Raised when inserting a key that already exists in a search tree."""

    def __init__(self, key):
        super().__init__(f"Key already present in tree: {key!r}")
        self.key = key
