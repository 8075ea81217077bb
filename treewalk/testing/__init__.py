"""Testing utilities for treewalk consumers."""

from .fixtures import (
    RecordingVisitor,
    build_sample_binary_tree,
    build_sample_book,
    SAMPLE_BOOK_RENDERING,
)

__all__ = [
    'RecordingVisitor',
    'build_sample_binary_tree',
    'build_sample_book',
    'SAMPLE_BOOK_RENDERING',
]
