#!/usr/bin/env python
"""
Traversal demo for treewalk.

Builds the sample trees, prints the binary tree in every traversal order,
renders the book outline directory-style, and shows the search tree's
sorted and pre-order listings.

Usage:
    python examples/traversal_demo.py
    python examples/traversal_demo.py --ascii    # plain ASCII glyphs
    python examples/traversal_demo.py -v         # debug logging
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path so the demo runs from a source checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalk import (
    ASCII_GLYPHS,
    DEFAULT_GLYPHS,
    BinarySearchTree,
    PlainVisitor,
    print_tree,
    traverse,
)
from treewalk.testing import build_sample_binary_tree, build_sample_book


def demo_search_tree():
    print("=" * 60)
    print("Binary search tree")
    print("=" * 60)

    tree = BinarySearchTree.from_iterable([1, 0, 8, 6, 2, 3, 4, 5, 9])
    print("sorted:    " + " ".join(str(value) for value in tree))
    print("pre-order: " + " ".join(str(value) for value in tree.to_list()))
    print()


def demo_binary_orders():
    print("=" * 60)
    print("Binary tree orders")
    print("=" * 60)

    tree = build_sample_binary_tree()
    visitor = PlainVisitor()
    for label, strategy in [
        ("breadth first", "bfs"),
        ("pre-order", "pre"),
        ("iterative pre", "iterative_pre"),
        ("post-order", "post"),
        ("in-order", "in"),
    ]:
        print(f"{label:<15}", end="")
        traverse(tree, visitor, strategy)
        print()
    print()


def demo_book(use_ascii):
    print("=" * 60)
    print("Book outline")
    print("=" * 60)

    print_tree(build_sample_book(), glyphs=ASCII_GLYPHS if use_ascii else DEFAULT_GLYPHS)


def main():
    parser = argparse.ArgumentParser(description="treewalk traversal demo")
    parser.add_argument("--ascii", action="store_true", help="Draw trees with ASCII glyphs")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    demo_search_tree()
    demo_binary_orders()
    demo_book(args.ascii)
    return 0


if __name__ == "__main__":
    sys.exit(main())
