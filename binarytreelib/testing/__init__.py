"""Testing utilities for BinaryTreeLib consumers."""

from .fixtures import reference_tree, degenerate_tree, build_from_traversals

__all__ = ['reference_tree', 'degenerate_tree', 'build_from_traversals']
