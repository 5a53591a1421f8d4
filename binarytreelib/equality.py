"""Structural equality of binary trees."""

from typing import Any, Optional

from .core.adapter import BinaryTreeAdapter, resolve_adapter


def is_identical(x: Optional[Any],
                 y: Optional[Any],
                 adapter: Optional[BinaryTreeAdapter] = None,
                 y_adapter: Optional[BinaryTreeAdapter] = None) -> bool:
    """Check whether two trees have the same shape and the same values.

    Two empty trees are identical; an empty tree is never identical to a
    non-empty one. Otherwise the roots must hold equal values and both
    pairs of subtrees must be identical. The comparison stops at the
    first mismatch.

    Recursion depth equals the height of the shorter tree, so comparing
    degenerate trees taller than the interpreter recursion limit raises
    ``RecursionError``.

    Args:
        x: Root of the first tree (None = empty tree)
        y: Root of the second tree (None = empty tree)
        adapter: Adapter for ``x`` (None = BinaryNodeAdapter)
        y_adapter: Adapter for ``y`` (None = same as ``adapter``)

    Returns:
        True if the trees are identical
    """
    x_adapter = resolve_adapter(adapter)
    y_adapter = x_adapter if y_adapter is None else y_adapter
    return _is_identical(x, y, x_adapter, y_adapter)


def _is_identical(x, y, x_adapter: BinaryTreeAdapter, y_adapter: BinaryTreeAdapter) -> bool:
    if x is None and y is None:
        return True
    if x is None or y is None:
        return False

    return (
        x_adapter.get_value(x) == y_adapter.get_value(y)
        and _is_identical(x_adapter.get_left(x), y_adapter.get_left(y), x_adapter, y_adapter)
        and _is_identical(x_adapter.get_right(x), y_adapter.get_right(y), x_adapter, y_adapter)
    )
