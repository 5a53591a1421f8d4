"""In-place postorder aggregation (subtree-sum transform)."""

import logging
from typing import Any, Optional

from .core.adapter import BinaryTreeAdapter, resolve_adapter
from .planning import CapabilityMismatchError

logger = logging.getLogger(__name__)


def sum_postorder(root: Optional[Any], adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Replace every value with the sum of its subtrees and return the total.

    A single postorder pass. For each node, the left subtree is transformed
    first, then the right subtree, and only then is the node's original
    value read and overwritten with ``left_total + right_total``. The node
    returns ``new_value + original_value``, which is the sum of every
    original value in its subtree. Leaves end up holding 0.

    WARNING: this is destructive. The tree is rewritten in place and the
    original values are lost, so calling it twice on the same tree gives a
    different result the second time. The caller needs exclusive access to
    the tree for the duration of the call.

    Recursion depth equals tree height; degenerate trees taller than the
    interpreter recursion limit raise ``RecursionError``, possibly after
    part of the tree has already been rewritten.

    Args:
        root: Root node (None = empty tree, returns 0, no mutation)
        adapter: Adapter that supports modification (None = BinaryNodeAdapter)

    Returns:
        Sum of all original values in the tree

    Raises:
        CapabilityMismatchError: If the adapter cannot rewrite values

    Example:
        >>> root = reference_tree()
        >>> sum_postorder(root)
        36
        >>> root.value
        35
    """
    adapter = resolve_adapter(adapter)
    if not adapter.supports_modification():
        raise CapabilityMismatchError(
            f"Adapter limitations: {adapter.__class__.__name__} does not support modification"
        )

    if root is None:
        return 0

    logger.debug("Rewriting subtree sums in place from root %r", root)
    total = _sum_postorder(root, adapter)
    logger.debug("Subtree-sum transform finished, total %d", total)
    return total


def _sum_postorder(node, adapter: BinaryTreeAdapter) -> int:
    if node is None:
        return 0

    left_total = _sum_postorder(adapter.get_left(node), adapter)
    right_total = _sum_postorder(adapter.get_right(node), adapter)

    # Read only after both children have been rewritten.
    original = adapter.get_value(node)
    adapter.set_value(node, left_total + right_total)
    return adapter.get_value(node) + original
