"""BinaryNode model for BinaryTreeLib.

The BinaryNode is intentionally kept simple - it's a data container that
owns at most one left and one right child. Navigation logic is delegated
to the BinaryTreeAdapter, so the algorithms in this package also work on
node types they did not define.
"""

from typing import Optional


class BinaryNode:
    """A vertex of an in-memory binary tree.

    Ownership is strictly hierarchical: every non-root node is referenced
    by exactly one parent through either its ``left`` or ``right`` slot.
    The tree is built by the caller (create nodes, then wire children)
    before any traversal runs. ``None`` stands for the empty tree.

    Equality is identity. Use ``is_identical`` to compare two trees by
    shape and values.

    Example:
        root = BinaryNode(1)
        root.left = BinaryNode(2)
        root.right = BinaryNode(3, left=BinaryNode(5))
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: int,
                 left: Optional["BinaryNode"] = None,
                 right: Optional["BinaryNode"] = None):
        """Create a node.

        Args:
            value: Integer payload of the node
            left: Left child (None = no child)
            right: Right child (None = no child)
        """
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child slots are empty
        """
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.value!r})"
