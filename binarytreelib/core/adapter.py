"""BinaryTreeAdapter abstraction for BinaryTreeLib.

The adapter provides the navigation logic for a specific node type,
decoupling the node representation from the algorithms. Every traversal,
view, comparison and aggregation goes through an adapter, so a tree built
from someone else's node class can be processed without converting it.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from .node import BinaryNode


class BinaryTreeAdapter(ABC):
    """Abstract adapter for navigating binary trees.

    While a node is just a data container, the adapter knows HOW to read
    its value and reach its two children. Adapters also declare their
    capabilities, e.g. whether node values may be rewritten in place.
    """

    @abstractmethod
    def get_left(self, node: Any) -> Optional[Any]:
        """Return the left child of ``node`` or None."""
        pass

    @abstractmethod
    def get_right(self, node: Any) -> Optional[Any]:
        """Return the right child of ``node`` or None."""
        pass

    @abstractmethod
    def get_value(self, node: Any) -> int:
        """Return the value stored in ``node``."""
        pass

    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator over the existing children, left first.

        Args:
            node: The parent node

        Returns:
            Iterator yielding zero, one or two child nodes
        """
        left = self.get_left(node)
        if left is not None:
            yield left
        right = self.get_right(node)
        if right is not None:
            yield right

    def is_leaf(self, node: Any) -> bool:
        """Check if ``node`` has no children."""
        return self.get_left(node) is None and self.get_right(node) is None

    # Capability flags - adapters declare what they support

    def supports_modification(self) -> bool:
        """Check if adapter supports rewriting node values.

        Returns:
            True if set_value is implemented
        """
        return False

    def set_value(self, node: Any, value: int) -> None:
        """Overwrite the value stored in ``node``.

        Args:
            node: The node to update
            value: New value

        Raises:
            NotImplementedError: If modification not supported
        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")


class BinaryNodeAdapter(BinaryTreeAdapter):
    """Default adapter for trees made of BinaryNode."""

    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.left

    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.right

    def get_value(self, node: BinaryNode) -> int:
        return node.value

    def is_leaf(self, node: BinaryNode) -> bool:
        return node.is_leaf()

    def supports_modification(self) -> bool:
        return True

    def set_value(self, node: BinaryNode, value: int) -> None:
        node.value = value


class AttributeAdapter(BinaryTreeAdapter):
    """Adapter for any node class exposing value and children as attributes.

    Useful for the common ``TreeNode(val, left, right)`` shape:

        adapter = AttributeAdapter(value_attr="val")
        values = inorder(root, adapter=adapter)
    """

    def __init__(self,
                 value_attr: str = "val",
                 left_attr: str = "left",
                 right_attr: str = "right",
                 writable: bool = True):
        """Initialize adapter.

        Args:
            value_attr: Attribute holding the node value
            left_attr: Attribute holding the left child
            right_attr: Attribute holding the right child
            writable: Whether set_value may rewrite the value attribute
        """
        self.value_attr = value_attr
        self.left_attr = left_attr
        self.right_attr = right_attr
        self.writable = writable

    def get_left(self, node: Any) -> Optional[Any]:
        return getattr(node, self.left_attr, None)

    def get_right(self, node: Any) -> Optional[Any]:
        return getattr(node, self.right_attr, None)

    def get_value(self, node: Any) -> int:
        return getattr(node, self.value_attr)

    def supports_modification(self) -> bool:
        return self.writable

    def set_value(self, node: Any, value: int) -> None:
        if not self.writable:
            super().set_value(node, value)
        setattr(node, self.value_attr, value)


def resolve_adapter(adapter: Optional[BinaryTreeAdapter]) -> BinaryTreeAdapter:
    """Return ``adapter`` or the default BinaryNodeAdapter when None."""
    if adapter is None:
        return BinaryNodeAdapter()
    return adapter
