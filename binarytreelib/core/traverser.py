"""Tree traversal strategies for BinaryTreeLib.

Traversers walk a binary tree in inorder, preorder or postorder. They work
through a BinaryTreeAdapter, so they are independent of the node class.

Two strategies are provided and yield identical sequences:

- RecursiveTraverser descends with the Python call stack. Its depth is
  limited by ``sys.getrecursionlimit()``; a degenerate tree taller than
  that raises ``RecursionError``.
- IterativeTraverser simulates the recursion with an explicit list used
  as a stack, so its depth is limited only by available memory.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional

from .adapter import BinaryTreeAdapter, resolve_adapter
from ..config import TraversalOrder, TraversalStrategy, parse_order, parse_strategy


class TreeTraverser(ABC):
    """Abstract base class for traversal strategies.

    Every method accepts a possibly empty root (None) and yields nodes.
    An empty tree yields nothing. Traversal never mutates the tree.
    """

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
                (None = BinaryNodeAdapter)
        """
        self.adapter = resolve_adapter(adapter)

    @abstractmethod
    def inorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Yield nodes as left subtree, node, right subtree."""
        pass

    @abstractmethod
    def preorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Yield nodes as node, left subtree, right subtree."""
        pass

    @abstractmethod
    def postorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Yield nodes as left subtree, right subtree, node."""
        pass

    def traverse(self, root: Optional[Any], order=TraversalOrder.INORDER) -> Iterator[Any]:
        """Traverse the tree in the given order.

        Args:
            root: Root node (None = empty tree)
            order: TraversalOrder or its name

        Yields:
            Nodes in the requested order
        """
        order = parse_order(order)
        if order == TraversalOrder.PREORDER:
            return self.preorder(root)
        if order == TraversalOrder.POSTORDER:
            return self.postorder(root)
        return self.inorder(root)


class RecursiveTraverser(TreeTraverser):
    """Direct recursive descent.

    Uses recursion (via generators) for natural depth-first behavior.
    """

    def inorder(self, root: Optional[Any]) -> Iterator[Any]:
        if root is None:
            return
        yield from self.inorder(self.adapter.get_left(root))
        yield root
        yield from self.inorder(self.adapter.get_right(root))

    def preorder(self, root: Optional[Any]) -> Iterator[Any]:
        if root is None:
            return
        yield root
        yield from self.preorder(self.adapter.get_left(root))
        yield from self.preorder(self.adapter.get_right(root))

    def postorder(self, root: Optional[Any]) -> Iterator[Any]:
        if root is None:
            return
        yield from self.postorder(self.adapter.get_left(root))
        yield from self.postorder(self.adapter.get_right(root))
        yield root


class IterativeTraverser(TreeTraverser):
    """Explicit-stack traversal.

    Preorder and inorder are lazy. Postorder has to see the whole tree
    before it can emit the first node, so it materializes its output.
    """

    def inorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Traverse tree inorder.

        A cursor descends left pushing every node it passes. When it runs
        off the tree, the top of the stack is the next node to emit, and
        the cursor continues into that node's right subtree.
        """
        stack: List[Any] = []
        current = root

        while stack or current is not None:
            if current is not None:
                stack.append(current)
                current = self.adapter.get_left(current)
            else:
                current = stack.pop()
                yield current
                current = self.adapter.get_right(current)

    def preorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Traverse tree preorder.

        Right is pushed before left so the left subtree is popped first.
        """
        if root is None:
            return

        stack: List[Any] = [root]
        while stack:
            current = stack.pop()
            yield current

            right = self.adapter.get_right(current)
            if right is not None:
                stack.append(right)
            left = self.adapter.get_left(current)
            if left is not None:
                stack.append(left)

    def postorder(self, root: Optional[Any]) -> Iterator[Any]:
        """Traverse tree postorder.

        Popping and pushing left before right records the nodes in
        node, right, left order, which is exactly postorder reversed.
        """
        if root is None:
            return

        stack: List[Any] = [root]
        reverse_postorder: List[Any] = []
        while stack:
            current = stack.pop()
            reverse_postorder.append(current)

            left = self.adapter.get_left(current)
            if left is not None:
                stack.append(left)
            right = self.adapter.get_right(current)
            if right is not None:
                stack.append(right)

        yield from reversed(reverse_postorder)


# Factory function for creating traversers by name
def create_traverser(strategy, adapter: Optional[BinaryTreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: TraversalStrategy or name (recursive, rec, iterative, iter)
        adapter: BinaryTreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        TraversalStrategy.RECURSIVE: RecursiveTraverser,
        TraversalStrategy.ITERATIVE: IterativeTraverser,
    }

    strategy = parse_strategy(strategy)
    if strategy not in strategies:
        raise ValueError(
            f"Cannot create a traverser for strategy {strategy.value!r}; "
            f"supply a custom_traverser instead"
        )

    return strategies[strategy](adapter)
