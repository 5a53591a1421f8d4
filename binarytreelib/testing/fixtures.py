"""Test fixtures for BinaryTreeLib consumers.

These helpers build trees for test suites. They are not a construction
API for applications; trees are normally assembled by the caller from
BinaryNode instances.
"""

from typing import Dict, List, Optional, Sequence

from ..core.node import BinaryNode
from ..core.traverser import IterativeTraverser


def reference_tree() -> BinaryNode:
    """Build the eight-node sample tree.

    Tree structure:
                 1
               /   \\
              2     3
             /     / \\
            4     5   6
                 / \\
                7   8

    Known results:
        inorder      4 2 1 7 5 8 3 6
        preorder     1 2 4 3 5 7 8 6
        postorder    4 2 7 8 5 6 3 1
        bottom view  4 7 5 8 6
        top view     4 2 1 3 6
    """
    root = BinaryNode(1)
    root.left = BinaryNode(2)
    root.right = BinaryNode(3)
    root.left.left = BinaryNode(4)
    root.right.left = BinaryNode(5)
    root.right.right = BinaryNode(6)
    root.right.left.left = BinaryNode(7)
    root.right.left.right = BinaryNode(8)
    return root


def degenerate_tree(size: int, side: str = "left", start: int = 1) -> Optional[BinaryNode]:
    """Build a linked-list shaped tree of ``size`` nodes.

    Every node has a single child on ``side``, so the height is
    ``size - 1``. Built bottom-up without recursion, so it can exceed the
    interpreter recursion limit.

    Args:
        size: Number of nodes (0 = empty tree)
        side: "left" or "right"
        start: Value of the root; values increase by one per level

    Returns:
        Root node or None when size is 0
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")

    root = None
    for value in range(start + size - 1, start - 1, -1):
        node = BinaryNode(value)
        setattr(node, side, root)
        root = node
    return root


def build_from_traversals(preorder: Sequence[int], inorder: Sequence[int]) -> Optional[BinaryNode]:
    """Rebuild a tree from its preorder and inorder value sequences.

    Values must be distinct, otherwise the shape is ambiguous. Uses an
    explicit stack, so arbitrarily deep trees can be rebuilt.

    Args:
        preorder: Preorder values
        inorder: Inorder values

    Returns:
        Root of the rebuilt tree (None for empty sequences)

    Raises:
        ValueError: If the sequences are inconsistent or contain duplicates
    """
    if len(preorder) != len(inorder):
        raise ValueError(
            f"Traversals differ in length: {len(preorder)} preorder vs {len(inorder)} inorder"
        )
    if not preorder:
        return None

    position: Dict[int, int] = {}
    for index, value in enumerate(inorder):
        if value in position:
            raise ValueError(f"Duplicate value {value!r}; traversals must hold distinct values")
        position[value] = index
    if set(preorder) != set(position):
        raise ValueError("Preorder and inorder hold different values")

    root = BinaryNode(preorder[0])
    stack: List[BinaryNode] = [root]
    inorder_index = 0

    # Each new preorder value is the left child of the stack top, unless
    # the stack top was already emitted inorder; then it becomes the right
    # child of the last node popped while catching up with the inorder.
    for value in preorder[1:]:
        parent = stack[-1]
        if parent.value != inorder[inorder_index]:
            parent.left = BinaryNode(value)
            stack.append(parent.left)
            continue

        while stack and stack[-1].value == inorder[inorder_index]:
            parent = stack.pop()
            inorder_index += 1
        parent.right = BinaryNode(value)
        stack.append(parent.right)

    rebuilt = [node.value for node in IterativeTraverser().inorder(root)]
    if rebuilt != list(inorder):
        raise ValueError("Preorder and inorder do not describe the same tree")
    return root
