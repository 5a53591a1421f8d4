#!/usr/bin/env python3
"""
Walk through every BinaryTreeLib operation on the eight-node sample tree.

This example demonstrates:
- Recursive and iterative traversals
- Structural comparison
- Top and bottom views
- The destructive subtree-sum transform

Pass --debug to see the library's debug logging.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarytreelib import (
    BinaryNode,
    inorder,
    preorder,
    postorder,
    is_identical,
    top_view,
    bottom_view,
    sum_postorder,
)


def build_tree():
    """Construct the following tree

               1
             /   \\
            2     3
           /     / \\
          4     5   6
               / \\
              7   8
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


def show(label, values):
    print(f"{label:<22}{' '.join(str(v) for v in values)}")


def main():
    if "--debug" in sys.argv:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    root = build_tree()

    for strategy in ("recursive", "iterative"):
        show(f"inorder ({strategy})", inorder(root, strategy))
        show(f"preorder ({strategy})", preorder(root, strategy))
        show(f"postorder ({strategy})", postorder(root, strategy))

    if is_identical(root, build_tree()):
        print("The given binary trees are identical")
    else:
        print("The given binary trees are not identical")

    show("bottom view", bottom_view(root))
    show("top view", top_view(root))

    total = sum_postorder(root)
    print(f"{'subtree-sum total':<22}{total}")
    show("inorder after sums", inorder(root))


if __name__ == "__main__":
    main()
