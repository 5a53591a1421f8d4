"""Horizontal projections (top view and bottom view) of a binary tree.

Every node has a horizontal offset from the root (root 0, left child
parent - 1, right child parent + 1) and a level (root 0, child parent + 1).
A view reports one value per distinct offset, ordered by ascending offset:

- the bottom view keeps the deepest node at each offset. On equal levels
  the node visited later in preorder wins.
- the top view keeps the shallowest node at each offset. On equal levels
  the node visited first in preorder wins.

Both views are filled by the same preorder descent; only the replacement
rule differs. The tie-breaks are deliberately not symmetric.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .config import ViewSide
from .core.adapter import BinaryTreeAdapter, resolve_adapter


@dataclass
class ProjectionEntry:
    """Node recorded for one horizontal offset."""
    value: int
    level: int


class HorizontalProjection:
    """Computes offset-based views of a tree through an adapter.

    Recursion depth equals tree height; degenerate trees taller than the
    interpreter recursion limit raise ``RecursionError``.
    """

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize projection with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = resolve_adapter(adapter)

    def offsets(self, root: Optional[Any], side: ViewSide) -> Dict[int, ProjectionEntry]:
        """Map every horizontal offset to the node visible from ``side``.

        Args:
            root: Root node (None = empty tree)
            side: ViewSide.TOP or ViewSide.BOTTOM

        Returns:
            Dict of offset -> ProjectionEntry (unordered)
        """
        side = ViewSide(side)
        entries: Dict[int, ProjectionEntry] = {}
        self._fill(root, 0, 0, side, entries)
        return entries

    def _fill(self, node, offset: int, level: int, side: ViewSide,
              entries: Dict[int, ProjectionEntry]) -> None:
        if node is None:
            return

        current = entries.get(offset)
        if side == ViewSide.BOTTOM:
            replace = current is None or level >= current.level
        else:
            replace = current is None or level < current.level
        if replace:
            entries[offset] = ProjectionEntry(self.adapter.get_value(node), level)

        self._fill(self.adapter.get_left(node), offset - 1, level + 1, side, entries)
        self._fill(self.adapter.get_right(node), offset + 1, level + 1, side, entries)

    def view(self, root: Optional[Any], side: ViewSide) -> List[int]:
        """Return the values visible from ``side``, by ascending offset."""
        entries = self.offsets(root, side)
        return [entries[offset].value for offset in sorted(entries)]

    def top_view(self, root: Optional[Any]) -> List[int]:
        """Return the shallowest value at each offset, left to right."""
        return self.view(root, ViewSide.TOP)

    def bottom_view(self, root: Optional[Any]) -> List[int]:
        """Return the deepest value at each offset, left to right."""
        return self.view(root, ViewSide.BOTTOM)


def top_view(root: Optional[Any], adapter: Optional[BinaryTreeAdapter] = None) -> List[int]:
    """Top view of a tree.

    Example:
        >>> top_view(reference_tree())
        [4, 2, 1, 3, 6]
    """
    return HorizontalProjection(adapter).top_view(root)


def bottom_view(root: Optional[Any], adapter: Optional[BinaryTreeAdapter] = None) -> List[int]:
    """Bottom view of a tree.

    Example:
        >>> bottom_view(reference_tree())
        [4, 7, 5, 8, 6]
    """
    return HorizontalProjection(adapter).bottom_view(root)
