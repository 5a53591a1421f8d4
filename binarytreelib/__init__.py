"""BinaryTreeLib - Binary Tree Algorithms Library.

BinaryTreeLib provides traversals, structural comparison, horizontal
projections and a subtree-sum transform for in-memory binary trees.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from binarytreelib import BinaryNode, inorder, top_view

    root = BinaryNode(1, left=BinaryNode(2), right=BinaryNode(3))
    inorder(root)                         # [2, 1, 3]
    inorder(root, strategy="iterative")   # same, without recursion
    top_view(root)                        # [2, 1, 3]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Every operation takes ``None`` as the empty tree and returns values
instead of printing them. Recursive operations are limited by the
interpreter recursion limit; use the iterative strategy for very deep
trees.
"""

__version__ = "0.1.0"

# Core components
from .core.node import BinaryNode
from .core.adapter import BinaryTreeAdapter, BinaryNodeAdapter, AttributeAdapter
from .core.traverser import (
    TreeTraverser,
    RecursiveTraverser,
    IterativeTraverser,
    create_traverser,
)
from .core.collector import (
    DataCollector,
    ValueCollector,
    FullNodeCollector,
    CustomCollector,
)

# Configuration and planning
from .config import (
    TraversalConfig,
    TraversalOrder,
    TraversalStrategy,
    DataRequirement,
    ViewSide,
    PerformanceConfig,
)
from .planning import ExecutionPlan, CapabilityMismatchError

# Algorithms
from .equality import is_identical
from .projection import HorizontalProjection, ProjectionEntry, top_view, bottom_view
from .aggregation import sum_postorder

# High-level API
from .api import (
    traverse_tree,
    collect_tree_data,
    inorder,
    preorder,
    postorder,
    count_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'BinaryNode',
    'BinaryTreeAdapter',
    'BinaryNodeAdapter',
    'AttributeAdapter',
    'TreeTraverser',
    'RecursiveTraverser',
    'IterativeTraverser',
    'create_traverser',
    'DataCollector',
    'ValueCollector',
    'FullNodeCollector',
    'CustomCollector',
    # Config
    'TraversalConfig',
    'TraversalOrder',
    'TraversalStrategy',
    'DataRequirement',
    'ViewSide',
    'PerformanceConfig',
    'ExecutionPlan',
    'CapabilityMismatchError',
    # Algorithms
    'is_identical',
    'HorizontalProjection',
    'ProjectionEntry',
    'top_view',
    'bottom_view',
    'sum_postorder',
    # API
    'traverse_tree',
    'collect_tree_data',
    'inorder',
    'preorder',
    'postorder',
    'count_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
