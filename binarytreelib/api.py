"""High-level API for BinaryTreeLib.

This module provides simple, functional interfaces for the common
operations. These functions wrap the object-oriented API (adapters,
traversers, collectors, execution plans) for ease of use in simple cases.

All functions accept ``None`` as the empty tree and return values rather
than printing them.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from .core.adapter import BinaryTreeAdapter, resolve_adapter
from .core.traverser import IterativeTraverser
from .config import (
    TraversalConfig,
    TraversalOrder,
    TraversalStrategy,
    DataRequirement,
    PerformanceConfig,
    parse_order,
    parse_strategy,
    parse_data_requirement,
)
from .planning import ExecutionPlan
from .equality import is_identical
from .projection import top_view, bottom_view
from .aggregation import sum_postorder


def traverse_tree(
    root: Optional[Any],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
    adapter: Optional[BinaryTreeAdapter] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node (None = empty tree)
        order: inorder, preorder or postorder
        strategy: recursive or iterative
        adapter: Tree adapter for the node type
        max_nodes: Stop after this many nodes

    Yields:
        Nodes in the requested order

    Example:
        >>> for node in traverse_tree(root, order="preorder", strategy="iterative"):
        ...     print(node.value)
    """
    config = TraversalConfig(
        order=parse_order(order),
        strategy=parse_strategy(strategy),
        data_requirements=DataRequirement.FULL_NODE,
        performance=PerformanceConfig(max_nodes=max_nodes),
    )

    plan = ExecutionPlan(config, adapter)

    for node, _ in plan.execute(root):
        yield node


def collect_tree_data(
    root: Optional[Any],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
    data_requirement: Union[DataRequirement, str] = DataRequirement.VALUE,
    adapter: Optional[BinaryTreeAdapter] = None,
    **kwargs
) -> Iterator[Tuple[Any, Any]]:
    """Traverse tree and collect specified data.

    Similar to traverse_tree but yields both nodes and collected data.

    Args:
        root: Starting node (None = empty tree)
        order: inorder, preorder or postorder
        strategy: recursive or iterative
        data_requirement: What data to collect
        adapter: Tree adapter for the node type
        **kwargs: Additional TraversalConfig fields (custom_collector,
            custom_traverser, max_nodes)

    Yields:
        Tuples of (node, collected_data)
    """
    config = TraversalConfig(
        order=parse_order(order),
        strategy=parse_strategy(strategy),
        data_requirements=parse_data_requirement(data_requirement),
    )

    if 'max_nodes' in kwargs:
        config.performance.max_nodes = kwargs.pop('max_nodes')

    # Apply any remaining kwargs directly
    for key, value in kwargs.items():
        if not hasattr(config, key):
            raise TypeError(f"Unknown option: {key}")
        setattr(config, key, value)

    plan = ExecutionPlan(config, adapter)
    yield from plan.execute(root)


def _values(root, order: TraversalOrder, strategy, adapter) -> List[int]:
    config = TraversalConfig(order=order, strategy=parse_strategy(strategy))
    return ExecutionPlan(config, adapter).run(root)


def inorder(root: Optional[Any],
            strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
            adapter: Optional[BinaryTreeAdapter] = None) -> List[int]:
    """Values in inorder (left, node, right).

    Example:
        >>> inorder(reference_tree())
        [4, 2, 1, 7, 5, 8, 3, 6]
    """
    return _values(root, TraversalOrder.INORDER, strategy, adapter)


def preorder(root: Optional[Any],
             strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
             adapter: Optional[BinaryTreeAdapter] = None) -> List[int]:
    """Values in preorder (node, left, right)."""
    return _values(root, TraversalOrder.PREORDER, strategy, adapter)


def postorder(root: Optional[Any],
              strategy: Union[TraversalStrategy, str] = TraversalStrategy.RECURSIVE,
              adapter: Optional[BinaryTreeAdapter] = None) -> List[int]:
    """Values in postorder (left, right, node)."""
    return _values(root, TraversalOrder.POSTORDER, strategy, adapter)


def count_nodes(root: Optional[Any], adapter: Optional[BinaryTreeAdapter] = None) -> int:
    """Count nodes in a tree.

    Uses the iterative traverser, so it works on trees of any height.
    """
    count = 0
    for _ in IterativeTraverser(adapter).preorder(root):
        count += 1
    return count


def get_leaf_nodes(root: Optional[Any],
                   strategy: Union[TraversalStrategy, str] = TraversalStrategy.ITERATIVE,
                   adapter: Optional[BinaryTreeAdapter] = None) -> Iterator[Any]:
    """Get all leaf nodes, left to right.

    Yields:
        Leaf nodes (nodes with no children)
    """
    adapter = resolve_adapter(adapter)
    for node in traverse_tree(root, order=TraversalOrder.PREORDER,
                              strategy=strategy, adapter=adapter):
        if adapter.is_leaf(node):
            yield node


def get_tree_stats(root: Optional[Any], adapter: Optional[BinaryTreeAdapter] = None) -> Dict[str, Any]:
    """Get statistics about a tree.

    Height counts edges: -1 for the empty tree, 0 for a single node.
    Computed with an explicit stack, so it works on trees of any height.

    Returns:
        Dictionary with total_nodes, leaf_nodes, internal_nodes, height,
        sum and depths (level -> node count)

    Example:
        >>> stats = get_tree_stats(reference_tree())
        >>> stats['height']
        3
    """
    adapter = resolve_adapter(adapter)
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'height': -1,
        'sum': 0,
        'depths': {}
    }

    stack = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()

        stats['total_nodes'] += 1
        stats['sum'] += adapter.get_value(node)
        if adapter.is_leaf(node):
            stats['leaf_nodes'] += 1

        stats['height'] = max(stats['height'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

        for child in adapter.get_children(node):
            stack.append((child, depth + 1))

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


__all__ = [
    'traverse_tree',
    'collect_tree_data',
    'inorder',
    'preorder',
    'postorder',
    'is_identical',
    'top_view',
    'bottom_view',
    'sum_postorder',
    'count_nodes',
    'get_leaf_nodes',
    'get_tree_stats',
]
