"""Configuration system for BinaryTreeLib.

This module defines how users specify their traversal requirements:
which order to visit nodes in, which strategy (recursive or explicit
stack) to use, what data to collect, and simple resource limits.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class TraversalOrder(Enum):
    """Canonical depth-first visiting orders of a binary tree."""
    INORDER = "inorder"      # Left, node, right
    PREORDER = "preorder"    # Node, left, right
    POSTORDER = "postorder"  # Left, right, node


class TraversalStrategy(Enum):
    """How the traversal is executed.

    Both built-in strategies produce the same sequence for the same tree.
    """
    RECURSIVE = "recursive"  # Call-stack descent, depth bounded by recursion limit
    ITERATIVE = "iterative"  # Explicit stack, depth bounded by memory only
    CUSTOM = "custom"        # User-defined traverser


class DataRequirement(Enum):
    """Specifies what is collected from each visited node."""
    VALUE = "value"       # The node's integer value
    FULL_NODE = "full"    # The node object itself
    CUSTOM = "custom"     # User-defined collection


class ViewSide(Enum):
    """Which projection of the tree to compute."""
    TOP = "top"          # Shallowest node per horizontal offset
    BOTTOM = "bottom"    # Deepest node per horizontal offset


@dataclass
class PerformanceConfig:
    """Configuration for resource limits."""

    lazy_evaluation: bool = True          # False walks the whole tree before yielding
    max_nodes: Optional[int] = None       # Maximum nodes to yield

    def check_node_limit(self, node_count: int) -> bool:
        """Check if node limit exceeded.

        Args:
            node_count: Number of nodes processed

        Returns:
            True if within limits or no limit set
        """
        if self.max_nodes is None:
            return True
        return node_count <= self.max_nodes


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    The ExecutionPlan validates this configuration against the adapter
    and assembles the traverser and collector it describes.
    """

    # Traversal algorithm
    order: TraversalOrder = TraversalOrder.INORDER
    strategy: TraversalStrategy = TraversalStrategy.RECURSIVE
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Performance
    performance: PerformanceConfig = field(default_factory=PerformanceConfig)

    # Convenience constructors for common configurations

    @classmethod
    def deep_tree(cls, order: TraversalOrder = TraversalOrder.INORDER) -> 'TraversalConfig':
        """Create config safe for very deep or degenerate trees.

        Args:
            order: Visiting order

        Returns:
            TraversalConfig using the explicit-stack strategy
        """
        return cls(
            order=order,
            strategy=TraversalStrategy.ITERATIVE,
            data_requirements=DataRequirement.VALUE,
        )

    @classmethod
    def values_only(cls, order: TraversalOrder = TraversalOrder.INORDER) -> 'TraversalConfig':
        """Create config that collects plain values with recursive descent."""
        return cls(order=order, data_requirements=DataRequirement.VALUE)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, got {self.strategy!r}")

        if not isinstance(self.data_requirements, DataRequirement):
            errors.append(
                f"data_requirements must be a DataRequirement, got {self.data_requirements!r}"
            )

        if self.performance.max_nodes is not None and self.performance.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        # Check custom components
        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors


def parse_order(order) -> TraversalOrder:
    """Parse order from string or enum.

    Raises:
        ValueError: If the name is not a known order
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'in': TraversalOrder.INORDER,
        'inorder': TraversalOrder.INORDER,
        'pre': TraversalOrder.PREORDER,
        'preorder': TraversalOrder.PREORDER,
        'post': TraversalOrder.POSTORDER,
        'postorder': TraversalOrder.POSTORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )


def parse_strategy(strategy) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'rec': TraversalStrategy.RECURSIVE,
        'recursive': TraversalStrategy.RECURSIVE,
        'iter': TraversalStrategy.ITERATIVE,
        'iterative': TraversalStrategy.ITERATIVE,
        'custom': TraversalStrategy.CUSTOM,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(strategy_map.keys())}"
    )


def parse_data_requirement(requirement) -> DataRequirement:
    """Parse data requirement from string or enum.

    Raises:
        ValueError: If the name is not a known requirement
    """
    if isinstance(requirement, DataRequirement):
        return requirement

    requirement_map = {
        'value': DataRequirement.VALUE,
        'full': DataRequirement.FULL_NODE,
        'node': DataRequirement.FULL_NODE,
        'custom': DataRequirement.CUSTOM,
    }

    requirement_lower = requirement.lower() if isinstance(requirement, str) else str(requirement)
    if requirement_lower in requirement_map:
        return requirement_map[requirement_lower]

    raise ValueError(f"Unknown data requirement: {requirement}")
