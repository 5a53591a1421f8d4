"""Execution planning for BinaryTreeLib.

The ExecutionPlan validates that a TraversalConfig can be satisfied by
a BinaryTreeAdapter and coordinates the actual traversal execution.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .core.adapter import BinaryTreeAdapter, resolve_adapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import DataCollector, ValueCollector, FullNodeCollector
from .config import TraversalConfig, TraversalStrategy, DataRequirement

logger = logging.getLogger(__name__)


class CapabilityMismatchError(Exception):
    """Raised when configuration requirements can't be met by adapter."""
    pass


class ExecutionPlan:
    """Validated execution plan for a traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. It validates the configuration up front, then picks
    the traverser and collector the configuration asks for.
    """

    def __init__(self, config: TraversalConfig, adapter: Optional[BinaryTreeAdapter] = None):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Tree adapter for the node type (None = BinaryNodeAdapter)

        Raises:
            CapabilityMismatchError: If the configuration is invalid
        """
        self.config = config
        self.adapter = resolve_adapter(adapter)

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

        logger.debug("Created execution plan: %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        """Select appropriate traverser based on configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser
        return create_traverser(self.config.strategy, self.adapter)

    def _select_collector(self) -> DataCollector:
        """Select appropriate data collector based on requirements."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def execute(self, root: Optional[Any]) -> Iterator[Tuple[Any, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start traversal from (None = empty tree)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        nodes = self.traverser.traverse(root, self.config.order)
        if not self.config.performance.lazy_evaluation:
            nodes = list(nodes)

        for node in nodes:
            if not self.config.performance.check_node_limit(self.nodes_processed + 1):
                logger.debug("Node limit %d reached, stopping traversal",
                             self.config.performance.max_nodes)
                break

            data = self.collector.collect(node)
            self.nodes_processed += 1
            yield (node, data)

    def run(self, root: Optional[Any]) -> List[Any]:
        """Execute the plan eagerly and return only the collected data."""
        return [data for _, data in self.execute(root)]

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_nodes': self.config.performance.max_nodes,
            'lazy_evaluation': self.config.performance.lazy_evaluation,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
