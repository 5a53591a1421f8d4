"""Data collection strategies for BinaryTreeLib.

DataCollectors define what information is extracted from nodes during a
traversal, so the same walk can produce values, node objects, or
anything a caller computes from a node.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from .adapter import BinaryTreeAdapter, resolve_adapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: Optional[BinaryTreeAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: BinaryTreeAdapter for reading node data
        """
        self.adapter = resolve_adapter(adapter)

    @abstractmethod
    def collect(self, node: Any) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects the node's integer value."""

    def collect(self, node: Any) -> int:
        """Return node value."""
        return self.adapter.get_value(node)


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: Any) -> Any:
        """Return the node itself."""
        return node


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: Optional[BinaryTreeAdapter], collect_func: Callable[[Any], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: BinaryTreeAdapter for tree navigation
            collect_func: Function(node) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: Any) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node)
