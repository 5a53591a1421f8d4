"""Core abstractions for BinaryTreeLib.

This module contains the node model and the abstract base classes that
define the BinaryTreeLib architecture.
"""

from .node import BinaryNode
from .adapter import BinaryTreeAdapter, BinaryNodeAdapter, AttributeAdapter
from .traverser import TreeTraverser, RecursiveTraverser, IterativeTraverser, create_traverser
from .collector import DataCollector, ValueCollector, FullNodeCollector, CustomCollector

__all__ = [
    "BinaryNode",
    "BinaryTreeAdapter",
    "BinaryNodeAdapter",
    "AttributeAdapter",
    "TreeTraverser",
    "RecursiveTraverser",
    "IterativeTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "FullNodeCollector",
    "CustomCollector",
]
