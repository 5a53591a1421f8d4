"""Contract tests ensuring recursive and iterative traversals agree.

These tests verify, over many randomly shaped trees, that both strategies:
1. Visit nodes in the same order for inorder, preorder and postorder
2. Place the root where each order says it belongs
3. Agree with reconstruction from preorder + inorder
"""

import random
from typing import Optional

import pytest

from binarytreelib import (
    BinaryNode,
    RecursiveTraverser,
    IterativeTraverser,
    TraversalOrder,
    is_identical,
    count_nodes,
    inorder,
    preorder,
)
from binarytreelib.testing import build_from_traversals


def random_tree(rng: random.Random, size: int, distinct: bool = True) -> Optional[BinaryNode]:
    """Grow a tree of ``size`` nodes by attaching each new node to a free slot."""
    if size == 0:
        return None

    values = rng.sample(range(size * 10), size) if distinct else [rng.randint(-5, 5) for _ in range(size)]
    root = BinaryNode(values[0])
    free_slots = [(root, "left"), (root, "right")]
    for value in values[1:]:
        parent, side = free_slots.pop(rng.randrange(len(free_slots)))
        child = BinaryNode(value)
        setattr(parent, side, child)
        free_slots.extend([(child, "left"), (child, "right")])
    return root


SEEDS = list(range(25))
ORDERS = list(TraversalOrder)


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("order", ORDERS, ids=lambda o: o.value)
def test_strategies_agree(seed, order):
    rng = random.Random(seed)
    root = random_tree(rng, rng.randint(0, 60), distinct=False)

    recursive = [n.value for n in RecursiveTraverser().traverse(root, order)]
    iterative = [n.value for n in IterativeTraverser().traverse(root, order)]
    assert recursive == iterative


@pytest.mark.parametrize("seed", SEEDS)
def test_root_position(seed):
    rng = random.Random(seed)
    root = random_tree(rng, rng.randint(1, 60))
    left_size = count_nodes(root.left)

    for traverser in (RecursiveTraverser(), IterativeTraverser()):
        assert next(iter(traverser.preorder(root))) is root
        assert list(traverser.postorder(root))[-1] is root
        assert list(traverser.inorder(root))[left_size] is root


@pytest.mark.parametrize("seed", SEEDS)
def test_every_node_visited_once(seed):
    rng = random.Random(seed)
    root = random_tree(rng, rng.randint(0, 60))
    expected = count_nodes(root)

    for traverser in (RecursiveTraverser(), IterativeTraverser()):
        for order in ORDERS:
            nodes = list(traverser.traverse(root, order))
            assert len(nodes) == expected
            assert len({id(n) for n in nodes}) == expected


@pytest.mark.parametrize("seed", SEEDS)
def test_rebuild_from_traversals(seed):
    rng = random.Random(seed)
    root = random_tree(rng, rng.randint(0, 60))
    rebuilt = build_from_traversals(preorder(root, "iterative"), inorder(root, "iterative"))
    assert is_identical(root, rebuilt)
