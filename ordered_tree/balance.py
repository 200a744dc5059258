"""Height bookkeeping and AVL rotations.

Heights are not cached on nodes; every call walks the subtree again.
"""

import logging
from enum import Enum
from typing import List, Optional

from ordered_tree.node import Node

logger = logging.getLogger(__name__)


def height(node: Optional[Node]) -> int:
    # Count levels breadth-first so degenerate chains don't recurse per node.
    levels = 0
    frontier: List[Node] = [node] if node is not None else []
    while frontier:
        levels += 1
        frontier = [child for n in frontier for child in (n.left, n.right) if child is not None]
    return levels


def balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(y: Node) -> Node:
    x = y.left
    assert x is not None
    t2 = x.right

    x.right = y
    y.left = t2

    return x


def rotate_left(x: Node) -> Node:
    y = x.right
    assert y is not None
    t2 = y.left

    y.left = x
    x.right = t2

    return y


def rebalance(node: Optional[Node]) -> Optional[Node]:
    """Restore the AVL condition at ``node`` and return the new subtree root.

    Left-heavy subtrees get a single right rotation when the left child's
    outer grandchild is at least as tall as the inner one, and a left-right
    double rotation otherwise. Right-heavy subtrees are the mirror image.
    """
    if node is None:
        return None

    balance = balance_factor(node)

    if balance > 1:
        left = node.left
        assert left is not None
        if height(left.left) >= height(left.right):
            logger.debug("right rotation at %r", node.value)
            return rotate_right(node)
        logger.debug("left-right rotation at %r", node.value)
        node.left = rotate_left(left)
        return rotate_right(node)

    if balance < -1:
        right = node.right
        assert right is not None
        if height(right.right) >= height(right.left):
            logger.debug("left rotation at %r", node.value)
            return rotate_left(node)
        logger.debug("right-left rotation at %r", node.value)
        node.right = rotate_right(right)
        return rotate_left(node)

    return node


def is_balanced(node: Optional[Node]) -> bool:
    if node is None:
        return True
    if abs(balance_factor(node)) > 1:
        return False
    return is_balanced(node.left) and is_balanced(node.right)


class BalancingPolicy(Enum):
    """What a tree does to each subtree root while unwinding a mutation."""
    NONE = "none"   # plain binary search tree
    AVL = "avl"     # rotate back into [-1, 1] at every ancestor

    def apply(self, node: Optional[Node]) -> Optional[Node]:
        if self is BalancingPolicy.AVL:
            return rebalance(node)
        return node
