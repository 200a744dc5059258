"""Traversal orders over a binary search tree.

Every function here is stateless and only touches ``tree.root()``, so one
walker serves both tree variants.
"""

from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple, TypeVar

from ordered_tree.node import Node

if TYPE_CHECKING:
    from ordered_tree.binary_search_tree import BinarySearchTree

T = TypeVar('T')


class TraversalOrder(Enum):
    PRE_ORDER = "pre"     # node, left, right
    IN_ORDER = "in"       # left, node, right
    POST_ORDER = "post"   # left, right, node


def walk(root: Optional[Node[T]], order: TraversalOrder) -> List[T]:
    """Collect the values under ``root`` in the given order.

    An explicit stack stands in for the call stack: a node is pushed once
    to expand its children and once more, marked, to emit its value. The
    push order decides where the value lands relative to its subtrees.

    Args:
        root: Subtree to walk; ``None`` yields an empty list
        order: Which depth-first order to use

    Returns:
        A new list holding every value exactly once
    """
    result: List[T] = []
    stack: List[Tuple[Optional[Node[T]], bool]] = [(root, False)]
    while stack:
        node, emit = stack.pop()
        if node is None:
            continue
        if emit:
            result.append(node.value)
        elif order is TraversalOrder.PRE_ORDER:
            stack.extend([(node.right, False), (node.left, False), (node, True)])
        elif order is TraversalOrder.IN_ORDER:
            stack.extend([(node.right, False), (node, True), (node.left, False)])
        else:
            stack.extend([(node, True), (node.right, False), (node.left, False)])
    return result


def traverse(tree: 'BinarySearchTree[T]',
             order: TraversalOrder = TraversalOrder.IN_ORDER) -> List[T]:
    return walk(tree.root(), order)


def pre_order(tree: 'BinarySearchTree[T]') -> List[T]:
    return traverse(tree, TraversalOrder.PRE_ORDER)


def in_order(tree: 'BinarySearchTree[T]') -> List[T]:
    return traverse(tree, TraversalOrder.IN_ORDER)


def post_order(tree: 'BinarySearchTree[T]') -> List[T]:
    return traverse(tree, TraversalOrder.POST_ORDER)
