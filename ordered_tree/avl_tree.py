from typing import TypeVar, List, Optional

from ordered_tree.balance import BalancingPolicy
from ordered_tree.binary_search_tree import BinarySearchTree
from ordered_tree.node import Node

T = TypeVar('T')


class AVLTree(BinarySearchTree[T]):
    """Binary search tree that rebalances every ancestor after a mutation.

    Insert and remove are the baseline recursive routines; only the
    balancing policy differs.
    """

    def __init__(self) -> None:
        super().__init__(BalancingPolicy.AVL)

    def _spawn(self) -> 'AVLTree[T]':
        return AVLTree()

    def _to_list(self, node: Optional[Node[T]], out: List[T]) -> None:
        if node is None:
            return
        self._to_list(node.left, out)
        out.append(node.value)
        self._to_list(node.right, out)

    def to_list(self) -> Optional[List[T]]:
        if self._root is None:
            return None
        out: List[T] = []
        self._to_list(self._root, out)
        return out
