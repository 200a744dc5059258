import logging
from typing import TypeVar, Generic, List, Iterator, Optional, Tuple

from ordered_tree import traversal
from ordered_tree.balance import BalancingPolicy, height, is_balanced
from ordered_tree.node import Node

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BinarySearchTree(Generic[T]):
    """Ordered set of unique values kept in a binary search tree.

    Mutations descend with an explicit path stack and relink each subtree
    root on the way back up, handing every root on the path to ``policy``
    first, so a degenerate chain never hits the recursion limit. With
    ``BalancingPolicy.NONE`` the tree never restructures itself; with
    ``BalancingPolicy.AVL`` it stays height-balanced.

    Instances are not safe for concurrent mutation. Callers sharing a tree
    between threads must provide their own locking.
    """

    def __init__(self, policy: BalancingPolicy = BalancingPolicy.NONE) -> None:
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self._policy: BalancingPolicy = policy

    @property
    def policy(self) -> BalancingPolicy:
        return self._policy

    def _rebuild(self, path: List[Tuple[Node[T], bool]], subtree: Optional[Node[T]]) -> None:
        # Unwind the descent: relink each parent, then let the policy restructure it.
        while path:
            parent, went_left = path.pop()
            if went_left:
                parent.left = subtree
            else:
                parent.right = subtree
            subtree = self._policy.apply(parent)
        self._root = subtree

    def _insert(self, value: T) -> bool:
        path: List[Tuple[Node[T], bool]] = []
        node = self._root
        while node is not None:
            if value < node.value:
                path.append((node, True))
                node = node.left
            elif value > node.value:
                path.append((node, False))
                node = node.right
            else:
                return False

        self._rebuild(path, Node(value))
        return True

    def insert(self, value: T) -> None:
        if self._insert(value):
            self._size += 1
        else:
            logger.debug("ignoring duplicate value %r", value)

    add = insert

    def _remove(self, value: T) -> bool:
        path: List[Tuple[Node[T], bool]] = []
        node = self._root
        while node is not None:
            if value < node.value:
                path.append((node, True))
                node = node.left
            elif value > node.value:
                path.append((node, False))
                node = node.right
            else:
                break

        if node is None:
            return False

        if node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            # Two children: take the in-order successor's value, unlink the successor.
            path.append((node, False))
            successor = node.right
            while successor.left is not None:
                path.append((successor, True))
                successor = successor.left
            node.value = successor.value
            replacement = successor.right

        self._rebuild(path, replacement)
        return True

    def remove(self, value: T) -> None:
        if not self.contains(value):
            logger.debug("value %r not present, nothing to remove", value)
            return
        self._remove(value)
        self._size -= 1

    def contains(self, value: T) -> bool:
        return self._find_node(self._root, value) is not None

    def is_leaf(self, value: T) -> bool:
        node = self._find_node(self._root, value)
        return node is not None and node.is_leaf()

    def root(self) -> Optional[Node[T]]:
        return self._root

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def height(self) -> int:
        return height(self._root)

    def is_balanced(self) -> bool:
        return is_balanced(self._root)

    def is_valid(self) -> bool:
        """Check the ordering invariant: in-order values strictly ascend."""
        values = self.in_order()
        return all(a < b for a, b in zip(values, values[1:]))

    def to_list(self) -> Optional[List[T]]:
        if self._root is None:
            return None
        return traversal.in_order(self)

    def in_order(self) -> List[T]:
        return traversal.in_order(self)

    def pre_order(self) -> List[T]:
        return traversal.pre_order(self)

    def post_order(self) -> List[T]:
        return traversal.post_order(self)

    def _spawn(self) -> 'BinarySearchTree[T]':
        return BinarySearchTree(self._policy)

    def copy(self) -> 'BinarySearchTree[T]':
        clone = self._spawn()
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def _find_node(self, node: Optional[Node[T]], value: T) -> Optional[Node[T]]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    def _find_min(self, node: Node[T]) -> Node[T]:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node[T]) -> Node[T]:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.in_order()})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(size={self._size}, height={self.height()})"
