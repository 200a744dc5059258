from typing import TypeVar, Generic, Optional

T = TypeVar('T')


class Node(Generic[T]):
    """A tree vertex that exclusively owns its two child subtrees."""

    def __init__(self, value: T) -> None:
        self.value: T = value
        self.left: Optional['Node[T]'] = None
        self.right: Optional['Node[T]'] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
