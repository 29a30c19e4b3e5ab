"""
Root Store

AVL tree holding the known roots. Each node keeps the derivatives that were
generated or validated for its root, with an occurrence counter.

    store = RootStore()
    store.insert('كتب')
    store.find('كتب').record_derivative('كاتب')
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass
class Derivative:
    """A word produced from a root, with how many times it was seen."""
    word: str
    frequency: int = 1

    def __str__(self):
        return f"{self.word} (f={self.frequency})"


@dataclass
class RootNode:
    """A node of the AVL tree."""
    root: str
    height: int = 1
    left: Optional['RootNode'] = None
    right: Optional['RootNode'] = None
    derivatives: List[Derivative] = field(default_factory=list)

    def record_derivative(self, word: str) -> Derivative:
        """Bump the frequency of an existing derivative or append a new one."""
        for derivative in self.derivatives:
            if derivative.word == word:
                derivative.frequency += 1
                return derivative
        derivative = Derivative(word)
        self.derivatives.append(derivative)
        return derivative

    @property
    def balance(self) -> int:
        return _height(self.left) - _height(self.right)


def _height(node: Optional[RootNode]) -> int:
    return node.height if node is not None else 0


def _update_height(node: RootNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: RootNode) -> RootNode:
    x = y.left
    y.left = x.right
    x.right = y
    _update_height(y)
    _update_height(x)
    return x


def _rotate_left(x: RootNode) -> RootNode:
    y = x.right
    x.right = y.left
    y.left = x
    _update_height(x)
    _update_height(y)
    return y


class RootStore:
    """
    Self-balancing binary search tree keyed by root text.

    Duplicate inserts are ignored. There is no deletion.
    """

    def __init__(self):
        self._root: Optional[RootNode] = None
        self._size = 0

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    def insert(self, root: str) -> None:
        """Insert a root; does nothing if it is already stored."""
        self._root = self._insert(self._root, root)

    def contains(self, root: str) -> bool:
        return self.find(root) is not None

    def find(self, root: str) -> Optional[RootNode]:
        node = self._root
        while node is not None:
            if root == node.root:
                return node
            node = node.left if root < node.root else node.right
        return None

    def list(self) -> List[str]:
        """All roots in ascending order."""
        return [node.root for node in self.nodes()]

    def all_entries(self) -> List[Tuple[str, List[Derivative]]]:
        """(root, derivatives) pairs in ascending root order."""
        return [(node.root, node.derivatives) for node in self.nodes()]

    def nodes(self) -> List[RootNode]:
        """In-order traversal of the tree."""
        result = []
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node)
            node = node.right
        return result

    @property
    def root_node(self) -> Optional[RootNode]:
        return self._root

    @property
    def height(self) -> int:
        return _height(self._root)

    def structure(self) -> Optional[Dict]:
        """Nested dict view of the tree, for debugging and visualization."""
        return self._structure(self._root)

    def __len__(self):
        return self._size

    def __contains__(self, root):
        return self.contains(root)

    def __iter__(self) -> Iterator[str]:
        return iter(self.list())

    # =========================================================================
    # INSERTION
    # =========================================================================

    def _insert(self, node: Optional[RootNode], key: str) -> RootNode:
        # 1. Standard BST insertion
        if node is None:
            self._size += 1
            return RootNode(key)

        if key < node.root:
            node.left = self._insert(node.left, key)
        elif key > node.root:
            node.right = self._insert(node.right, key)
        else:
            return node

        # 2. Height of this ancestor
        _update_height(node)

        # 3. Rebalance
        balance = node.balance

        # Left-Left
        if balance > 1 and key < node.left.root:
            return _rotate_right(node)

        # Right-Right
        if balance < -1 and key > node.right.root:
            return _rotate_left(node)

        # Left-Right
        if balance > 1 and key > node.left.root:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)

        # Right-Left
        if balance < -1 and key < node.right.root:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)

        return node

    def _structure(self, node: Optional[RootNode]) -> Optional[Dict]:
        if node is None:
            return None
        view = {
            'root': node.root,
            'height': node.height,
            'derivatives': [str(d) for d in node.derivatives],
        }
        if node.left is not None:
            view['left'] = self._structure(node.left)
        if node.right is not None:
            view['right'] = self._structure(node.right)
        return view
