"""
Unbalanced binary search tree over a totally ordered key type.

This module implements the OrderedTree class which provides:
- Insertion and deletion with status results instead of printed diagnostics
- Membership queries and in-order listing
- Level-order structural queries (leaf count, single-child nodes, cousins)

Nodes only hold downward links. Whenever an algorithm needs to look upward
(parent or grandparent), the relationship is rebuilt with an explicit
node -> parent map during a level-order walk.
"""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar

K = TypeVar("K")


class SupportsOrdering(Protocol):
    """Keys that can be ordered with < and >."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


def natural_compare(a: SupportsOrdering, b: SupportsOrdering) -> int:
    """
    Three-way comparison using the keys' own ordering.

    Returns:
        -1 if a < b, 1 if a > b, 0 otherwise
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class InsertStatus(IntEnum):
    """Outcome of OrderedTree.insert()."""
    INSERTED = 0
    DUPLICATE = 1


class DeleteStatus(IntEnum):
    """Outcome of OrderedTree.delete()."""
    DELETED = 0
    NOT_FOUND = 1


class TreeNode(Generic[K]):
    """A tree node owning at most two children."""

    def __init__(self, info: K):
        self.info = info
        self.left: Optional[TreeNode[K]] = None
        self.right: Optional[TreeNode[K]] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def has_single_child(self) -> bool:
        return (self.left is None) != (self.right is None)

    def __repr__(self) -> str:
        return f"TreeNode({self.info!r})"


class OrderedTree(Generic[K]):
    """
    Mutable binary search tree without rebalancing.

    Keys are unique. Depth depends on insertion order: O(log n) on average
    for random order, O(n) for sorted input.
    """

    def __init__(self, compare: Optional[Callable[[K, K], float]] = None):
        """
        Initialize an empty tree.

        Args:
            compare: Comparison function returning negative, zero, or positive.
                Defaults to the keys' own < and > operators.
        """
        self.root: Optional[TreeNode[K]] = None
        self._compare = compare if compare is not None else natural_compare
        self._size = 0

    @property
    def size(self) -> int:
        """Get number of keys in the tree."""
        return self._size

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self.root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.in_order())

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()!r})"

    # ------------------------------------------------------------------
    # Mutation

    def insert(self, key: K) -> InsertStatus:
        """
        Insert a key as a new leaf.

        Args:
            key: Key to insert

        Returns:
            InsertStatus.DUPLICATE if the key is already present (tree
            unchanged), InsertStatus.INSERTED otherwise
        """
        if self.root is None:
            self.root = TreeNode(key)
            self._size = 1
            return InsertStatus.INSERTED

        current = self.root
        while True:
            c = self._compare(key, current.info)
            if c == 0:
                return InsertStatus.DUPLICATE
            if c < 0:
                if current.left is None:
                    current.left = TreeNode(key)
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = TreeNode(key)
                    break
                current = current.right

        self._size += 1
        return InsertStatus.INSERTED

    def delete(self, key: K) -> DeleteStatus:
        """
        Remove a key from the tree.

        A node with two children is replaced by its in-order successor, the
        leftmost node of its right subtree.

        Args:
            key: Key to remove

        Returns:
            DeleteStatus.NOT_FOUND if the key is absent (tree unchanged),
            DeleteStatus.DELETED otherwise
        """
        parent: Optional[TreeNode[K]] = None
        current = self.root
        is_left = False

        while current is not None:
            c = self._compare(key, current.info)
            if c == 0:
                break
            parent = current
            if c < 0:
                current = current.left
                is_left = True
            else:
                current = current.right
                is_left = False

        if current is None:
            return DeleteStatus.NOT_FOUND

        if current.left is None:
            replacement = current.right
        elif current.right is None:
            replacement = current.left
        else:
            successor = current.right
            successor_parent = current
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left

            # A direct right child keeps its own right subtree.
            if successor_parent is not current:
                successor_parent.left = successor.right
                successor.right = current.right

            successor.left = current.left
            replacement = successor

        self._set_child(parent, is_left, replacement)
        current.left = current.right = None
        self._size -= 1
        return DeleteStatus.DELETED

    def _set_child(
        self, parent: Optional[TreeNode[K]], is_left: bool, node: Optional[TreeNode[K]]
    ) -> None:
        """Put node into parent's left/right slot, or make it the root."""
        if parent is None:
            self.root = node
        elif is_left:
            parent.left = node
        else:
            parent.right = node

    # ------------------------------------------------------------------
    # Queries

    def contains(self, key: K) -> bool:
        """Check if key is present in the tree."""
        current = self.root
        while current is not None:
            c = self._compare(key, current.info)
            if c == 0:
                return True
            current = current.left if c < 0 else current.right
        return False

    def in_order(self) -> list[K]:
        """
        List all keys in ascending order.

        Returns:
            Keys from a left, node, right traversal
        """
        result: list[K] = []
        # Explicit stack: a degenerate tree can be deeper than the recursion limit.
        stack: list[TreeNode[K]] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.info)
            node = node.right
        return result

    def level_order(
        self,
    ) -> Iterator[tuple[TreeNode[K], Optional[TreeNode[K]], int]]:
        """
        Walk the tree breadth-first, left to right within a level.

        Yields:
            (node, parent, depth) triples; the root has parent None and depth 0
        """
        if self.root is None:
            return
        queue: deque[tuple[TreeNode[K], Optional[TreeNode[K]], int]] = deque()
        queue.append((self.root, None, 0))
        while queue:
            node, parent, depth = queue.popleft()
            yield node, parent, depth
            if node.left is not None:
                queue.append((node.left, node, depth + 1))
            if node.right is not None:
                queue.append((node.right, node, depth + 1))

    def count_leaves(self) -> int:
        """Count nodes without children."""
        return sum(1 for node, _, _ in self.level_order() if node.is_leaf())

    def single_child_nodes(self) -> list[K]:
        """
        Find nodes with exactly one child ("single parents").

        Returns:
            Keys in level order
        """
        return [node.info for node, _, _ in self.level_order() if node.has_single_child()]

    def cousins_of(self, key: K) -> list[K]:
        """
        Find the cousins of a key.

        Cousins sit at the same depth, have different parents, and share the
        same grandparent. The root and its children have no cousins.

        Args:
            key: Key whose cousins are wanted

        Returns:
            Cousin keys in left-to-right order, empty if key is absent
        """
        parents: dict[TreeNode[K], Optional[TreeNode[K]]] = {}
        target: Optional[TreeNode[K]] = None
        target_depth = -1

        for node, parent, depth in self.level_order():
            parents[node] = parent
            if self._compare(node.info, key) == 0:
                target = node
                target_depth = depth
                break

        if target is None or target_depth < 2:
            return []

        target_parent = parents[target]
        grandparent = parents[target_parent]

        # Second pass over the target level only.
        parents = {}
        cousins: list[K] = []
        for node, parent, depth in self.level_order():
            if depth > target_depth:
                break
            parents[node] = parent
            if depth < target_depth or parent is target_parent:
                continue
            if parents[parent] is grandparent:
                cousins.append(node.info)
        return cousins
