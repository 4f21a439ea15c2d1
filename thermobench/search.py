"""Search algorithms over arrays, linked lists and balanced binary search
trees, with the setup helpers that build their even-number data sets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

_MASK64 = (1 << 64) - 1


@dataclass(eq=False)
class Node:
    """A node of a linked list (``left`` is previous, ``right`` next) or of a tree."""

    data: int = 0
    left: Node | None = field(default=None, repr=False)
    right: Node | None = field(default=None, repr=False)


@dataclass
class LinkedList:
    """A doubly linked list reached through ``head``."""

    head: Node | None = None
    size: int = 0

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self.size


@dataclass
class BinarySearchTree:
    """A binary search tree reached through ``root``."""

    root: Node | None = None
    size: int = 0

    def __iter__(self) -> Iterator[int]:
        """Yield the data in order."""
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self.size


class PbRandom:
    """Linear congruential generator with a 64-bit unsigned state."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & _MASK64

    def next(self) -> int:
        """Advance the state and return a value in ``range(32768)``."""
        self.state = (self.state * 1103515245 + 12345) & _MASK64
        return ((self.state >> 16) & 0xFFFFFFFF) % 32768

    def seed(self, value: int) -> None:
        """Reset the state to ``value``."""
        self.state = value & _MASK64


_RNG = PbRandom()


def pb_rand() -> int:
    """Return the next value of the shared generator."""
    return _RNG.next()


def pb_srand(seed: int) -> None:
    """Seed the shared generator."""
    _RNG.seed(seed)


def linear_array_search(array: Sequence[int], query: int) -> bool:
    """Scan ``array`` front to back for ``query``; needs no ordering."""
    for value in array:
        if value == query:
            return True
    return False


def linkedlist_search(lst: LinkedList, query: int) -> bool:
    """Walk the list from its head looking for ``query``."""
    node = lst.head
    while node is not None:
        if node.data == query:
            return True
        node = node.right
    return False


def binary_array_search(array: Sequence[int], query: int) -> bool:
    """Binary search in a sorted ``array``."""
    left, right = 0, len(array) - 1
    while left <= right:
        mid = (left + right) // 2
        value = array[mid]
        if query == value:
            return True
        if query < value:
            right = mid - 1
        else:
            left = mid + 1
    return False


def binary_tree_search(tree: BinarySearchTree, query: int) -> bool:
    """Descend from the root of ``tree`` looking for ``query``."""
    node = tree.root
    while node is not None:
        if query < node.data:
            node = node.left
        elif query > node.data:
            node = node.right
        else:
            return True
    return False


def make_evens_array(length: int) -> list[int]:
    """Return ``[0, 2, 4, ...]`` with ``length`` elements."""
    return [i * 2 for i in range(length)]


def _scrambled_nodes(length: int) -> list[Node]:
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")
    nodes = [Node() for _ in range(length)]
    # Shuffle node placement with the shared generator, as the allocation
    # pattern of a general program would.
    for _ in range(length * 100):
        idx = pb_rand() % length
        jdx = pb_rand() % length
        nodes[idx], nodes[jdx] = nodes[jdx], nodes[idx]
    for i, node in enumerate(nodes):
        node.data = i * 2
        node.left = None
        node.right = None
    return nodes


def make_evens_list(length: int) -> LinkedList:
    """Return a linked list holding ``0, 2, 4, ...`` in order.

    Raises ValueError when ``length`` is not positive.
    """
    nodes = _scrambled_nodes(length)
    for prev, nxt in zip(nodes, nodes[1:]):
        prev.right = nxt
        nxt.left = prev
    return LinkedList(head=nodes[0], size=length)


def make_evens_tree(length: int) -> BinarySearchTree:
    """Return a balanced binary search tree holding ``0, 2, 4, ...``.

    Raises ValueError when ``length`` is not positive.
    """
    nodes = _scrambled_nodes(length)
    root = tree_merge(nodes, 0, length - 1)
    return BinarySearchTree(root=root, size=length)


def tree_merge(nodes: list[Node], lo: int, hi: int) -> Node:
    """Link the sorted ``nodes[lo:hi+1]`` into a balanced tree and return its root."""
    if lo == hi:
        return nodes[lo]
    mid = (lo + hi) // 2
    if mid == lo:
        nodes[lo].right = nodes[hi]
        return nodes[lo]
    root = nodes[mid]
    root.left = tree_merge(nodes, lo, mid - 1)
    root.right = tree_merge(nodes, mid + 1, hi)
    return root