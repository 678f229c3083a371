# src/pathfinding/visited.py
"""
VisitedSet: closed set of settled nodes.

Open addressing with linear probing over a power-of-two table, keyed by
(x, y, elevation). The table never grows; its size is fixed from the
node budget when the search context is built.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .node import NodePool, NodeRef, SearchNode

_U32 = 0xFFFFFFFF


def next_power_of_two(num: int) -> int:
    """Smallest power of two >= num (1 for num <= 1)."""
    if num <= 1:
        return 1
    return 1 << (num - 1).bit_length()


def spatial_hash(x: int, y: int, elevation: int) -> int:
    """32-bit hash of a cell: multiplicative spatial hash plus a fmix step."""
    ux = x & 0xFFFF
    uy = y & 0xFFFF
    ue = elevation & 0xFF

    h = ((ux * 73856093) ^ (uy * 19349663) ^ (ue * 83492791)) & _U32

    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _U32
    h ^= h >> 13

    return h


def node_hash(node: SearchNode) -> int:
    return spatial_hash(node.x, node.y, node.elevation)


class VisitedSet:
    """Set of node references deduplicated by position + elevation."""

    def __init__(self, pool: NodePool, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Visited set capacity must be >= 0, got {capacity}")
        self._pool = pool
        self._capacity = next_power_of_two(capacity)
        self._mask = self._capacity - 1
        self._table: List[Optional[NodeRef]] = [None] * self._capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def refs(self) -> List[NodeRef]:
        """Stored references in table order."""
        return [ref for ref in self._table if ref is not None]

    def try_insert(self, ref: NodeRef) -> Tuple[bool, Optional[NodeRef]]:
        """
        Insert `ref` unless an equal cell is already stored.

        Returns (True, ref) on insertion and (False, existing) when an
        equal cell was already present; the stored entry is never
        replaced. (False, None) means the table is full.
        """
        node = self._pool[ref]
        index = node_hash(node) & self._mask

        for _ in range(self._capacity):
            current = self._table[index]

            if current is None:
                self._table[index] = ref
                self._size += 1
                return True, ref

            if self._pool[current].same_cell(node):
                return False, current

            index = (index + 1) & self._mask

        return False, None

    def contains(self, ref: NodeRef) -> bool:
        return self.find(self._pool[ref]) is not None

    def find(self, node: SearchNode) -> Optional[NodeRef]:
        """Reference of the stored node equal to `node`, if any."""
        index = node_hash(node) & self._mask

        for _ in range(self._capacity):
            current = self._table[index]

            if current is None:
                return None

            if self._pool[current].same_cell(node):
                return current

            index = (index + 1) & self._mask

        return None

    def clear(self) -> None:
        self._table = [None] * self._capacity
        self._size = 0
