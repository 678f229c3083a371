# src/pathfinding/frontier.py
"""
Frontier: fixed-capacity binary min-heap of node references keyed on cost_f.

Ties resolve purely by heap position: a given sequence of pushes always
pops in the same order.
"""

from __future__ import annotations

from typing import List, Optional

from .node import NodePool, NodeRef


def _left_child(index: int) -> int:
    return 2 * index + 1


def _parent(index: int) -> int:
    return (index - 1) // 2


class Frontier:
    """Open set of the search, ordered by total estimated cost."""

    def __init__(self, pool: NodePool, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Frontier capacity must be >= 0, got {capacity}")
        self._pool = pool
        self._heap: List[NodeRef] = [0] * capacity
        self._capacity = capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def refs(self) -> List[NodeRef]:
        """Current heap contents in array order (root first)."""
        return self._heap[: self._size]

    def peek(self) -> Optional[NodeRef]:
        return self._heap[0] if self._size else None

    def push(self, ref: NodeRef) -> bool:
        """Add a node; False (and no change) when the heap is full."""
        if self._size >= self._capacity:
            return False

        index = self._size
        self._heap[index] = ref
        self._size += 1
        self._sift_up(index)
        return True

    def pop(self) -> Optional[NodeRef]:
        """Remove and return the cheapest node, or None when empty."""
        if self._size == 0:
            return None

        top = self._heap[0]
        self._size -= 1

        if self._size != 0:
            self._heap[0] = self._heap[self._size]
            self._sift_down(0)

        return top

    def clear(self) -> None:
        self._size = 0

    # ------------------------------------------------------------------
    # Heap maintenance
    # ------------------------------------------------------------------

    def _cost(self, ref: NodeRef) -> int:
        return self._pool[ref].cost_f

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        moving = heap[index]
        moving_cost = self._cost(moving)

        while index != 0:
            parent = _parent(index)
            if not moving_cost < self._cost(heap[parent]):
                break
            heap[index] = heap[parent]
            index = parent

        heap[index] = moving

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = self._size
        moving = heap[index]
        moving_cost = self._cost(moving)

        while True:
            left = _left_child(index)
            if left >= size:
                break

            best = left
            right = left + 1
            if right < size and self._cost(heap[right]) < self._cost(heap[left]):
                best = right

            if not self._cost(heap[best]) < moving_cost:
                break

            heap[index] = heap[best]
            index = best

        heap[index] = moving
