# src/pathfinding/node.py
"""
Search nodes and the bounded arena they live in.

Nodes are referenced by their index in the pool (NodeRef), parent links
included, so a whole search can be dropped at once by dropping the pool.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from movement import Direction, MovementAction

# Index of a node inside its NodePool.
NodeRef = int


@dataclass
class SearchNode:
    x: int
    y: int
    elevation: int
    cost_g: int
    cost_f: int
    parent: Optional[NodeRef]
    origin_direction: Direction
    movement_action: MovementAction = MovementAction.NONE

    def same_cell(self, other: "SearchNode") -> bool:
        """Logical identity used for deduplication: position + elevation."""
        return (
            self.x == other.x
            and self.y == other.y
            and self.elevation == other.elevation
        )


class NodePool:
    """
    Fixed-capacity bump allocator for SearchNode records.

    reserve() places a node in the next free slot; commit() makes it
    permanent. Until committed, the slot is handed out again by the next
    reserve(), so candidates that are thrown away do not eat the budget.
    Nothing is ever freed individually.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"Node pool capacity must be >= 0, got {capacity}")
        self._slots: List[Optional[SearchNode]] = [None] * capacity
        self._capacity = capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def is_full(self) -> bool:
        return self._count >= self._capacity

    def __len__(self) -> int:
        """Number of committed nodes."""
        return self._count

    def __getitem__(self, ref: NodeRef) -> SearchNode:
        node = self._slots[ref]
        if node is None:
            raise IndexError(f"Empty node slot {ref}")
        return node

    def __iter__(self) -> Iterator[SearchNode]:
        for i in range(self._count):
            yield self._slots[i]  # type: ignore[misc]

    def reserve(self, node: SearchNode) -> Optional[NodeRef]:
        """Store `node` in the next free slot, or return None when exhausted."""
        if self._count >= self._capacity:
            return None
        self._slots[self._count] = node
        return self._count

    def commit(self) -> NodeRef:
        """Keep the most recently reserved node."""
        if self._count >= self._capacity or self._slots[self._count] is None:
            raise RuntimeError("commit() without a pending reservation")
        ref = self._count
        self._count += 1
        return ref

    def clear(self) -> None:
        """Release every node at once."""
        self._slots = [None] * self._capacity
        self._count = 0

    def parent_chain(self, ref: NodeRef) -> Iterator[SearchNode]:
        """Yield the node at `ref`, then each ancestor up to the root."""
        current: Optional[NodeRef] = ref
        while current is not None:
            node = self[current]
            yield node
            current = node.parent
