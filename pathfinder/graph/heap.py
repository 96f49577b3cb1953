"""
Binary min-heap keyed by cost.

Dijkstra and A* use it as a lazy-deletion priority queue: instead of a
decrease-key operation they push a fresh entry whenever a node's cost
improves and skip entries for already-finalized nodes when they are
popped. That costs extra pushes (up to one per relaxation, so O(E)
entries) but keeps the O((V + E) log V) bound.

Equal costs pop in sift order: strict < comparisons in both directions,
as in a textbook array heap. heapq orders ties differently (its pop sifts
the last leaf to the bottom before bubbling it up), and the step trace
depends on this order.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Array-backed binary heap of (cost, item) entries."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, cost: float, item: T) -> None:
        self._heap.append((cost, item))
        self._bubble_up(len(self._heap) - 1)

    def pop(self) -> tuple[float, T]:
        """
        Remove and return the (cost, item) entry with the lowest cost.

        Raises:
            IndexError: If the heap is empty
        """
        if not self._heap:
            raise IndexError("pop from empty heap")

        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sink_down(0)
        return top

    def peek(self) -> tuple[float, T]:
        if not self._heap:
            raise IndexError("peek at empty heap")
        return self._heap[0]

    def _bubble_up(self, i: int) -> None:
        heap = self._heap
        while i > 0:
            parent = (i - 1) // 2
            if heap[i][0] < heap[parent][0]:
                heap[i], heap[parent] = heap[parent], heap[i]
                i = parent
            else:
                break

    def _sink_down(self, i: int) -> None:
        heap = self._heap
        n = len(heap)
        while True:
            smallest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and heap[left][0] < heap[smallest][0]:
                smallest = left
            if right < n and heap[right][0] < heap[smallest][0]:
                smallest = right
            if smallest == i:
                break
            heap[i], heap[smallest] = heap[smallest], heap[i]
            i = smallest

    def __repr__(self) -> str:
        return f"MinHeap(size={len(self._heap)})"
