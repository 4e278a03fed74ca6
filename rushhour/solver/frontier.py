"""
Frontier Module - Priority queue of search nodes keyed by board state.
"""

import heapq
import itertools
from typing import Any, Callable, Dict, List, Optional, Tuple

from .board import BoardState
from .node import SearchNode

# Placeholder left in the heap for entries that were replaced
_REMOVED = None


class PriorityFrontier:
    """
    Binary-heap frontier with at most one live node per state.

    The heap is ordered by (priority, insertion counter), so equal
    priorities pop in insertion order. A map from state to its live heap
    entry gives O(1) membership checks; pushing a state that is already
    queued marks the old entry removed and it is skipped when popped.

    Args:
        priority: Function returning the sort key of a node, e.g. (f, h)
    """

    def __init__(self, priority: Callable[[SearchNode], Tuple[int, ...]]):
        self._priority = priority
        self._heap: List[List[Any]] = []
        self._entries: Dict[BoardState, List[Any]] = {}
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        """Add a node, replacing any node already queued for the same state."""
        stale = self._entries.pop(node.state, None)
        if stale is not None:
            stale[-1] = _REMOVED

        entry = [self._priority(node), next(self._counter), node]
        self._entries[node.state] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> SearchNode:
        """
        Remove and return the node with the lowest priority.

        Raises:
            KeyError: If the frontier is empty
        """
        while self._heap:
            *_, node = heapq.heappop(self._heap)
            if node is not _REMOVED:
                del self._entries[node.state]
                return node
        raise KeyError("pop from an empty frontier")

    def get(self, state: BoardState) -> Optional[SearchNode]:
        """Live node queued for a state, or None."""
        entry = self._entries.get(state)
        return entry[-1] if entry is not None else None

    def __contains__(self, state: BoardState) -> bool:
        return state in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
