"""
Search Node Module - A state reached during search, with its path cost.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from .board import BoardState
from .move import Move


@dataclass(frozen=True, eq=False)
class SearchNode:
    """
    Node in the search graph.

    Nodes are never updated in place: finding a cheaper path creates a new
    node that replaces the stale one in the frontier.

    Attributes:
        state: Board state of this node
        parent: Node this one was generated from (None for the root);
            only followed when rebuilding the path
        g: Moves from the initial state
        h: Heuristic estimate of the moves left
        move: Move that produced this state (None for the root)
    """
    state: BoardState
    parent: Optional['SearchNode'] = None
    g: int = 0
    h: int = 0
    move: Optional[Move] = None

    @property
    def f(self) -> int:
        """Estimated total cost g + h."""
        return self.g + self.h

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def path(self) -> Iterator['SearchNode']:
        """Iterate from this node back to the root."""
        node: Optional[SearchNode] = self
        while node is not None:
            yield node
            node = node.parent
