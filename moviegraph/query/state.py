"""
Result records for pairwise shortest-path queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PairResult:
    """
    Outcome of one start/end query.

    Attributes:
        start: Start node position
        end: End node position
        start_title: Title of the start node
        end_title: Title of the end node
        path: Node positions from start to end, or None if unreachable
        path_titles: Titles along the path (empty when unreachable)
    """

    start: int
    end: int
    start_title: str
    end_title: str
    path: list[int] | None
    path_titles: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        """Whether a path exists."""
        return self.path is not None

    @property
    def degrees(self) -> int | None:
        """Number of hops on the path, or None if unreachable."""
        if self.path is None:
            return None
        return len(self.path) - 1
