"""
Result containers shared by the graph algorithms.

Expected failure modes (no path, negative cycle, empty queue) are reported
as a Status on the returned value rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Hashable, List, Optional, Union

Weight = Union[int, float]


class Status(Enum):
    """Outcome of a graph query."""

    OK = "ok"
    NO_PATH = "no_path"
    NEGATIVE_CYCLE = "negative_cycle"
    EMPTY = "empty"


@dataclass
class PathResult:
    """
    Single-pair shortest path.

    Attributes:
        status: Status.OK or Status.NO_PATH.
        path: Vertices from start to finish (inclusive); empty when no path.
        weight: Total path weight, or None when no path.
    """

    status: Status
    path: List[Hashable] = field(default_factory=list)
    weight: Optional[Weight] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def found(cls, path: List[Hashable], weight: Weight) -> "PathResult":
        return cls(Status.OK, list(path), weight)

    @classmethod
    def no_path(cls) -> "PathResult":
        return cls(Status.NO_PATH)


@dataclass
class DistanceResult:
    """
    Single-source shortest distances.

    Attributes:
        status: Status.OK or Status.NEGATIVE_CYCLE.
        distances: Mapping vertex -> distance (``math.inf`` if unreachable);
            empty when a negative cycle was detected.
    """

    status: Status
    distances: Dict[Hashable, Weight] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def negative_cycle(cls) -> "DistanceResult":
        return cls(Status.NEGATIVE_CYCLE)


__all__ = ["Status", "Weight", "PathResult", "DistanceResult"]
