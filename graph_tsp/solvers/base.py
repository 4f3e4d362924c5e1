import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, List, Optional, Sequence

from ..store import NO_PATH, GraphStore


Tour = List[Hashable]


def tour_length(graph: GraphStore, tour: Sequence[Hashable], closed: bool = False) -> float:
    """Length of the tour as an open path, or as a cycle when ``closed``.

    Returns inf when some consecutive pair is not connected.
    """
    walk = list(tour)
    if closed and len(walk) > 1:
        walk.append(walk[0])
    length = graph.path_length(walk)
    if length == NO_PATH:
        return float("inf")
    return float(length)


class Solver(ABC):
    """Produces a tour visiting every vertex of a GraphStore."""

    name: str = "base"

    @abstractmethod
    def solve(self, graph: GraphStore) -> Tour:
        raise NotImplementedError


@dataclass
class SolveResult:
    tour: Tour
    length: float
    solver_name: str
    optimum: Optional[float] = None
    closed: bool = False

    @property
    def gap(self) -> float:
        """Relative excess over ``optimum``; inf when there is nothing to compare.

        ``optimum`` must be measured the same way as ``length`` (a cycle when
        ``closed``, an open path otherwise).
        """
        if self.optimum is None or math.isclose(self.optimum, 0.0) or math.isinf(self.length):
            return float("inf")
        return (self.length - self.optimum) / self.optimum
