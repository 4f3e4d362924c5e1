import dataclasses
import random
from typing import Optional

from ..evolutionary import InverOverConfig, InverOverSearch
from ..store import GraphStore
from .base import SolveResult, Solver, Tour


class InverOverSolver(Solver):
    """Solver front end for InverOverSearch."""

    name = "inver_over"

    def __init__(self, config: InverOverConfig = None, rng: random.Random = None):
        self.cfg = config or InverOverConfig()
        self.rng = rng

    def solve(self, graph: GraphStore) -> Tour:
        return self.solve_with_result(graph).tour

    def solve_with_result(self, graph: GraphStore, optimum: Optional[float] = None) -> SolveResult:
        """Run the search; with a known ``optimum`` the tour is optimised as a cycle.

        TSPLIB optima are closed tour lengths, so comparing them against an
        open path would understate the gap.
        """
        config = self.cfg
        if optimum is not None and not config.closed_tour:
            config = dataclasses.replace(config, closed_tour=True)
        search = InverOverSearch(config, graph, rng=self.rng)
        search.run()
        tour, length = search.best()
        return SolveResult(
            tour=tour, length=length, solver_name=self.name, optimum=optimum, closed=config.closed_tour
        )
