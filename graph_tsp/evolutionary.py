import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .errors import InvalidArgumentError
from .solvers.base import Tour, tour_length
from .store import GraphStore

_LOGGER = logging.getLogger(__name__)


@dataclass
class InverOverConfig:
    population_size: int = 20
    inversion_probability: float = 0.02
    termination_iterations: int = 1000
    closed_tour: bool = False
    random_seed: int = 123

    def __post_init__(self):
        if self.population_size < 1:
            raise InvalidArgumentError("population_size must be at least 1")
        if not 0.0 <= self.inversion_probability <= 1.0:
            raise InvalidArgumentError("inversion_probability must be within [0, 1]")
        if self.termination_iterations < 0:
            raise InvalidArgumentError("termination_iterations must be non-negative")


class InverOverSearch:
    """
    Inver-Over evolutionary search (Tao & Michalewicz) over a fully connected graph.

    Each generation every individual produces one child by a chain of segment
    inversions, guided either by a random city of its own tour or by the
    successor of the current city in another individual. The child replaces
    its parent only when it is strictly shorter.
    """

    def __init__(self, config: InverOverConfig, graph: GraphStore, rng: random.Random = None):
        self.cfg = config
        self.graph = graph
        self.rng = rng or random.Random(config.random_seed)
        self.cities: Tour = graph.get_vertices()
        self.population: List[Tour] = [self._random_tour() for _ in range(config.population_size)]
        self.lengths: List[float] = [self.evaluate(tour) for tour in self.population]
        self.generation = 0
        self.best_tour: Tour = []
        self.best_length = float("inf")
        for tour, length in zip(self.population, self.lengths):
            if not self.best_tour or length < self.best_length:
                self.best_tour = list(tour)
                self.best_length = length

    def _random_tour(self) -> Tour:
        tour = list(self.cities)
        self.rng.shuffle(tour)
        return tour

    def evaluate(self, tour: Tour) -> float:
        return tour_length(self.graph, tour, closed=self.cfg.closed_tour)

    def _comparison_city(self, child: Tour, pos: int, idx: int):
        n = len(child)
        pop_size = len(self.population)
        if pop_size < 2 or self.rng.random() < self.cfg.inversion_probability:
            other = self.rng.randrange(n - 1)
            if other >= pos:
                other += 1
            return child[other]
        mate_idx = self.rng.randrange(pop_size - 1)
        if mate_idx >= idx:
            mate_idx += 1
        mate = self.population[mate_idx]
        return mate[(mate.index(child[pos]) + 1) % n]

    def _make_child(self, idx: int) -> Tour:
        child = list(self.population[idx])
        n = len(child)
        if n < 3:
            return child
        pos = self.rng.randrange(n)
        # Mate-guided chains can revisit the same configuration; bound them.
        for _ in range(2 * n):
            target = self._comparison_city(child, pos, idx)
            tpos = child.index(target)
            if abs(pos - tpos) == 1 or (pos == 0 and tpos == n - 1):
                break
            if pos < tpos:
                child[pos + 1 : tpos + 1] = reversed(child[pos + 1 : tpos + 1])
            else:
                child[tpos:pos] = reversed(child[tpos:pos])
            pos = child.index(target)
        return child

    def step(self) -> None:
        for idx in range(len(self.population)):
            child = self._make_child(idx)
            length = self.evaluate(child)
            if length < self.lengths[idx]:
                self.population[idx] = child
                self.lengths[idx] = length
                if length < self.best_length:
                    self.best_tour = list(child)
                    self.best_length = length
        self.generation += 1
        _LOGGER.debug("generation %d: best length %s", self.generation, self.best_length)

    def best(self) -> Tuple[Tour, float]:
        return list(self.best_tour), self.best_length

    def run(self, iterations: Optional[int] = None) -> Tour:
        if iterations is None:
            iterations = self.cfg.termination_iterations
        if self.cities:
            for _ in range(iterations):
                self.step()
        _LOGGER.info(
            "inver-over finished after %d generations: best length %s over %d cities",
            self.generation,
            self.best_length,
            len(self.cities),
        )
        return list(self.best_tour)


class TourOptimizer:
    """Approximates the shortest tour through every vertex of a graph."""

    def __init__(self, graph: GraphStore, rng: random.Random = None, seed: int = None, closed_tour: bool = False):
        self.graph = graph
        self.rng = rng or random.Random(seed)
        self.closed_tour = closed_tour

    def get_optimal_tour(
        self, population_size: int, inversion_probability: float, termination_iterations: int
    ) -> Tour:
        config = InverOverConfig(
            population_size=population_size,
            inversion_probability=inversion_probability,
            termination_iterations=termination_iterations,
            closed_tour=self.closed_tour,
        )
        return InverOverSearch(config, self.graph, rng=self.rng).run()
