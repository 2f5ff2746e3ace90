# pathfinding_lab/algorithms/genetic.py
"""
Genetic / evolutionary search over fixed-length move sequences.

Each individual is a list of moves (Up, Down, Left, Right). Decoding walks the
moves from the start cell and stops at the first blocked/out-of-bounds move or
on reaching the goal; genes after that point are ignored. Fitness rewards
reaching the goal with a short path, and otherwise rewards getting close.

Per generation: evaluate, sort by fitness, keep the elites, then fill the rest
of the population with tournament-selected parents, single-point crossover and
per-gene mutation. The best individual ever seen is kept as an independent copy.
"""
from __future__ import annotations
import math
import os
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from loguru import logger

from ..core.metrics import SearchResult, Step, Stopwatch
from ..core.oracle import GridOracle, Position, manhattan
from .base import SearchSteps, check_endpoints, failure, trivial_steps

NAME = "Genetic"

REACHED_BASE_SCORE = 10000.0
LENGTH_PENALTY = 10.0
LOG_EVERY = 20


class Move(Enum):
    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


MOVES: Tuple[Move, ...] = tuple(Move)


@dataclass(frozen=True)
class GeneticConfig:
    population_size: int = 100
    max_generations: int = 200
    crossover_rate: float = 0.8
    mutation_rate: float = 0.1            # per gene
    individual_mutation_rate: float = 1.0  # chance an offspring is considered for mutation at all
    tournament_size: int = 5
    elitism_count: int = 2
    length_factor: float = 1.8
    min_gene_length: int = 5
    seed: Optional[int] = None

    def __post_init__(self):
        if self.population_size < 1:
            raise ValueError(f"population_size must be >= 1, got {self.population_size}")
        if self.max_generations < 1:
            raise ValueError(f"max_generations must be >= 1, got {self.max_generations}")
        if self.tournament_size < 1:
            raise ValueError(f"tournament_size must be >= 1, got {self.tournament_size}")
        if not 0 <= self.elitism_count <= self.population_size:
            raise ValueError(
                f"elitism_count must be within [0, population_size], got {self.elitism_count}")
        for name in ("crossover_rate", "mutation_rate", "individual_mutation_rate"):
            rate = getattr(self, name)
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {rate}")
        if self.length_factor <= 0:
            raise ValueError(f"length_factor must be positive, got {self.length_factor}")
        if self.min_gene_length < 2:
            raise ValueError(f"min_gene_length must be >= 2, got {self.min_gene_length}")

    @classmethod
    def from_env(cls, defaults: Optional[Dict[str, Any]] = None, **overrides) -> "GeneticConfig":
        """Field defaults, then `defaults`, then GA_* environment variables, then keyword overrides."""
        env = {
            "population_size": ("GA_POPULATION", int),
            "max_generations": ("GA_GENERATIONS", int),
            "crossover_rate": ("GA_CROSSOVER", float),
            "mutation_rate": ("GA_MUTATION", float),
            "individual_mutation_rate": ("GA_INDIVIDUAL_MUTATION", float),
            "tournament_size": ("GA_TOURNAMENT", int),
            "elitism_count": ("GA_ELITISM", int),
            "length_factor": ("GA_LENGTH_FACTOR", float),
            "min_gene_length": ("GA_MIN_LENGTH", int),
            "seed": ("GA_SEED", int),
        }
        values = dict(defaults or {})
        for attr, (var, conv) in env.items():
            raw = os.getenv(var)
            if raw is not None and raw != "":
                values[attr] = conv(raw)
        values.update(overrides)
        return cls(**values)

    def gene_length(self, start: Position, end: Position) -> int:
        return max(self.min_gene_length, math.ceil(manhattan(start, end) * self.length_factor))


@dataclass
class Individual:
    genes: List[Move]
    fitness: float = 0.0
    path: List[Position] = field(default_factory=list)
    reached_goal: bool = False

    @classmethod
    def random(cls, length: int, rng: random.Random) -> "Individual":
        return cls([rng.choice(MOVES) for _ in range(length)])

    def copy(self) -> "Individual":
        return Individual(list(self.genes), self.fitness, list(self.path), self.reached_goal)


def decode_and_evaluate(ind: Individual, start: Position, end: Position, oracle: GridOracle) -> None:
    """Walk the genes from start, then score the realized path. Updates ind in place."""
    pos = Position(*start)
    ind.path = [pos]
    ind.reached_goal = False
    seen = {pos}
    self_intersections = 0

    for move in ind.genes:
        nxt = pos.offset(*move.value)
        if not oracle.is_walkable(nxt):
            break
        if nxt in seen:
            self_intersections += 1
        pos = nxt
        ind.path.append(pos)
        seen.add(pos)
        if pos == end:
            ind.reached_goal = True
            break

    if ind.reached_goal:
        fitness = REACHED_BASE_SCORE - LENGTH_PENALTY * len(ind.path)
        fitness -= 0.1 * self_intersections
    else:
        fitness = 1.0 / (1.0 + manhattan(pos, end))
        fitness -= 1.0 * self_intersections
        if len(ind.path) < 2:
            fitness *= 0.1
    ind.fitness = max(0.0, fitness)


def tournament_select(population: Sequence[Individual], size: int, rng: random.Random) -> Individual:
    best: Optional[Individual] = None
    for _ in range(size):
        contender = population[rng.randrange(len(population))]
        if best is None or contender.fitness > best.fitness:
            best = contender
    return best


def crossover(a: Individual, b: Individual, rng: random.Random) -> Tuple[Individual, Individual]:
    """Single-point crossover; the cut never falls at either end."""
    cut = rng.randrange(1, len(a.genes))
    return (Individual(a.genes[:cut] + b.genes[cut:]),
            Individual(b.genes[:cut] + a.genes[cut:]))


def mutate(ind: Individual, cfg: GeneticConfig, rng: random.Random) -> None:
    if rng.random() >= cfg.individual_mutation_rate:
        return
    for i, gene in enumerate(ind.genes):
        if rng.random() < cfg.mutation_rate:
            ind.genes[i] = rng.choice([m for m in MOVES if m is not gene])


def _untried_neighbors(ind: Individual, oracle: GridOracle) -> Tuple[Position, ...]:
    on_path = set(ind.path)
    return tuple(p for p in oracle.neighbors(ind.path[-1]) if p not in on_path)


def _keep_best(best_ever: Optional[Individual], candidate: Individual) -> Individual:
    """Replace the best-so-far only on strict improvement; the stored individual is a copy."""
    if best_ever is None or candidate.fitness > best_ever.fitness:
        return candidate.copy()
    return best_ever


def _next_generation(population: List[Individual], cfg: GeneticConfig, rng: random.Random) -> List[Individual]:
    nxt = [ind.copy() for ind in population[:cfg.elitism_count]]
    while len(nxt) < cfg.population_size:
        p1 = tournament_select(population, cfg.tournament_size, rng)
        p2 = tournament_select(population, cfg.tournament_size, rng)
        if rng.random() < cfg.crossover_rate:
            c1, c2 = crossover(p1, p2, rng)
        else:
            c1, c2 = Individual(list(p1.genes)), Individual(list(p2.genes))
        mutate(c1, cfg, rng)
        mutate(c2, cfg, rng)
        nxt.append(c1)
        if len(nxt) < cfg.population_size:
            nxt.append(c2)
    return nxt


def genetic_search(
    start: Position,
    end: Position,
    oracle: GridOracle,
    config: Optional[GeneticConfig] = None,
    rng: Optional[random.Random] = None,
) -> SearchSteps:
    """Evolve move sequences toward the goal; one Step per generation.

    Only a best individual that actually reaches the goal is reported as a success.
    Evolution stops early once the best path is as short as the Manhattan lower bound.
    """
    early = check_endpoints(NAME, start, end, oracle)
    if early is not None:
        return (yield from trivial_steps(early))

    cfg = config or GeneticConfig()
    rng = rng or random.Random(cfg.seed)
    start, end = Position(*start), Position(*end)
    lower_bound = manhattan(start, end)
    length = cfg.gene_length(start, end)
    logger.debug(f"{NAME}: gene length {length} (manhattan {lower_bound}, factor {cfg.length_factor})")

    evaluated = 0
    generations = 0
    best_ever: Optional[Individual] = None

    with Stopwatch() as meter:
        population = [Individual.random(length, rng) for _ in range(cfg.population_size)]

        for gen in range(1, cfg.max_generations + 1):
            for ind in population:
                decode_and_evaluate(ind, start, end, oracle)
            evaluated += len(population)
            generations = gen
            population.sort(key=lambda ind: ind.fitness, reverse=True)
            best = population[0]

            best_ever = _keep_best(best_ever, best)

            yield Step(NAME, tuple(best.path), _untried_neighbors(best, oracle), best.path[-1], gen,
                       fitness=best.fitness, reached_goal=best.reached_goal)

            if gen % LOG_EVERY == 0:
                logger.debug(f"{NAME}: generation {gen} | best fitness {best.fitness:.3f} | "
                             f"reached {best.reached_goal} | best overall {best_ever.fitness:.3f}")

            if best.reached_goal and len(best.path) - 1 == lower_bound:
                logger.debug(f"{NAME}: shortest possible path found in generation {gen}")
                break

            if gen < cfg.max_generations:
                population = _next_generation(population, cfg, rng)

        # re-decode so the reported path is exactly what the stored genes produce
        decode_and_evaluate(best_ever, start, end, oracle)

    if best_ever.reached_goal:
        path = tuple(best_ever.path)
        res = SearchResult(NAME, True, path, float(len(path) - 1), evaluated, generations, meter.elapsed)
        logger.debug(f"{NAME}: finished after {generations} generations | length={len(path)}")
        yield Step(NAME, path, (), path[-1], generations, fitness=best_ever.fitness,
                   reached_goal=True, done=True, final=res)
        return res

    logger.debug(f"{NAME}: no individual reached {tuple(end)} in {generations} generations")
    return failure(NAME, evaluated, generations, meter.elapsed)
