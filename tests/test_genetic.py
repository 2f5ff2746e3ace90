import random

import pytest

from pathfinding_lab.algorithms.base import drain
from pathfinding_lab.algorithms.genetic import (
    MOVES,
    GeneticConfig,
    Individual,
    Move,
    _keep_best,
    _next_generation,
    crossover,
    decode_and_evaluate,
    genetic_search,
    mutate,
    tournament_select,
)
from pathfinding_lab.core.oracle import manhattan
from pathfinding_lab.problems.checks import is_valid_path
from pathfinding_lab.problems.grid import GridMap


def test_decode_stops_on_reaching_goal(open_grid):
    ind = Individual([Move.RIGHT] * 4 + [Move.UP] * 4)
    decode_and_evaluate(ind, (0, 0), (4, 0), open_grid)
    assert ind.reached_goal
    assert ind.path == [(0, 0), (1, 0), (2, 0), (3, 0), (4, 0)]
    assert ind.fitness == pytest.approx(10000.0 - 10.0 * 5)


def test_decode_stops_at_first_blocked_move(open_grid):
    ind = Individual([Move.UP, Move.LEFT, Move.RIGHT, Move.RIGHT, Move.RIGHT])
    decode_and_evaluate(ind, (0, 0), (4, 4), open_grid)
    assert ind.path == [(0, 0), (0, 1)]
    assert not ind.reached_goal
    assert ind.fitness == pytest.approx(1.0 / (1.0 + 7))


def test_degenerate_path_is_penalized(open_grid):
    ind = Individual([Move.LEFT] + [Move.RIGHT] * 4)
    decode_and_evaluate(ind, (0, 0), (4, 0), open_grid)
    assert ind.path == [(0, 0)]
    assert ind.fitness == pytest.approx(0.1 * (1.0 / 5.0))


def test_self_intersection_floors_fitness_at_zero(open_grid):
    ind = Individual([Move.RIGHT, Move.LEFT, Move.UP, Move.UP, Move.UP])
    decode_and_evaluate(ind, (0, 0), (4, 0), open_grid)
    assert len(ind.path) == 6 and not ind.reached_goal
    assert ind.fitness == 0.0


def test_shorter_successful_paths_score_higher(open_grid):
    direct = Individual([Move.RIGHT] * 4 + [Move.UP])
    detour = Individual([Move.UP, Move.RIGHT, Move.RIGHT, Move.RIGHT, Move.RIGHT, Move.DOWN])
    for ind in (direct, detour):
        decode_and_evaluate(ind, (0, 0), (4, 0), open_grid)
    assert direct.reached_goal and detour.reached_goal
    assert direct.fitness > detour.fitness


def test_copy_is_independent():
    original = Individual([Move.UP, Move.DOWN], fitness=3.0, path=[(0, 0)], reached_goal=False)
    clone = original.copy()
    clone.genes[0] = Move.LEFT
    clone.path.append((1, 0))
    assert original.genes == [Move.UP, Move.DOWN]
    assert original.path == [(0, 0)]


def test_crossover_swaps_tails():
    rng = random.Random(1)
    a = Individual([Move.UP] * 8)
    b = Individual([Move.DOWN] * 8)
    c1, c2 = crossover(a, b, rng)
    cut = c1.genes.index(Move.DOWN)
    assert 1 <= cut < 8
    assert c1.genes == [Move.UP] * cut + [Move.DOWN] * (8 - cut)
    assert c2.genes == [Move.DOWN] * cut + [Move.UP] * (8 - cut)


def test_mutation_always_changes_gene_at_full_rate():
    cfg = GeneticConfig(mutation_rate=1.0)
    ind = Individual([Move.UP] * 10)
    mutate(ind, cfg, random.Random(0))
    assert all(g is not Move.UP for g in ind.genes)
    assert all(g in MOVES for g in ind.genes)


def test_mutation_respects_individual_rate():
    cfg = GeneticConfig(mutation_rate=1.0, individual_mutation_rate=0.0)
    ind = Individual([Move.UP] * 10)
    mutate(ind, cfg, random.Random(0))
    assert ind.genes == [Move.UP] * 10


def test_tournament_prefers_fitter():
    weak = Individual([Move.UP], fitness=1.0)
    strong = Individual([Move.UP], fitness=5.0)
    assert tournament_select([weak, strong], 64, random.Random(0)) is strong
    assert tournament_select([weak], 3, random.Random(0)) is weak


@pytest.mark.parametrize("kwargs", [
    {"population_size": 0},
    {"max_generations": 0},
    {"tournament_size": 0},
    {"elitism_count": 101},
    {"crossover_rate": 1.5},
    {"mutation_rate": -0.1},
    {"min_gene_length": 1},
    {"length_factor": 0},
])
def test_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        GeneticConfig(**kwargs)


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("GA_POPULATION", "40")
    monkeypatch.setenv("GA_MUTATION", "0.25")
    monkeypatch.setenv("GA_SEED", "11")
    cfg = GeneticConfig.from_env(max_generations=7)
    assert cfg.population_size == 40
    assert cfg.mutation_rate == 0.25
    assert cfg.seed == 11
    assert cfg.max_generations == 7
    assert cfg.crossover_rate == 0.8


def test_gene_length_has_a_floor():
    cfg = GeneticConfig()
    assert cfg.gene_length((0, 0), (1, 0)) == 5
    assert cfg.gene_length((0, 0), (10, 0)) == 18


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_converges_to_shortest_path_on_open_grid(open_grid, seed):
    cfg = GeneticConfig(seed=seed, max_generations=300)
    run = drain(genetic_search((0, 0), (4, 0), open_grid, config=cfg))
    r = run.result
    assert r.success
    assert r.path == tuple((x, 0) for x in range(5))
    assert r.nodes_explored == r.iterations * cfg.population_size


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_stops_early_once_path_matches_manhattan_distance(open_grid, seed):
    cfg = GeneticConfig(seed=seed, max_generations=300)
    run = drain(genetic_search((0, 0), (4, 0), open_grid, config=cfg))
    assert run.result.iterations < cfg.max_generations
    last_generation = run.steps[-2]
    assert not last_generation.done
    assert last_generation.iteration == run.result.iterations
    assert last_generation.reached_goal
    assert len(last_generation.path) - 1 == manhattan((0, 0), (4, 0))


def test_same_seed_same_steps():
    grid = GridMap.from_strings([
        "S...#...",
        "..#.#.#.",
        "..#...#G",
    ])
    cfg = GeneticConfig(population_size=30, max_generations=40, seed=42)
    first = drain(genetic_search(grid.start, grid.goal, grid, config=cfg))
    second = drain(genetic_search(grid.start, grid.goal, grid, config=cfg))
    assert first.steps == second.steps
    assert first.result == second.result


def test_explicit_rng_overrides_seed(open_grid):
    cfg = GeneticConfig(population_size=20, max_generations=10, seed=None)
    a = drain(genetic_search((0, 0), (4, 4), open_grid, config=cfg, rng=random.Random(5)))
    b = drain(genetic_search((0, 0), (4, 4), open_grid, config=cfg, rng=random.Random(5)))
    assert a.steps == b.steps


def test_one_step_per_generation(enclosed_grid):
    cfg = GeneticConfig(population_size=10, max_generations=12, seed=0)
    run = drain(genetic_search((0, 0), (4, 4), enclosed_grid, config=cfg))
    assert not run.result.success
    assert [s.iteration for s in run.steps] == list(range(1, 13))
    assert run.result.iterations == 12
    assert run.result.nodes_explored == 120
    for step in run.steps:
        assert step.fitness is not None
        assert step.current == step.path[-1]
        assert not set(step.neighbors) & set(step.path)


def test_successful_path_is_valid():
    grid = GridMap.from_strings([
        "S....",
        ".###.",
        "....G",
    ])
    cfg = GeneticConfig(seed=4, max_generations=300)
    run = drain(genetic_search(grid.start, grid.goal, grid, config=cfg))
    assert run.result.success
    final = run.steps[-1]
    assert final.done and final.reached_goal
    assert final.path == run.result.path
    assert is_valid_path(grid, run.result.path, grid.start, grid.goal)


def test_generation_step_info(open_grid):
    cfg = GeneticConfig(population_size=10, max_generations=3, seed=0)
    step = next(genetic_search((0, 0), (4, 4), open_grid, config=cfg))
    assert step.info().startswith("Genetic | Generation: 1 | Best Fitness: ")


def test_config_from_env_layers_defaults_under_env(monkeypatch):
    monkeypatch.delenv("GA_SEED", raising=False)
    assert GeneticConfig.from_env(defaults={"seed": 7}).seed == 7
    monkeypatch.setenv("GA_SEED", "3")
    assert GeneticConfig.from_env(defaults={"seed": 7}).seed == 3
    assert GeneticConfig.from_env(defaults={"seed": 7}, seed=9).seed == 9


def _ranked_population(size, length=6):
    rng = random.Random(8)
    return [Individual([rng.choice(MOVES) for _ in range(length)], fitness=float(size - i))
            for i in range(size)]


def test_next_generation_carries_elite_copies_first():
    cfg = GeneticConfig(population_size=10, elitism_count=2, mutation_rate=1.0)
    pop = _ranked_population(10)
    elite_genes = [list(ind.genes) for ind in pop[:2]]
    nxt = _next_generation(pop, cfg, random.Random(3))
    assert len(nxt) == 10
    for parent, child, genes in zip(pop[:2], nxt[:2], elite_genes):
        assert child is not parent
        assert child.genes == genes
        assert child.fitness == parent.fitness
        child.genes[0] = Move.LEFT if genes[0] is not Move.LEFT else Move.RIGHT
        assert parent.genes == genes


def test_next_generation_without_elitism_breeds_everyone():
    cfg = GeneticConfig(population_size=6, elitism_count=0, tournament_size=2)
    pop = _ranked_population(6)
    nxt = _next_generation(pop, cfg, random.Random(3))
    assert len(nxt) == 6
    assert all(child.fitness == 0.0 for child in nxt)


def test_best_ever_replaced_only_on_strict_improvement():
    first = Individual([Move.UP, Move.UP], fitness=2.0, path=[(0, 0), (0, 1)])
    kept = _keep_best(None, first)
    assert kept is not first and kept.genes == first.genes

    tie = Individual([Move.RIGHT, Move.RIGHT], fitness=2.0)
    assert _keep_best(kept, tie) is kept

    worse = Individual([Move.DOWN, Move.DOWN], fitness=1.0)
    assert _keep_best(kept, worse) is kept

    better = Individual([Move.RIGHT, Move.UP], fitness=2.5)
    replaced = _keep_best(kept, better)
    assert replaced is not better
    assert replaced.genes == [Move.RIGHT, Move.UP]
    better.genes[0] = Move.LEFT
    assert replaced.genes == [Move.RIGHT, Move.UP]
