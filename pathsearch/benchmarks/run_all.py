# pathsearch/benchmarks/run_all.py
# Run every engine on one problem and record cost, expansions, time and peak memory.
#   python -m pathsearch.benchmarks.run_all --problem puzzle --moves 40
from __future__ import annotations

import argparse
import json
import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..algorithms.astar import astar
from ..algorithms.bfs import bfs
from ..algorithms.dijkstra import dijkstra
from ..algorithms.ida_star import idastar
from ..core.metrics import CountingSuccessors, MeasuredRun, SearchResult
from ..core.problem import Problem, heuristic_of, unit_successors, weighted_successors
from ..core.utils import path_cost
from ..problems.grid import make_grid_problem
from ..problems.romania import romania_problem
from ..problems.sliding_puzzle import SlidingPuzzle, SlidingPuzzleProblem

logger = logging.getLogger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
SEED          = int(os.getenv("PATHSEARCH_SEED", "7"))           # puzzle scramble seed
PUZZLE_SIDE   = int(os.getenv("PATHSEARCH_PUZZLE_SIDE", "3"))    # 3 -> 8-puzzle
PUZZLE_MOVES  = int(os.getenv("PATHSEARCH_PUZZLE_MOVES", "30"))  # random-walk length
LOG_LEVEL     = os.getenv("PATHSEARCH_LOG_LEVEL", "WARNING")

DEFAULT_OUT = Path(__file__).with_name("results.json")


@dataclass
class BenchmarkConfig:
    problem: str = "puzzle"            # puzzle | romania | grid
    seed: int = SEED
    puzzle_side: int = PUZZLE_SIDE
    puzzle_moves: int = PUZZLE_MOVES
    algos: Sequence[str] = ("BFS", "Dijkstra", "A*", "IDA*")
    out: Optional[Path] = DEFAULT_OUT


# ---- Runners ----------------------------------------------------------------
# Each runner gets the problem and a `wrap` hook that installs an expansion
# counter around whatever successor function it hands to the engine.

def _run_bfs(problem: Problem, wrap):
    path = bfs([problem.initial_state()], wrap(unit_successors(problem)), problem.is_goal)
    if path is None:
        return None
    return path, path_cost(path, weighted_successors(problem))

def _run_dijkstra(problem: Problem, wrap):
    return dijkstra([problem.initial_state()], wrap(weighted_successors(problem)), problem.is_goal)

def _run_astar(problem: Problem, wrap):
    return astar(problem.initial_state(), wrap(weighted_successors(problem)),
                 heuristic_of(problem), problem.is_goal)

def _run_idastar(problem: Problem, wrap):
    return idastar(problem.initial_state(), wrap(weighted_successors(problem)),
                   heuristic_of(problem), problem.is_goal)

RUNNERS: Dict[str, Callable] = {
    "BFS": _run_bfs,
    "Dijkstra": _run_dijkstra,
    "A*": _run_astar,
    "IDA*": _run_idastar,
}


def load_problem(cfg: BenchmarkConfig) -> Problem:
    if cfg.problem == "puzzle":
        rng = np.random.default_rng(cfg.seed)
        board = SlidingPuzzle.scrambled(cfg.puzzle_side, cfg.puzzle_moves, rng)
        return SlidingPuzzleProblem(board)
    if cfg.problem == "romania":
        return romania_problem()
    if cfg.problem == "grid":
        return make_grid_problem()
    raise ValueError(f"unknown problem {cfg.problem!r} (expected puzzle, romania or grid)")


def run_one(name: str, problem: Problem) -> SearchResult:
    runner = RUNNERS[name]
    counters: List[CountingSuccessors] = []

    def wrap(successors):
        counter = CountingSuccessors(successors)
        counters.append(counter)
        return counter

    try:
        with MeasuredRun() as meter:
            found = runner(problem, wrap)
    except Exception as e:
        logger.exception("%s failed", name)
        return SearchResult(name, False, 0, None, sum(c.calls for c in counters), 0.0, 0, error=repr(e))

    expanded = sum(c.calls for c in counters)
    if found is None:
        return SearchResult(name, False, 0, None, expanded, meter.elapsed, meter.peak_kb)
    path, cost = found
    return SearchResult(name, True, len(path) - 1, cost, expanded, meter.elapsed, meter.peak_kb)


def run(cfg: BenchmarkConfig) -> List[SearchResult]:
    unknown = [a for a in cfg.algos if a not in RUNNERS]
    if unknown:
        raise ValueError(f"unknown algorithm(s) {unknown}; choose from {sorted(RUNNERS)}")
    problem = load_problem(cfg)
    results = []
    for name in cfg.algos:
        print(f"→ Running {name} ...")
        r = run_one(name, problem)
        if r.error:
            print(f"  {name}: ERROR {r.error}")
        else:
            print(
                f"  {name}: "
                f"{'OK' if r.success else 'FAIL'} "
                f"cost={r.cost} "
                f"expanded={r.nodes_expanded}, "
                f"time={r.time_s:.4f}s"
            )
        results.append(r)
    return results


def _parse_args(argv=None) -> BenchmarkConfig:
    ap = argparse.ArgumentParser(description="Compare the search engines on one problem.")
    ap.add_argument("--problem", choices=("puzzle", "romania", "grid"), default="puzzle")
    ap.add_argument("--seed", type=int, default=SEED)
    ap.add_argument("--side", type=int, default=PUZZLE_SIDE, help="sliding puzzle side")
    ap.add_argument("--moves", type=int, default=PUZZLE_MOVES, help="scramble length")
    ap.add_argument("--algos", nargs="+", default=list(RUNNERS), choices=list(RUNNERS))
    ap.add_argument("--out", type=Path, default=DEFAULT_OUT, help="results JSON path")
    args = ap.parse_args(argv)
    return BenchmarkConfig(problem=args.problem, seed=args.seed, puzzle_side=args.side,
                           puzzle_moves=args.moves, algos=tuple(args.algos), out=args.out)


def main(argv=None) -> List[SearchResult]:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING))
    cfg = _parse_args(argv)
    results = run(cfg)

    out = {"problem": cfg.problem, "results": [r.as_row() for r in results], "ts": time.time()}
    print(json.dumps(out, indent=2))
    if cfg.out is not None:
        cfg.out.write_text(json.dumps(out, indent=2))
    return results

if __name__ == "__main__":
    main()
