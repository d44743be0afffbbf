#!/usr/bin/env python3
"""
Timing harness for the partition sorter.

Each scenario builds a fresh input per run, times only the sort call and
checks the output is ascending before it counts the run.
"""

import argparse
import logging
import sys
import time
from typing import NamedTuple

import numpy as np

from pivotsort import settings
from pivotsort.errors import BenchmarkError, PivotSortError
from pivotsort.sorter import sort_copy, sort_in_place

logger = logging.getLogger(__name__)

SCENARIOS = ("random", "ascending", "descending")


class TrialResult(NamedTuple):
    scenario: str
    elements: int
    runs: int
    mean: float
    best: float
    worst: float


def make_input(scenario: str, elements: int, rng: np.random.Generator) -> list:
    if scenario == "random":
        return rng.integers(0, elements, size=elements).tolist()
    if scenario == "ascending":
        return list(range(elements))
    if scenario == "descending":
        return list(range(elements - 1, -1, -1))
    raise ValueError(f"Unknown scenario: {scenario}")


def _check_sorted(data, scenario):
    for idx in range(len(data) - 1):
        if data[idx] > data[idx + 1]:
            raise BenchmarkError(
                f"{scenario}: element {idx} ({data[idx]!r}) > element {idx + 1} ({data[idx + 1]!r})"
            )


def time_trials(scenario, elements, runs, sorter=sort_in_place, seed=None) -> TrialResult:
    """Time `runs` sorts of `elements` items. `sorter` is sort_in_place or sort_copy."""
    if elements < 0 or runs < 0:
        raise ValueError(f"elements and runs must be non-negative, got {elements} and {runs}")
    rng = np.random.default_rng(seed)
    durations = np.empty(runs, dtype=np.float64)

    for run in range(runs):
        data = make_input(scenario, elements, rng)
        before = time.perf_counter()
        result = sorter(data)
        durations[run] = time.perf_counter() - before
        _check_sorted(data if result is None else result, scenario)

    res = TrialResult(
        scenario, elements, runs,
        float(durations.mean()) if runs else 0.0,
        float(durations.min()) if runs else 0.0,
        float(durations.max()) if runs else 0.0,
    )
    logger.debug("%s: %d x %d elements, mean %.6fs", scenario, runs, elements, res.mean)
    return res


def _ms(secs):
    return f"{secs * 1000:.3f} ms"


def format_table(results) -> str:
    lines = [
        "┌────────────┬──────────┬───────┬──────────────┬──────────────┬──────────────┐",
        "│ Scenario   │ Elements │  Runs │ Mean         │ Best         │ Worst        │",
        "├────────────┼──────────┼───────┼──────────────┼──────────────┼──────────────┤",
    ]
    for r in results:
        lines.append(
            f"│ {r.scenario:10} │ {r.elements:8} │ {r.runs:5} │ {_ms(r.mean):12} │ {_ms(r.best):12} │ {_ms(r.worst):12} │"
        )
    lines.append("└────────────┴──────────┴───────┴──────────────┴──────────────┴──────────────┘")
    return "\n".join(lines)


def _count(text):
    val = int(text)
    if val < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {val}")
    return val


def build_parser():
    p = argparse.ArgumentParser(
        prog="pivotsort-bench",
        description="Average wall-clock time of the median-of-three partition sort.",
    )
    p.add_argument("--elements", type=_count, help="elements per input")
    p.add_argument("--runs", type=_count, help="repetitions per scenario")
    p.add_argument("--seed", type=_count, help="seed for random inputs")
    p.add_argument("--scenario", action="append", choices=SCENARIOS,
                   help="scenario to run (repeatable, default: all)")
    p.add_argument("--copy", action="store_true", help="benchmark sort_copy instead of sort_in_place")
    p.add_argument("--settings", help="settings JSON file")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = settings.load_settings(args.settings)
        elements = args.elements if args.elements is not None else cfg["bench_elements"]
        runs = args.runs if args.runs is not None else cfg["bench_runs"]
        seed = args.seed if args.seed is not None else cfg["bench_seed"]
        sorter = sort_copy if args.copy else sort_in_place

        results = [
            time_trials(name, elements, runs, sorter, seed)
            for name in (args.scenario or SCENARIOS)
        ]
    except PivotSortError as e:
        logger.error("%s", e)
        return 1

    print(format_table(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
