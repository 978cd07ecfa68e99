#!/bin/python
"""
Unified entry point for running the Firefly Algorithm over the benchmark suite.

Every selected problem is minimized in turn and its minimum is printed
together with the time the run took.
"""
import argparse
import logging
import sys
import time

from algorithms.FA import FireflyOptions, optimize
from algorithms.FA.rng import normalize_seed
from problems.registry import get_problem_definition, list_problem_definitions
from SwarmCore.errors import ConfigurationError
from SwarmCore.utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser():
    defaults = FireflyOptions()
    parser = argparse.ArgumentParser(
        description="Run the Firefly Algorithm on the benchmark problem suite."
    )

    parser.add_argument(
        "--problems",
        "-p",
        nargs="+",
        default=None,
        help="Names of the problems to run (default: all registered problems)"
    )
    parser.add_argument(
        "--dimension",
        "-d",
        type=int,
        default=10,
        help="Input dimensionality of every problem (default: 10)"
    )

    # Firefly options
    parser.add_argument("--swarm-size", type=int, default=defaults.swarm_size)
    parser.add_argument("--maximum-iterations", type=int, default=defaults.maximum_iterations)
    parser.add_argument("--stuck-run-iterations", type=int, default=defaults.stuck_run_iterations_count)
    parser.add_argument("--attractiveness", type=float, default=defaults.attractiveness_coefficient)
    parser.add_argument("--light-absorption", type=float, default=defaults.light_absorption_coefficient)
    parser.add_argument("--jitter", type=float, default=defaults.movement_jitter_coefficient)
    parser.add_argument(
        "--in-bounds-seed",
        type=normalize_seed,
        default=defaults.in_bounds_random_generator_seed,
        help="32 hex characters seeding the initial positions"
    )
    parser.add_argument(
        "--zero-to-one-seed",
        type=normalize_seed,
        default=defaults.zero_to_one_random_generator_seed,
        help="32 hex characters seeding the per-firefly movement jitter"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=defaults.workers,
        help="Threads used to move fireflies; results do not depend on it (default: 1)"
    )

    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-dir", default=None, help="Also write logs to this directory")
    return parser


def options_from_args(args):
    return FireflyOptions(
        swarm_size=args.swarm_size,
        in_bounds_random_generator_seed=args.in_bounds_seed,
        zero_to_one_random_generator_seed=args.zero_to_one_seed,
        maximum_iterations=args.maximum_iterations,
        stuck_run_iterations_count=args.stuck_run_iterations,
        attractiveness_coefficient=args.attractiveness,
        light_absorption_coefficient=args.light_absorption,
        movement_jitter_coefficient=args.jitter,
        workers=args.workers,
    )


def run_suite(problem_names, dimension, options):
    """Runs FA on every named problem and prints one line per problem."""
    start_time = time.perf_counter()
    results = {}

    for index, name in enumerate(problem_names, start=1):
        problem = get_problem_definition(name).instantiate(dimension=dimension)
        problem_start_time = time.perf_counter()

        minimum = optimize(problem, options)
        results[name] = minimum

        problem_delta_time = time.perf_counter() - problem_start_time
        padding = " " * max(0, 32 - len(name))
        print(
            f"[{index:02}/{len(problem_names):02}|{name}] {padding}Minimum: {minimum.value:.6f}"
            f"    ({problem_delta_time:.4f} seconds)"
        )

    delta_time = time.perf_counter() - start_time
    print(f"-- Finished in {delta_time:.4f} seconds --")
    return results


def main(argv=None):
    """Parse command line arguments and run the selected problems."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_dir=args.log_dir)
    except ValueError as exc:
        parser.error(str(exc))

    if args.dimension < 1:
        parser.error(f"--dimension must be at least 1, got {args.dimension}")

    available = list(list_problem_definitions())
    problem_names = args.problems or available
    unknown = [name for name in problem_names if name not in available]
    if unknown:
        parser.error(f"unknown problem(s): {', '.join(unknown)} (available: {', '.join(available)})")

    try:
        options = options_from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))
    logger.info(f"Running {len(problem_names)} problems with options: {options}")

    run_suite(problem_names, args.dimension, options)
    return 0


if __name__ == "__main__":
    sys.exit(main())
