"""Command line interface for the heat plate solver."""

import argparse

from .config import load_config
from .jacobi_solver import JacobiSolver


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="heatplate",
        description="Steady-state heat plate solver (parallel Jacobi relaxation)")
    parser.add_argument('--config', type=str, default=None, help='YAML run configuration file')
    parser.add_argument('--rows', type=int, default=None, help='Grid rows (default: 500)')
    parser.add_argument('--cols', type=int, default=None, help='Grid columns (default: 500)')
    parser.add_argument('--tolerance', type=float, default=None, help='Convergence tolerance (default: 1e-3)')
    parser.add_argument('--north', type=float, default=None, help='North edge temperature (default: 0)')
    parser.add_argument('--south', type=float, default=None, help='South edge temperature (default: 100)')
    parser.add_argument('--east', type=float, default=None, help='East edge temperature (default: 100)')
    parser.add_argument('--west', type=float, default=None, help='West edge temperature (default: 100)')
    parser.add_argument('--threads', type=int, default=None, help='Worker threads (default: all processors)')
    parser.add_argument('--max-iterations', type=int, default=None,
                        help='Stop after this many sweeps (default: no limit)')
    parser.add_argument('--quiet', action='store_true', help='Suppress progress output')
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)

    try:
        config = load_config(
            args.config,
            rows=args.rows,
            cols=args.cols,
            tolerance=args.tolerance,
            north=args.north,
            south=args.south,
            east=args.east,
            west=args.west,
            num_threads=args.threads,
            max_iterations=args.max_iterations,
            verbose=False if args.quiet else None,
        )
    except (OSError, ValueError) as e:
        parser.error(str(e))

    solver = JacobiSolver(config)
    solver.solve()
    return 0
