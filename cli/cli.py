#!/usr/bin/env python3
"""Command-line interface for solving graph-coloring problem files."""

import argparse
import sys
import traceback
from pathlib import Path
import logging

# Ensure project root is on the import path when executing from the CLI folder
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from coloring.parser import load_problem
from coloring.problem import InvalidProblem
from coloring.reporter import format_result
from coloring.runner import run_solver
from coloring.solvers import SearchCancelled
from flags import Flags, FlagRegistry
from version import __version_display__


def _solver_help() -> str:
    solver = FlagRegistry.SOLVER
    options = ", ".join(
        f"{value} = {solver.get_option_display_name(value)}" for value in solver.option_dict)
    return f"{solver.help_text} Options: {options}."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Color a constraint graph with k colors, or report failure.")
    parser.add_argument(
        "problem_file",
        help="Path to the problem file (colors=K line plus one 'u,v' edge per line).")
    parser.add_argument(
        FlagRegistry.SOLVER.cli_option,
        choices=list(FlagRegistry.SOLVER.option_dict),
        default=FlagRegistry.SOLVER.get_default(),
        help=_solver_help())
    parser.add_argument(
        FlagRegistry.TIME_LIMIT_SECONDS.cli_option,
        type=int,
        default=FlagRegistry.TIME_LIMIT_SECONDS.get_default(),
        help=FlagRegistry.TIME_LIMIT_SECONDS.help_text)
    parser.add_argument(
        FlagRegistry.LOG_SEARCH.cli_option,
        action="store_true",
        help=FlagRegistry.LOG_SEARCH.help_text)
    parser.add_argument(
        "--no-validate",
        dest="validate_solution",
        action="store_false",
        help="Skip the final check of the returned coloring.")
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version_display__}")
    parser.add_argument( '-log',
        '--loglevel',
        default='warning',
        help='Provide logging level. Example --loglevel debug, default=warning' )

    return parser


def build_flags(args: argparse.Namespace) -> Flags:
    flags = Flags()
    flags.from_dict({
        'solver': args.solver,
        'time_limit_seconds': args.time_limit_seconds,
        'log_search': args.log_search,
        'validate_solution': args.validate_solution,
    }, strict=True)
    return flags


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        logging.basicConfig(level=args.loglevel.upper())

        flags = build_flags(args)
        problem = load_problem(Path(args.problem_file))
    except (InvalidProblem, FileNotFoundError, KeyError, TypeError, ValueError) as exc:
        parser.error(str(exc))

    try:
        result = run_solver(problem, flags)
    except SearchCancelled as exc:
        print(f"Search stopped: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        traceback.print_exc()
        return 1
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
