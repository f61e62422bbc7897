"""Tests for the command-line interface."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.cli import build_parser, main


@pytest.fixture
def write_problem(tmp_path):
    def _write(text):
        path = tmp_path / "problem.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


def test_prints_solution(write_problem, capsys):
    exit_code = main([write_problem("colors=3\n1,2\n2,3\n1,3\n")])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "SOLUTION: {1: 1, 2: 2, 3: 3}"


def test_prints_failure(write_problem, capsys):
    exit_code = main([write_problem("colors=2\n1,2\n2,3\n1,3\n")])

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == "failure"


def test_cp_sat_solver_option(write_problem, capsys):
    exit_code = main([write_problem("colors=2\n1,2\n"), "--solver", "cp_sat"])

    assert exit_code == 0
    assert capsys.readouterr().out.startswith("SOLUTION: {")


def test_self_loop_is_a_usage_error(write_problem, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([write_problem("colors=2\n3,3\n")])

    assert excinfo.value.code == 2
    assert "self-loop" in capsys.readouterr().err


def test_missing_file_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.txt")])

    assert excinfo.value.code == 2


def test_out_of_range_time_limit_is_a_usage_error(write_problem):
    with pytest.raises(SystemExit):
        main([write_problem("colors=2\n1,2\n"), "--time-limit-seconds", "-5"])


def test_parser_defaults():
    args = build_parser().parse_args(["problem.txt"])

    assert args.solver == "mac_backtracking"
    assert args.time_limit_seconds == 0
    assert args.log_search is False
    assert args.validate_solution is True
    assert args.loglevel == "warning"


def test_solver_help_lists_option_display_names(monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    help_text = build_parser().format_help()

    assert "mac_backtracking = MAC Backtracking" in help_text
    assert "cp_sat = OR-Tools CP-SAT" in help_text


def test_oversized_color_count_is_a_usage_error(write_problem, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([write_problem("colors=3000000\n1,2\n")])

    assert excinfo.value.code == 2
    assert "exceeds the maximum" in capsys.readouterr().err


def test_solver_failure_is_not_a_usage_error(write_problem, monkeypatch, capsys):
    import cli.cli as cli_module

    def broken(problem, flags):
        raise ValueError("Color 4 is not in the domain of variable 1")

    monkeypatch.setattr(cli_module, "run_solver", broken)
    exit_code = main([write_problem("colors=2\n1,2\n")])

    assert exit_code == 1
    err = capsys.readouterr().err
    assert "Error: Color 4 is not in the domain" in err
    assert "usage:" not in err
