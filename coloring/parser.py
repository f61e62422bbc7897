"""Reader for the plain-text problem file format.

Format, one directive per line:

    # comment
    colors=3
    1,2
    2,3

- Blank lines and lines starting with '#' are skipped.
- `colors=K` declares the color count; a later declaration replaces an
  earlier one.
- Any line containing a comma declares an edge between its first two fields.
  Further fields are ignored.
- All other lines are ignored.
"""

from pathlib import Path
import re
from typing import List, Optional, Union
import logging as log

from .problem import ColoringProblem, Edge, InvalidProblem

COLORS_DIRECTIVE = re.compile(r"^colors\s*=\s*(.*)$")


def _parse_int(text: str, line_number: int, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise InvalidProblem(
            f"Line {line_number}: {what} must be an integer, got '{text.strip()}'"
        ) from None


def parse_problem_text(text: str) -> ColoringProblem:
    """Parse the contents of a problem file.

    Args:
        text: Full file contents

    Returns:
        The validated ColoringProblem

    Raises:
        InvalidProblem: On a self-loop, a bad integer, or a missing color count
    """
    num_colors: Optional[int] = None
    edges: List[Edge] = []

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        match = COLORS_DIRECTIVE.match(line)
        if match:
            num_colors = _parse_int(match.group(1), line_number, "Color count")
            if num_colors < 0:
                raise InvalidProblem(
                    f"Line {line_number}: color count cannot be negative, got {num_colors}"
                )
            continue

        if "," not in line:
            log.debug(f"Line {line_number}: ignoring '{line}'")
            continue

        fields = line.split(",")
        u = _parse_int(fields[0], line_number, "Edge endpoint")
        v = _parse_int(fields[1], line_number, "Edge endpoint")
        if u == v:
            raise InvalidProblem(f"Line {line_number}: self-loop on variable {u}")
        edges.append((u, v))

    if num_colors is None:
        raise InvalidProblem("Missing 'colors=' declaration")

    problem = ColoringProblem.create(num_colors=num_colors, edges=edges)
    log.info(
        f"Parsed problem: {len(problem.variables)} variables, "
        f"{len(problem.edges)} edges, {problem.num_colors} colors"
    )
    return problem


def load_problem(path: Union[str, Path]) -> ColoringProblem:
    """Read and parse a problem file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidProblem: If the contents are malformed
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Problem file not found: {path}") from exc
    return parse_problem_text(text)


def format_problem_text(problem: ColoringProblem) -> str:
    """Write a problem back out in the file format.

    Isolated variables cannot be expressed in the format and are dropped.
    """
    lines: List[str] = [f"colors={problem.num_colors}"]
    lines.extend(f"{u},{v}" for u, v in problem.edges)
    return "\n".join(lines) + "\n"

