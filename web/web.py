"""Web entry point: a small HTTP API around the coloring solvers."""
import logging as log
import os
import sys
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

# Add parent directory to path to import the solver packages
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from coloring.problem import MAX_COLORS, ColoringProblem, InvalidProblem
from coloring.reporter import format_result
from coloring.runner import run_solver
from coloring.solvers import SearchCancelled
from flags import Flags
from version import __version__


class SolveRequest(BaseModel):
    colors: int = Field(ge=0, le=MAX_COLORS)
    edges: List[List[int]] = Field(default_factory=list)
    variables: List[int] = Field(default_factory=list)
    flags: Dict[str, Any] = Field(default_factory=dict)


class SolveResponse(BaseModel):
    status: str
    solution: Optional[Dict[int, int]] = None
    report: str
    stats: Dict[str, Any] = Field(default_factory=dict)


app = FastAPI(title="Graph Coloring Solver", version=__version__)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest):
    """Solve one problem.

    Malformed problems and bad flag values are rejected with 422. A search
    that runs out of time returns 408.
    """
    try:
        flags = Flags()
        flags.from_dict(request.flags, strict=True)
        problem = ColoringProblem.create(
            num_colors=request.colors,
            edges=request.edges,
            variables=request.variables,
        )
    except (InvalidProblem, KeyError, TypeError, ValueError) as exc:
        raise HTTPException(status_code=422, detail=str(exc))

    try:
        result = run_solver(problem, flags)
    except SearchCancelled as exc:
        raise HTTPException(status_code=408, detail=str(exc))

    return SolveResponse(
        status=str(result.status),
        solution=result.assignment,
        report=format_result(result),
        stats=result.stats,
    )


if __name__ == "__main__":
    # Configure logging
    log.basicConfig(
        level=log.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Run the app
    import uvicorn
    port = int(os.environ.get("PORT", 8080))
    uvicorn.run(app, host="0.0.0.0", port=port)
