"""API routes for the Sudoku puzzle application."""

from __future__ import annotations

import logging
import os
import random
import time
from dataclasses import dataclass
from typing import TypeVar

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool

from ..models.schemas import (
    CellPosition,
    ConflictsRequest,
    ConflictsResponse,
    GenerateRequest,
    GenerateResponse,
    GridInfoResponse,
    HealthResponse,
    MoveRequest,
    MoveResponse,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import SearchBudgetExceeded, SudokuSolver, is_valid_grid
from ..solver.constraints import get_conflicts, position_key
from ..solver.game import GameBoard
from ..solver.generator import generate_sudoku
from ..solver.geometry import (
    EMPTY,
    SUPPORTED_SIZES,
    GridInfo,
    Position,
    copy_grid,
    get_grid_info,
)
from ..solver.labels import format_value, parse_value

router = APIRouter()
_SETTINGS: EngineSettings | None = None
_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        _LOGGER.warning("Invalid %s=%r, using default %r", name, raw, default)
        return default


@dataclass(frozen=True)
class EngineSettings:
    count_limit: int = 2
    count_max_size: int = 9
    solve_max_nodes: int = 200_000


def _get_settings() -> tuple[EngineSettings | None, str | None]:
    global _SETTINGS

    if _SETTINGS is not None:
        return _SETTINGS, None

    settings = EngineSettings(
        count_limit=_env("SUDOKU_COUNT_LIMIT", 2),
        count_max_size=_env("SUDOKU_COUNT_MAX_SIZE", 9),
        solve_max_nodes=_env("SUDOKU_SOLVE_MAX_NODES", 200_000),
    )

    if settings.count_limit < 2:
        return None, f"SUDOKU_COUNT_LIMIT must be >= 2, got {settings.count_limit}"
    if settings.solve_max_nodes < 1:
        return None, (
            f"SUDOKU_SOLVE_MAX_NODES must be >= 1, got {settings.solve_max_nodes}"
        )

    _SETTINGS = settings
    return _SETTINGS, None


def _shape_matches(grid: list[list[int]], info: GridInfo) -> bool:
    return len(grid) == info.rows and all(len(row) == info.cols for row in grid)


def _require_shape(grid: list[list[int]], info: GridInfo, name: str = "grid") -> None:
    if not _shape_matches(grid, info):
        raise HTTPException(
            status_code=400,
            detail=f"{name} must be {info.rows}x{info.cols}",
        )
    for row in grid:
        for cell in row:
            if cell < EMPTY or cell > info.max_val:
                raise HTTPException(
                    status_code=400,
                    detail=f"{name} values must be between 0 and {info.max_val}",
                )


def _positions(conflicts: set[Position]) -> list[CellPosition]:
    return [CellPosition(row=r, col=c) for r, c in sorted(conflicts)]


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    settings, _ = _get_settings()

    return HealthResponse(
        status="healthy",
        engine_ready=settings is not None,
        supported_sizes=list(SUPPORTED_SIZES),
    )


@router.get(
    "/api/v1/sudoku/sizes/{size}", response_model=GridInfoResponse, tags=["Sudoku"]
)
async def grid_info(size: int):
    """Describe the geometry of a supported grid size."""
    try:
        info = get_grid_info(size)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return GridInfoResponse(
        size=info.size,
        rows=info.rows,
        cols=info.cols,
        sub_rows=info.sub_rows,
        sub_cols=info.sub_cols,
        max_val=info.max_val,
        labels=[format_value(v, size) for v in range(1, info.max_val + 1)],
    )


@router.post(
    "/api/v1/sudoku:generate", response_model=GenerateResponse, tags=["Sudoku"]
)
async def generate_puzzle(request: GenerateRequest):
    """
    Generate a new puzzle.

    Generation runs in the threadpool; 6x6 and 9x9 puzzles are verified to
    have a unique solution, 16x16 puzzles are not.
    """
    rng = random.Random(request.seed) if request.seed is not None else None
    start = time.perf_counter()
    try:
        result = await run_in_threadpool(
            generate_sudoku, request.size, request.difficulty, rng
        )
    except Exception as e:
        _LOGGER.exception("Puzzle generation failed")
        raise HTTPException(status_code=500, detail=str(e))

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    _LOGGER.info(
        "Generated %dx%d %s puzzle with %d clues in %.1f ms",
        request.size,
        request.size,
        request.difficulty,
        result.clues,
        elapsed_ms,
    )

    return GenerateResponse(
        size=result.size,
        difficulty=result.difficulty,
        puzzle=result.puzzle_grid(),
        solution=result.solution_grid(),
        clues=result.clues,
        unique_verified=result.unique_verified,
        elapsed_ms=elapsed_ms,
    )


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
async def solve_sudoku(request: SolveRequest):
    """
    Solve a puzzle from a JSON grid.

    Expected JSON format:
    {
        "size": 9,
        "grid": [[row1], [row2], ...]
    }
    Where each row is a list of `size` integers (0 for empty).
    """
    grid = request.grid
    info = get_grid_info(request.size)

    # Validate grid format
    if not is_valid_grid(grid, info):
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    settings, error = _get_settings()
    if settings is None:
        raise HTTPException(status_code=500, detail=error)

    solver = SudokuSolver(info, max_nodes=settings.solve_max_nodes)
    dead_cell = solver.find_dead_cell(grid)
    if dead_cell is not None:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message=f"Puzzle has no solution (no candidate for cell "
            f"{position_key(*dead_cell)})",
        )

    try:
        solved = copy_grid(grid)
        if not await run_in_threadpool(solver.solve, solved):
            return SolveResponse(
                success=False,
                original=grid,
                solved=None,
                message="Puzzle has no solution",
            )

        unique = None
        if request.size <= settings.count_max_size:
            try:
                count = await run_in_threadpool(
                    solver.count_solutions, grid, settings.count_limit
                )
                unique = count == 1
            except SearchBudgetExceeded:
                _LOGGER.info("Uniqueness check skipped: search budget exceeded")

    except SearchBudgetExceeded:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Puzzle search budget exceeded",
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    message = "Puzzle solved successfully"
    if unique is False:
        message = "Puzzle solved (puzzle has multiple solutions)"

    return SolveResponse(
        success=True,
        original=grid,
        solved=solved,
        unique=unique,
        message=message,
    )


@router.post(
    "/api/v1/sudoku:conflicts", response_model=ConflictsResponse, tags=["Sudoku"]
)
async def find_conflicts(request: ConflictsRequest):
    """List cells that share a value with another cell in their unit."""
    info = get_grid_info(request.size)
    _require_shape(request.grid, info)

    conflicts = get_conflicts(request.grid, info)
    return ConflictsResponse(
        conflicts=_positions(conflicts),
        keys=[position_key(r, c) for r, c in sorted(conflicts)],
    )


@router.post("/api/v1/sudoku:move", response_model=MoveResponse, tags=["Sudoku"])
async def make_move(request: MoveRequest):
    """
    Apply a user entry to a puzzle in progress.

    The entry is either a value or a key press decoded with the grid's
    labels; keys that do not apply to the grid size are ignored. Clue cells
    cannot be changed and no entry is accepted once the grid matches the
    solution.
    """
    info = get_grid_info(request.size)
    _require_shape(request.puzzle, info, "puzzle")
    _require_shape(request.grid, info, "grid")
    _require_shape(request.solution, info, "solution")

    board = GameBoard(request.puzzle, request.grid, request.solution, info)
    for r in range(info.rows):
        for c in range(info.cols):
            if board.is_given(r, c) and request.grid[r][c] != request.puzzle[r][c]:
                raise HTTPException(
                    status_code=400,
                    detail=f"grid changes clue cell {position_key(r, c)}",
                )

    value = request.value
    if request.key is not None:
        value = parse_value(request.key, request.size)

    accepted = value is not None and board.enter(request.row, request.col, value)
    return MoveResponse(
        accepted=accepted,
        grid=board.grid,
        conflicts=_positions(board.conflicts()),
        complete=board.is_complete(),
        won=board.is_won(),
    )
