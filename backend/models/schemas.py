"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

SizeField = Literal[6, 9, 16]
DifficultyField = Literal["easy", "medium", "hard"]

_EXAMPLE_6X6 = [
    [1, 0, 0, 0, 5, 0],
    [0, 5, 0, 1, 0, 3],
    [2, 0, 0, 0, 0, 6],
    [0, 0, 5, 0, 3, 0],
    [0, 0, 0, 6, 0, 0],
    [0, 6, 0, 0, 0, 5],
]


class CellPosition(BaseModel):
    """A cell position."""

    row: int = Field(ge=0, description="Row index")
    col: int = Field(ge=0, description="Column index")


class GridInfoResponse(BaseModel):
    """Geometry of a supported grid size."""

    size: int = Field(description="Edge length of the grid")
    rows: int = Field(description="Number of rows")
    cols: int = Field(description="Number of columns")
    sub_rows: int = Field(description="Rows per sub-block")
    sub_cols: int = Field(description="Columns per sub-block")
    max_val: int = Field(description="Largest cell value")
    labels: list[str] = Field(description="Display label for each value 1..max_val")


class GridRequest(BaseModel):
    """A grid of a given size (0 for empty cells)."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"size": 6, "grid": _EXAMPLE_6X6}}
    )

    size: SizeField = Field(description="Grid size (6, 9 or 16)")
    grid: list[list[int]] = Field(description="size x size grid (0 for empty cells)")


class SolveRequest(GridRequest):
    """Request to solve a grid."""


class SolveResponse(BaseModel):
    """Response from solving a grid."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    unique: bool | None = Field(
        default=None,
        description="Whether the solution is unique (None when not checked)",
    )
    message: str = Field(description="Status message")


class GenerateRequest(BaseModel):
    """Request to generate a new puzzle."""

    size: SizeField = Field(default=9, description="Grid size (6, 9 or 16)")
    difficulty: DifficultyField = Field(default="easy", description="Difficulty")
    seed: int | None = Field(
        default=None, description="Optional seed for a reproducible puzzle"
    )


class GenerateResponse(BaseModel):
    """A generated puzzle and its solution."""

    size: int = Field(description="Grid size")
    difficulty: str = Field(description="Difficulty")
    puzzle: list[list[int]] = Field(description="Puzzle grid (0 for empty cells)")
    solution: list[list[int]] = Field(description="Solved grid")
    clues: int = Field(description="Number of pre-filled cells")
    unique_verified: bool = Field(
        description="Whether uniqueness was checked during generation"
    )
    elapsed_ms: float = Field(description="Generation time in milliseconds")


class ConflictsRequest(GridRequest):
    """Request to compute conflicting cells."""


class ConflictsResponse(BaseModel):
    """Cells that violate a row, column or sub-block constraint."""

    conflicts: list[CellPosition] = Field(description="Conflicting cells")
    keys: list[str] = Field(description="Conflicting cells as 'row-col' keys")


class MoveRequest(BaseModel):
    """A user entry on a puzzle in progress."""

    size: SizeField = Field(description="Grid size (6, 9 or 16)")
    puzzle: list[list[int]] = Field(description="Original puzzle with clues")
    grid: list[list[int]] = Field(description="Current grid including user entries")
    solution: list[list[int]] = Field(description="Solution grid")
    row: int = Field(ge=0, description="Row index")
    col: int = Field(ge=0, description="Column index")
    value: int | None = Field(
        default=None, ge=0, description="Value to enter (0 clears the cell)"
    )
    key: str | None = Field(
        default=None,
        description="Key pressed instead of a value (1-9, A-G, Backspace, Delete)",
    )

    @model_validator(mode="after")
    def _value_or_key(self) -> "MoveRequest":
        if (self.value is None) == (self.key is None):
            raise ValueError("exactly one of value or key is required")
        return self


class MoveResponse(BaseModel):
    """Board state after a user entry."""

    accepted: bool = Field(description="Whether the entry was applied")
    grid: list[list[int]] = Field(description="Grid after the entry")
    conflicts: list[CellPosition] = Field(description="Conflicting cells")
    complete: bool = Field(description="Whether every cell is filled")
    won: bool = Field(description="Whether the grid matches the solution")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    engine_ready: bool = Field(description="Whether engine settings are valid")
    supported_sizes: list[int] = Field(description="Supported grid sizes")
