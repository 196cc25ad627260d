"""Main FastAPI application for the Sudoku puzzle engine."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import _get_settings, router


@asynccontextmanager
async def _app_lifespan(_: FastAPI):
    """Eagerly validate engine settings so misconfiguration fails at startup."""
    settings, error = _get_settings()
    if settings is None:
        raise RuntimeError(f"Invalid engine configuration at startup: {error}")
    yield


app = FastAPI(
    title="Sudoku Puzzle API",
    description="API for generating, checking and solving 6x6, 9x9 and 16x16 Sudoku",
    version="1.0.0",
    lifespan=_app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sudoku Puzzle API", "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.main:app", host="0.0.0.0", port=8000, reload=True)
