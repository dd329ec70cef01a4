"""Configuration dataclasses and result containers for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass

from hexlife.config.constants import (
    DEFAULT_GENERATIONS,
    DEFAULT_POPULATION,
    DEFAULT_RESOLUTION,
    HALT_WINDOW,
    WARMUP_TICKS,
)

__all__ = [
    "RunConfig",
    "RunResult",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunResult:
    """Top-level result for one simulated universe."""

    run_id: str
    generations_run: int
    final_population: int
    terminated_at: int | None
    termination_reason: str | None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Runtime knobs for one seeded simulation run."""

    population: int = DEFAULT_POPULATION
    resolution: int = DEFAULT_RESOLUTION
    generations: int = DEFAULT_GENERATIONS
    seed: int = 0
    warmup_ticks: int = WARMUP_TICKS
    halt_window: int = HALT_WINDOW
    stop_on_extinction: bool = True
    write_frames: bool = True

    def __post_init__(self) -> None:
        if self.population < 0:
            raise ValueError("population must be >= 0")
        if self.generations < 1:
            raise ValueError("generations must be >= 1")
        if self.warmup_ticks < 0:
            raise ValueError("warmup_ticks must be >= 0")
        if self.halt_window < 1:
            raise ValueError("halt_window must be >= 1")

    def run_id(self) -> str:
        """Build a reproducible run ID stable across runs for identical settings."""
        return f"r{self.resolution}_n{self.population}_s{self.seed}"
