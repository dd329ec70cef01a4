"""Termination detectors for long-running simulations."""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum


class TerminationReason(str, Enum):
    """Termination reason labels persisted in run metadata."""

    EXTINCTION = "extinction"
    HALT = "halt"


class HaltDetector:
    """Detect N consecutive unchanged live sets."""

    def __init__(self, window: int) -> None:
        if window < 1:
            raise ValueError("window must be >= 1")
        self.window = window
        self._last_live: frozenset[Hashable] | None = None
        self._unchanged_count = 0

    def observe(self, live_cells: frozenset[Hashable]) -> bool:
        """Return True once the live set has remained unchanged for `window` checks."""
        if self._last_live is None:
            self._last_live = live_cells
            return False

        if live_cells == self._last_live:
            self._unchanged_count += 1
        else:
            self._unchanged_count = 0
            self._last_live = live_cells

        return self._unchanged_count >= self.window


class ExtinctionDetector:
    """Detect a universe with no live cells left."""

    def observe(self, population: int) -> bool:
        return population == 0
