"""Exception types raised by the simulation core."""

from __future__ import annotations


class InvalidResolution(ValueError):
    """Raised when a grid resolution is not supported by the grid capability."""

    def __init__(self, resolution: object, valid: str = "") -> None:
        self.resolution = resolution
        message = f"unsupported grid resolution: {resolution!r}"
        if valid:
            message = f"{message}; must be {valid}"
        super().__init__(message)


class GridInvariantError(RuntimeError):
    """A grid query failed or returned out-of-domain data for a tracked cell.

    Signals corrupted internal state rather than bad caller input.
    """
