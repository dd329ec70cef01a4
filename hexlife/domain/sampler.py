"""Seeded coordinate samplers used to populate a new universe."""

from __future__ import annotations

from random import Random
from typing import Protocol

from hexlife.config.constants import MAX_LAT, MAX_LNG, MIN_LAT, MIN_LNG
from hexlife.domain.grid import LngLat


def create_rng(seed: int) -> Random:
    """Return a randomness source whose draws are reproducible for *seed*."""
    return Random(seed)


class GeoSampler(Protocol):
    """Anything that draws one geographic coordinate per call."""

    def sample_coord(self) -> LngLat: ...


class UniformSampler:
    """Uniform over the coordinate box, longitude drawn before latitude."""

    def __init__(self, rng: Random | None = None) -> None:
        self.rng = rng if rng is not None else Random()

    def sample_coord(self) -> LngLat:
        lng = self.rng.uniform(MIN_LNG, MAX_LNG)
        lat = self.rng.uniform(MIN_LAT, MAX_LAT)
        return LngLat(lng, lat)
