"""Project one cell boundary into a closed equirectangular ring.

Cells that straddle the antimeridian come back from the grid with vertices
on both sides of the +/-180 seam. Plotted naively their edges wrap across the
whole map, so negative longitudes are shifted east by 360 degrees to keep the
ring contiguous.
"""

from __future__ import annotations

from collections.abc import Sequence

from hexlife.config.constants import MAX_LNG
from hexlife.domain.errors import GridInvariantError
from hexlife.domain.grid import LngLat
from hexlife.io.geojson import Ring


def crosses_antimeridian(points: Sequence[Sequence[float]]) -> bool:
    """Return True if any consecutive pair of the open chain jumps more than 180 degrees.

    The closing edge (last -> first) is not scanned.
    """
    for prev, curr in zip(points, points[1:]):
        if abs(curr[0] - prev[0]) > MAX_LNG:
            return True
    return False


def project_boundary(vertices: Sequence[LngLat]) -> Ring:
    """Convert boundary vertices into a closed ring, correcting the antimeridian seam."""
    if not vertices:
        raise GridInvariantError("cell boundary has no vertices")
    points: Ring = []
    for vertex in vertices:
        if not vertex.in_domain():
            raise GridInvariantError(f"boundary vertex outside geographic domain: {vertex}")
        points.append([vertex.lng, vertex.lat])

    if crosses_antimeridian(points):
        for point in points:
            if point[0] < 0.0:
                point[0] += 2 * MAX_LNG

    points.append(list(points[0]))
    return points
