"""GeoJSON feature serialization for rendered universes.

Every rendered cell becomes one ``Polygon`` feature with a single outer ring,
``properties: null`` and no bounding box.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

Ring = list[list[float]]
"""Closed polygon ring of ``[lng, lat]`` points (first point == last point)."""

Feature = dict[str, Any]
FeatureCollection = dict[str, Any]


def polygon_feature(ring: Ring) -> Feature:
    """Wrap one closed ring as a property-less polygon feature."""
    return {
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [ring]},
        "properties": None,
    }


def feature_collection(features: Iterable[Feature]) -> FeatureCollection:
    """Build a FeatureCollection document from *features*."""
    return {"type": "FeatureCollection", "features": list(features)}


def dumps(collection: FeatureCollection) -> str:
    """Serialize a FeatureCollection to compact GeoJSON text."""
    return json.dumps(collection, separators=(",", ":"))


def load_rings(source: str | Path) -> list[Ring]:
    """Read the outer ring of every polygon feature from GeoJSON text or a file path.

    Raises :exc:`ValueError` if the document is not a FeatureCollection of polygons.
    """
    text = source.read_text() if isinstance(source, Path) else source
    document = json.loads(text)
    if document.get("type") != "FeatureCollection":
        raise ValueError("expected a GeoJSON FeatureCollection")
    rings: list[Ring] = []
    for feature in document.get("features", []):
        geometry = feature.get("geometry") or {}
        if geometry.get("type") != "Polygon":
            raise ValueError(f"expected Polygon geometry, got {geometry.get('type')!r}")
        rings.append([[float(x), float(y)] for x, y in geometry["coordinates"][0]])
    return rings
