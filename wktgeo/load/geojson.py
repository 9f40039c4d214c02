"""Helpers to persist geometries on disk as GeoJSON."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Mapping

from ..geometry import Geometry, mapping


def _ensure_path(path: Path | str | PathLike[str]) -> Path:
    """Return ``path`` as :class:`pathlib.Path` enforcing valid types."""

    if isinstance(path, Path):
        return path
    if isinstance(path, (str, PathLike)):
        return Path(path)
    raise TypeError("path must be a string, Path or os.PathLike instance")


def _feature(geometry: Geometry, properties: Mapping[str, Any] | None = None) -> dict[str, Any]:
    return {"type": "Feature", "properties": dict(properties or {}), "geometry": mapping(geometry)}


def as_feature_collection(geom: Geometry | Iterable[Geometry]) -> dict[str, Any]:
    """Wrap one geometry, or an iterable of them, in a GeoJSON FeatureCollection."""

    if isinstance(geom, Geometry):
        features = [_feature(geom)]
    else:
        features = []
        for item in geom:
            if not isinstance(item, Geometry):
                raise TypeError("iterable values must be wktgeo geometries")
            features.append(_feature(item))
    return {"type": "FeatureCollection", "features": features}


def save_geometry(geom: Geometry | Iterable[Geometry], path: Path | str | PathLike[str]) -> Path:
    """Persist a geometry (or several) to disk as a GeoJSON FeatureCollection."""

    target = _ensure_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    feature_collection = as_feature_collection(geom)
    target.write_text(json.dumps(feature_collection, ensure_ascii=False, indent=2), encoding="utf-8")
    return target


__all__ = ["as_feature_collection", "save_geometry"]
