"""Persistence helpers for parsed geometries."""

from .geojson import save_geometry

__all__ = ["save_geometry"]
