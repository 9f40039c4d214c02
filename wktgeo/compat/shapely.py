"""Conversion of wktgeo geometries into :mod:`shapely` objects.

Downstream spatial work (predicates, projections, plotting) is left to
shapely; this module only maps the value model onto its constructors.
shapely has no notion of measures, so ``M`` values are dropped and only
``z`` is carried over.
"""

from __future__ import annotations

import shapely.geometry as sg
from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from ..exceptions import InvalidGeometryError
from ..geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def _xy(point: Point) -> tuple[float, ...]:
    if point.is_3d:
        return (point.x, point.y, point.z)
    return (point.x, point.y)


def _line_coords(line: LineString) -> list[tuple[float, ...]]:
    return [_xy(point) for point in line.points]


def _polygon(polygon: Polygon) -> sg.Polygon:
    if polygon.is_empty:
        return sg.Polygon()
    shell = _line_coords(polygon.exterior)
    holes = [_line_coords(ring) for ring in polygon.interiors]
    return sg.Polygon(shell, holes)


def _convert(geometry: Geometry) -> BaseGeometry:
    if isinstance(geometry, Point):
        if geometry.is_empty:
            return sg.Point()
        return sg.Point(*_xy(geometry))

    if isinstance(geometry, LineString):
        if geometry.is_empty:
            return sg.LineString()
        return sg.LineString(_line_coords(geometry))

    if isinstance(geometry, Polygon):
        return _polygon(geometry)

    if isinstance(geometry, MultiPoint):
        if geometry.is_empty:
            return sg.MultiPoint()
        return sg.MultiPoint([_xy(point) for point in geometry if not point.is_empty])

    if isinstance(geometry, MultiLineString):
        if geometry.is_empty:
            return sg.MultiLineString()
        return sg.MultiLineString([_line_coords(line) for line in geometry])

    if isinstance(geometry, MultiPolygon):
        if geometry.is_empty:
            return sg.MultiPolygon()
        return sg.MultiPolygon([_polygon(polygon) for polygon in geometry])

    if isinstance(geometry, GeometryCollection):
        if geometry.is_empty:
            return sg.GeometryCollection()
        return sg.GeometryCollection([_convert(member) for member in geometry])

    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Return the shapely equivalent of ``geometry``.

    The reader enforces no minimum sizes, so a line of one point or a ring of
    fewer than four points reads fine but cannot be built by shapely; those
    raise :class:`~wktgeo.exceptions.InvalidGeometryError`.
    """

    try:
        return _convert(geometry)
    except (GEOSException, ValueError) as exc:
        raise InvalidGeometryError(
            f"Cannot convert {geometry.geometry_type} to shapely: {exc}"
        ) from exc


__all__ = ["to_shapely"]
