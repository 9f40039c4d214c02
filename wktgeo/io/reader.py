"""Recursive-descent reader building geometries out of Well-Known Text."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from ..config import ReaderConfig
from ..exceptions import (
    DimensionalityMixError,
    GeometryError,
    NestingDepthError,
    TrailingInputError,
    UnknownGeometryTypeError,
    WKTSyntaxError,
)
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
from .parser import WKTParser

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMPTY = "EMPTY"

_DIMENSIONALITY = {
    None: (False, False),
    "Z": (True, False),
    "M": (False, True),
    "ZM": (True, True),
}

_GEOMETRY_TYPES: dict[str, type[Geometry]] = {
    cls.geometry_type: cls
    for cls in (Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)
}


class WKTReader:
    """Build geometries out of Well-Known Text strings.

    A reader holds no per-call state and may be shared between threads.
    """

    def __init__(self, config: ReaderConfig | None = None):
        self.config = config or ReaderConfig()

    def read(self, text: str) -> Geometry:
        """Read a single geometry spanning the whole of ``text``.

        Raises a :class:`~wktgeo.exceptions.GeometryError` subclass if ``text``
        is not valid WKT, including when input remains after the geometry.
        """

        parser = WKTParser(text.upper())
        geometry = self.read_geometry(parser)

        if not parser.is_end_of_stream():
            token = parser.peek()
            raise TrailingInputError(
                f"Invalid WKT: unexpected {token.text!r} at position {token.position} after geometry",
                token=token.text,
                position=token.position,
            )

        logger.debug(
            "Read %s%s from %d characters",
            geometry.geometry_type,
            " EMPTY" if geometry.is_empty else "",
            len(text),
        )
        return geometry

    def try_read(self, text: str) -> tuple[Geometry | None, GeometryError | None]:
        """Like :meth:`read`, returning ``(geometry, None)`` or ``(None, error)``."""

        try:
            return self.read(text), None
        except GeometryError as exc:
            return None, exc

    def read_geometry(self, parser: WKTParser, *, _level: int = 0) -> Geometry:
        """Read one geometry from ``parser`` without requiring end of stream.

        ``parser`` must hold upper-cased text.
        """

        geometry_type = parser.get_next_word()

        position = parser.position
        marker = parser.get_optional_next_word()
        is_empty = marker == EMPTY
        if is_empty:
            marker = None
        if marker not in _DIMENSIONALITY:
            raise WKTSyntaxError(f"Unexpected word in WKT: {marker}", token=marker, position=position)
        is_3d, is_measured = _DIMENSIONALITY[marker]

        if not is_empty:
            position = parser.position
            word = parser.get_optional_next_word()
            if word == EMPTY:
                is_empty = True
            elif word is not None:
                raise WKTSyntaxError(f"Unexpected word in WKT: {word}", token=word, position=position)

        cls = _GEOMETRY_TYPES.get(geometry_type)
        if cls is None:
            raise UnknownGeometryTypeError(geometry_type)

        if is_empty:
            if cls is Point:
                return Point.empty(is_3d, is_measured)
            return cls.factory((), is_3d, is_measured)

        if cls is Point:
            return self._read_point_text(parser, is_3d, is_measured)
        if cls is LineString:
            return self._read_line_string_text(parser, is_3d, is_measured)
        if cls is Polygon:
            return self._read_polygon_text(parser, is_3d, is_measured)
        if cls is MultiPoint:
            return MultiPoint.factory(self._read_point_list(parser, is_3d, is_measured), is_3d, is_measured)
        if cls is MultiLineString:
            return MultiLineString.factory(self._read_ring_list(parser, is_3d, is_measured), is_3d, is_measured)
        if cls is MultiPolygon:
            polygons = self._read_list(parser, lambda: self._read_polygon_text(parser, is_3d, is_measured))
            return MultiPolygon.factory(polygons, is_3d, is_measured)
        return self._read_geometry_collection_text(parser, is_3d, is_measured, _level + 1)

    @staticmethod
    def _read_list(parser: WKTParser, read_item: Callable[[], T], *, of_points: bool = False) -> list[T]:
        """( item, item, ... )"""

        parser.match_opener()
        items: list[T] = []
        while True:
            items.append(read_item())
            if parser.get_next_closer_or_comma(after_coordinates=of_points) == ")":
                return items

    @staticmethod
    def _read_point(parser: WKTParser, is_3d: bool, is_measured: bool) -> Point:
        """x y [z] [m]"""

        x = parser.get_next_number()
        y = parser.get_next_number()
        z = parser.get_next_number() if is_3d else None
        m = parser.get_next_number() if is_measured else None

        return Point.factory(x, y, z, m)

    def _read_point_text(self, parser: WKTParser, is_3d: bool, is_measured: bool) -> Point:
        """(x y)"""

        parser.match_opener()
        point = self._read_point(parser, is_3d, is_measured)
        parser.match_closer(after_coordinates=True)
        return point

    def _read_point_list(self, parser: WKTParser, is_3d: bool, is_measured: bool) -> list[Point]:
        """(x y, ...)"""

        return self._read_list(parser, lambda: self._read_point(parser, is_3d, is_measured), of_points=True)

    def _read_line_string_text(self, parser: WKTParser, is_3d: bool, is_measured: bool) -> LineString:
        return LineString.factory(self._read_point_list(parser, is_3d, is_measured), is_3d, is_measured)

    def _read_ring_list(self, parser: WKTParser, is_3d: bool, is_measured: bool) -> list[LineString]:
        """((x y, ...), ...)"""

        return self._read_list(parser, lambda: self._read_line_string_text(parser, is_3d, is_measured))

    def _read_polygon_text(self, parser: WKTParser, is_3d: bool, is_measured: bool) -> Polygon:
        return Polygon.factory(self._read_ring_list(parser, is_3d, is_measured), is_3d, is_measured)

    def _read_geometry_collection_text(
        self, parser: WKTParser, is_3d: bool, is_measured: bool, level: int
    ) -> GeometryCollection:
        max_depth = self.config.max_depth
        if max_depth is not None and level > max_depth:
            raise NestingDepthError(
                f"GEOMETRYCOLLECTION nesting exceeds the maximum depth of {max_depth}",
                position=parser.position,
            )

        def read_member() -> Geometry:
            geometry = self.read_geometry(parser, _level=level)
            if geometry.is_3d != is_3d or geometry.is_measured != is_measured:
                raise DimensionalityMixError(GeometryCollection.geometry_type, is_3d, is_measured, geometry)
            return geometry

        return GeometryCollection.factory(self._read_list(parser, read_member), is_3d, is_measured)


_default_reader = WKTReader()


def read(text: str) -> Geometry:
    """Read ``text`` with a default :class:`WKTReader`."""

    return _default_reader.read(text)


__all__ = ["WKTReader", "read"]
