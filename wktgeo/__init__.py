"""Well-Known Text geometry reader."""

from .config import ReaderConfig
from .exceptions import (
    DimensionalityMixError,
    ErrorKind,
    ExtraCoordinateError,
    GeometryError,
    InvalidGeometryError,
    NestingDepthError,
    TrailingInputError,
    UnknownGeometryTypeError,
    WKTLexicalError,
    WKTSyntaxError,
)
from .geometry import (
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    mapping,
)
from .io import WKTParser, WKTReader, read

__version__ = "0.1.0"

__all__ = [
    "DimensionalityMixError",
    "ErrorKind",
    "ExtraCoordinateError",
    "Geometry",
    "GeometryCollection",
    "GeometryError",
    "InvalidGeometryError",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "NestingDepthError",
    "Point",
    "Polygon",
    "ReaderConfig",
    "TrailingInputError",
    "UnknownGeometryTypeError",
    "WKTLexicalError",
    "WKTParser",
    "WKTReader",
    "WKTSyntaxError",
    "mapping",
    "read",
]
