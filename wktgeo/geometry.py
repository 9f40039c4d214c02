"""Immutable geometry value model.

Every geometry is a frozen dataclass: it is validated once, when created, and
never changes afterwards. Containers hold their members in tuples, so two
geometries built from the same text compare (and hash) equal.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Iterator

from .exceptions import DimensionalityMixError, InvalidGeometryError


class Geometry:
    """Base class of all geometry values."""

    __slots__ = ()

    geometry_type: ClassVar[str] = "GEOMETRY"

    is_3d: bool
    is_measured: bool

    @property
    def is_empty(self) -> bool:
        raise NotImplementedError

    @property
    def coordinate_dimension(self) -> int:
        return 2 + int(self.is_3d) + int(self.is_measured)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return {"type": type(self).__name__, "coordinates": self._geo_coordinates()}

    def _geo_coordinates(self) -> tuple:
        raise NotImplementedError


class _Members:
    """Sequence behaviour shared by the geometries made of other geometries."""

    __slots__ = ()

    _member_field: ClassVar[str]

    def _members(self) -> tuple:
        return getattr(self, self._member_field)

    def __len__(self) -> int:
        return len(self._members())

    def __iter__(self) -> Iterator:
        return iter(self._members())

    def __getitem__(self, index):
        return self._members()[index]

    @property
    def is_empty(self) -> bool:
        return len(self._members()) == 0


def _coordinate(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidGeometryError(f"Coordinate {name} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise InvalidGeometryError(f"Coordinate {name} must be finite, got {value!r}")
    return number


def _resolve_members(
    geometry_type: str,
    members: Iterable[Geometry],
    member_type: type[Geometry],
    is_3d: bool | None,
    is_measured: bool | None,
) -> tuple[tuple, bool, bool]:
    """Check container members and work out the container dimensionality.

    When the dimensionality is not given it is taken from the first member,
    or defaults to 2D for an empty container.
    """

    members = tuple(members)
    for member in members:
        if not isinstance(member, member_type):
            raise InvalidGeometryError(
                f"{geometry_type} can only contain {member_type.__name__}, got {type(member).__name__}"
            )

    if is_3d is None:
        is_3d = members[0].is_3d if members else False
    if is_measured is None:
        is_measured = members[0].is_measured if members else False
    is_3d, is_measured = bool(is_3d), bool(is_measured)

    for member in members:
        if member.is_3d != is_3d or member.is_measured != is_measured:
            raise DimensionalityMixError(geometry_type, is_3d, is_measured, member)

    return members, is_3d, is_measured


@dataclass(frozen=True, slots=True)
class Point(Geometry):
    """A single position, or an empty point when ``x`` and ``y`` are ``None``.

    ``is_3d`` and ``is_measured`` default to the presence of ``z`` and ``m``;
    they only need to be given explicitly for empty points.
    """

    geometry_type: ClassVar[str] = "POINT"

    x: float | None = None
    y: float | None = None
    z: float | None = None
    m: float | None = None
    is_3d: bool | None = None
    is_measured: bool | None = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise InvalidGeometryError("Point requires both x and y, or neither")

        for name in ("x", "y", "z", "m"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _coordinate(name, value))

        is_3d = self.z is not None if self.is_3d is None else bool(self.is_3d)
        is_measured = self.m is not None if self.is_measured is None else bool(self.is_measured)

        if self.x is None:
            if self.z is not None or self.m is not None:
                raise InvalidGeometryError("An empty point cannot have z or m coordinates")
        else:
            if is_3d != (self.z is not None):
                raise InvalidGeometryError("A point has a z coordinate if and only if it is 3D")
            if is_measured != (self.m is not None):
                raise InvalidGeometryError("A point has an m coordinate if and only if it is measured")

        object.__setattr__(self, "is_3d", is_3d)
        object.__setattr__(self, "is_measured", is_measured)

    @classmethod
    def factory(cls, x: float, y: float, z: float | None = None, m: float | None = None) -> "Point":
        return cls(x, y, z, m)

    @classmethod
    def empty(cls, is_3d: bool = False, is_measured: bool = False) -> "Point":
        return cls(is_3d=is_3d, is_measured=is_measured)

    @property
    def is_empty(self) -> bool:
        return self.x is None

    @property
    def coordinates(self) -> tuple[float, ...]:
        """Return ``(x, y[, z][, m])``, or an empty tuple for an empty point."""

        if self.x is None:
            return ()
        values = [self.x, self.y]
        if self.is_3d:
            values.append(self.z)
        if self.is_measured:
            values.append(self.m)
        return tuple(values)

    def _geo_coordinates(self) -> tuple:
        if self.x is None:
            return ()
        if self.is_3d:
            return (self.x, self.y, self.z)
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class LineString(_Members, Geometry):
    geometry_type: ClassVar[str] = "LINESTRING"
    _member_field: ClassVar[str] = "points"

    points: tuple[Point, ...] = ()
    is_3d: bool | None = None
    is_measured: bool | None = None

    def __post_init__(self) -> None:
        points, is_3d, is_measured = _resolve_members(
            self.geometry_type, self.points, Point, self.is_3d, self.is_measured
        )
        if any(point.is_empty for point in points):
            raise InvalidGeometryError("A LineString cannot contain empty points")
        object.__setattr__(self, "points", points)
        object.__setattr__(self, "is_3d", is_3d)
        object.__setattr__(self, "is_measured", is_measured)

    @classmethod
    def factory(
        cls,
        points: Iterable[Point],
        is_3d: bool | None = None,
        is_measured: bool | None = None,
    ) -> "LineString":
        return cls(tuple(points), is_3d, is_measured)

    def _geo_coordinates(self) -> tuple:
        return tuple(point._geo_coordinates() for point in self.points)


@dataclass(frozen=True, slots=True)
class Polygon(_Members, Geometry):
    """A polygon made of rings; the first ring is the exterior boundary."""

    geometry_type: ClassVar[str] = "POLYGON"
    _member_field: ClassVar[str] = "rings"

    rings: tuple[LineString, ...] = ()
    is_3d: bool | None = None
    is_measured: bool | None = None

    def __post_init__(self) -> None:
        rings, is_3d, is_measured = _resolve_members(
            self.geometry_type, self.rings, LineString, self.is_3d, self.is_measured
        )
        object.__setattr__(self, "rings", rings)
        object.__setattr__(self, "is_3d", is_3d)
        object.__setattr__(self, "is_measured", is_measured)

    @classmethod
    def factory(
        cls,
        rings: Iterable[LineString],
        is_3d: bool | None = None,
        is_measured: bool | None = None,
    ) -> "Polygon":
        return cls(tuple(rings), is_3d, is_measured)

    @property
    def exterior(self) -> LineString | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LineString, ...]:
        return self.rings[1:]

    def _geo_coordinates(self) -> tuple:
        return tuple(ring._geo_coordinates() for ring in self.rings)


@dataclass(frozen=True, slots=True)
class GeometryCollection(_Members, Geometry):
    """An ordered collection of geometries sharing one dimensionality.

    The ``Multi*`` subclasses restrict ``member_type``.
    """

    geometry_type: ClassVar[str] = "GEOMETRYCOLLECTION"
    member_type: ClassVar[type[Geometry]] = Geometry
    _member_field: ClassVar[str] = "geometries"

    geometries: tuple[Geometry, ...] = ()
    is_3d: bool | None = None
    is_measured: bool | None = None

    def __post_init__(self) -> None:
        geometries, is_3d, is_measured = _resolve_members(
            self.geometry_type, self.geometries, self.member_type, self.is_3d, self.is_measured
        )
        object.__setattr__(self, "geometries", geometries)
        object.__setattr__(self, "is_3d", is_3d)
        object.__setattr__(self, "is_measured", is_measured)

    @classmethod
    def factory(
        cls,
        geometries: Iterable[Geometry],
        is_3d: bool | None = None,
        is_measured: bool | None = None,
    ):
        return cls(tuple(geometries), is_3d, is_measured)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        if type(self) is GeometryCollection:
            return {
                "type": "GeometryCollection",
                "geometries": [geometry.__geo_interface__ for geometry in self.geometries],
            }
        return {"type": type(self).__name__, "coordinates": self._geo_coordinates()}

    def _geo_coordinates(self) -> tuple:
        return tuple(geometry._geo_coordinates() for geometry in self.geometries)


class MultiPoint(GeometryCollection):
    __slots__ = ()

    geometry_type = "MULTIPOINT"
    member_type = Point


class MultiLineString(GeometryCollection):
    __slots__ = ()

    geometry_type = "MULTILINESTRING"
    member_type = LineString


class MultiPolygon(GeometryCollection):
    __slots__ = ()

    geometry_type = "MULTIPOLYGON"
    member_type = Polygon


def mapping(geometry: Geometry) -> dict[str, Any]:
    """Return the GeoJSON-like mapping of ``geometry``.

    Measures have no GeoJSON representation and are left out.
    """

    if not isinstance(geometry, Geometry):
        raise TypeError("geometry must be a wktgeo Geometry")
    return geometry.__geo_interface__


__all__ = [
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "mapping",
]
