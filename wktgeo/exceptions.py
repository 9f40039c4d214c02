"""Errors raised while reading or building geometries.

Every error derives from :class:`GeometryError` (itself a ``ValueError``) and
carries a :class:`ErrorKind` tag, so callers may either catch a specific class
or switch on ``error.kind``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .geometry import Geometry


class ErrorKind(Enum):
    LEXICAL = "lexical"
    SYNTAX = "syntax"
    UNKNOWN_TYPE = "unknown_type"
    TRAILING = "trailing"
    DIMENSIONALITY = "dimensionality"
    INVALID_GEOMETRY = "invalid_geometry"


def describe_dimensionality(is_3d: bool, is_measured: bool) -> str:
    """Return the WKT marker for a dimensionality, ``"XY"`` when there is none."""

    if is_3d and is_measured:
        return "ZM"
    if is_3d:
        return "Z"
    if is_measured:
        return "M"
    return "XY"


class GeometryError(ValueError):
    """Base class for malformed WKT input and invalid geometry construction."""

    kind: ErrorKind = ErrorKind.INVALID_GEOMETRY


class InvalidGeometryError(GeometryError):
    kind = ErrorKind.INVALID_GEOMETRY


class WKTLexicalError(GeometryError):
    """Text that is not a valid token was found in the WKT.

    ``character`` holds the offending character, or the whole run of a
    malformed number.
    """

    kind = ErrorKind.LEXICAL

    def __init__(self, character: str, position: int, reason: str = "Unexpected character"):
        super().__init__(f"{reason} {character!r} in WKT at position {position}")
        self.character = character
        self.position = position


class _PositionedError(GeometryError):
    def __init__(self, message: str, *, token: str | None = None, position: int | None = None):
        super().__init__(message)
        self.token = token
        self.position = position


class WKTSyntaxError(_PositionedError):
    """An expected token was not found at the current position."""

    kind = ErrorKind.SYNTAX


class NestingDepthError(WKTSyntaxError):
    pass


class TrailingInputError(_PositionedError):
    """A complete geometry was read but the WKT text continues."""

    kind = ErrorKind.TRAILING


class ExtraCoordinateError(TrailingInputError, WKTSyntaxError):
    """A coordinate tuple holds more numbers than its Z/M marker declares.

    Dimensionality comes from the marker only, so the extra number is input
    left over after a complete point.
    """

    kind = ErrorKind.TRAILING


class UnknownGeometryTypeError(GeometryError):
    kind = ErrorKind.UNKNOWN_TYPE

    def __init__(self, geometry_type: str):
        super().__init__(f"Unknown geometry type: {geometry_type}")
        self.geometry_type = geometry_type


class DimensionalityMixError(GeometryError):
    """A member's dimensionality differs from the one of its container."""

    kind = ErrorKind.DIMENSIONALITY

    def __init__(self, container: str, is_3d: bool, is_measured: bool, member: "Geometry"):
        expected = describe_dimensionality(is_3d, is_measured)
        found = describe_dimensionality(member.is_3d, member.is_measured)
        super().__init__(
            f"Cannot mix dimensionality in a {container}: expected {expected}, "
            f"found {member.geometry_type} {found}"
        )
        self.container = container
        self.member = member


__all__ = [
    "DimensionalityMixError",
    "ErrorKind",
    "ExtraCoordinateError",
    "GeometryError",
    "InvalidGeometryError",
    "NestingDepthError",
    "TrailingInputError",
    "UnknownGeometryTypeError",
    "WKTLexicalError",
    "WKTSyntaxError",
    "describe_dimensionality",
]
