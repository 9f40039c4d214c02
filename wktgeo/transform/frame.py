"""Parse WKT columns of pandas and geopandas frames."""

from __future__ import annotations

import logging
from typing import Any

import geopandas as gpd
import pandas as pd

from ..compat.shapely import to_shapely
from ..exceptions import GeometryError
from ..geometry import Geometry
from ..io.reader import WKTReader

logger = logging.getLogger(__name__)

_ERRORS = ("raise", "coerce")


def _is_missing(value: Any) -> bool:
    if isinstance(value, str):
        return False
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _parse_values(
    df: pd.DataFrame,
    column: str,
    errors: str,
    reader: WKTReader | None,
) -> pd.Series:
    """Return a Series of geometries (or ``None``) aligned on ``df.index``."""

    if column not in df.columns:
        raise ValueError(f"input DataFrame must contain a {column!r} column")
    if errors not in _ERRORS:
        raise ValueError(f"errors must be one of {_ERRORS}, got {errors!r}")

    reader = reader or WKTReader()
    geometries: list[Geometry | None] = []
    failures = 0

    for index, value in df[column].items():
        if _is_missing(value):
            geometries.append(None)
            continue
        if not isinstance(value, str):
            raise TypeError(f"row {index!r}: WKT values must be strings, got {type(value).__name__}")

        try:
            geometries.append(reader.read(value))
        except GeometryError as exc:
            if errors == "raise":
                raise
            failures += 1
            logger.warning("Row %r: could not read WKT (%s): %s", index, exc.kind.value, exc)
            geometries.append(None)

    logger.info(
        "Parsed %d WKT values from column %r (%d failures)",
        len(geometries) - failures,
        column,
        failures,
    )
    return pd.Series(geometries, index=df.index, dtype=object)


def read_wkt_column(
    df: pd.DataFrame,
    column: str = "wkt",
    *,
    geometry_column: str = "geometry",
    errors: str = "raise",
    reader: WKTReader | None = None,
) -> pd.DataFrame:
    """Return a copy of ``df`` with the WKT in ``column`` parsed into geometries.

    Parameters
    ----------
    df:
        DataFrame holding WKT strings under ``column``.
    geometry_column:
        Name of the column receiving :class:`~wktgeo.geometry.Geometry` values.
    errors:
        ``"raise"`` propagates the first :class:`~wktgeo.exceptions.GeometryError`;
        ``"coerce"`` logs it and stores ``None`` for that row.
    reader:
        Optional preconfigured :class:`~wktgeo.io.reader.WKTReader`.
    """

    result = df.copy()
    result[geometry_column] = _parse_values(df, column, errors, reader)
    return result


def to_geodataframe(
    df: pd.DataFrame,
    column: str = "wkt",
    *,
    errors: str = "raise",
    reader: WKTReader | None = None,
    keep_wkt: bool = False,
) -> gpd.GeoDataFrame:
    """Return a GeoDataFrame whose geometry column is built from the WKT in ``column``.

    Geometries are converted to shapely objects, so measures are dropped.
    ``errors`` also covers geometries shapely cannot build, such as a
    one-point line.
    """

    geometries = _parse_values(df, column, errors, reader)
    shapes = []
    for index, geometry in geometries.items():
        if geometry is None:
            shapes.append(None)
            continue
        try:
            shapes.append(to_shapely(geometry))
        except GeometryError as exc:
            if errors == "raise":
                raise
            logger.warning("Row %r: could not convert geometry (%s): %s", index, exc.kind.value, exc)
            shapes.append(None)

    data = df.copy() if keep_wkt else df.drop(columns=[column])
    return gpd.GeoDataFrame(data, geometry=gpd.GeoSeries(shapes, index=df.index))


__all__ = ["read_wkt_column", "to_geodataframe"]
