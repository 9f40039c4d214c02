"""Tabular helpers built on top of the WKT reader."""

from .frame import read_wkt_column, to_geodataframe

__all__ = ["read_wkt_column", "to_geodataframe"]
