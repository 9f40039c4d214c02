from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from wktgeo.config import ReaderConfig
from wktgeo.exceptions import (
    DimensionalityMixError,
    ErrorKind,
    GeometryError,
    NestingDepthError,
    TrailingInputError,
    UnknownGeometryTypeError,
    WKTLexicalError,
    WKTSyntaxError,
)
from wktgeo.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from wktgeo.io.parser import WKTParser
from wktgeo.io.reader import WKTReader, read

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def _load(name: str) -> list[dict]:
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.mark.parametrize("case", _load("valid_wkt.json"), ids=lambda case: case["wkt"])
def test_read_declared_dimensionality(case):
    geometry = read(case["wkt"])

    assert geometry.geometry_type == case["type"]
    assert geometry.is_3d is case["is_3d"]
    assert geometry.is_measured is case["is_measured"]


@pytest.mark.parametrize("case", _load("invalid_wkt.json"), ids=lambda case: case["wkt"] or "<empty>")
def test_read_rejects_invalid_wkt(case):
    with pytest.raises(GeometryError) as excinfo:
        read(case["wkt"])

    assert excinfo.value.kind is ErrorKind(case["kind"])


def test_read_point():
    point = read("POINT (1 2)")

    assert point == Point(1.0, 2.0)
    assert (point.x, point.y, point.z, point.m) == (1.0, 2.0, None, None)
    assert point.is_3d is False
    assert point.is_measured is False


def test_read_point_zm_reads_z_before_m():
    point = read("POINT ZM (1 2 3 4)")

    assert point.z == 3.0
    assert point.m == 4.0


def test_read_line_string_keeps_input_order():
    line = read("LINESTRING (0 0, 1 1, 2 2)")

    assert isinstance(line, LineString)
    assert [(point.x, point.y) for point in line] == [(0, 0), (1, 1), (2, 2)]


def test_read_polygon_with_hole():
    polygon = read("POLYGON ((0 0, 0 4, 4 4, 0 0), (1 1, 1 2, 2 2, 1 1))")

    assert isinstance(polygon, Polygon)
    assert len(polygon.exterior) == 4
    assert len(polygon.interiors) == 1
    assert polygon.interiors[0][1] == Point(1, 2)


def test_read_multipolygon():
    multi = read("MULTIPOLYGON (((0 0, 0 1, 1 1, 0 0)), ((10 10, 10 11, 11 11, 10 10)))")

    assert isinstance(multi, MultiPolygon)
    assert len(multi) == 2
    for polygon in multi:
        assert isinstance(polygon, Polygon)
        assert len(polygon.rings) == 1
        assert len(polygon.rings[0]) == 4
    assert multi[1].exterior[0] == Point(10, 10)


def test_read_multipoint_members_are_not_parenthesized():
    multi = read("MULTIPOINT (1 2, 3 4)")

    assert isinstance(multi, MultiPoint)
    assert list(multi) == [Point(1, 2), Point(3, 4)]


def test_read_multilinestring():
    multi = read("MULTILINESTRING Z ((0 0 0, 1 1 1), (2 2 2, 3 3 3))")

    assert isinstance(multi, MultiLineString)
    assert [len(line) for line in multi] == [2, 2]
    assert multi.is_3d


def test_read_nested_geometry_collection():
    collection = read(
        "GEOMETRYCOLLECTION (POINT (1 2), GEOMETRYCOLLECTION (LINESTRING (0 0, 1 1)), POINT EMPTY)"
    )

    assert isinstance(collection, GeometryCollection)
    assert len(collection) == 3
    assert isinstance(collection[1], GeometryCollection)
    assert isinstance(collection[1][0], LineString)
    assert collection[2].is_empty


def test_read_numbers():
    line = read("LINESTRING (-1.5 +2, .5 1E3, 2.5e-1 -3.)")

    assert [point.coordinates for point in line] == [(-1.5, 2.0), (0.5, 1000.0), (0.25, -3.0)]


def test_read_ignores_whitespace_and_case():
    assert read("  point\n(\t1   2 )  ") == read("POINT (1 2)")


def test_read_empty_geometries():
    assert read("POINT EMPTY") == Point.empty()
    assert read("POINT ZM EMPTY") == Point.empty(True, True)
    assert read("MULTIPOLYGON EMPTY") == MultiPolygon()
    assert read("POLYGON Z EMPTY").is_3d


def test_read_geometry_collection_of_empty_members():
    collection = read("GEOMETRYCOLLECTION Z (POINT Z EMPTY, LINESTRING Z (0 0 0, 1 1 1))")

    assert collection[0] == Point.empty(is_3d=True)
    assert len(collection[1]) == 2


def test_read_is_idempotent():
    text = "GEOMETRYCOLLECTION M (POINT M (1 2 3), POLYGON M ((0 0 0, 0 1 0, 1 1 0, 0 0 0)))"

    first = read(text)
    second = read(text)

    assert first == second
    assert first is not second
    assert hash(first) == hash(second)


def test_read_trailing_input():
    with pytest.raises(TrailingInputError) as excinfo:
        read("POINT (1 2) X")

    assert excinfo.value.token == "X"
    assert excinfo.value.position == 12


def test_read_extra_coordinate_is_trailing_input():
    with pytest.raises(TrailingInputError) as excinfo:
        read("POINT (1 2 3)")

    assert isinstance(excinfo.value, WKTSyntaxError)
    assert excinfo.value.position == 11


def test_read_dimensionality_mix_names_member():
    with pytest.raises(DimensionalityMixError) as excinfo:
        read("GEOMETRYCOLLECTION (POINT (1 2), POINT Z (1 2 3))")

    assert excinfo.value.member == Point(1, 2, 3)
    assert "POINT Z" in str(excinfo.value)


def test_read_unknown_type():
    with pytest.raises(UnknownGeometryTypeError) as excinfo:
        read("TRIANGLE ((0 0, 1 0, 0 1, 0 0))")

    assert excinfo.value.geometry_type == "TRIANGLE"


def test_read_unexpected_marker():
    with pytest.raises(WKTSyntaxError, match="Unexpected word in WKT: ZZ"):
        read("POINT ZZ (1 2)")


def test_read_lexical_error_reports_character():
    with pytest.raises(WKTLexicalError) as excinfo:
        read("POINT (1 @ 2)")

    assert excinfo.value.character == "@"
    assert excinfo.value.position == 9


def test_read_rejects_overflowing_number():
    with pytest.raises(WKTLexicalError):
        read("POINT (1E999 2)")


def test_read_geometry_does_not_require_end_of_stream():
    parser = WKTParser("POINT (1 2) POINT (3 4)")
    reader = WKTReader()

    assert reader.read_geometry(parser) == Point(1, 2)
    assert reader.read_geometry(parser) == Point(3, 4)
    assert parser.is_end_of_stream()


def test_try_read_returns_error_value():
    reader = WKTReader()

    geometry, error = reader.try_read("POINT (1 2)")
    assert geometry == Point(1, 2)
    assert error is None

    geometry, error = reader.try_read("POINT (1 2) 3")
    assert geometry is None
    assert error.kind is ErrorKind.TRAILING


def test_max_depth_limits_collection_nesting():
    reader = WKTReader(ReaderConfig(max_depth=2))
    text = "GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (POINT (1 2))))"

    assert reader.read("GEOMETRYCOLLECTION (GEOMETRYCOLLECTION (POINT (1 2)))")
    with pytest.raises(NestingDepthError) as excinfo:
        reader.read(text)
    assert excinfo.value.kind is ErrorKind.SYNTAX

    assert len(WKTReader().read(text)) == 1


def test_reader_is_safe_across_threads():
    reader = WKTReader()
    texts = [f"LINESTRING ({i} {i}, {i + 1} {i + 1})" for i in range(20)]
    results: dict[int, LineString] = {}

    def worker(index: int) -> None:
        results[index] = reader.read(texts[index])

    threads = [threading.Thread(target=worker, args=(index,)) for index in range(len(texts))]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert [results[i][0].x for i in range(len(texts))] == [float(i) for i in range(len(texts))]


def test_read_logs_at_debug(caplog):
    with caplog.at_level("DEBUG", logger="wktgeo.io.reader"):
        read("POINT EMPTY")

    assert "Read POINT EMPTY" in caplog.text


@pytest.mark.parametrize(
    "text",
    ["POLYGON ((0 0, 1 1) 5)", "GEOMETRYCOLLECTION (POINT (1 2) 5)", "MULTILINESTRING ((0 0, 1 1) 2)"],
)
def test_read_number_after_member_is_syntax_error(text):
    with pytest.raises(WKTSyntaxError) as excinfo:
        read(text)

    assert excinfo.value.kind is ErrorKind.SYNTAX
    assert "extra coordinate" not in str(excinfo.value)


def test_read_malformed_numbers_are_lexical_errors():
    with pytest.raises(WKTLexicalError, match="Malformed number"):
        read("POINT (1.5.3)")
    with pytest.raises(WKTLexicalError, match="Malformed number"):
        read("POINT (1-2)")
