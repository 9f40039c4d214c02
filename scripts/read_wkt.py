"""Command line interface to read a Well-Known Text geometry."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path


def _ensure_project_root_on_path() -> None:
    """Make the repository root importable when running as a script."""

    repo_root = Path(__file__).resolve().parents[1]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_project_root_on_path()

from wktgeo.config import ReaderConfig, configure_logging, load_environment  # noqa: E402  (import after path fix)
from wktgeo.exceptions import GeometryError, describe_dimensionality  # noqa: E402
from wktgeo.geometry import Geometry, Point  # noqa: E402
from wktgeo.io.reader import WKTReader  # noqa: E402
from wktgeo.load.geojson import save_geometry  # noqa: E402

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "wkt",
        nargs="?",
        help="WKT literal to read, e.g. 'POINT Z (1 2 3)'.",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="Text file holding the WKT literal.",
    )
    parser.add_argument(
        "--geojson",
        type=Path,
        default=None,
        help="Write the geometry to this file as a GeoJSON FeatureCollection.",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum GEOMETRYCOLLECTION nesting (overrides WKTGEO_MAX_DEPTH).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides WKTGEO_LOG_LEVEL).",
    )
    return parser


def describe(geometry: Geometry) -> str:
    """One-line summary of a geometry."""

    dimensionality = describe_dimensionality(geometry.is_3d, geometry.is_measured)
    if geometry.is_empty:
        return f"{geometry.geometry_type} {dimensionality} EMPTY"
    if isinstance(geometry, Point):
        coordinates = " ".join(f"{value:g}" for value in geometry.coordinates)
        return f"{geometry.geometry_type} {dimensionality} ({coordinates})"
    return f"{geometry.geometry_type} {dimensionality} with {len(geometry)} member(s)"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    load_environment()
    configure_logging(args.log_level)

    config = ReaderConfig.from_env()
    if args.max_depth is not None:
        config = ReaderConfig(max_depth=args.max_depth)

    text = args.file.read_text(encoding="utf-8") if args.file is not None else args.wkt

    try:
        geometry = WKTReader(config).read(text)
    except GeometryError as exc:
        print(f"Invalid WKT ({exc.kind.value}): {exc}", file=sys.stderr)
        return 1

    print(describe(geometry))

    if args.geojson is not None:
        output_path = save_geometry(geometry, args.geojson)
        logger.info("GeoJSON saved to %s", output_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
