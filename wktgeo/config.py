"""Settings for wktgeo: ``.env`` loading, logging and reader limits.

Nothing here runs on import; ``scripts/read_wkt.py`` calls
:func:`load_environment` and :func:`configure_logging` itself.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_FILE = os.getenv("WKTGEO_ENV_FILE", ".env")
LOG_LEVEL_ENV = "WKTGEO_LOG_LEVEL"
MAX_DEPTH_ENV = "WKTGEO_MAX_DEPTH"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if line.startswith("#"):
        return None
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep or not key:
        return None
    return key, value.strip().strip("\"'")


def load_environment(path: os.PathLike[str] | str = ENV_FILE, *, override: bool = False) -> dict[str, str]:
    """Copy ``KEY=value`` pairs of a ``.env`` file into ``os.environ``.

    Variables already set are left alone unless ``override`` is true. Returns
    every pair read from the file; a missing file yields ``{}``.
    """

    env_path = Path(path)
    if not env_path.exists():
        return {}

    pairs = filter(None, map(_parse_env_line, env_path.read_text(encoding="utf-8").splitlines()))
    loaded = dict(pairs)
    for key, value in loaded.items():
        if override or key not in os.environ:
            os.environ[key] = value
    return loaded


def configure_logging(level: str | int | None = None) -> None:
    """Set the root log level, ``WKTGEO_LOG_LEVEL`` or ``WARNING`` by default."""

    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root_logger.setLevel(level)


@dataclass(frozen=True, slots=True)
class ReaderConfig:
    """Settings of a :class:`~wktgeo.io.reader.WKTReader`.

    ``max_depth`` bounds the nesting of geometry collections; ``None`` means
    no limit.
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None")

    @classmethod
    def from_env(cls) -> "ReaderConfig":
        raw = os.getenv(MAX_DEPTH_ENV, "").strip()
        if not raw:
            return cls()
        try:
            return cls(max_depth=int(raw))
        except ValueError as exc:
            raise ValueError(f"{MAX_DEPTH_ENV} must be a positive integer, got {raw!r}") from exc


__all__ = [
    "ENV_FILE",
    "ReaderConfig",
    "configure_logging",
    "load_environment",
]
