# src/motley_hue/utils/load_config.py

"""Load JSON object configs from a <data/> directory, validate and cache them.

The data directory comes from an explicit `base_dir`, else MOTLEY_HUE_DATA_DIR,
else the first `data/` found walking up from this file (the package's own
`motley_hue/data/`). Results are cached per file path and mtime.

Used by the named-color settings and by tests needing hot reload.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "ENV_VAR",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VAR = "MOTLEY_HUE_DATA_DIR"

Validator = Callable[[dict[str, Any]], dict[str, Any]]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not an object."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key includes: path, mtime, encoding, validator_present
_CONFIG_CACHE: dict[tuple[Path, float, str, bool], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first 'data' directory walking up from start, or raise."""
    start = (start or Path(__file__)).resolve()
    tried = []
    for p in [start, *start.parents]:
        cand = p / "data"
        if cand.is_dir():
            return cand
        tried.append(str(cand))
    raise DataDirNotFound("No 'data' directory found.\nTried:\n  " + "\n  ".join(tried))


def _env_data_dir() -> Path | None:
    v = os.environ.get(ENV_VAR)
    return Path(os.path.expanduser(v)).resolve() if v else None


def _resolve(file: str | os.PathLike[str], data_dir: Path) -> Path:
    """Map `file` to <data_dir>/<file>.json, refusing paths that leave data_dir."""
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, run `validator` on it, and cache the result.

    Callers must pass the same validator for a given file: the cache only
    records whether one was present.
    """
    data_dir = (base_dir or _env_data_dir() or _default_data_dir()).resolve()
    path = _resolve(file, data_dir)

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding, validator is not None)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")
    if validator is not None:
        try:
            data = validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return data


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point MOTLEY_HUE_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(ENV_VAR)
        os.environ[ENV_VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(ENV_VAR, None)
        else:
            os.environ[ENV_VAR] = self._old
        clear_config_cache()
