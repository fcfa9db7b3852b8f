from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class Config:
    log_level: str = "WARNING"
    display_precision: int = 2
    json_indent: int = 2


_ENV_PREFIX = "ORDERPRICE_"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        import tomllib  # py311+
    except ModuleNotFoundError:
        import tomli as tomllib

    return tomllib.loads(path.read_text(encoding="utf-8"))


def _to_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _to_log_level(value: Any, default: str) -> str:
    if not isinstance(value, str):
        return default
    normalized = value.strip().upper()
    if normalized in _LOG_LEVELS:
        return normalized
    return default


def _from_sources(raw: Dict[str, Any]) -> Config:
    log_level = _to_log_level(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", raw.get("log_level", "WARNING")), "WARNING")
    display_precision = _to_int(
        os.getenv(f"{_ENV_PREFIX}DISPLAY_PRECISION", raw.get("display_precision", 2)), 2
    )
    json_indent = _to_int(os.getenv(f"{_ENV_PREFIX}JSON_INDENT", raw.get("json_indent", 2)), 2)

    return Config(
        log_level=log_level,
        display_precision=max(0, display_precision),
        json_indent=max(0, json_indent),
    )


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    section = tool.get("orderprice", {}) if isinstance(tool, dict) else {}
    return _from_sources(section if isinstance(section, dict) else {})


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)
