"""
Project name / version lookup for log records.

Reads `pyproject.toml` when running from a checkout and falls back to the
installed distribution metadata, then to fixed defaults.
"""

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path
from typing import Any

DISTRIBUTION_NAME = "catalog-api"


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    """Walk up from `start` looking for a pyproject.toml (at most `max_up` levels)."""
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def load_pyproject_data(pyproject_path: Path) -> dict:
    with pyproject_path.open("rb") as f:
        return tomllib.load(f)


def get_pyproject_value(key: str, start: str | Path | None = None, max_up: int = 5, default: Any = None) -> Any:
    """
    Dotted lookup into pyproject.toml, e.g. get_pyproject_value("project.version").
    Missing file, unreadable file or missing key all return `default`.
    """
    if not key:
        return default

    start_path = Path(start).resolve() if start is not None else Path(__file__).resolve().parent
    pyproject = find_pyproject(start=start_path, max_up=max_up)
    if not pyproject:
        return default

    try:
        data = load_pyproject_data(pyproject)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    cur = data
    for part in key.split("."):
        if isinstance(cur, dict) and part in cur:
            cur = cur[part]
        else:
            return default
    return cur


def get_project_name(start: Path | str | None = None, max_up: int = 5) -> str:
    return get_pyproject_value("project.name", start=start, max_up=max_up, default=DISTRIBUTION_NAME)


def get_project_version(start: Path | str | None = None, max_up: int = 5, default: str = "unknown") -> str:
    """Installed distribution version first, pyproject.toml second."""
    name = get_project_name(start=start, max_up=max_up)
    try:
        return importlib_metadata.version(name)
    except importlib_metadata.PackageNotFoundError:
        pass

    val = get_pyproject_value("project.version", start=start, max_up=max_up, default=None)
    return val if val is not None else default


__all__ = [
    "find_pyproject",
    "load_pyproject_data",
    "get_pyproject_value",
    "get_project_name",
    "get_project_version",
]
