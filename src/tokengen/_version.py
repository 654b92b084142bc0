"""Package version, read from the installed distribution or the source checkout."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version from a source checkout's pyproject.toml, else from installed metadata."""
    if _PYPROJECT.is_file():
        project = tomllib.loads(_PYPROJECT.read_text(encoding="utf-8")).get("project", {})
        if isinstance(project.get("version"), str):
            return project["version"]
    try:
        return _metadata_version("tokengen")
    except PackageNotFoundError:
        return "0.0.0"
