"""Shared pytest fixtures for tokengen tests."""

import json
from pathlib import Path

import pytest

from tokengen.core.manifest import ProjectManifest


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def token_tree(fixtures_dir: Path) -> dict:
    """Return the sample design token document."""
    return json.loads((fixtures_dir / "designTokens.json").read_text(encoding="utf-8"))


@pytest.fixture
def token_project(tmp_path: Path, fixtures_dir: Path) -> ProjectManifest:
    """Create a project with the sample token document at the default location."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "designTokens.json").write_text(
        (fixtures_dir / "designTokens.json").read_text(encoding="utf-8"), encoding="utf-8"
    )
    return ProjectManifest(root=tmp_path)
