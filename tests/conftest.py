"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit


@pytest.fixture
def tmp_pyproject(tmp_path: Path) -> Path:
    """Create a temporary pyproject.toml file."""
    content = """\
# Release metadata
[project]
name = "Test_Package"
version = "1.2.3"  # bumped by CI
dependencies = [
    "requests>=2.0",
]
"""
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(content)
    return pyproject


@pytest.fixture
def sample_toml_doc() -> tomlkit.TOMLDocument:
    """Create a sample TOML document."""
    content = """\
[project]
name = "my-package"
version = "2.0.0-rc.1"
dependencies = ["click>=8.0", "pydantic>=2.0"]
"""
    return tomlkit.parse(content)
