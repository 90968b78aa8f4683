"""Tests for lazy_semver.toml."""

from __future__ import annotations

from pathlib import Path

import pytest
import tomlkit

from lazy_semver.toml import (
    load_pyproject,
    project_name,
    project_version,
    rewrite_project_version,
    save_pyproject,
)


class TestLoadSavePyproject:
    def test_load(self, tmp_pyproject: Path) -> None:
        doc = load_pyproject(tmp_pyproject)
        assert project_name(doc, "") == "test-package"
        assert project_version(doc) == "1.2.3"

    def test_save_round_trips_comments(self, tmp_pyproject: Path) -> None:
        before = tmp_pyproject.read_text()
        save_pyproject(tmp_pyproject, load_pyproject(tmp_pyproject))
        assert tmp_pyproject.read_text() == before


class TestProjectName:
    def test_returns_name(self, sample_toml_doc: tomlkit.TOMLDocument) -> None:
        assert project_name(sample_toml_doc, "fallback") == "my-package"

    def test_normalizes_fallback(self) -> None:
        doc = tomlkit.parse("[project]")
        assert project_name(doc, "My_Dir") == "my-dir"

    def test_no_project_table(self) -> None:
        assert project_name(tomlkit.parse(""), "fallback") == "fallback"


class TestProjectVersion:
    def test_returns_version(self, sample_toml_doc: tomlkit.TOMLDocument) -> None:
        assert project_version(sample_toml_doc) == "2.0.0-rc.1"

    def test_returns_default_when_missing(self) -> None:
        doc = tomlkit.parse("[project]")
        assert project_version(doc) == "0.0.0"


class TestRewriteProjectVersion:
    def test_rewrites_in_place(self, tmp_pyproject: Path) -> None:
        old, new = rewrite_project_version(tmp_pyproject, lambda v: "9.9.9")
        assert (old, new) == ("1.2.3", "9.9.9")

        text = tmp_pyproject.read_text()
        assert "# Release metadata" in text
        assert 'version = "9.9.9"' in text
        assert "# bumped by CI" in text
        assert project_version(load_pyproject(tmp_pyproject)) == "9.9.9"

    def test_passes_current_version(self, tmp_pyproject: Path) -> None:
        seen: list[str] = []

        def change(version: str) -> str:
            seen.append(version)
            return version

        rewrite_project_version(tmp_pyproject, change)
        assert seen == ["1.2.3"]

    def test_adds_missing_version(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "foo"\n')
        old, _ = rewrite_project_version(pyproject, lambda v: "0.1.0")
        assert old == "0.0.0"
        assert project_version(load_pyproject(pyproject)) == "0.1.0"

    def test_failed_change_leaves_file_alone(self, tmp_pyproject: Path) -> None:
        before = tmp_pyproject.read_text()

        def change(version: str) -> str:
            raise ValueError("nope")

        with pytest.raises(ValueError, match="nope"):
            rewrite_project_version(tmp_pyproject, change)
        assert tmp_pyproject.read_text() == before

    def test_no_project_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.other]\nkey = 1\n")
        with pytest.raises(KeyError):
            rewrite_project_version(pyproject, lambda v: "1.0.0")
