"""Reading and rewriting the version held in a pyproject.toml.

tomlkit keeps comments and layout intact, so a bump only touches the
``version = ...`` line.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, cast

import tomlkit
from packaging.utils import canonicalize_name

DEFAULT_VERSION = "0.0.0"


def load_pyproject(path: Path) -> tomlkit.TOMLDocument:
    return tomlkit.parse(path.read_text())


def save_pyproject(path: Path, doc: tomlkit.TOMLDocument) -> None:
    path.write_text(tomlkit.dumps(doc))


def project_name(doc: tomlkit.TOMLDocument, fallback: str) -> str:
    """Return [project].name normalized per PEP 503, or fallback if unset."""
    name = doc.get("project", {}).get("name") or fallback
    return canonicalize_name(name)


def project_version(doc: tomlkit.TOMLDocument) -> str:
    """Return [project].version, or "0.0.0" if unset."""
    return str(doc.get("project", {}).get("version", DEFAULT_VERSION))


def rewrite_project_version(
    path: Path, change: Callable[[str], str]
) -> tuple[str, str]:
    """Pass [project].version of the file at path through change and save.

    The file is only written once change has returned, so an exception from
    change leaves it untouched.

    Args:
        path: pyproject.toml to rewrite.
        change: Maps the current version string to the new one.

    Returns:
        The (old, new) version strings.

    Raises:
        KeyError: If the file has no [project] table.
    """
    doc = load_pyproject(path)
    # Cast needed because tomlkit types are complex unions
    project = cast(dict[str, Any], doc["project"])
    old = str(project.get("version", DEFAULT_VERSION))
    new = change(old)
    project["version"] = new
    save_pyproject(path, doc)
    return old, new
