"""Lazily-parsed, mutable semantic versions."""

from __future__ import annotations

from lazy_semver.exceptions import InvalidVersion
from lazy_semver.models import Part, VersionParts
from lazy_semver.versions import Version, bump, parse_parts

__all__ = ["InvalidVersion", "Part", "Version", "VersionParts", "bump", "parse_parts"]
