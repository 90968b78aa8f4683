"""Version parsing and bumping utilities.

A :class:`Version` wraps a raw version string and only parses it when one of
its components is first read or written. Parsing is lenient about the numeric
part, with special handling for incomplete version strings (e.g., "1.0" →
"1.0.0") and non-numeric segments (→ 0), but strict about the pre-release
label. Build metadata ("+build") is not supported.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

import semver
from pydantic import ValidationError

from .exceptions import InvalidVersion
from .models import Part, VersionParts

# Leading ASCII digits of a segment, after optional whitespace and "+" sign.
_LEADING_INT = re.compile(r"\s*\+?([0-9]+)", re.ASCII)


def _coerce_segment(segment: str) -> int:
    """Best-effort integer conversion: "3" → 3, "12abc" → 12, "a" → 0."""
    match = _LEADING_INT.match(segment)
    return int(match.group(1)) if match else 0


def _assign(parts: VersionParts, field: str, value: Any) -> None:
    """Set a field on parts, translating validation failures.

    The model validates on assignment, so a rejected value never reaches
    the stored state.

    Raises:
        InvalidVersion: If the model rejects the value.
    """
    try:
        setattr(parts, field, value)
    except ValidationError as exc:
        if field == "pre_release":
            msg = (
                f"Invalid pre-release {value!r}: only ASCII letters, digits, "
                "'.' and '-' are allowed"
            )
        else:
            msg = f"Invalid {field} version {value!r}: must be a non-negative integer"
        raise InvalidVersion(msg) from exc


def parse_parts(version_str: str) -> VersionParts:
    """Parse a version string into its components.

    Handles incomplete versions by padding with zeros:
    - "1" → 1.0.0
    - "1.2" → 1.2.0
    - "1.2.3-rc.1" → 1.2.3 with pre-release "rc.1"

    Everything after the first "-" is the pre-release label. The numeric part
    is split into at most 3 segments; segments that aren't numbers count as 0.

    Raises:
        InvalidVersion: If the pre-release label contains invalid characters.
    """
    numeric, _, pre_release = version_str.partition("-")
    digits = [_coerce_segment(segment) for segment in numeric.split(".", 2)]
    while len(digits) < 3:
        digits.append(0)
    major, minor, patch = digits
    parts = VersionParts(major=major, minor=minor, patch=patch)
    if pre_release:
        _assign(parts, "pre_release", pre_release)
    return parts


class Version:
    """A mutable semantic version, parsed from a string on first use.

    Mutators work in place and return the instance, so calls chain::

        Version("1.2.3").increment_minor_version().set_pre_release_version("rc.1")

    Instances are not thread-safe; share them between threads only behind
    your own lock.
    """

    def __init__(self, version: str = "") -> None:
        self._raw = version
        self._parts: VersionParts | None = None

    def __str__(self) -> str:
        return self.get_version()

    def __repr__(self) -> str:
        shown = self._raw if self._parts is None else self._parts.render()
        return f"{type(self).__name__}({shown!r})"

    @property
    def is_parsed(self) -> bool:
        """Whether the raw string has been parsed yet."""
        return self._parts is not None

    def _parse(self) -> VersionParts:
        """Parse the raw string once and return the parsed components."""
        if self._parts is None:
            self._parts = parse_parts(self._raw)
        return self._parts

    def get_version(self) -> str:
        """Return the version as MAJOR.MINOR.PATCH[-PRERELEASE]."""
        return self._parse().render()

    # Getters

    def get_major_version(self) -> int:
        return self._parse().major

    def get_minor_version(self) -> int:
        return self._parse().minor

    def get_patch_version(self) -> int:
        return self._parse().patch

    def get_pre_release_version(self) -> str:
        """Return the pre-release label, or "" if there is none."""
        return self._parse().pre_release

    major = property(get_major_version)
    minor = property(get_minor_version)
    patch = property(get_patch_version)
    pre_release = property(get_pre_release_version)

    # Setters

    def set_major_version(self, value: int) -> Version:
        _assign(self._parse(), "major", value)
        return self

    def set_minor_version(self, value: int) -> Version:
        _assign(self._parse(), "minor", value)
        return self

    def set_patch_version(self, value: int) -> Version:
        _assign(self._parse(), "patch", value)
        return self

    def set_pre_release_version(self, value: str) -> Version:
        """Set the pre-release label. An empty string removes it.

        Raises:
            InvalidVersion: If the label contains anything other than ASCII
                            letters, digits, "." and "-".
        """
        _assign(self._parse(), "pre_release", value)
        return self

    # Increments reset every lower-precedence digit.

    def increment_major_version(self) -> Version:
        self.set_major_version(self.get_major_version() + 1)
        self.set_minor_version(0)
        return self.set_patch_version(0)

    def increment_minor_version(self) -> Version:
        self.set_minor_version(self.get_minor_version() + 1)
        return self.set_patch_version(0)

    def increment_patch_version(self) -> Version:
        return self.set_patch_version(self.get_patch_version() + 1)

    # Decrements leave lower digits alone and refuse to go below zero.

    def decrement_major_version(self) -> Version:
        return self.set_major_version(self.get_major_version() - 1)

    def decrement_minor_version(self) -> Version:
        return self.set_minor_version(self.get_minor_version() - 1)

    def decrement_patch_version(self) -> Version:
        return self.set_patch_version(self.get_patch_version() - 1)

    # Part-addressed variants, for callers that pick the digit at runtime.

    def get(self, part: Part | str) -> int:
        return getattr(self._parse(), Part(part).value)

    def set(self, part: Part | str, value: int) -> Version:
        _assign(self._parse(), Part(part).value, value)
        return self

    def increment(self, part: Part | str) -> Version:
        return _INCREMENTS[Part(part)](self)

    def decrement(self, part: Part | str) -> Version:
        return _DECREMENTS[Part(part)](self)

    # Conversions

    def to_parts(self) -> VersionParts:
        """Return a detached copy of the parsed components."""
        return self._parse().model_copy()

    def to_semver(self) -> semver.Version:
        """Convert to a ``semver.Version`` for use with the semver package."""
        parts = self._parse()
        return semver.Version(
            major=parts.major,
            minor=parts.minor,
            patch=parts.patch,
            prerelease=parts.pre_release or None,
        )


_INCREMENTS: dict[Part, Callable[[Version], Version]] = {
    Part.MAJOR: Version.increment_major_version,
    Part.MINOR: Version.increment_minor_version,
    Part.PATCH: Version.increment_patch_version,
}
_DECREMENTS: dict[Part, Callable[[Version], Version]] = {
    Part.MAJOR: Version.decrement_major_version,
    Part.MINOR: Version.decrement_minor_version,
    Part.PATCH: Version.decrement_patch_version,
}


def bump(version_str: str, part: Part | str = Part.PATCH) -> str:
    """Increment one digit of a version string and return the result.

    Examples:
        bump("1.2.3") → "1.2.4"
        bump("1.2.3", "minor") → "1.3.0"
        bump("2", "major") → "3.0.0"
    """
    return Version(version_str).increment(part).get_version()
