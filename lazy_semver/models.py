"""Data models for lazy-semver.

These Pydantic models hold the parsed state of a version. The
:class:`~lazy_semver.versions.Version` wrapper creates one lazily and routes
every mutation through it, so field constraints are enforced on assignment.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PRE_RELEASE_PATTERN = r"^[A-Za-z0-9.-]*$"


class Part(str, Enum):
    """One of the three numeric components of a version."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


class VersionParts(BaseModel):
    """Parsed components of a semantic version.

    Attributes:
        major: Incompatible API changes. Never negative.
        minor: Backwards compatible features. Never negative.
        patch: Backwards compatible fixes. Never negative.
        pre_release: Dot/hyphen separated ASCII alphanumerics, or "" when
                     the version is not a pre-release.
    """

    model_config = ConfigDict(validate_assignment=True)

    major: int = Field(default=0, ge=0, strict=True)
    minor: int = Field(default=0, ge=0, strict=True)
    patch: int = Field(default=0, ge=0, strict=True)
    pre_release: str = Field(default="", pattern=PRE_RELEASE_PATTERN)

    def render(self) -> str:
        """Format as MAJOR.MINOR.PATCH[-PRERELEASE]."""
        core = f"{self.major}.{self.minor}.{self.patch}"
        return f"{core}-{self.pre_release}" if self.pre_release else core
