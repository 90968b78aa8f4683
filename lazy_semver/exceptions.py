"""Exceptions raised by lazy-semver."""

from __future__ import annotations


class InvalidVersion(ValueError):
    """A version component was given a value it cannot hold.

    Raised for negative (or non-integer) digits and for pre-release labels
    containing characters outside ``[A-Za-z0-9.-]``. The operation that
    raised it leaves the version untouched.
    """
