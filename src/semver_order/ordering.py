# SPDX-License-Identifier: MIT
"""Ordering helpers that accept raw version strings."""

from __future__ import annotations

from typing import Iterable, Union

from .compare import compare, sort_versions, version_key
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid. version1 is
            parsed first, so its error wins when both are invalid.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)
    return compare(v1, v2)


def sort_version_strings(versions: list[str]) -> None:
    """Sort a list of version strings in place, in ascending precedence.

    Every element is parsed before anything is reordered, so an invalid entry
    leaves the list untouched. Sorted elements are written back in their
    rendered form (``str(Version)``).

    Raises:
        InvalidVersionError: On the first element that fails to parse
    """
    parsed = [parse_version(version) for version in versions]
    sort_versions(parsed)
    versions[:] = [str(version) for version in parsed]


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If versions is empty
        InvalidVersionError: If any version string is invalid
    """
    return max((_coerce(version) for version in versions), key=version_key)


def min_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the lowest precedence.

    Raises:
        ValueError: If versions is empty
        InvalidVersionError: If any version string is invalid
    """
    return min((_coerce(version) for version in versions), key=version_key)
