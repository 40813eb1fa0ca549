# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 ordering.

1.0.0-alpha < 1.0.0-alpha.1 < 1.0.0-alpha.beta < 1.0.0-beta < 1.0.0-beta.2
< 1.0.0-beta.11 < 1.0.0-rc.1 < 1.0.0

Build metadata is ignored in comparisons.
"""

from __future__ import annotations

import re
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from _typeshed import SupportsAllComparisons

    from .semver import Version

# A '-' inside pre-release text is literal, so numeric identifiers may be signed
_NUMERIC_IDENTIFIER = re.compile(r"-?[0-9]+")


def _sign(left: Any, right: Any) -> int:
    return (left > right) - (left < right)


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _compare_numeric(n1: str, n2: str) -> int:
    """Compare two numeric identifiers by value without converting them to int.

    Identifiers may be longer than int() accepts. Leading zeros are
    insignificant and "-0" equals "0".
    """
    digits1 = n1.lstrip("-").lstrip("0")
    digits2 = n2.lstrip("-").lstrip("0")
    negative1 = n1.startswith("-") and bool(digits1)
    negative2 = n2.startswith("-") and bool(digits2)

    if negative1 != negative2:
        return -1 if negative1 else 1

    result = _sign((len(digits1), digits1), (len(digits2), digits2))
    return -result if negative1 else result


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha). Otherwise identifiers are compared
    left to right: numeric ones numerically, alphanumeric ones in ASCII
    order, and numeric identifiers always sort below alphanumeric ones.
    When every shared position is equal, more identifiers win.
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        numeric1 = _is_numeric(p1)
        numeric2 = _is_numeric(p2)

        if numeric1 and numeric2:
            result = _compare_numeric(p1, p2)
        elif numeric1:
            return -1
        elif numeric2:
            return 1
        else:
            result = _sign(p1, p2)

        if result:
            return result

    return _sign(len(parts1), len(parts2))


def compare(version1: Version, version2: Version) -> int:
    """Compare two versions by precedence.

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2
    """
    for attr in ("major", "minor", "patch"):
        val1 = getattr(version1, attr)
        val2 = getattr(version2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return compare_prerelease(version1.prerelease, version2.prerelease)


def less_than(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) < 0


def less_or_equal(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) <= 0


def greater_than(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) > 0


def greater_or_equal(version1: Version, version2: Version) -> bool:
    return compare(version1, version2) >= 0


def is_equal(version1: Version, version2: Version) -> bool:
    """Field-wise equality of major, minor, patch and the pre-release text.

    Unlike ``compare(...) == 0`` the pre-release is matched literally, so
    ``1.0.0-rc.01`` and ``1.0.0-rc.1`` are not equal. Build metadata is ignored.
    """
    return (
        version1.major == version2.major
        and version1.minor == version2.minor
        and version1.patch == version2.patch
        and version1.prerelease == version2.prerelease
    )


def version_key(version: Version) -> SupportsAllComparisons:
    """Return a sort key for a Version, suitable for sorted() and min()/max().

    Examples:
        >>> release, alpha = Version(1, 0, 0), Version(1, 0, 0, "alpha")
        >>> sorted([release, alpha], key=version_key) == [alpha, release]
        True
    """
    return cmp_to_key(compare)(version)


def sort_versions(versions: list[Version]) -> None:
    """Sort a list of versions in place, in ascending precedence."""
    versions.sort(key=version_key)
