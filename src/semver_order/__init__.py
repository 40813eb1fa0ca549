# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and sorting.

Example:
    >>> from semver_order import parse_version, compare_versions, is_valid_semver
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>>
    >>> is_valid_semver("1.0")
    False
    >>>
    >>> compare_versions("1.0.0-alpha", "1.0.0")
    -1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    is_valid_semver,
    InvalidVersionError,
)
from .compare import (
    compare,
    compare_prerelease,
    less_than,
    less_or_equal,
    greater_than,
    greater_or_equal,
    is_equal,
    version_key,
    sort_versions,
)
from .ordering import (
    compare_versions,
    sort_version_strings,
    max_version,
    min_version,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "InvalidVersionError",
    # Version comparison
    "compare",
    "compare_prerelease",
    "less_than",
    "less_or_equal",
    "greater_than",
    "greater_or_equal",
    "is_equal",
    "version_key",
    "sort_versions",
    # String helpers
    "compare_versions",
    "sort_version_strings",
    "max_version",
    "min_version",
]
