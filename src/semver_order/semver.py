# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +001, +build.123, +exp.sha.5114f85

Only the three numeric fields are validated. Pre-release and build metadata
text is kept verbatim, so loosely formed inputs such as ``1.0.0-a-b`` or
``01.2.3`` are accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

from .compare import compare, is_equal

# Field slots filled by the scanner, in order of appearance
_MAJOR, _MINOR, _PATCH, _PRERELEASE, _BUILD = range(5)
_NUMERIC_FIELD_NAMES = ("major", "minor", "patch")

# int() and str() refuse more than sys.get_int_max_str_digits() digits (640 at
# the lowest setting), so long numbers are converted in chunks below that
_CHUNK_DIGITS = 600


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Ordering operators follow SemVer precedence. Equality and hashing cover
    major, minor, patch and the literal pre-release text; build metadata is
    never considered.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" if none
        build: Build metadata (e.g., "build.123", "20130313144700"), "" if none
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] rendering."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return is_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return ".".join(_int_to_digits(value) for value in (self.major, self.minor, self.patch))


def _split_fields(version_string: str) -> list[str]:
    """Scan the input once, distributing characters over the five field slots.

    A '.' advances major -> minor -> patch and is literal text afterwards.
    Only the first '-' (before any '+') opens the pre-release field and only
    the first '+' opens the build metadata field; later ones are literal.
    """
    fields: list[list[str]] = [[] for _ in range(5)]
    slot = _MAJOR
    in_prerelease = False
    in_build = False

    for char in version_string:
        if char == "." and slot < _PATCH:
            slot += 1
            continue
        if char == "-" and not in_prerelease and not in_build:
            in_prerelease = True
            slot = _PRERELEASE
            continue
        if char == "+" and not in_build:
            in_build = True
            slot = _BUILD
            continue
        fields[slot].append(char)

    return ["".join(chars) for chars in fields]


def _digits_to_int(text: str) -> int:
    value = 0
    for start in range(0, len(text), _CHUNK_DIGITS):
        chunk = text[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def _int_to_digits(value: int) -> str:
    if value < 10**_CHUNK_DIGITS:
        return str(value)
    high, low = divmod(value, 10**_CHUNK_DIGITS)
    return _int_to_digits(high) + str(low).zfill(_CHUNK_DIGITS)


def _parse_numeric(version_string: str, name: str, text: str) -> int:
    # str.isdigit alone also accepts non-ASCII digits such as superscripts
    if not text or not text.isascii() or not text.isdigit():
        raise InvalidVersionError(
            version_string,
            f"Invalid semantic version: {version_string} "
            f"({name} version {text!r} is not a non-negative integer)",
        )
    return _digits_to_int(text)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If a numeric component is missing or not a
            non-negative integer

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease='alpha.1', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    fields = _split_fields(version_string)
    major, minor, patch = (
        _parse_numeric(version_string, name, text)
        for name, text in zip(_NUMERIC_FIELD_NAMES, fields[_MAJOR : _PATCH + 1])
    )

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=fields[_PRERELEASE],
        build=fields[_BUILD],
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
