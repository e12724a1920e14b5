# SPDX-License-Identifier: MIT
"""Dotted-numeric version parsing.

Supports MAJOR.MINOR[.BUILD[.REVISION]] with whitespace allowed around each
component:
- "1.2", "1.2.3", "1.2.3.4"
- "  1 . 2  " (parses as 1.2)
- "01.2" (leading zeros are dropped, parses as 1.2)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

# Two to four digit runs separated by dots, whitespace allowed around each run
VERSION_PATTERN = re.compile(
    r"\s*(?P<major>[0-9]+)\s*"
    r"\.\s*(?P<minor>[0-9]+)\s*"
    r"(?:\.\s*(?P<build>[0-9]+)\s*"
    r"(?:\.\s*(?P<revision>[0-9]+)\s*)?)?"
)

# Components are 32-bit signed integers
MAX_COMPONENT = 2**31 - 1


class InvalidVersionError(Exception):
    """Raised when a string is not a valid dotted-numeric version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed dotted-numeric version.

    Attributes:
        major: Major version number
        minor: Minor version number
        build: Optional third component
        revision: Optional fourth component, only present when build is
    """

    major: int
    minor: int
    build: Optional[int] = None
    revision: Optional[int] = None

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return ".".join(str(part) for part in self.components)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key < other.sort_key

    @property
    def components(self) -> tuple[int, ...]:
        """Return the present components, most significant first."""
        parts = [self.major, self.minor]
        if self.build is not None:
            parts.append(self.build)
            if self.revision is not None:
                parts.append(self.revision)
        return tuple(parts)

    @property
    def sort_key(self) -> tuple[int, int, int, int]:
        """Return a comparison key; absent components sort before zero."""
        build = -1 if self.build is None else self.build
        revision = -1 if self.revision is None else self.revision
        return (self.major, self.minor, build, revision)


def parse_version(version_string: str) -> Version:
    """Parse a dotted-numeric version string into a Version object.

    Args:
        version_string: A string of two to four dot-separated non-negative
            integers, optionally padded with whitespace

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string is not a valid version

    Examples:
        >>> parse_version("1.2")
        Version(major=1, minor=2, build=None, revision=None)

        >>> parse_version(" 1 . 2 . 3 ")
        Version(major=1, minor=2, build=3, revision=None)
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string.strip():
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    match = VERSION_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(version_string)

    values = {
        name: None if raw is None else int(raw)
        for name, raw in match.groupdict().items()
    }
    for name, value in values.items():
        if value is not None and value > MAX_COMPONENT:
            raise InvalidVersionError(
                version_string, f"Version component {name} out of range: {value}"
            )

    return Version(**values)


def try_parse_version(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse_version("2.1")
        Version(major=2, minor=1, build=None, revision=None)
        >>> try_parse_version("2") is None
        True
    """
    try:
        return parse_version(version_string)
    except InvalidVersionError:
        return None


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid dotted-numeric version.

    Examples:
        >>> is_valid_version("1.0")
        True
        >>> is_valid_version("1")
        False
        >>> is_valid_version("1.0.0.0.0")
        False
    """
    return try_parse_version(version_string) is not None
