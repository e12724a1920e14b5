# SPDX-License-Identifier: MIT
"""Version range parsing.

Accepted forms:
- "1.2"        at least 1.2
- "[1.2]"      exactly 1.2
- "(1.2,)"     greater than 1.2
- "(,1.2]"     at most 1.2
- "[1.2,2.3)"  at least 1.2, less than 2.3

Whitespace is allowed around the brackets, the comma and inside versions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .compare import compare_versions
from .version import Version, try_parse_version

logger = logging.getLogger(__name__)

VersionParser = Callable[[str], Optional[Version]]

_MIN_BRACKETS = {"[": True, "(": False}
_MAX_BRACKETS = {"]": True, ")": False}


@dataclass(frozen=True)
class VersionRange:
    """An interval over versions.

    Either bound may be absent, meaning the range is unbounded on that side.
    The inclusive flags always reflect the bracket that was written, even
    when the bound itself is absent ("(,1.2]" has min_inclusive=False).

    Attributes:
        min_version: Lower bound, or None if unbounded below
        min_inclusive: Whether min_version itself is in the range
        max_version: Upper bound, or None if unbounded above
        max_inclusive: Whether max_version itself is in the range
    """

    min_version: Optional[Version] = None
    min_inclusive: bool = False
    max_version: Optional[Version] = None
    max_inclusive: bool = False

    def __str__(self) -> str:
        """Return the canonical range string, which parses back to this range."""
        if (
            self.min_version is not None
            and self.min_inclusive
            and self.max_version is None
            and not self.max_inclusive
        ):
            return str(self.min_version)
        if self.is_exact:
            return f"[{self.min_version}]"
        lower = "" if self.min_version is None else str(self.min_version)
        upper = "" if self.max_version is None else str(self.max_version)
        opening = "[" if self.min_inclusive else "("
        closing = "]" if self.max_inclusive else ")"
        return f"{opening}{lower},{upper}{closing}"

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.contains(version)

    @property
    def is_exact(self) -> bool:
        """Return True if the range matches a single version."""
        return (
            self.min_version is not None
            and self.min_version == self.max_version
            and self.min_inclusive
            and self.max_inclusive
        )

    def contains(self, version: Union[str, Version]) -> bool:
        """Check whether a version falls inside this range.

        Args:
            version: Version string or Version object

        Raises:
            InvalidVersionError: If a version string is invalid
        """
        if self.min_version is not None:
            cmp = compare_versions(version, self.min_version)
            if cmp < 0 or (cmp == 0 and not self.min_inclusive):
                return False
        if self.max_version is not None:
            cmp = compare_versions(version, self.max_version)
            if cmp > 0 or (cmp == 0 and not self.max_inclusive):
                return False
        return True


def _parse_bound(token: str, parse_version: VersionParser) -> tuple[bool, Optional[Version]]:
    """Parse one side of a bracketed range.

    Returns (ok, version). A blank token is ok with no version.
    """
    if not token.strip():
        return True, None
    version = parse_version(token)
    return version is not None, version


def parse_version_range(
    value: str,
    parse_version: VersionParser = try_parse_version,
) -> Optional[VersionRange]:
    """Parse a version range string.

    A string that is itself a valid version is always read as a bare
    version, before any bracket syntax is considered.

    Args:
        value: The range string
        parse_version: Parses a single version, returning None on failure

    Returns:
        The parsed VersionRange, or None if the string is not a valid range

    Raises:
        TypeError: If value is not a string

    Examples:
        >>> str(parse_version_range(" [ 1.2 , 2.3 ) "))
        '[1.2,2.3)'
        >>> parse_version_range("(,1.2]").min_inclusive
        False
        >>> parse_version_range("1.2,2.3") is None
        True
    """
    if not isinstance(value, str):
        raise TypeError(f"Version range must be a string, got {type(value).__name__}")

    value = value.strip()

    version = parse_version(value)
    if version is not None:
        return VersionRange(min_version=version, min_inclusive=True)

    if len(value) < 3:
        logger.debug("Rejected version range %r: too short", value)
        return None

    min_inclusive = _MIN_BRACKETS.get(value[0])
    max_inclusive = _MAX_BRACKETS.get(value[-1])
    if min_inclusive is None or max_inclusive is None:
        logger.debug("Rejected version range %r: missing brackets", value)
        return None

    parts = value[1:-1].split(",")
    if len(parts) > 2:
        logger.debug("Rejected version range %r: more than one comma", value)
        return None

    # A single token is used for both bounds
    min_token = parts[0]
    max_token = parts[-1]

    min_ok, min_version = _parse_bound(min_token, parse_version)
    max_ok, max_version = _parse_bound(max_token, parse_version)
    if not (min_ok and max_ok):
        logger.debug("Rejected version range %r: invalid bound version", value)
        return None

    return VersionRange(
        min_version=min_version,
        min_inclusive=min_inclusive,
        max_version=max_version,
        max_inclusive=max_inclusive,
    )


def is_valid_version_range(value: str) -> bool:
    """Check if a string is a valid version range.

    Examples:
        >>> is_valid_version_range("(,1.2]")
        True
        >>> is_valid_version_range("[1.2,2.3,3.4]")
        False
    """
    if not isinstance(value, str):
        return False
    return parse_version_range(value) is not None
