# SPDX-License-Identifier: MIT
"""Version comparison for dotted-numeric versions.

Components are compared most significant first. A missing component sorts
before any present one, so 1.2 < 1.2.0 < 1.2.0.0.
"""

from __future__ import annotations

from typing import Union

from .version import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("1.2", "1.2")
        0
        >>> compare_versions("1.2.0", "1.2")
        1
    """
    key1 = _coerce(version1).sort_key
    key2 = _coerce(version2).sort_key
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.10", "1.2.0", "1.2"], key=version_key)
        ['1.2', '1.2.0', '1.10']
    """
    return _coerce(version).sort_key
