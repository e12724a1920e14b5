# SPDX-License-Identifier: MIT
"""Version range parsing for package version constraints.

This package parses dotted-numeric versions and bracketed version range
specifiers into immutable interval objects.

Example:
    >>> from version_spec import parse_version_range, parse_version
    >>>
    >>> spec = parse_version_range("[1.2,2.3)")
    >>> spec.min_inclusive, spec.max_inclusive
    (True, False)
    >>> parse_version("2.0") in spec
    True
    >>>
    >>> parse_version_range("1.2,2.3") is None
    True
"""

__version__ = "0.1.0"

from .version import (
    Version,
    parse_version,
    try_parse_version,
    is_valid_version,
    InvalidVersionError,
    VERSION_PATTERN,
)
from .compare import (
    compare_versions,
    version_key,
)
from .version_range import (
    VersionRange,
    parse_version_range,
    is_valid_version_range,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    "InvalidVersionError",
    "VERSION_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    # Range parsing
    "VersionRange",
    "parse_version_range",
    "is_valid_version_range",
]
