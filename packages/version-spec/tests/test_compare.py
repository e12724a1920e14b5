# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from version_spec import (
    InvalidVersionError,
    parse_version,
    compare_versions,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0", "1.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0", "2.0") == -1
        assert compare_versions("2.0", "1.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0", "1.1") == -1
        assert compare_versions("1.1", "1.0") == 1

    def test_numeric_not_lexical(self):
        """Test that components compare as numbers."""
        assert compare_versions("1.10", "1.9") == 1

    def test_missing_component_sorts_first(self):
        """Test that a missing component is lower than zero."""
        assert compare_versions("1.2", "1.2.0") == -1
        assert compare_versions("1.2.0", "1.2.0.0") == -1
        assert compare_versions("1.2.0.0", "1.2") == 1

    def test_whitespace_normalised(self):
        """Test that padded strings compare equal to their canonical form."""
        assert compare_versions(" 1 . 2 ", "1.2") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0")
        v2 = parse_version("2.0")
        assert compare_versions(v1, v2) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0")
        assert compare_versions(v, "2.0") == -1
        assert compare_versions("1.0", v) == 0

    def test_invalid_string(self):
        """Test that an invalid version string raises error."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1", "1.0")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0", "1.0", "1.1", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0", "1.0.1", "1.1", "2.0"]

    def test_sorting_component_counts(self):
        """Test sorting versions with differing component counts."""
        versions = ["1.2.0.0", "1.2", "1.2.0"]
        assert sorted(versions, key=version_key) == ["1.2", "1.2.0", "1.2.0.0"]

    def test_sorting_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0"), parse_version("1.0")]
        sorted_versions = sorted(versions, key=version_key)
        assert sorted_versions[0].major == 1
        assert sorted_versions[1].major == 2


class TestTransitivity:
    """Tests for comparison transitivity."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a = "1.2"
        b = "1.2.0"
        c = "1.10"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0", "2.0") == -1
        assert compare_versions("2.0", "1.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0", "1.0.0", "1.0.0.0"]:
            assert compare_versions(v, v) == 0
