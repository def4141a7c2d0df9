# SPDX-License-Identifier: MIT
"""Property-based tests for versions and versioned names.

These tests verify that:
- Formatting a parsed version and parsing it again gives the same version
- Splitting a composed versioned name gives back the name and version
- is_valid_name agrees with a character-level reading of the grammar
- Numeric pre-release identifiers are rejected exactly when they have a leading zero
"""

from __future__ import annotations

import string

import pytest
from hypothesis import given, strategies as st

from tiny_ver import (
    MAX_COMPONENT,
    ParseError,
    ParseErrorKind,
    Version,
    is_valid_name,
    parse_version,
    split_versioned_name,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

components = st.integers(min_value=0, max_value=MAX_COMPONENT)

# Numeric identifiers without leading zeros, or identifiers with a non-digit
numeric_identifiers = st.from_regex(r"0|[1-9][0-9]{0,5}", fullmatch=True)
alphanumeric_identifiers = st.from_regex(r"[0-9]*[A-Za-z-][0-9A-Za-z-]*", fullmatch=True)
identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)

pre_releases = st.lists(identifiers, min_size=1, max_size=4).map(".".join)

valid_names = st.from_regex(r"[a-z]([a-z_]{0,10}[a-z])?", fullmatch=True)


@st.composite
def versions(draw):
    """Generate a valid Version."""
    pre_release = draw(st.one_of(st.none(), pre_releases))
    return Version(draw(components), draw(components), draw(components), pre_release)


@st.composite
def version_strings(draw):
    """Generate a valid version string, allowing leading zeros in fields."""
    fields = [
        draw(st.integers(min_value=0, max_value=3)) * "0" + str(draw(components))
        for _ in range(3)
    ]
    text = ".".join(fields)
    pre_release = draw(st.one_of(st.none(), pre_releases))
    if pre_release is not None:
        text += f"-{pre_release}"
    return text


# =============================================================================
# Properties
# =============================================================================


class TestRoundTrip:
    """Formatting and parsing are inverse operations."""

    @given(versions())
    def test_parse_of_format(self, version: Version):
        """Test that parse(str(v)) == v."""
        assert parse_version(str(version)) == version

    @given(version_strings())
    def test_parsed_strings_round_trip(self, text: str):
        """Test that any parseable string round-trips through its canonical form."""
        version = parse_version(text)
        assert parse_version(str(version)) == version


class TestSplitComposeProperties:
    """Splitting undoes composing for valid names."""

    @given(valid_names, versions())
    def test_split_inverts_compose(self, name: str, version: Version):
        """Test that split(compose(v, name)) == (name, v)."""
        assert split_versioned_name(version.versioned_name(name)) == (name, version)

    @given(valid_names, version_strings())
    def test_split_of_joined_string(self, name: str, text: str):
        """Test that split(name + '-' + s) == (name, parse(s))."""
        assert split_versioned_name(f"{name}-{text}") == (name, parse_version(text))


class TestNameProperties:
    """is_valid_name matches the name grammar."""

    @given(valid_names)
    def test_generated_names_valid(self, name: str):
        """Test that names built from the grammar are valid."""
        assert is_valid_name(name)

    @given(st.text(alphabet=string.ascii_letters + string.digits + "_-", max_size=12))
    def test_agrees_with_character_rules(self, name: str):
        """Test is_valid_name against the character-level rules."""
        expected = (
            len(name) > 0
            and name[0] in string.ascii_lowercase
            and name[-1] in string.ascii_lowercase
            and all(c in string.ascii_lowercase or c == "_" for c in name)
        )
        assert is_valid_name(name) is expected


class TestPreReleaseProperties:
    """Leading-zero rule for numeric pre-release identifiers."""

    @given(st.from_regex(r"[0-9]{1,6}", fullmatch=True))
    def test_numeric_identifier(self, identifier: str):
        """Test that numeric identifiers fail only with a leading zero."""
        text = f"1.0.0-rc.{identifier}"
        if len(identifier) > 1 and identifier.startswith("0"):
            with pytest.raises(ParseError) as exc_info:
                parse_version(text)
            assert exc_info.value.kind is ParseErrorKind.INVALID_PRE_RELEASE
        else:
            assert parse_version(text).pre_release == f"rc.{identifier}"
