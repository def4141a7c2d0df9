# SPDX-License-Identifier: MIT
"""Version parsing and formatting.

Supports MAJOR.MINOR.PATCH with an optional pre-release suffix:
- Release: 1.2.3, 0.0.1
- Pre-release: 1.2.3-alpha, 1.2.3-alpha.1, 1.2.3-rc.0, 1.2.3-x-y.7

Pre-release identifiers are ASCII alphanumerics and hyphens. Numeric
identifiers may not have leading zeros, although the MAJOR, MINOR and PATCH
fields may. Build metadata (``+build``) is not part of the grammar.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidNameError, ParseError, ParseErrorKind
from .name import is_valid_name

# Largest value accepted for MAJOR, MINOR and PATCH (unsigned 32-bit)
MAX_COMPONENT = 2**32 - 1

_NUMBER_PATTERN = re.compile(r"[0-9]+")
_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


def _parse_component(piece: str, value: str) -> int:
    if not _NUMBER_PATTERN.fullmatch(piece):
        raise ParseError(ParseErrorKind.INVALID_NUMBER, value)
    number = int(piece)
    if number > MAX_COMPONENT:
        raise ParseError(
            ParseErrorKind.INVALID_NUMBER,
            value,
            f"Invalid version '{value}': component {piece} exceeds {MAX_COMPONENT}",
        )
    return number


def _check_pre_release(pre_release: str, value: str) -> None:
    """Raise ParseError unless ``pre_release`` is a valid pre-release suffix."""
    if not pre_release:
        raise ParseError(
            ParseErrorKind.INVALID_PRE_RELEASE,
            value,
            f"Invalid version '{value}': pre-release cannot be empty",
        )

    identifiers = pre_release.split(".")
    if any(not identifier for identifier in identifiers):
        raise ParseError(
            ParseErrorKind.INVALID_PRE_RELEASE,
            value,
            f"Invalid version '{value}': empty pre-release identifier",
        )

    for identifier in identifiers:
        if not _IDENTIFIER_PATTERN.fullmatch(identifier):
            raise ParseError(
                ParseErrorKind.INVALID_PRE_RELEASE,
                value,
                f"Invalid version '{value}': pre-release identifier '{identifier}' "
                "may only contain ASCII letters, digits and hyphens",
            )
        # "0" is allowed, "01" is not
        if _NUMBER_PATTERN.fullmatch(identifier) and len(identifier) > 1 and identifier[0] == "0":
            raise ParseError(
                ParseErrorKind.INVALID_PRE_RELEASE,
                value,
                f"Invalid version '{value}': numeric pre-release identifier "
                f"'{identifier}' has a leading zero",
            )


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Instances are immutable and compare by value. They are not ordered.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        pre_release: Optional pre-release suffix, stored verbatim (e.g. "rc.1")
    """

    major: int
    minor: int
    patch: int
    pre_release: Optional[str] = None

    def __post_init__(self) -> None:
        for number in (self.major, self.minor, self.patch):
            if (
                not isinstance(number, int)
                or isinstance(number, bool)
                or not 0 <= number <= MAX_COMPONENT
            ):
                raise ParseError(
                    ParseErrorKind.INVALID_NUMBER,
                    repr(number),
                    f"Invalid version component {number!r}: "
                    f"expected an integer between 0 and {MAX_COMPONENT}",
                )
        if self.pre_release is not None:
            if not isinstance(self.pre_release, str):
                raise ParseError(
                    ParseErrorKind.INVALID_PRE_RELEASE,
                    repr(self.pre_release),
                    f"Invalid pre-release {self.pre_release!r}: expected a string",
                )
            _check_pre_release(self.pre_release, self.pre_release)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if self.pre_release is not None:
            return f"{self.base_version}-{self.pre_release}"
        return self.base_version

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.pre_release is not None

    @property
    def base_version(self) -> str:
        """Return the version without its pre-release suffix."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def versioned_name(self, name: str) -> str:
        """Combine a package name with this version.

        Args:
            name: Package name, must satisfy :func:`is_valid_name`

        Returns:
            ``{name}-{version}``, e.g. ``"lib-1.2.3-beta"``

        Raises:
            InvalidNameError: If the name is not valid

        Examples:
            >>> parse_version("1.2.3-beta").versioned_name("lib")
            'lib-1.2.3-beta'
        """
        if not is_valid_name(name):
            raise InvalidNameError(name)
        return f"{name}-{self}"


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    The string is split on its first hyphen only, so hyphens inside the
    pre-release suffix are kept. Checks run in order and the first failure
    is reported: field count, then numbers, then the pre-release suffix.

    Args:
        version_string: A string in MAJOR.MINOR.PATCH[-pre_release] format

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: With kind INVALID_FORMAT if there are not exactly three
            numeric fields, INVALID_NUMBER if a field is not an unsigned
            integer, or INVALID_PRE_RELEASE if the suffix is malformed

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, pre_release=None)

        >>> parse_version("1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, pre_release='alpha.1')
    """
    if not isinstance(version_string, str):
        raise ParseError(
            ParseErrorKind.INVALID_FORMAT,
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    version_part, hyphen, pre_release_part = version_string.partition("-")

    fields = version_part.split(".")
    if len(fields) != 3:
        raise ParseError(ParseErrorKind.INVALID_FORMAT, version_string)

    major, minor, patch = (_parse_component(field, version_string) for field in fields)

    pre_release: Optional[str] = None
    if hyphen:
        _check_pre_release(pre_release_part, version_string)
        pre_release = pre_release_part

    return Version(major=major, minor=minor, patch=patch, pre_release=pre_release)


def format_version(version: Version) -> str:
    """Return the canonical string form of a version.

    Examples:
        >>> format_version(parse_version("01.2.3-rc.1"))
        '1.2.3-rc.1'
    """
    return str(version)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_version("1.0.0")
        True
        >>> is_valid_version("1.0")
        False
        >>> is_valid_version("1.0.0-rc.01")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
