# SPDX-License-Identifier: MIT
"""Versioned names: a package name and a version joined by a hyphen.

Format: {name}-{major}.{minor}.{patch}[-{pre_release}]

Examples:
- lib-1.2.3
- my_app-1.2.3-alpha.1
"""

from __future__ import annotations

from typing import Union

from .errors import ParseError, SplitError, SplitErrorKind
from .version import Version, parse_version


def versioned_name(version: Union[Version, str], name: str) -> str:
    """Build a versioned name from a version and a package name.

    Args:
        version: Version object or version string
        name: Package name, must satisfy :func:`is_valid_name`

    Returns:
        The versioned name

    Raises:
        ParseError: If ``version`` is a string that is not a valid version
        InvalidNameError: If the name is not valid

    Examples:
        >>> versioned_name("1.2.3", "lib")
        'lib-1.2.3'
        >>> versioned_name("1.2.3-alpha.1", "my_app")
        'my_app-1.2.3-alpha.1'
    """
    if isinstance(version, str):
        version = parse_version(version)
    return version.versioned_name(name)


def split_versioned_name(full_name: str) -> tuple[str, Version]:
    """Split a versioned name into its package name and version.

    The split happens at the first hyphen. The name part is returned as-is
    and is not checked against the name grammar, so ``"Foo-1.0.0"`` splits
    into ``("Foo", Version(1, 0, 0))``.

    Args:
        full_name: A string such as ``"mypackage-1.2.3"`` or
            ``"mypackage-1.2.3-beta"``

    Returns:
        Tuple of (name, version)

    Raises:
        SplitError: With kind MISSING_HYPHEN if there is no hyphen, or
            VERSION_PARSE_ERROR if the text after it is not a valid version

    Examples:
        >>> split_versioned_name("lib-1.2.3-beta")
        ('lib', Version(major=1, minor=2, patch=3, pre_release='beta'))
    """
    name, hyphen, version_string = full_name.partition("-")
    if not hyphen:
        raise SplitError(SplitErrorKind.MISSING_HYPHEN, full_name)

    try:
        version = parse_version(version_string)
    except ParseError as e:
        raise SplitError(SplitErrorKind.VERSION_PARSE_ERROR, full_name, cause=e) from e

    return name, version
