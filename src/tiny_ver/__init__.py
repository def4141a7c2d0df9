# SPDX-License-Identifier: MIT
"""Compact version parsing and versioned names.

This package parses and formats MAJOR.MINOR.PATCH[-pre_release] versions,
validates lower-case package names, and joins or splits the two as
``name-version`` strings.

Example:
    >>> from tiny_ver import parse_version, is_valid_name, split_versioned_name
    >>>
    >>> version = parse_version("1.2.3-alpha.1")
    >>> version.pre_release
    'alpha.1'
    >>> version.versioned_name("my_app")
    'my_app-1.2.3-alpha.1'
    >>>
    >>> is_valid_name("tiny_ver")
    True
    >>>
    >>> split_versioned_name("lib-1.2.3")
    ('lib', Version(major=1, minor=2, patch=3, pre_release=None))
"""

__version__ = "0.1.0"

from .errors import (
    TinyVersionError,
    ParseError,
    ParseErrorKind,
    InvalidNameError,
    SplitError,
    SplitErrorKind,
)
from .name import (
    NAME_PATTERN,
    is_valid_name,
    normalize_name,
)
from .version import (
    MAX_COMPONENT,
    Version,
    parse_version,
    format_version,
    is_valid_version,
)
from .versioned import (
    versioned_name,
    split_versioned_name,
)

__all__ = [
    # Errors
    "TinyVersionError",
    "ParseError",
    "ParseErrorKind",
    "InvalidNameError",
    "SplitError",
    "SplitErrorKind",
    # Names
    "NAME_PATTERN",
    "is_valid_name",
    "normalize_name",
    # Versions
    "MAX_COMPONENT",
    "Version",
    "parse_version",
    "format_version",
    "is_valid_version",
    # Versioned names
    "versioned_name",
    "split_versioned_name",
]
