# SPDX-License-Identifier: MIT
"""Exceptions raised by version parsing and versioned-name handling.

Each failure family has a closed set of kinds so callers can branch on
``error.kind`` instead of matching message text:

- ParseError: INVALID_FORMAT, INVALID_NUMBER, INVALID_PRE_RELEASE
- InvalidNameError: the rejected name is available as ``error.name``
- SplitError: MISSING_HYPHEN, VERSION_PARSE_ERROR (with ``error.cause``)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class TinyVersionError(Exception):
    """Base class for all tiny-ver errors."""

    pass


class ParseErrorKind(Enum):
    """Reasons a version string can be rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_NUMBER = "invalid_number"
    INVALID_PRE_RELEASE = "invalid_pre_release"


_PARSE_MESSAGES = {
    ParseErrorKind.INVALID_FORMAT: "expected MAJOR.MINOR.PATCH",
    ParseErrorKind.INVALID_NUMBER: "version components must be unsigned integers",
    ParseErrorKind.INVALID_PRE_RELEASE: "invalid pre-release suffix",
}


class ParseError(TinyVersionError):
    """Raised when a string is not a valid version."""

    def __init__(self, kind: ParseErrorKind, value: str, message: str = ""):
        self.kind = kind
        self.value = value
        self.message = message or f"Invalid version '{value}': {_PARSE_MESSAGES[kind]}"
        super().__init__(self.message)


class InvalidNameError(TinyVersionError):
    """Raised when a package name does not follow the name grammar."""

    def __init__(self, name: str, message: str = ""):
        self.name = name
        self.message = message or (
            f"Invalid name '{name}': expected lower-case letters and underscores, "
            "starting and ending with a letter"
        )
        super().__init__(self.message)


class SplitErrorKind(Enum):
    """Reasons a versioned name cannot be split."""

    MISSING_HYPHEN = "missing_hyphen"
    VERSION_PARSE_ERROR = "version_parse_error"


class SplitError(TinyVersionError):
    """Raised when a versioned name cannot be split into name and version.

    Attributes:
        kind: Which rule was violated
        value: The versioned name that was rejected
        cause: The nested ParseError for VERSION_PARSE_ERROR, otherwise None
    """

    def __init__(
        self,
        kind: SplitErrorKind,
        value: str,
        cause: Optional[ParseError] = None,
    ):
        self.kind = kind
        self.value = value
        self.cause = cause
        if kind is SplitErrorKind.MISSING_HYPHEN:
            self.message = f"Invalid versioned name '{value}': no '-' separator"
        else:
            self.message = f"Invalid versioned name '{value}': {cause}"
        super().__init__(self.message)
