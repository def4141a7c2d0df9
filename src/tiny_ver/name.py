# SPDX-License-Identifier: MIT
"""Package name grammar used in versioned names.

A name is one or more lower-case ASCII letters, optionally separated by
underscores, and must start and end with a letter:

    name := lower { ("_" | lower) } lower    (or a single lower letter)
"""

from __future__ import annotations

import re

from .errors import InvalidNameError

NAME_PATTERN = re.compile(r"[a-z](?:[a-z_]*[a-z])?")


def is_valid_name(name: str) -> bool:
    """Check if a string is a valid package name.

    Args:
        name: The string to validate

    Returns:
        True if the name follows the name grammar, False otherwise

    Examples:
        >>> is_valid_name("tiny_ver")
        True
        >>> is_valid_name("_foo")
        False
        >>> is_valid_name("foo1bar")
        False
    """
    if not isinstance(name, str):
        return False
    return NAME_PATTERN.fullmatch(name) is not None


def normalize_name(name: str) -> str:
    """Normalize a distribution name into the package name grammar.

    The name is lower-cased, runs of hyphens, periods and whitespace become a
    single underscore, and leading/trailing underscores are removed.

    Args:
        name: The raw name, e.g. a ``[project] name`` from pyproject.toml

    Returns:
        The normalized name

    Raises:
        InvalidNameError: If the normalized name is still not valid
            (for example because it contains digits)

    Examples:
        >>> normalize_name("My-Package")
        'my_package'
        >>> normalize_name("tiny.ver")
        'tiny_ver'
    """
    normalized = name.lower()
    normalized = re.sub(r"[-.\s]+", "_", normalized)
    normalized = re.sub(r"_+", "_", normalized)
    normalized = normalized.strip("_")

    if not is_valid_name(normalized):
        raise InvalidNameError(
            name, f"Invalid name '{name}': normalized form '{normalized}' is not a valid name"
        )

    return normalized
