# SPDX-License-Identifier: MIT
"""Project configuration loading from pyproject.toml.

The package name and version used by ``tiny-ver compose`` are read from
``[tool.tiny-ver]`` and fall back to the ``[project]`` table:

    [tool.tiny-ver]
    name = "my_app"
    version = "1.2.3-beta"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class ProjectConfig:
    """Configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Package name (may still need normalizing)
        version: Version string (not yet parsed)
    """

    project_dir: Path
    name: str = ""
    version: str = ""

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ProjectConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            ProjectConfig instance

        Raises:
            ConfigError: If the file is not valid TOML
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "ProjectConfig":
        """Create ProjectConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool_config = pyproject.get("tool", {}).get("tiny-ver", {})

        name = tool_config.get("name") or project.get("name", "")
        version = tool_config.get("version") or project.get("version", "")

        if not isinstance(name, str):
            raise ConfigError(f"name must be a string, got {type(name).__name__}")
        if not isinstance(version, str):
            raise ConfigError(f"version must be a string, got {type(version).__name__}")

        return cls(project_dir=project_dir, name=name, version=version)


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the project root by looking for pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while current != current.parent:
        if (current / "pyproject.toml").exists():
            return current
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> ProjectConfig:
    """Load project configuration.

    Args:
        project_dir: Project directory (defaults to finding project root)

    Returns:
        ProjectConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
        FileNotFoundError: If pyproject.toml doesn't exist
    """
    if project_dir is None:
        project_dir = find_project_root()

    return ProjectConfig.from_pyproject(project_dir)
