"""
Site config component port definitions.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class FileSystemPort(Protocol):
    """Port for file system operations."""

    def exists(self, path: Path) -> bool:
        """Check if a file exists."""
        ...

    def read_yaml(self, path: Path) -> Any:
        """Read and parse a YAML file."""
        ...

    def read_json(self, path: Path) -> Any:
        """Read and parse a JSON file."""
        ...


class EnvironmentPort(Protocol):
    """Port for environment variable access."""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Get an environment variable."""
        ...
