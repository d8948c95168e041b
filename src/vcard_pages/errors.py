from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base class for failures that abort a build."""


class ConfigError(BuildError):
    """A required input (directory, template, config file) is missing or unreadable."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class RecordError(BuildError):
    def __init__(self, path: Path, message: str):
        super().__init__(f"{path.name}: {message}")
        self.path = path
