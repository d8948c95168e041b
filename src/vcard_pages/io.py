from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import RecordError

logger = logging.getLogger(__name__)

RECORD_SUFFIXES = (".yaml", ".yml")


def collect_data_files(data_dir: Path) -> list[Path]:
    """Return all .yaml/.yml files found directly inside data_dir, sorted by name."""
    if not data_dir.is_dir():
        return []
    return sorted(
        p for p in data_dir.iterdir()
        if p.is_file() and p.name.endswith(RECORD_SUFFIXES)
    )


def load_record(path: Path) -> dict[str, Any]:
    """Parse one record file. Malformed YAML propagates as yaml.YAMLError."""
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        logger.debug("%s: empty document", path.name)
        return {}
    if not isinstance(data, dict):
        raise RecordError(path, f"expected a mapping, got {type(data).__name__}")
    return data
