"""build.py — the whole site build as one linear pass.

  check template → check data dir → enumerate records → clean output →
  copy assets → [normalize → render → serialize → write] per record →
  write marker

Both checks run before the output tree is touched, so a misconfigured run
leaves the previous build in place. Any other failure propagates and aborts
the run part-way; there is no rollback.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .config import BuildPaths, Defaults
from .errors import ConfigError
from .exporter import card_to_vcf_text
from .io import collect_data_files, load_record
from .model import ContactRecord
from .normalize import normalize_record
from .render import load_template, render_page
from .writer import copy_assets, reset_output, write_contact, write_marker

logger = logging.getLogger(__name__)

STATUS_BUILT = "built"
STATUS_EMPTY = "empty"


@dataclass
class BuildResult:
    status: str
    dist_dir: Path
    records: list[ContactRecord] = field(default_factory=list)
    assets_copied: bool = False
    dry_run: bool = False

    @property
    def count(self) -> int:
        return len(self.records)


def check_inputs(paths: BuildPaths) -> None:
    if not paths.template.is_file():
        raise ConfigError(f"Template not found: {paths.template}", paths.template)
    if not paths.data_dir.is_dir():
        raise ConfigError(f"Data directory not found: {paths.data_dir}", paths.data_dir)


def build_site(
    paths: BuildPaths,
    defaults: Defaults | None = None,
    *,
    dry_run: bool = False,
    on_record: Callable[[ContactRecord], None] | None = None,
) -> BuildResult:
    defaults = defaults or Defaults()
    check_inputs(paths)

    files = collect_data_files(paths.data_dir)
    if not files:
        logger.warning("no .yaml/.yml files in %s", paths.data_dir)
        return BuildResult(status=STATUS_EMPTY, dist_dir=paths.dist_dir, dry_run=dry_run)

    template = load_template(paths.template)

    result = BuildResult(status=STATUS_BUILT, dist_dir=paths.dist_dir, dry_run=dry_run)
    if dry_run:
        result.assets_copied = paths.assets_dir.is_dir()
    else:
        reset_output(paths.dist_dir)
        result.assets_copied = copy_assets(paths.assets_dir, paths.dist_dir)

    for path in files:
        record = normalize_record(load_record(path), path, defaults)
        html = render_page(template, record)
        vcf = card_to_vcf_text(record)
        if not dry_run:
            write_contact(paths.dist_dir, record, html, vcf)
        logger.debug("%s -> %s/", path.name, record.slug)
        result.records.append(record)
        if on_record is not None:
            on_record(record)

    if not dry_run:
        write_marker(paths.dist_dir)
    return result
