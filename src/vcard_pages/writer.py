from __future__ import annotations

import logging
import shutil
from pathlib import Path

from .model import ContactRecord
from .normalize import vcard_filename

logger = logging.getLogger(__name__)

MARKER_FILE = ".nojekyll"
PAGE_FILE = "index.html"


def reset_output(dist_dir: Path) -> None:
    """Erase any previous build and start from an empty directory."""
    if dist_dir.exists():
        shutil.rmtree(dist_dir)
    dist_dir.mkdir(parents=True)


def copy_assets(assets_dir: Path, dist_dir: Path) -> bool:
    """Copy the static assets tree into the output root, if there is one."""
    if not assets_dir.is_dir():
        logger.debug("no assets directory at %s", assets_dir)
        return False
    shutil.copytree(assets_dir, dist_dir, dirs_exist_ok=True)
    return True


def _under(base: Path, part: str) -> Path:
    # joined like os.path.join on a relative part, never replacing base
    return base.joinpath(part.lstrip("/"))


def write_contact(dist_dir: Path, record: ContactRecord, html: str, vcf: str) -> Path:
    """Write dist/<slug>/index.html and the .vcf next to it; returns the directory."""
    out_dir = _under(dist_dir, record.slug)
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / PAGE_FILE).write_bytes(html.encode("utf-8"))
    _under(out_dir, vcard_filename(record.name)).write_bytes(vcf.encode("utf-8"))
    return out_dir


def write_marker(dist_dir: Path) -> Path:
    # tells GitHub Pages to skip Jekyll
    marker = dist_dir / MARKER_FILE
    marker.write_bytes(b"")
    return marker
