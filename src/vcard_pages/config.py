from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError

CONF_FILE = "vcard-pages.toml"

DEFAULT_ORGANIZATION = "Stiftung Team Ensemble"
DEFAULT_WEBSITE = "https://team-ensemble.ch"

_PATH_KEYS = ("data_dir", "templates_dir", "template", "assets_dir", "dist_dir")


@dataclass(frozen=True)
class BuildPaths:
    root: Path
    data_dir: Path
    templates_dir: Path
    template: Path
    assets_dir: Path
    dist_dir: Path

    @classmethod
    def from_root(cls, root: Path) -> BuildPaths:
        root = Path(root)
        templates = root / "templates"
        return cls(
            root=root,
            data_dir=root / "data",
            templates_dir=templates,
            template=templates / "card.html",
            assets_dir=root / "assets",
            dist_dir=root / "dist",
        )


@dataclass(frozen=True)
class Defaults:
    """Values filled in when a record leaves the field empty."""

    organization: str = DEFAULT_ORGANIZATION
    website: str = DEFAULT_WEBSITE


def _read_conf(conf_file: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(conf_file.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {conf_file}: {exc}", conf_file) from exc


def load_settings(root: Path, conf_file: Path | None = None) -> tuple[BuildPaths, Defaults]:
    """Resolve build paths and defaults for a project rooted at `root`.

    `conf_file` defaults to `root/vcard-pages.toml`; the implicit file is
    optional, an explicitly named one must exist. Relative paths in the file
    resolve against `root`. A `templates_dir` without a `template` moves the
    template along with it.
    """
    root = Path(root)
    paths = BuildPaths.from_root(root)
    defaults = Defaults()

    explicit = conf_file is not None
    conf = Path(conf_file) if explicit else root / CONF_FILE
    if not conf.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {conf}", conf)
        return paths, defaults

    data = _read_conf(conf)

    overrides = {k: root / str(data[k]) for k in _PATH_KEYS if k in data}
    if "templates_dir" in overrides and "template" not in overrides:
        overrides["template"] = overrides["templates_dir"] / paths.template.name
    paths = replace(paths, **overrides)

    defaults = Defaults(
        organization=str(data.get("organization", defaults.organization)),
        website=str(data.get("website", defaults.website)),
    )
    return paths, defaults
