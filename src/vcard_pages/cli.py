from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .build import STATUS_EMPTY, build_site
from .config import BuildPaths, Defaults, load_settings
from .errors import ConfigError, RecordError
from .exporter import card_to_vcf_text
from .io import load_record
from .model import ContactRecord
from .normalize import normalize_record
from .report import print_summary

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="vcard-pages: build a contact page and a .vcf download for every YAML record.",
)
console = Console()


def _settings(
    root: Path,
    config: Path | None,
    data: Path | None = None,
    template: Path | None = None,
    assets: Path | None = None,
    output: Path | None = None,
) -> tuple[BuildPaths, Defaults]:
    paths, defaults = load_settings(root, config)
    overrides: dict[str, Path] = {}
    if data is not None:
        overrides["data_dir"] = data
    if template is not None:
        overrides["template"] = template
        overrides["templates_dir"] = template.parent
    if assets is not None:
        overrides["assets_dir"] = assets
    if output is not None:
        overrides["dist_dir"] = output
    return replace(paths, **overrides), defaults


# ── `build` command ────────────────────────────────────────────────────────────

@app.command()
def build(
    root: Path = typer.Option(Path("."), "--root", help="Project folder holding data/, templates/, assets/"),
    config: Path | None = typer.Option(
        None, "--config", "-c",
        help="TOML settings file (default: <root>/vcard-pages.toml if present)",
    ),
    data: Path | None = typer.Option(None, "--data", "-d", help="Folder of .yaml/.yml contact records"),
    template: Path | None = typer.Option(None, "--template", "-t", help="Page template (Jinja2)"),
    assets: Path | None = typer.Option(None, "--assets", help="Static files copied into the output root"),
    output: Path | None = typer.Option(None, "--output", "-o", help="Output folder, erased on every build"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Render everything but write nothing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Build dist/<slug>/index.html and dist/<slug>/<First>-<Last>.vcf per contact.

    \b
    The output folder is deleted and rebuilt from scratch each time.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    def _progress(record: ContactRecord) -> None:
        console.print(f"  → {record.name.full} [dim]({record.slug})[/dim]")

    console.print("\n[bold]Building contact cards…[/bold]\n")
    try:
        paths, defaults = _settings(root, config, data, template, assets, output)
        result = build_site(paths, defaults, dry_run=dry_run, on_record=_progress)
    except ConfigError as exc:
        console.print(Panel(f"[bold red]{escape(str(exc))}[/bold red]", title="Cannot build", border_style="red"))
        raise typer.Exit(code=1)
    except Exception as exc:
        console.print(f"[bold red]Build failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if result.status == STATUS_EMPTY:
        console.print(f"[yellow]No .yaml/.yml files found in [white]{paths.data_dir}/[/white][/yellow]")
        raise typer.Exit(code=0)

    print_summary(result)


# ── `card` command ─────────────────────────────────────────────────────────────

@app.command()
def card(
    record: Path = typer.Argument(..., help="A single .yaml/.yml contact record"),
    root: Path = typer.Option(Path("."), "--root", help="Project folder (for vcard-pages.toml defaults)"),
    config: Path | None = typer.Option(None, "--config", "-c", help="TOML settings file"),
) -> None:
    """Print the vCard for one record without building the site."""
    try:
        _, defaults = load_settings(root, config)
        text = card_to_vcf_text(normalize_record(load_record(record), record, defaults))
    except ConfigError as exc:
        console.print(f"[bold red]{escape(str(exc))}[/bold red]")
        raise typer.Exit(code=1)
    except (OSError, yaml.YAMLError, RecordError) as exc:
        console.print(f"[bold red]Cannot read {record}:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    typer.echo(text)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
