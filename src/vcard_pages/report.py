from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .build import BuildResult
from .normalize import vcard_filename

console = Console()

# ── Palette ────────────────────────────────────────────────────────────────────
_ACCENT  = "#4d9fff"
_GREEN   = "#3ecf8e"
_TEXT    = "#c9d1e0"
_MID     = "#8896af"
_DIM     = "#546075"
_BORDER  = "#2a3347"


def print_summary(result: BuildResult) -> None:
    console.print()
    console.print(Text("  BUILD SUMMARY", style=f"dim {_DIM}"))
    console.print()

    table = Table(show_header=True, header_style=f"bold {_TEXT}", box=None, padding=(0, 2))
    table.add_column("Contact", style=_TEXT)
    table.add_column("Slug", style=_ACCENT)
    table.add_column("Card", style=_MID)
    table.add_column("Source", style=f"dim {_DIM}")
    for r in result.records:
        table.add_row(r.name.full, r.slug, vcard_filename(r.name), r.source or "")
    console.print(table)
    console.print()

    # Same slug twice means the later record overwrote the earlier one
    seen: dict[str, str] = {}
    for r in result.records:
        if r.slug in seen:
            console.print(Text(
                f"  ! slug '{r.slug}' used by {seen[r.slug]} and {r.source}",
                style="bold yellow",
            ))
        seen[r.slug] = r.source or r.slug

    body = Text()
    if result.dry_run:
        body.append(f"Dry run: {result.count} contact(s) checked, nothing written\n",
                    style="bold yellow")
    else:
        body.append(f"✓  Built {result.count} contact(s)\n", style=f"bold {_GREEN}")
    body.append(str(result.dist_dir), style=f"dim {_MID}")
    console.print(Panel(
        body,
        border_style="yellow" if result.dry_run else _GREEN,
        padding=(0, 2),
    ))
