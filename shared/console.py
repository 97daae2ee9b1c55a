"""
pwstats Console Interface
==========================

Rich-powered console abstraction providing a unified presentation layer
for pwstats output: a banner, section headers, status-coloured messages
and tables, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_TOOL_THEME = Theme(
    {
        "tool.banner": "bold bright_cyan",
        "tool.section": "bold bright_magenta",
        "tool.success": "bold green",
        "tool.info": "bold bright_blue",
        "tool.dim": "dim white",
        "tool.good": "bold bright_green",
        "tool.ok": "bold yellow",
        "tool.poor": "bold white on red",
    }
)

_TAGLINE = "Password generator statistics"


class ToolConsole:
    """Unified console interface for pwstats.

    Usage::

        con = ToolConsole()
        con.banner()
        con.section("Entropy")
        con.success("Report complete")
    """

    def __init__(self, *, quiet: bool = False, record: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet:  Suppress all output (useful in library / test mode).
            record: Enable Rich recording for HTML export.
        """
        self._console = Console(
            theme=_TOOL_THEME,
            quiet=quiet,
            record=record,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner / sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the pwstats banner panel."""
        text = Text.from_markup(
            f"[tool.banner]pwstats[/tool.banner]  "
            f"[tool.dim]{_TAGLINE}  |  v{version}[/tool.dim]"
        )
        self._console.print(Panel(text, border_style="bright_cyan", padding=(0, 2)))

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(f"  {title}  ", style="tool.section", characters="─")
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(f"[tool.success][✔] SUCCESS:[/tool.success] {message}")

    def info(self, message: str) -> None:
        self._console.print(f"[tool.info][ℹ] INFO:[/tool.info] {message}")

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Row tuples; each cell is rendered as Rich markup.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
