"""
pwstats Console Output
=======================

Rich-based rendering of an :class:`AggregateReport`: an overall strength
banner, password length figures, entropy figures with colour-coded
states, and the dictionary summary.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import ToolConsole
from pwstats.core.models import AggregateReport, EntropyValue, StrengthState


_STATE_STYLES: dict[StrengthState, str] = {
    StrengthState.GOOD: "tool.good",
    StrengthState.OK: "tool.ok",
    StrengthState.POOR: "tool.poor",
}


class StatsConsoleOutput:
    """Console formatter for statistics reports.

    Usage::

        display = StatsConsoleOutput()
        display.display_report(engine.calculate_stats())
    """

    def __init__(self, console: Optional[ToolConsole] = None) -> None:
        self.console = console or ToolConsole()
        self._rich = self.console.rich

    def display_report(self, report: AggregateReport) -> None:
        self._display_strength(report.password.password_strength)
        self._display_password(report)
        self._display_entropy(report)
        self._display_dictionary(report)

    # ------------------------------------------------------------------ #
    #  Sections
    # ------------------------------------------------------------------ #

    def _display_strength(self, strength: StrengthState) -> None:
        style = _STATE_STYLES[strength]
        text = Text()
        text.append("Password strength: ", style="bold")
        text.append(f" {strength.value} ", style=style)
        self._rich.print(Panel(text, border_style="bright_cyan"))

    def _display_password(self, report: AggregateReport) -> None:
        self.console.section("Password")
        password = report.password
        length = (
            str(password.min_length)
            if password.min_length == password.max_length
            else f"{password.min_length} - {password.max_length}"
        )
        self.console.table(
            "Structure",
            ["Metric", "Value"],
            [
                ("Length", length),
                ("Random numbers required", password.random_numbers_required),
            ],
            styles=["bold", ""],
        )

    def _display_entropy(self, report: AggregateReport) -> None:
        self.console.section("Entropy")
        entropy = report.entropy

        tbl = Table(
            title="Entropy (bits)",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Measure", style="bold")
        tbl.add_column("Bits", justify="right")
        tbl.add_column("Threshold", justify="right")
        tbl.add_column("State", justify="center")

        if entropy.min_entropy_blind.equal:
            tbl.add_row(
                "Blind", *self._cells(entropy.min_entropy_blind, entropy.blind_threshold)
            )
        else:
            tbl.add_row(
                "Blind (shortest)",
                *self._cells(entropy.min_entropy_blind, entropy.blind_threshold),
            )
            tbl.add_row(
                "Blind (longest)",
                *self._cells(entropy.max_entropy_blind, entropy.blind_threshold),
            )
            tbl.add_row("Blind (average length)", str(entropy.entropy_blind), "", "")
        tbl.add_row("Seen", *self._cells(entropy.entropy_seen, entropy.seen_threshold))

        self._rich.print(tbl)

    def _display_dictionary(self, report: AggregateReport) -> None:
        dictionary = report.dictionary
        if not dictionary.source and dictionary.num_words_total == 0:
            self.console.info("No dictionary statistics available.")
            return

        self.console.section("Dictionary")
        self.console.table(
            "Word list",
            ["Metric", "Value"],
            [
                ("Source", dictionary.source),
                ("Words (total)", dictionary.num_words_total),
                ("Words (filtered)", dictionary.num_words_filtered),
                ("Available", f"{dictionary.percent_words_available}%"),
                (
                    "Word length filter",
                    f"{dictionary.filter_min_length} - {dictionary.filter_max_length}",
                ),
                ("Contains accents", "yes" if dictionary.contains_accents else "no"),
            ],
            styles=["bold", ""],
        )

    @staticmethod
    def _cells(entropy: EntropyValue, threshold: int) -> tuple[str, str, str]:
        style = _STATE_STYLES[entropy.state]
        return (
            str(entropy.value),
            str(threshold),
            f"[{style}]{entropy.state.value}[/{style}]",
        )
