"""
pwstats Output Module
======================

Console output formatters for statistics reports.
"""

from pwstats.output.console import StatsConsoleOutput

__all__ = ["StatsConsoleOutput"]
