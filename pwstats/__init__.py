"""
pwstats -- Password Generator Statistics
=========================================

Computes length bounds, randomness demand, blind and seen entropy, and
an overall strength label for a word-based password generator
configuration.

Modules:
    - pwstats.core.engine: Statistics facade and report assembly
    - pwstats.core.models: Pydantic data models
    - pwstats.core.cache: Tri-slot invalidatable cache
    - pwstats.analyzers: Length, entropy, strength and dictionary calculators
    - pwstats.output: Console output
    - pwstats.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "pwstats"
