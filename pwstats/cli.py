"""
pwstats CLI
============

Click-based command-line interface for the statistics engine.

Usage::

    python -m pwstats stats preset.toml
    python -m pwstats -o json stats preset.toml
    python -m pwstats stats preset.toml --word-list-size 7776

A preset file holds generator configuration fields at the top level and
an optional ``[dictionary]`` table of pre-computed dictionary stats::

    num_words = 4
    word_length_min = 4
    word_length_max = 8
    separator_character = "RANDOM"
    padding_type = "ADAPTIVE"
    pad_to_length = 32
    case_transform = "random"

    [dictionary]
    source = "EFF large word list"
    num_words_total = 7776

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from typing import Any, Optional

import click
from pydantic import ValidationError

from shared.config import ToolConfig, load_preset
from shared.console import ToolConsole
from shared.logger import ToolLogger

from pwstats import __version__
from pwstats.analyzers.dictionary import StaticDictionaryProvider
from pwstats.core.engine import StatisticsEngine
from pwstats.core.errors import StatsError
from pwstats.core.models import DictionaryStats, GeneratorConfig
from pwstats.output.console import StatsConsoleOutput


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="pwstats")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to pwstats settings file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the settings file, then console).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    quiet: bool,
) -> None:
    """pwstats -- statistics for word-based password generators.

    Report length bounds, random numbers consumed, blind and seen
    entropy, and an overall strength rating for a generator preset.
    """
    ctx.ensure_object(dict)

    tool_config = ToolConfig.load(config) if config else ToolConfig()
    settings = tool_config.global_settings
    output_format = output or settings.output_format

    ctx.obj["config"] = tool_config
    ctx.obj["output_format"] = output_format
    ctx.obj["logger"] = ToolLogger(
        "engine",
        log_level="DEBUG" if settings.debug else settings.log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
    )

    # JSON goes to stdout untouched, so the console only speaks in console mode
    console = ToolConsole(quiet=quiet or output_format == "json")
    ctx.obj["console"] = console
    ctx.obj["display"] = StatsConsoleOutput(console)

    if not quiet and output_format == "console":
        console.banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _build_engine(
    preset: dict[str, Any],
    tool_config: ToolConfig,
    logger: ToolLogger,
    word_list_size: Optional[int],
) -> StatisticsEngine:
    """Create an engine from a raw preset dictionary."""
    preset = dict(preset)
    dictionary_table = preset.pop("dictionary", None)

    provider = None
    if dictionary_table is not None:
        provider = StaticDictionaryProvider(DictionaryStats.model_validate(dictionary_table))

    if word_list_size is None:
        word_list_size = tool_config.stats.word_list_size

    return StatisticsEngine(
        GeneratorConfig.model_validate(preset),
        provider,
        word_list_size=word_list_size,
        logger=logger,
    )


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("preset_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--word-list-size", "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Number of words the generator picks from (seen-entropy base).",
)
@click.pass_context
def stats(ctx: click.Context, preset_file: str, word_list_size: Optional[int]) -> None:
    """Calculate statistics for a generator preset file."""
    console: ToolConsole = ctx.obj["console"]
    tool_config: ToolConfig = ctx.obj["config"]

    try:
        engine = _build_engine(
            load_preset(preset_file), tool_config, ctx.obj["logger"], word_list_size
        )
        report = engine.calculate_stats(
            suppress_warnings=tool_config.stats.suppress_warnings
        )
    except (StatsError, ValidationError, FileNotFoundError) as exc:
        # quiet consoles swallow output, errors must still reach the user
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)
        return

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        ctx.obj["display"].display_report(report)
        console.success(f"Statistics calculated for {preset_file}")


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the pwstats CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
