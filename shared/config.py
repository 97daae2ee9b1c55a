"""
pwstats Configuration Management
=================================

Centralized settings for the pwstats tooling using Python dataclasses and
TOML-based persistence.

Settings cover the ambient concerns only (logging, output, engine inputs
that are not part of a generator preset). Generator presets -- the
resolved password-generator configurations the statistics engine works
on -- are plain TOML tables loaded with :func:`load_preset` and validated
by :class:`pwstats.core.models.GeneratorConfig`.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "pwstats.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class StatsConfig:
    """Configuration for the statistics engine.

    ``word_list_size`` is the number of words available to the generator
    after dictionary filtering. When unset the engine falls back to the
    configured word count as the seen-entropy base.
    """

    word_list_size: Optional[int] = None
    suppress_warnings: bool = False


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and output preferences."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    output_format: str = "console"
    color_theme: str = "dark"
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class ToolConfig:
    """Master configuration aggregating global and engine settings.

    Usage:
        >>> config = ToolConfig.load()                  # from default path
        >>> config = ToolConfig.load("custom.toml")     # from custom path
        >>> print(config.global_settings.log_level)
        'WARNING'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> ToolConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``pwstats.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`ToolConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            stats=cls._build_section(StatsConfig, raw.get("stats", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> ToolConfig:
    """Module-level convenience wrapper around :meth:`ToolConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = ToolConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]


def load_preset(path: str | Path) -> dict[str, Any]:
    """Read a generator preset TOML file into a plain dictionary.

    The preset's top-level keys are generator configuration fields; an
    optional ``[dictionary]`` table carries pre-computed dictionary
    statistics. No validation happens here.

    Raises:
        FileNotFoundError: If *path* does not exist.
    """
    preset_path = Path(path)
    if not preset_path.exists():
        raise FileNotFoundError(f"Preset file not found: {preset_path}")
    with open(preset_path, "rb") as fh:
        return tomllib.load(fh)
