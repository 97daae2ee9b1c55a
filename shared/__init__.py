"""
pwstats Shared Module
=====================

Configuration, structured logging and console helpers shared by the
pwstats tool package.
"""

from shared.config import ToolConfig, get_config, load_preset

__all__ = ["ToolConfig", "get_config", "load_preset"]
