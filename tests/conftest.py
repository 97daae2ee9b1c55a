"""Shared fixtures for pwstats tests."""

import pytest

from shared.logger import ToolLogger
from pwstats.core.cache import StatsCache
from pwstats.core.engine import StatisticsEngine
from pwstats.core.models import GeneratorConfig


@pytest.fixture
def basic_config():
    """Three words of 4-8 letters joined by '-', no padding, no casing."""
    return GeneratorConfig(
        num_words=3,
        word_length_min=4,
        word_length_max=8,
        separator_character="-",
        padding_type="NONE",
        padding_digits_before=0,
        padding_digits_after=0,
        case_transform="NONE",
    )


@pytest.fixture
def quiet_logger():
    return ToolLogger("test", log_level="DEBUG", console_output=False)


@pytest.fixture
def cache():
    return StatsCache()


@pytest.fixture
def make_engine(quiet_logger):
    """Factory building an engine with a silent logger."""

    def _make(config=None, **kwargs):
        kwargs.setdefault("logger", quiet_logger)
        return StatisticsEngine(config or GeneratorConfig(), **kwargs)

    return _make
