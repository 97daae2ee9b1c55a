"""Tests for the statistics engine facade."""

import logging
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from shared.logger import ToolLogger

from pwstats.analyzers.config_stats import ConfigStatsCalculator
from pwstats.analyzers.dictionary import (
    DictionaryStatsProvider,
    NullDictionaryProvider,
    StaticDictionaryProvider,
)
from pwstats.analyzers.entropy import EntropyCalculator
from pwstats.core.engine import StatisticsEngine
from pwstats.core.errors import DegenerateAlphabetError
from pwstats.core.models import (
    AggregateReport,
    DictionaryStats,
    GeneratorConfig,
    StrengthState,
)


@pytest.fixture
def count_calls(monkeypatch):
    """Count real computations of config and entropy stats."""
    calls = {"config": 0, "entropy": 0}
    config_compute = ConfigStatsCalculator._compute
    entropy_compute = EntropyCalculator._compute

    def counting_config(self):
        calls["config"] += 1
        return config_compute(self)

    def counting_entropy(self):
        calls["entropy"] += 1
        return entropy_compute(self)

    monkeypatch.setattr(ConfigStatsCalculator, "_compute", counting_config)
    monkeypatch.setattr(EntropyCalculator, "_compute", counting_entropy)
    return calls


class TestConstruction:

    def test_primes_config_stats(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config)
        assert count_calls == {"config": 1, "entropy": 0}
        assert engine.cache.is_valid("config")
        assert not engine.cache.is_valid("entropy")
        assert not engine.cache.is_valid("dictionary")

    def test_priming_suppresses_substitution_warning(self, make_engine, quiet_logger):
        config = GeneratorConfig(character_substitutions={"s": "$$"})
        with patch.object(quiet_logger, "warning") as warning:
            engine = make_engine(config)
            warning.assert_not_called()
            engine.config_stats()
            warning.assert_called_once()

    def test_default_dictionary_provider(self, make_engine):
        engine = make_engine()
        assert isinstance(engine.dictionary_provider, NullDictionaryProvider)
        assert engine.dictionary_stats() == DictionaryStats()


class TestIdempotence:

    def test_config_stats_not_recomputed(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config)
        first = engine.config_stats()
        second = engine.config_stats()
        assert first is second
        assert count_calls["config"] == 1

    def test_entropy_stats_not_recomputed(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config)
        first = engine.entropy_stats()
        second = engine.entropy_stats()
        engine.calculate_stats()
        assert first is second
        assert count_calls["entropy"] == 1

    def test_repeated_reports_are_equal(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config)
        assert engine.calculate_stats() == engine.calculate_stats()
        assert count_calls == {"config": 1, "entropy": 1}

    def test_invalidate_forces_recomputation(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config)
        before = engine.calculate_stats()
        engine.invalidate()
        after = engine.calculate_stats()
        assert before == after
        assert count_calls == {"config": 2, "entropy": 2}

    def test_update_config(self, make_engine, basic_config):
        engine = make_engine(basic_config)
        assert engine.config_stats().random_numbers_required == 3
        engine.update_config(GeneratorConfig(**{**basic_config.model_dump(), "case_transform": "RANDOM"}))
        assert engine.config_stats().random_numbers_required == 6
        assert engine.entropy_stats().entropy_seen.value == (27 * 8).bit_length()

    def test_concurrent_reports(self, make_engine, basic_config, count_calls):
        engine = make_engine(basic_config, word_list_size=7776)
        with ThreadPoolExecutor(max_workers=8) as pool:
            reports = list(pool.map(lambda _: engine.calculate_stats(), range(32)))
        assert all(report == reports[0] for report in reports)
        assert count_calls == {"config": 1, "entropy": 1}


class TestAggregateReport:

    def test_basic_report(self, make_engine, basic_config):
        report = make_engine(basic_config).calculate_stats()
        assert isinstance(report, AggregateReport)
        assert report.password.min_length == 14
        assert report.password.max_length == 26
        assert report.password.random_numbers_required == 3
        assert report.password.password_strength == StrengthState.POOR
        assert report.entropy.blind_threshold == 78
        assert report.entropy.seen_threshold == 52
        assert report.dictionary == DictionaryStats()

    def test_good_strength(self, make_engine):
        config = GeneratorConfig(num_words=6, case_transform="CAPITALISE")
        engine = make_engine(config, word_list_size=7776)
        assert engine.password_strength() == StrengthState.GOOD
        assert engine.calculate_stats().password.password_strength == StrengthState.GOOD

    def test_mixed_strength(self, make_engine):
        config = GeneratorConfig(num_words=5, word_length_min=1, word_length_max=3)
        report = make_engine(config, word_list_size=7776).calculate_stats()
        assert report.entropy.min_entropy_blind.state == StrengthState.POOR
        assert report.entropy.entropy_seen.state == StrengthState.GOOD
        assert report.password.password_strength == StrengthState.OK

    def test_dictionary_provider_is_passed_through(self, make_engine, basic_config):
        dictionary = DictionaryStats(
            source="EFF large word list",
            num_words_total=7776,
            num_words_filtered=6914,
            percent_words_available=88.9,
            filter_min_length=4,
            filter_max_length=8,
        )
        engine = make_engine(basic_config, dictionary_provider=StaticDictionaryProvider(dictionary))
        assert isinstance(engine.dictionary_provider, DictionaryStatsProvider)
        report = engine.calculate_stats()
        assert report.dictionary == dictionary
        assert engine.cache.get("dictionary") == dictionary

    def test_dictionary_queried_every_report(self, make_engine, basic_config):
        engine = make_engine(basic_config)
        with patch.object(
            engine.dictionary_provider, "dictionary_stats", return_value=DictionaryStats()
        ) as provider:
            engine.calculate_stats()
            engine.calculate_stats()
        assert provider.call_count == 2

    def test_report_keys(self, make_engine, basic_config):
        report = make_engine(basic_config).calculate_stats().to_dict()
        assert set(report) == {"dictionary", "password", "entropy"}
        assert set(report["password"]) == {
            "minLength",
            "maxLength",
            "randomNumbersRequired",
            "passwordStrength",
        }
        assert set(report["entropy"]) == {
            "minEntropyBlind",
            "maxEntropyBlind",
            "entropySeen",
            "entropyBlind",
            "blindThreshold",
            "seenThreshold",
        }
        assert set(report["entropy"]["minEntropyBlind"]) == {"value", "state", "equal"}
        assert set(report["dictionary"]) == {
            "source",
            "numWordsTotal",
            "numWordsFiltered",
            "percentWordsAvailable",
            "filterMinLength",
            "filterMaxLength",
            "containsAccents",
        }
        assert report["password"]["passwordStrength"] == "POOR"

    def test_permutation_stats(self, make_engine, basic_config):
        permutations = make_engine(basic_config, word_list_size=100).permutation_stats()
        assert permutations.permutations_seen == 100**3

    def test_errors_propagate(self, make_engine):
        config = GeneratorConfig(separator_character="RANDOM", separator_alphabet="")
        engine = make_engine(config)
        with pytest.raises(DegenerateAlphabetError):
            engine.calculate_stats()
        assert not engine.cache.is_valid("entropy")


class TestSubstitutionWarning:

    @pytest.fixture
    def substituting_config(self):
        return GeneratorConfig(padding_type="FIXED", character_substitutions={"s": "$$"})

    def test_suppressed_report_does_not_warn(self, make_engine, quiet_logger, substituting_config):
        engine = make_engine(substituting_config)
        with patch.object(quiet_logger, "warning") as warning:
            engine.calculate_stats(suppress_warnings=True)
            warning.assert_not_called()
            engine.calculate_stats()
            warning.assert_called_once()

    def test_entropy_stats_alone_does_not_warn(self, make_engine, quiet_logger, substituting_config):
        engine = make_engine(substituting_config)
        with patch.object(quiet_logger, "warning") as warning:
            engine.entropy_stats()
            warning.assert_not_called()


class TestDefaultLogger:

    def test_default_logger_leaves_configured_logger_alone(self, tmp_path, basic_config):
        log_file = tmp_path / "engine.log"
        configured = ToolLogger(
            "engine", log_level="DEBUG", log_file=log_file, console_output=False
        )
        first = StatisticsEngine(basic_config, logger=configured)
        handlers = list(configured.underlying.handlers)

        second = StatisticsEngine(GeneratorConfig(num_words=4))
        second.calculate_stats()
        first.calculate_stats()
        for handler in configured.underlying.handlers:
            handler.flush()

        assert second.logger.underlying is configured.underlying
        assert configured.underlying.level == logging.DEBUG
        assert configured.underlying.handlers == handlers
        assert "returning the stats" in log_file.read_text(encoding="utf-8")

    def test_unconfigured_binding_keeps_level(self):
        underlying = logging.getLogger("pwstats.unbound")
        underlying.setLevel(logging.ERROR)
        log = ToolLogger("unbound", configure=False)
        assert log.underlying.level == logging.ERROR
        assert log.underlying.handlers == []
