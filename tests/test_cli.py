"""Tests for the pwstats command-line interface."""

import json

import pytest
from click.testing import CliRunner

from pwstats import __version__
from pwstats.cli import cli

XKCD_PRESET = """\
num_words = 4
word_length_min = 4
word_length_max = 8
separator_character = "-"
case_transform = "none"

[dictionary]
source = "EFF large word list"
num_words_total = 7776
num_words_filtered = 6914
percent_words_available = 88.9
filter_min_length = 4
filter_max_length = 8
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def preset(tmp_path):
    path = tmp_path / "xkcd.toml"
    path.write_text(XKCD_PRESET, encoding="utf-8")
    return path


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestStatsCommand:

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"], obj={})
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_json_report(self, runner, preset):
        result = runner.invoke(cli, ["-o", "json", "stats", str(preset), "-w", "7776"], obj={})
        assert result.exit_code == 0, result.output

        report = json.loads(result.stdout)
        assert report["password"] == {
            "minLength": 19,
            "maxLength": 35,
            "randomNumbersRequired": 4,
            "passwordStrength": "GOOD",
        }
        assert report["entropy"]["entropySeen"]["value"] == (7776**4).bit_length()
        assert report["dictionary"]["numWordsTotal"] == 7776

    def test_word_list_size_from_settings(self, runner, preset, tmp_path):
        settings = _write(tmp_path, "pwstats.toml", "[stats]\nword_list_size = 7776\n")
        result = runner.invoke(
            cli, ["-c", settings, "-o", "json", "stats", str(preset)], obj={}
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["password"]["passwordStrength"] == "GOOD"

    def test_placeholder_word_base_without_size(self, runner, preset):
        result = runner.invoke(cli, ["-o", "json", "stats", str(preset)], obj={})
        report = json.loads(result.stdout)
        assert report["entropy"]["entropySeen"]["value"] == (4**4).bit_length()
        assert report["password"]["passwordStrength"] == "OK"

    def test_console_report(self, runner, preset):
        result = runner.invoke(cli, ["stats", str(preset)], obj={})
        assert result.exit_code == 0, result.output
        assert "Password strength" in result.output
        assert "EFF large word list" in result.output

    def test_quiet_console(self, runner, preset):
        result = runner.invoke(cli, ["-q", "stats", str(preset)], obj={})
        assert result.exit_code == 0
        assert "Password strength" not in result.output

    def test_rejects_zero_word_list_size(self, runner, preset):
        result = runner.invoke(cli, ["stats", str(preset), "-w", "0"], obj={})
        assert result.exit_code == 2


class TestErrors:

    def test_degenerate_alphabet(self, runner, tmp_path):
        path = _write(
            tmp_path,
            "broken.toml",
            'separator_character = "RANDOM"\nseparator_alphabet = ""\n',
        )
        result = runner.invoke(cli, ["-o", "json", "stats", path], obj={})
        assert result.exit_code == 1
        assert "degenerate alphabet" in result.output

    def test_invalid_case_transform(self, runner, tmp_path):
        path = _write(tmp_path, "bad.toml", 'case_transform = "SHOUTY"\n')
        result = runner.invoke(cli, ["stats", path], obj={})
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_missing_preset(self, runner, tmp_path):
        result = runner.invoke(cli, ["stats", str(tmp_path / "missing.toml")], obj={})
        assert result.exit_code == 2
