"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from preflop_odds import config
from preflop_odds.cli import app
from preflop_odds.formatters.table import TSV_HEADER

runner = CliRunner()


class TestArguments:
    """Exit codes for bad input."""

    def test_missing_trials(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 1
        assert "Supply a number of simulations." in result.output

    @pytest.mark.parametrize("value", ["abc", "0", "1.5", "-5", "1_0", "+3", "1e3"])
    def test_invalid_trials(self, value):
        result = runner.invoke(app, [value, "--hands", "AA"])
        assert result.exit_code == 2
        assert "Number of simulations must be greater than 0." in result.output

    def test_unknown_hand(self):
        result = runner.invoke(app, ["5", "--hands", "AA,ZZ"])
        assert result.exit_code == 2
        assert "Unknown starting hand: ZZ" in result.output

    def test_invalid_workers(self):
        result = runner.invoke(app, ["5", "--workers", "0"])
        assert result.exit_code == 2


class TestEnvironment:
    """Bad settings are reported like bad arguments."""

    def test_bad_workers_setting(self, monkeypatch):
        monkeypatch.setattr(config, "WORKERS", "abc")
        result = runner.invoke(app, ["5", "--hands", "AA"])
        assert result.exit_code == 2
        assert "PREFLOP_ODDS_WORKERS" in result.output

    def test_workers_flag_overrides_setting(self, monkeypatch):
        monkeypatch.setattr(config, "WORKERS", "abc")
        result = runner.invoke(app, ["2", "--hands", "AA", "--workers", "1"])
        assert result.exit_code == 0

    def test_bad_log_level(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "FOO")
        result = runner.invoke(app, ["5", "--hands", "AA"])
        assert result.exit_code == 2
        assert "PREFLOP_ODDS_LOG_LEVEL" in result.output

    def test_verbose_ignores_log_level(self, monkeypatch):
        monkeypatch.setattr(config, "LOG_LEVEL", "FOO")
        result = runner.invoke(app, ["2", "--hands", "AA", "--verbose"])
        assert result.exit_code == 0


class TestSimulate:
    """Successful runs."""

    def test_tsv_output(self):
        result = runner.invoke(app, ["3", "--hands", "AA,72o"])
        assert result.exit_code == 0

        lines = result.stdout.splitlines()
        assert lines[0].split("\t") == list(TSV_HEADER)
        assert len(lines) == 3
        rows = [line.split("\t") for line in lines[1:]]
        assert sorted(r[0] for r in rows) == ["72o", "AA"]
        for r in rows:
            assert r[1] == "3"
            assert int(r[2]) + int(r[3]) + int(r[4]) == 3

    def test_full_catalog(self):
        result = runner.invoke(app, ["1"])
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 1 + 169

    def test_worker_processes(self):
        result = runner.invoke(app, ["4", "--hands", "AA,72o,JTs", "--workers", "2"])
        assert result.exit_code == 0

        rows = [line.split("\t") for line in result.stdout.splitlines()[1:]]
        assert sorted(r[0] for r in rows) == ["72o", "AA", "JTs"]
        assert all(r[1] == "4" for r in rows)

    def test_pretty(self):
        result = runner.invoke(app, ["2", "--hands", "KK", "--pretty"])
        assert result.exit_code == 0
        assert "KK" in result.stdout
        assert "\t" not in result.stdout
