"""Tests for the command-line entry point."""

import logging

import pytest
from bspricer.cli import main, parse_params, report, split_argv
from bspricer.core import OptionSpec, DEFAULTS, ParseError

DEFAULT_OUTPUT = [
    "Call Price: 10.4506",
    "Put Price: 5.5735",
    "Call Delta: 0.6368",
    "Put Delta: -0.3632",
]


def _lines(capsys):
    return capsys.readouterr().out.strip().splitlines()


class TestMain:
    def test_no_arguments_uses_defaults(self, capsys):
        main([])
        assert _lines(capsys) == DEFAULT_OUTPUT

    def test_five_arguments(self, capsys):
        main(["200", "100", "0.05", "0.2", "1.0"])
        lines = _lines(capsys)
        assert len(lines) == 4
        call_delta = float(lines[2].split(": ")[1])
        assert call_delta > 0.99

    def test_negative_rate_is_positional(self, capsys):
        main(["100", "100", "-0.01", "0.2", "1.0"])
        assert len(_lines(capsys)) == 4

    def test_malformed_argument_falls_back_to_default(self, capsys):
        main(["100", "100", "0.05", "abc", "1.0"])
        assert _lines(capsys) == DEFAULT_OUTPUT

    def test_too_few_arguments_ignored(self, capsys):
        main(["120", "100"])
        assert _lines(capsys) == DEFAULT_OUTPUT

    def test_domain_violation_prints_nan(self, capsys):
        main(["100", "100", "0.05", "0.2", "0"])
        assert _lines(capsys)[0] == "Call Price: nan"

    @pytest.mark.parametrize("rate", ["-1e-3", "-.5e-2", "-0.001"])
    def test_negative_exponent_rate_is_a_value(self, capsys, rate):
        main(["100", "100", rate, "0.2", "1.0"])
        lines = _lines(capsys)
        assert len(lines) == 4
        assert lines[0] != DEFAULT_OUTPUT[0]

    def test_dash_prefixed_malformed_value_falls_back(self, capsys):
        main(["100", "100", "0.05", "-x", "1.0"])
        assert _lines(capsys) == DEFAULT_OUTPUT

    def test_flags_mix_with_values(self, capsys):
        main(["100", "-v", "100", "0.05", "0.2", "1.0"])
        assert _lines(capsys) == DEFAULT_OUTPUT

    def test_fallback_is_logged_at_debug(self, capsys, caplog):
        caplog.set_level(logging.DEBUG, logger="bspricer.cli")
        main(["100", "oops", "0.05", "0.2", "1.0"])
        assert "Could not parse K='oops'" in caplog.text


class TestStrict:
    def test_dash_prefixed_malformed_value_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--strict", "100", "100", "0.05", "-x", "1.0"])
        assert exc.value.code == 2
        assert "argument 4 ('-x')" in capsys.readouterr().err

    def test_negative_exponent_rate_passes(self, capsys):
        main(["--strict", "100", "100", "-1e-3", "0.2", "1.0"])
        assert len(_lines(capsys)) == 4

    def test_malformed_argument_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--strict", "100", "100", "0.05", "abc", "1.0"])
        assert exc.value.code == 2
        assert "argument 4" in capsys.readouterr().err

    def test_domain_violation_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--strict", "100", "100", "0.05", "0.2", "0"])
        assert exc.value.code == 2
        assert "T=0.0: must be positive" in capsys.readouterr().err

    def test_partial_arguments_exit_2(self):
        with pytest.raises(SystemExit) as exc:
            main(["--strict", "100", "100"])
        assert exc.value.code == 2

    def test_valid_input_passes(self, capsys):
        main(["--strict"])
        assert _lines(capsys) == DEFAULT_OUTPUT


class TestParseParams:
    def test_empty(self):
        assert parse_params([]) is DEFAULTS

    def test_all_values(self):
        opt = parse_params(["90", "110", "0.01", "0.3", "0.5"])
        assert opt == OptionSpec(S=90.0, K=110.0, r=0.01, sigma=0.3, T=0.5)

    def test_extra_values_ignored(self):
        opt = parse_params(["90", "110", "0.01", "0.3", "0.5", "junk"])
        assert opt.T == 0.5

    def test_per_field_fallback(self):
        opt = parse_params(["x", "110", "y", "0.3", "0.5"])
        assert opt == OptionSpec(S=DEFAULTS.S, K=110.0, r=DEFAULTS.r, sigma=0.3, T=0.5)

    def test_strict_reports_index(self):
        with pytest.raises(ParseError) as exc:
            parse_params(["90", "110", "0.01", "0.3", "half"], strict=True)
        assert exc.value.index == 5
        assert exc.value.value == "half"


def test_report_format():
    assert report(DEFAULTS).splitlines() == DEFAULT_OUTPUT


def test_split_argv_keeps_dash_values():
    flags, values = split_argv(["--strict", "-1e-3", "-x", "-v", "1"])
    assert flags == ["--strict", "-v"]
    assert values == ["-1e-3", "-x", "1"]
