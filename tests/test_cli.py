"""End-to-end tests for the epochconv CLI through click's CliRunner.

Failure messages raised via SystemExit are written by the runner into the
captured output, so ``result.output`` carries both converted lines and the
``* * *`` marker.
"""

from __future__ import annotations

import subprocess
import sys
from importlib.metadata import version
from pathlib import Path

import pytest
from click.testing import CliRunner

from epochconv.cli import cli

EPOCH = "1970-01-01T00:00:00Z"
ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def runner():
    return CliRunner()


def _lines(result):
    return result.output.splitlines()


class TestPositionalArguments:
    def test_single_default_format(self, runner):
        result = runner.invoke(cli, ["0"])
        assert result.exit_code == 0
        assert result.output == f"{EPOCH}\n"

    def test_multiple_in_order(self, runner):
        result = runner.invoke(cli, ["1000", "0"])
        assert result.exit_code == 0
        assert _lines(result) == ["1970-01-01T00:16:40Z", EPOCH]

    def test_from_millis(self, runner):
        result = runner.invoke(cli, ["--from", "millis", "0"])
        assert result.exit_code == 0
        assert result.output == f"{EPOCH}\n"

    def test_options_after_values(self, runner):
        result = runner.invoke(cli, ["1500", "--from", "MILLIS"])
        assert result.exit_code == 0
        assert result.output == "1970-01-01T00:00:01Z\n"

    @pytest.mark.parametrize(
        "fmt,value",
        [
            ("unix", "1700000000"),
            ("millis", "1700000000000"),
            ("micros", "1700000000000000"),
            ("nanos", "1700000000000000000"),
        ],
    )
    def test_each_input_unit(self, runner, fmt, value):
        result = runner.invoke(cli, ["--from", fmt, "--to", "rfc3339", value])
        assert result.exit_code == 0
        assert result.output == "2023-11-14T22:13:20Z\n"

    def test_negative_value_after_double_dash(self, runner):
        result = runner.invoke(cli, ["--from", "nanos", "--", "-1"])
        assert result.exit_code == 0
        assert result.output == "1969-12-31T23:59:59Z\n"

    def test_args_skip_stdin(self, runner):
        result = runner.invoke(cli, ["0"], input="not read\n")
        assert result.exit_code == 0
        assert result.output == f"{EPOCH}\n"


class TestStdin:
    def test_trailing_newline_yields_failing_empty_unit(self, runner):
        result = runner.invoke(cli, [], input="0\n1000\n")
        assert result.exit_code == 1
        lines = _lines(result)
        assert lines[:2] == [EPOCH, "1970-01-01T00:16:40Z"]
        assert lines[2] == "* * * Input:  as unix: parsing '': invalid syntax"
        assert len(lines) == 3

    def test_no_trailing_newline(self, runner):
        result = runner.invoke(cli, [], input="0\n1000")
        assert result.exit_code == 0
        assert _lines(result) == [EPOCH, "1970-01-01T00:16:40Z"]

    def test_empty_stdin_fails(self, runner):
        result = runner.invoke(cli, [], input="")
        assert result.exit_code == 1
        assert "* * * Input:" in result.output

    def test_lone_carriage_return_is_one_malformed_unit(self, runner):
        result = runner.invoke(cli, [], input=b"0\r5")
        assert result.exit_code == 1
        assert EPOCH not in result.output
        assert "1970-01-01T00:00:05Z" not in result.output

    def test_crlf_leaves_carriage_return_in_unit(self, runner):
        result = runner.invoke(cli, [], input=b"5\r\n")
        assert result.exit_code == 1
        assert "parsing '5\\r': invalid syntax" in result.output

    def test_invalid_utf8_is_read_error(self, runner):
        result = runner.invoke(cli, [], input=b"\xff\n")
        assert result.exit_code == 1
        assert "* * * reading standard input" in result.output

    def test_real_stdin_does_not_translate_carriage_returns(self):
        proc = subprocess.run(
            [sys.executable, "-m", "epochconv"],
            input=b"0\r5",
            capture_output=True,
            cwd=ROOT,
        )
        assert proc.returncode == 1
        assert proc.stdout == b""
        assert b"* * * Input:" in proc.stderr


class TestFailures:
    def test_not_a_number(self, runner):
        result = runner.invoke(cli, ["notanumber"])
        assert result.exit_code != 0
        assert result.output == "* * * Input: notanumber as unix: parsing 'notanumber': invalid syntax\n"

    def test_abort_stops_remaining_units(self, runner):
        result = runner.invoke(cli, ["1", "abc", "2"])
        assert result.exit_code == 1
        assert "1970-01-01T00:00:01Z" in result.output
        assert "1970-01-01T00:00:02Z" not in result.output

    def test_unsupported_input_format(self, runner):
        result = runner.invoke(cli, ["--from", "parsec", "0"])
        assert result.exit_code == 1
        assert result.output == "* * * Input: 0 as parsec: Unsupported format\n"

    def test_unsupported_output_format(self, runner):
        result = runner.invoke(cli, ["--to", "iso", "0"])
        assert result.exit_code == 1
        assert result.output == "* * * Output: 0s+0ns as iso: Unsupported format\n"

    def test_out_of_calendar_range(self, runner):
        result = runner.invoke(cli, ["253402300800"])
        assert result.exit_code == 1
        assert "outside the renderable range 0001-01-01T00:00:00Z to 9999-12-31T23:59:59Z" in result.output

    def test_int64_overflow(self, runner):
        result = runner.invoke(cli, ["9223372036854775808"])
        assert result.exit_code == 1
        assert "value out of range" in result.output

    def test_unknown_option_is_usage_error(self, runner):
        result = runner.invoke(cli, ["--bogus", "0"])
        assert result.exit_code == 2
        assert EPOCH not in result.output

    def test_missing_option_value(self, runner):
        result = runner.invoke(cli, ["--from"])
        assert result.exit_code == 2


class TestFlagsAndConfig:
    def test_debug_and_verbose_do_not_change_output(self, runner):
        result = runner.invoke(cli, ["--debug", "-v", "-v", "0"])
        assert result.exit_code == 0
        assert EPOCH in _lines(result)

    def test_verbose_long_form_repeatable(self, runner):
        result = runner.invoke(cli, ["--verbose", "--verbose", "0"])
        assert result.exit_code == 0
        assert EPOCH in _lines(result)

    def test_json_logs_emit_conversion_events(self, runner):
        result = runner.invoke(cli, ["--json-logs", "--debug", "0"])
        assert result.exit_code == 0
        assert '"event": "converted"' in result.output

    def test_env_default_input_format(self, runner, monkeypatch):
        monkeypatch.setenv("EPOCHCONV_FROM_FORMAT", "millis")
        result = runner.invoke(cli, ["1000"])
        assert result.exit_code == 0
        assert result.output == "1970-01-01T00:00:01Z\n"

    def test_flag_beats_env(self, runner, monkeypatch):
        monkeypatch.setenv("EPOCHCONV_FROM_FORMAT", "millis")
        result = runner.invoke(cli, ["--from", "unix", "1000"])
        assert result.output == "1970-01-01T00:16:40Z\n"

    def test_invalid_env_config(self, runner, monkeypatch):
        monkeypatch.setenv("EPOCHCONV_JSON_LOGS", "sometimes")
        result = runner.invoke(cli, ["0"])
        assert result.exit_code == 1
        assert "* * * invalid configuration" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"epochconv, version {version('epochconv')}" in result.output

    def test_help_lists_aliases(self, runner):
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "--from FORMAT" in result.output
        assert "millis" in result.output
