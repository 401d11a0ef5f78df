"""Tests for the argparse CLI, driven through ``main(argv)``."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from wordcount.__main__ import main
from wordcount.core import runner as runner_mod
from wordcount.model.stats import UINTMAX_MAX, FileStatistics
from wordcount.utils.exit_codes import ExitCode


@pytest.fixture(autouse=True)
def _c_locale(monkeypatch: pytest.MonkeyPatch):
    for var in ("LC_ALL", "LC_CTYPE", "LC_NUMERIC", "LANG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LC_ALL", "C")


@pytest.fixture
def sample(tmp_path: Path) -> Path:
    p = tmp_path / "sample.txt"
    p.write_bytes(b"hello world\na\tb\n")
    return p


def _stdin(monkeypatch: pytest.MonkeyPatch, data: bytes) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))


class TestFlags:
    def test_default_counters(self, sample, capsys):
        rc = main([str(sample)])
        out = capsys.readouterr().out
        assert rc == ExitCode.SUCCESS
        assert out == f"        2        4       16  {sample}\n"

    def test_each_flag(self, sample, capsys):
        expected = {"-l": "2", "-w": "4", "-c": "16", "-L": "11"}
        for flag, value in expected.items():
            assert main([flag, str(sample)]) == ExitCode.SUCCESS
            assert capsys.readouterr().out == f"  {value.rjust(7)}  {sample}\n"

    def test_long_flags(self, sample, capsys):
        rc = main(["--lines", "--max-line-length", str(sample)])
        assert rc == ExitCode.SUCCESS
        assert capsys.readouterr().out == f"        2       11  {sample}\n"

    def test_combined_short_flags(self, sample, capsys):
        assert main(["-wc", str(sample)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == f"        4       16  {sample}\n"

    def test_options_after_operands(self, sample, capsys):
        assert main([str(sample), "-l", str(sample)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.splitlines() == [
            f"        2  {sample}",
            f"        2  {sample}",
            "        4  total",
        ]

    def test_width_is_not_a_default(self, sample, capsys):
        main([str(sample)])
        fields = capsys.readouterr().out.split()
        assert fields[:3] == ["2", "4", "16"]
        assert fields[3] == str(sample)


class TestStdin:
    def test_no_operands_reads_stdin_unlabeled(self, monkeypatch, capsys):
        _stdin(monkeypatch, b"hello world\n")
        assert main([]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "        1        2       12\n"

    def test_dash_operand(self, monkeypatch, capsys, tmp_path):
        monkeypatch.chdir(tmp_path)
        _stdin(monkeypatch, b"a b  c\td\n")
        assert main(["-"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "        1        4        9  -\n"


class TestUsageAndHelp:
    def test_unknown_flag_is_usage_error(self, capsys):
        rc = main(["-x"])
        captured = capsys.readouterr()
        assert rc == ExitCode.USAGE == 2
        assert "The syntax of the command is incorrect." in captured.err
        assert "Try wc -h for more information." in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("argv", [["-1"], ["-l5"], ["-l", "-42", "x"], ["--bogus"]])
    def test_unknown_option_forms_are_usage_errors(self, argv, capsys):
        rc = main(argv)
        captured = capsys.readouterr()
        assert rc == ExitCode.USAGE
        assert "The syntax of the command is incorrect." in captured.err
        assert "No such file or directory" not in captured.err
        assert captured.out == ""

    def test_digit_option_message_names_the_character(self, capsys):
        main(["-1"])
        assert "invalid option -- '1'" in capsys.readouterr().err

    def test_help_before_unknown_option_wins(self, capsys):
        rc = main(["-h", "--bogus"])
        captured = capsys.readouterr()
        assert rc == ExitCode.SUCCESS
        assert "word, line, and byte count" in captured.out
        assert captured.err == ""

    def test_unknown_option_before_help_is_usage_error(self, capsys):
        assert main(["-x", "-h"]) == ExitCode.USAGE
        assert capsys.readouterr().out == ""

    def test_help_inside_short_cluster(self, capsys):
        assert main(["-lh"]) == ExitCode.SUCCESS
        assert "--max-line-length" in capsys.readouterr().out

    def test_dash_dash_ends_options(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "-1").write_bytes(b"one two\n")
        assert main(["-w", "--", "-1"]) == ExitCode.SUCCESS
        assert capsys.readouterr().out == "        2  -1\n"

    def test_help_exits_zero(self, capsys):
        rc = main(["-h"])
        out = capsys.readouterr().out
        assert rc == ExitCode.SUCCESS
        assert "word, line, and byte count" in out
        assert "--max-line-length" in out
        assert "EXIT STATUS" in out

    def test_help_wins_over_files(self, sample, capsys):
        assert main(["--help", str(sample)]) == ExitCode.SUCCESS
        assert str(sample) not in capsys.readouterr().out


class TestMultipleFiles:
    def test_total_and_path_errors(self, sample, tmp_path, capsys):
        missing = tmp_path / "missing"
        rc = main([str(sample), str(tmp_path), str(missing), str(sample)])
        captured = capsys.readouterr()
        assert rc == ExitCode.SUCCESS
        assert captured.out.splitlines() == [
            f"        2        4       16  {sample}",
            f"        0        0        0  {tmp_path}",
            f"        2        4       16  {sample}",
            "        4        8       32  total",
        ]
        assert "Is a directory." in captured.err
        assert "No such file or directory." in captured.err

    def test_overflow_fails_without_total(self, sample, monkeypatch, capsys):
        monkeypatch.setattr(
            runner_mod,
            "scan",
            lambda stream, config: FileStatistics(bytes=UINTMAX_MAX),
        )
        rc = main(["-c", str(sample), str(sample)])
        captured = capsys.readouterr()
        assert rc == ExitCode.FAILURE
        assert not any(l.endswith("  total") for l in captured.out.splitlines())
        assert "Error: integer overflow in total bytes." in captured.err


class TestJson:
    def test_json_replaces_counts_lines(self, sample, tmp_path, capsys):
        rc = main(["--json", str(sample), str(sample)])
        report = json.loads(capsys.readouterr().out)
        assert rc == ExitCode.SUCCESS
        assert report["schema_version"] == "count_report_v1"
        assert report["total"] == {"lines": 4, "words": 8, "bytes": 32}
        assert [i["status"] for i in report["inputs"]] == ["ok", "ok"]
