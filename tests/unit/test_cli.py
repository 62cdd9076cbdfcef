"""Tests for the command-line entry point."""

from __future__ import annotations

import pytest

from elbonian.cli import main


def test_prints_both_forms(capsys):
    assert main([" 99 "]) == 0
    assert capsys.readouterr().out == "99\tLmVw\n"


def test_integer_only(capsys):
    assert main(["MMCX", "--integer"]) == 0
    assert capsys.readouterr().out == "2110\n"


def test_numeral_only(capsys):
    assert main(["2000", "--numeral"]) == 0
    assert capsys.readouterr().out == "MM\n"


def test_conversion_error_exit_status(capsys):
    assert main(["4333"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "4333" in captured.err


def test_negative_number_is_out_of_bounds(capsys):
    assert main(["-5"]) == 1
    assert "cannot be represented" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(capsys):
    assert main(["MM", "--log-level", "debug"]) == 0
    assert capsys.readouterr().out == "2000\tMM\n"


def test_unknown_log_level_flag_rejected(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["MM", "--log-level", "verbose"])
    assert excinfo.value.code == 2
