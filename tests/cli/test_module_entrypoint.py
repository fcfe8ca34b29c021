"""Tests for running sexpand as a module (`python -m sexpand`)."""

from __future__ import annotations

import runpy
from unittest.mock import patch

import pytest


def test_module_help_exits_zero() -> None:
    """Running with --help should exit cleanly with code 0."""
    with patch("sys.argv", ["sexpand", "--help"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("sexpand", run_name="__main__")
    assert exc_info.value.code == 0


def test_module_expands_notation(capsys) -> None:
    """The module entrypoint runs the same CLI."""
    with patch("sys.argv", ["sexpand", "n[01-02]"]):
        runpy.run_module("sexpand", run_name="__main__")
    assert capsys.readouterr().out == "n01,n02\n"


def test_module_error_exits_one(capsys) -> None:
    with patch("sys.argv", ["sexpand", "n[04-01]"]):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("sexpand", run_name="__main__")
    assert exc_info.value.code == 1
    assert "ReversedRangeError" in capsys.readouterr().err
