"""Tests for the command-line runner."""

import pytest

from ecsbench.bench.cli import main

SMALL = ["--rounds", "3", "--warmup", "1", "--entities", "5", "--points", "2"]


def test_list_prints_every_scenario(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    for name in ("entity", "owned", "locked", "unchecked", "flat_boxed_iter"):
        assert name in out
    assert "[independent]" in out


def test_run_named_scenarios(capsys):
    assert main(["run", "entity", "owned", *SMALL]) == 0
    out = capsys.readouterr().out
    assert "note: 'owned'" in out
    assert "outliers" in out
    assert "independent" in out


def test_run_group(capsys):
    args = ["group", "entity_iter", "--rounds", "2", "--warmup", "0", "--iter-entities", "10"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "flat_iter" in out
    assert "note:" not in out


def test_unknown_scenario_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["run", "nope"])
    assert exc_info.value.code == 2
    assert "Unknown scenario" in capsys.readouterr().err


def test_threaded_run_without_assertions(capsys):
    assert main(["run", "unchecked", "--workers", "2", "--no-debug-assertions", *SMALL]) == 0


@pytest.mark.parametrize("option", [["--rounds", "0"], ["--entities", "-1"], ["--workers", "0"]])
def test_out_of_range_option_is_a_usage_error(capsys, option):
    with pytest.raises(SystemExit) as exc_info:
        main(["run", "flat_iter", *option])
    assert exc_info.value.code == 2
    assert "validation error" in capsys.readouterr().err
