import io

import pytest

from Launcher import launch, main, parse_arguments
from RingErrors import InvalidOptionError, InvalidProcessCountError, MissingArgumentError


def test_parse_defaults():
    assert parse_arguments(["5"]) == (5, None, 5.0)


def test_parse_running_time_and_mean_delay():
    assert parse_arguments(["7", "2.5", "0.1"]) == (7, 2.5, 0.1)


def test_parse_missing_count():
    with pytest.raises(MissingArgumentError):
        parse_arguments([])


@pytest.mark.parametrize("arg", ["2", "0", "-4", "abc", "3.5"])
def test_parse_invalid_count(arg):
    with pytest.raises(InvalidProcessCountError):
        parse_arguments([arg])


@pytest.mark.parametrize("argv", [["3", "soon"], ["3", "0"], ["3", "1", "-2"]])
def test_parse_invalid_options(argv):
    with pytest.raises(InvalidOptionError):
        parse_arguments(argv)


def test_main_exit_codes_are_distinct(capsys):
    assert main([]) == 1
    assert "missing number of processes" in capsys.readouterr().err

    assert main(["2"]) == 2
    assert "at least 3 processes" in capsys.readouterr().err

    assert main(["3", "never"]) == 3


def test_launch_prints_initial_and_transition_snapshots():
    out = io.StringIO()
    handled = launch(5, runningTime=0.5, meanDelay=0.01, out=out)

    lines = [line for line in out.getvalue().split("\n\n") if line]
    assert handled > 0
    assert len(lines) == handled + 1
    assert all(len(line.split(",")) == 5 for line in lines)
