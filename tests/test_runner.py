import pytest

from argsy import ArgsRegistry, Occurrence, in_range
from argsy.runner import run


def make_args():
    args = ArgsRegistry("program", "Run this program")
    args.flag("h", "help", "Print the usage menu")
    args.option("i", "iter", "The number of times to run", "TIMES", Occurrence.REQUIRED, type=int)
    return args


def count(args: ArgsRegistry) -> int:
    return args.validated_value_of("iter", int, in_range(1, 10))


def test_run_returns_main_result():
    assert run(make_args(), count, argv=["-i", "5"]) == 5


def test_run_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_args(), count, argv=["--help"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "Usage: program [-h] -i TIMES" in out
    assert "Options:" in out


def test_run_help_wins_over_missing_required(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_args(), count, argv=["-h"])
    assert excinfo.value.code == 0


def test_run_bundled_help_after_parse(capsys):
    args = make_args()
    args.flag("v", "verbose", "Verbose")
    with pytest.raises(SystemExit) as excinfo:
        run(args, count, argv=["-i", "5", "-vh"])
    assert excinfo.value.code == 0
    assert "Usage: program" in capsys.readouterr().out


def test_run_parse_error_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_args(), count, argv=[])
    assert excinfo.value.code == 1
    assert "required option 'iter' missing" in capsys.readouterr().out


def test_run_validation_error_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_args(), count, argv=["-i", "15"])
    assert excinfo.value.code == 1
    assert "must be less than or equal to 10" in capsys.readouterr().out


def test_run_without_help_key():
    args = ArgsRegistry("program")
    args.option("n", "name")
    assert run(args, lambda a: a.optional_value_of("name", str), argv=[], help_key=None) is None


def test_run_defaults_to_process_arguments(monkeypatch):
    monkeypatch.setattr("sys.argv", ["program", "-i", "2"])
    assert run(make_args(), count) == 2


def make_logged_args():
    args = ArgsRegistry("program")
    args.flag("h", "help", "Print the usage menu")
    args.option("l", "log_file", "The name of the log file", "NAME")
    return args


def test_run_help_after_terminator_is_free_token():
    assert run(make_logged_args(), lambda a: a.remaining, argv=["--", "-h"]) == ["-h"]


def test_run_help_as_option_value_is_not_help():
    result = run(
        make_logged_args(),
        lambda a: a.value_of("log_file", str),
        argv=["-l", "--help"],
    )
    assert result == "--help"


def test_run_help_with_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_logged_args(), count, argv=["--nope", "-h"])
    assert excinfo.value.code == 0
    assert "Usage: program" in capsys.readouterr().out


def test_run_accepts_command_line_string():
    assert run(make_args(), count, argv="-i 3") == 3


def test_run_malformed_command_line_exits_one(capsys):
    with pytest.raises(SystemExit) as excinfo:
        run(make_logged_args(), lambda a: None, argv="-l 'unterminated")
    assert excinfo.value.code == 1
    assert "Malformed command line" in capsys.readouterr().out
