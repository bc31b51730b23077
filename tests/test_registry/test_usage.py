import pytest

from argsy import ArgsRegistry, Occurrence


@pytest.fixture
def args():
    args = ArgsRegistry("program", "Run this program")
    args.flag("h", "help", "Print the usage menu")
    args.option("i", "iter", "The number of times to run", "TIMES", Occurrence.REQUIRED, type=int)
    args.option("l", "log_file", "The name of the log file", "NAME")
    args.option("r", "ratio", "Sampling ratio", default=0.5, type=float)
    args.option("t", "tag", "Tag the run", "TAG", Occurrence.MULTIPLE)
    return args


def test_short_usage(args):
    assert (
        args.short_usage()
        == "Usage: program [-h] -i TIMES [-l NAME] [-r RATIO] [-t TAG...]"
    )


def test_usage_lists_every_option(args):
    lines = args.usage().splitlines()
    assert lines[0] == "Run this program"
    assert lines[1] == ""
    assert lines[2] == "Options:"
    assert lines[3] == f"    {'-h, --help':<30} Print the usage menu"
    assert lines[4] == f"    {'-i, --iter TIMES':<30} The number of times to run (required)"
    assert lines[5] == f"    {'-l, --log_file NAME':<30} The name of the log file"
    assert lines[6] == f"    {'-r, --ratio RATIO':<30} Sampling ratio (default: 0.5)"
    assert lines[7] == f"    {'-t, --tag TAG':<30} Tag the run (repeatable)"


def test_usage_brief_replaces_description(args):
    assert args.usage("How to use program").splitlines()[0] == "How to use program"


def test_usage_wraps_long_flags():
    args = ArgsRegistry("program")
    args.option("", "a_really_long_option_name", "Long one", "SOME_VALUE")
    lines = args.usage().splitlines()
    assert lines[0] == "Options:"
    assert lines[1] == "    --a_really_long_option_name SOME_VALUE"
    assert lines[2] == f"    {'':<30} Long one"


def test_full_usage(args):
    assert args.full_usage() == f"{args.short_usage()}\n\n{args.usage()}"


def test_render_help(args, capsys):
    args.render_help()
    captured = capsys.readouterr().out
    assert "Usage: program [-h] -i TIMES" in captured
    assert "Options:" in captured
    assert "--log_file NAME" in captured
    assert "(default: 0.5)" in captured
