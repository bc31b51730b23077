import pytest

from argsy import ArgsRegistry, Occurrence
from argsy.exceptions import OptionAlreadyExistsError, OptionDefinitionError


def test_str():
    """Test the string representation of ArgsRegistry."""
    args = ArgsRegistry("program")
    assert str(args) == "ArgsRegistry(program='program', options=0, flags=0, required=0)"

    args.flag("h", "help", "Print the usage menu")
    args.option("i", "iter", "Iterations", "TIMES", Occurrence.REQUIRED, type=int)
    args.option("l", "log_file", "Log file", "NAME")
    assert str(args) == "ArgsRegistry(program='program', options=3, flags=1, required=1)"
    assert repr(args) == str(args)


def test_has_options():
    args = ArgsRegistry("program")
    assert not args.has_options()
    args.flag("f", "flag", "Flag")
    assert args.has_options()


def test_registration_is_chainable():
    args = (
        ArgsRegistry("program")
        .flag("f", "flag", "Flag")
        .option("o", "option", "Option", "OPT")
    )
    assert [schema.key for schema in args.options] == ["flag", "option"]


def test_long_key_is_canonical_and_short_key_is_alias():
    args = ArgsRegistry("program")
    args.option("o", "output", "Output", "FILE")
    assert args.get_option("output") is args.get_option("o")
    assert args.get_option("o").key == "output"
    assert args.get_option("missing") is None


def test_short_only_option_uses_short_key():
    args = ArgsRegistry("program")
    args.flag("v", "", "Verbose")
    assert args.get_option("v").key == "v"


def test_flag_schema():
    args = ArgsRegistry("program")
    args.flag("h", "help", "Print the usage menu")
    schema = args.get_option("help")
    assert schema.is_flag
    assert schema.type is bool
    assert schema.hint == ""
    assert schema.default is None
    assert not schema.is_required


def test_occurrence_accepts_strings():
    args = ArgsRegistry("program")
    args.option("i", "iter", occurrence="req", type=int)
    assert args.get_option("iter").occurrence is Occurrence.REQUIRED


def test_default_makes_required_option_optional():
    args = ArgsRegistry("program")
    args.option("i", "iter", occurrence=Occurrence.REQUIRED, default=3, type=int)
    assert not args.get_option("iter").is_required


def test_string_default_is_coerced():
    args = ArgsRegistry("program")
    args.option("i", "iter", default="7", type=int)
    assert args.get_option("iter").default.value == 7


def test_multiple_default_list():
    args = ArgsRegistry("program")
    args.option("t", "tag", occurrence=Occurrence.MULTIPLE, default=["a", "b"])
    assert args.get_option("tag").default.values == ("a", "b")


@pytest.mark.parametrize(
    "short, long",
    [
        ("", ""),
        ("ab", "alpha"),
        ("-a", "alpha"),
        ("a", "--alpha"),
        ("a", "al pha"),
        ("a", "al=pha"),
    ],
)
def test_malformed_keys_fail_fast(short, long):
    args = ArgsRegistry("program")
    with pytest.raises(OptionDefinitionError):
        args.option(short, long, "Option")


@pytest.mark.parametrize(
    "short, long",
    [("f", "other"), ("x", "flag"), ("x", "f")],
)
def test_duplicate_keys_fail_fast(short, long):
    args = ArgsRegistry("program")
    args.flag("f", "flag", "Flag")
    with pytest.raises(OptionAlreadyExistsError):
        args.option(short, long, "Option")
    assert len(args.options) == 1


def test_option_rejects_flag_occurrence():
    args = ArgsRegistry("program")
    with pytest.raises(OptionDefinitionError, match="flag()"):
        args.option("f", "flag", occurrence=Occurrence.FLAG)


def test_option_rejects_unknown_occurrence():
    args = ArgsRegistry("program")
    with pytest.raises(OptionDefinitionError, match="Invalid Occurrence"):
        args.option("o", "option", occurrence="sometimes")


def test_option_rejects_unsupported_type():
    args = ArgsRegistry("program")
    with pytest.raises(OptionDefinitionError, match="unsupported option type"):
        args.option("o", "option", type=list)


@pytest.mark.parametrize(
    "default, value_type",
    [("abc", int), (1.5, int), (True, int), (3, str), ("maybe", bool)],
)
def test_option_rejects_mismatched_default(default, value_type):
    args = ArgsRegistry("program")
    with pytest.raises(OptionDefinitionError, match="invalid default"):
        args.option("o", "option", default=default, type=value_type)


def test_int_default_is_widened_for_float_option():
    args = ArgsRegistry("program")
    args.option("r", "ratio", default=5, type=float)
    args.parse([])
    value = args.value_of("ratio", float)
    assert value == 5.0
    assert isinstance(value, float)
