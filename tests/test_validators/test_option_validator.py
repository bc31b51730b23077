import pytest
from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError

from argsy import ArgsRegistry, Occurrence, Order, ValidationRule
from argsy.exceptions import UnknownOptionError
from argsy.validators import OptionValidator, int_range_validator, option_validator


def test_option_validator_accepts_valid_values():
    validator = OptionValidator(int, [ValidationRule(Order.GREATER_THAN, 0)])
    for valid in ["1", " 5 ", "100"]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["0", "-1", "abc", "1.5", ""])
def test_option_validator_rejects_invalid(invalid):
    validator = OptionValidator(int, [ValidationRule(Order.GREATER_THAN, 0)])
    with pytest.raises(ValidationError):
        validator.validate(Document(invalid))


def test_option_validator_messages():
    validator = OptionValidator(int, [ValidationRule(Order.LESS_THAN, 10)])
    with pytest.raises(ValidationError) as excinfo:
        validator.validate(Document("abc"))
    assert excinfo.value.message == "Enter a valid int value."

    with pytest.raises(ValidationError) as excinfo:
        validator.validate(Document("12"))
    assert excinfo.value.message == "Invalid input. Value must be less than 10."


def test_option_validator_incomparable_rule():
    validator = OptionValidator(int, [ValidationRule(Order.LESS_THAN, "10")])
    with pytest.raises(ValidationError, match="cannot compare"):
        validator.validate(Document("5"))


def test_option_validator_for_registered_option():
    args = ArgsRegistry("program")
    args.option("i", "iter", "Iterations", "TIMES", Occurrence.REQUIRED, type=int)
    args.option("l", "log_file", "Log file", "NAME")

    iter_validator = option_validator(args, "i", [ValidationRule(Order.GREATER_THAN, 0)])
    assert iter_validator.value_type is int
    with pytest.raises(ValidationError):
        iter_validator.validate(Document(""))

    log_validator = option_validator(args, "log_file")
    log_validator.validate(Document(""))
    log_validator.validate(Document("run.log"))


def test_option_validator_unknown_option():
    with pytest.raises(UnknownOptionError):
        option_validator(ArgsRegistry("program"), "missing")


def test_int_range_validator_accepts_valid_numbers():
    validator = int_range_validator(1, 10)
    for valid in ["1", "5", "10"]:
        validator.validate(Document(valid))


@pytest.mark.parametrize("invalid", ["0", "11", "5.5", "hello", "-1", ""])
def test_int_range_validator_rejects_invalid(invalid):
    validator = int_range_validator(1, 10)
    with pytest.raises(ValidationError):
        validator.validate(Document(invalid))
