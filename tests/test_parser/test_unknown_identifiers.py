import pytest

from flagwright import Parser
from flagwright.exceptions import (
    MalformedFlagClusterError,
    UnknownIdentifierError,
    UnknownOptionError,
)
from flagwright.parser.resolver import expand_multiple_flags


def test_unknown_long_option():
    parser = Parser("demo", ["--bogus"])
    parser.add_flag("-v", "--verbose")
    with pytest.raises(UnknownOptionError) as error:
        parser.parse()
    assert error.value.token == "--bogus"
    assert str(error.value) == (
        "Unknown option --bogus. In case this is meant to be a "
        "non-option/argument/parameter, please specify the start of non-options "
        "with '--'. See -h/--help for program information."
    )


def test_unknown_short_option():
    parser = Parser("demo", ["-x"])
    with pytest.raises(UnknownOptionError):
        parser.parse()


def test_unknown_flag_group():
    parser = Parser("demo", ["-xyz"])
    parser.add_flag("-v")
    with pytest.raises(MalformedFlagClusterError) as error:
        parser.parse()
    assert error.value.token == "-xyz"
    assert str(error.value).startswith(
        "Unknown flags -x, -y and -z. In case this is meant to be a "
        "non-option/argument/parameter, please specify the start of arguments with '--'."
    )


def test_unknown_identifiers_share_a_base():
    parser = Parser("demo", ["-5"])
    parser.add_positional("number", type=int)
    with pytest.raises(UnknownIdentifierError):
        parser.parse()


def test_negative_number_after_end_of_options():
    parser = Parser("demo", ["--", "-5"])
    parser.add_positional("number", type=int)
    assert parser.parse() == {"number": -5}


def test_unknown_identifier_reported_before_positionals():
    parser = Parser("demo", ["--oops"])
    parser.add_positional("first")
    parser.add_positional("second")
    with pytest.raises(UnknownOptionError):
        parser.parse()


@pytest.mark.parametrize(
    "token, expected",
    [
        ("-a", "-a"),
        ("-ab", "-a and -b"),
        ("-abc", "-a, -b and -c"),
    ],
)
def test_expand_multiple_flags(token, expected):
    assert expand_multiple_flags(token) == expected
