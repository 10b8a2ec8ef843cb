import pytest

from flagwright import Parser
from flagwright.exceptions import DesignError, UnknownOptionError


def build_parser(arguments):
    parser = Parser("demo", arguments)
    parser.add_flag("-a", "--all", help="All entries.")
    parser.add_flag("-l", "--long", help="Long listing.")
    parser.add_flag("-r", help="Reverse.")
    return parser


def test_grouped_short_flags():
    args = build_parser(["-alr"]).parse()
    assert args == {"all": True, "long": True, "r": True}


def test_group_in_any_order():
    args = build_parser(["-rl"]).parse()
    assert args == {"all": False, "long": True, "r": True}


def test_long_flags():
    args = build_parser(["--long", "--all"]).parse()
    assert args == {"all": True, "long": True, "r": False}


def test_repeated_flag_stays_true():
    args = build_parser(["-a", "-a", "--all", "-aa"]).parse()
    assert args["all"] is True


def test_unknown_character_left_in_group():
    with pytest.raises(UnknownOptionError) as error:
        build_parser(["-alx"]).parse()
    assert error.value.token == "-x"
    assert str(error.value).startswith("Unknown option -x.")


def test_flag_default_true():
    parser = Parser("demo", [])
    parser.add_flag("--color", default=True)
    assert parser.parse() == {"color": True}


def test_flag_default_must_be_bool():
    parser = Parser("demo", [])
    with pytest.raises(DesignError):
        parser.add_flag("--color", default="yes")


def test_option_value_is_not_read_as_flags():
    parser = Parser("demo", ["-o", "-v", "-v"])
    parser.add_option("-o")
    parser.add_flag("-v")
    assert parser.parse() == {"o": "-v", "v": True}


def test_flag_group_with_option_value_attached():
    parser = Parser("demo", ["-v", "-n3"])
    parser.add_flag("-v", "--verbose")
    parser.add_option("-n", type=int)
    assert parser.parse() == {"verbose": True, "n": 3}


def test_flag_cannot_be_required():
    parser = Parser("demo", [])
    with pytest.raises(DesignError):
        parser.add_flag("--force", required=True)


def test_flag_with_attached_value_is_not_an_option():
    parser = Parser("demo", ["-g4"])
    parser.add_flag("-g")
    with pytest.raises(UnknownOptionError) as error:
        parser.parse()
    assert error.value.token == "-4"
