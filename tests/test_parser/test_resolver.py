import pytest

from flagwright.exceptions import DesignError
from flagwright.parser import Binding, BindingKind, IdPair, TokenResolver


def option(dest, short="", long="", value_type=str, **kwargs):
    return Binding(BindingKind.OPTION, dest, IdPair(short, long), value_type, **kwargs)


def test_resolver_without_parser():
    resolver = TokenResolver(["-n", "5", "-v", "file.txt"])
    resolver.add_option(option("number", "n", "number", int, required=True))
    resolver.add_flag(Binding(BindingKind.FLAG, "verbose", IdPair("v"), bool, False))
    resolver.add_positional(Binding(BindingKind.POSITIONAL, "file"))
    assert resolver.parse() == {"number": 5, "verbose": True, "file": "file.txt"}
    assert repr(resolver) == "TokenResolver(options=1, flags=1, positionals=1)"


def test_resolver_parses_once():
    resolver = TokenResolver([])
    resolver.parse()
    with pytest.raises(DesignError):
        resolver.parse()


def test_resolver_rejects_wrong_binding_kind():
    resolver = TokenResolver([])
    with pytest.raises(AssertionError):
        resolver.add_flag(option("name", long="name"))


def test_tokens_are_consumed_across_phases():
    resolver = TokenResolver(["-o", "out", "-q", "in"])
    resolver.add_option(option("output", "o"))
    resolver.add_flag(Binding(BindingKind.FLAG, "quiet", IdPair("q"), bool, False))
    resolver.add_positional(Binding(BindingKind.POSITIONAL, "input"))
    resolver.parse()
    assert resolver.buffer.remaining() == []


def test_binding_value_text():
    flag = Binding(BindingKind.FLAG, "verbose", IdPair("v"), bool, False)
    files = Binding(BindingKind.POSITIONAL, "files", value_type=list[int])
    assert flag.get_value_text() == ""
    assert option("n", "n", value_type=int).get_value_text() == "(integer)"
    assert files.get_value_text() == "FILES... (list of integer)"
    assert files.is_container and files.is_positional
    assert files.display() == "files"
    assert flag.display() == "-v"
