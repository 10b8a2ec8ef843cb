from io import StringIO

import pytest
from rich.console import Console

from flagwright import HelpSignal, Parser
from flagwright.formats import HelpFormat
from flagwright.validators import ArithmeticRange


def make_console():
    return Console(
        file=StringIO(), width=120, highlight=False, color_system=None, force_terminal=False
    )


def build_parser(arguments, console):
    parser = Parser(
        "demo",
        arguments,
        version="1.2.0",
        short_description="Demo tool",
        console=console,
    )
    parser.metadata.description = ["Counts things in [brackets]."]
    parser.metadata.examples = ["demo -n 5 input.txt"]
    parser.metadata.date = "2025-06-01"
    parser.add_option("-n", "--number", type=int, required=True, help="How many.")
    parser.add_option(
        "--level", type=int, default=3, validator=ArithmeticRange(1, 5), help="Level."
    )
    parser.add_section("Output")
    parser.add_line("Controls what is printed.", is_paragraph=True)
    parser.add_flag("-v", "--verbose", help="Talk more.")
    parser.add_list_item("VERBOSE=1", "Same as -v.")
    parser.add_positional("file", help="Input file.")
    parser.add_positional("extra", type=list[str], help="More files.")
    return parser


@pytest.mark.parametrize("flag", ["-h", "--help"])
def test_help_is_rendered_and_signalled(flag):
    console = make_console()
    with pytest.raises(HelpSignal):
        build_parser([flag], console).parse()
    output = console.file.getvalue()

    assert output.startswith("demo - Demo tool\n================\n")
    for section in ["SYNOPSIS", "DESCRIPTION", "POSITIONAL ARGUMENTS", "OPTIONS",
                    "OUTPUT", "EXAMPLES", "VERSION"]:
        assert section in output
    assert "demo [OPTIONS] FILE EXTRA..." in output
    assert "Counts things in [brackets]." in output
    assert "ARGUMENT-1 FILE (string)" in output
    assert "ARGUMENT-2 EXTRA... (list of string)" in output
    assert "Common options" in output
    assert "-h, --help" in output
    assert "--export-help (string)" in output
    assert "-n, --number (integer)" in output
    assert "How many. This option is required." in output
    assert "Level. Default: 3. Value must be in range [1,5]." in output
    assert "-v, --verbose" in output
    assert "VERBOSE=1" in output
    assert "Last update: 2025-06-01" in output
    assert "demo version: 1.2.0" in output


def test_help_layout_follows_declaration_order():
    console = make_console()
    with pytest.raises(HelpSignal):
        build_parser(["--help"], console).parse()
    output = console.file.getvalue()
    assert output.index("--number") < output.index("OUTPUT") < output.index("--verbose")


def test_help_ignores_other_arguments():
    console = make_console()
    with pytest.raises(HelpSignal):
        build_parser(["--bogus", "-h", "-n"], console).parse()
    assert "demo - Demo tool" in console.file.getvalue()


def test_help_after_end_of_options_is_a_value():
    console = make_console()
    parser = Parser("demo", ["--", "-h"], console=console)
    parser.add_positional("value")
    assert parser.parse() == {"value": "-h"}
    assert console.file.getvalue() == ""


def test_custom_synopsis_replaces_the_generated_one():
    console = make_console()
    parser = Parser("demo", ["-h"], console=console)
    parser.metadata.synopsis = ["demo [--fast] FILE"]
    parser.add_positional("file")
    with pytest.raises(HelpSignal):
        parser.parse()
    output = console.file.getvalue()
    assert "demo [--fast] FILE" in output
    assert "[OPTIONS]" not in output


def test_help_format_selected():
    parser = Parser("demo", ["-h"], console=make_console())
    assert isinstance(parser._format, HelpFormat)
