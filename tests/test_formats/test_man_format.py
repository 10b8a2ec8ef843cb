from dataclasses import fields
from io import StringIO

import pytest

from flagwright import HelpSignal, Parser
from flagwright.formats import ManFormat
from flagwright.parser import ParserMetadata


def build_parser(arguments, output):
    parser = Parser(
        "demo",
        arguments,
        version="1.2.0",
        short_description="Demo tool",
        output=output,
    )
    parser.metadata.date = "2025-06-01"
    parser.metadata.man_page_title = "User Commands"
    parser.metadata.description = ["Reads C:\\data.", "Second paragraph."]
    parser.add_option("-n", "--number", type=int, required=True, help="How many.")
    parser.add_subsection("Tuning")
    parser.add_line("First line.")
    parser.add_line("Second line.")
    parser.add_flag("--fast", help="Go fast.")
    parser.add_positional("file", help="Input file.")
    return parser


@pytest.mark.parametrize(
    "arguments", [["--export-help", "man"], ["--export-help=man"], ["-v", "--export-help=man"]]
)
def test_man_page_is_written_and_signalled(arguments):
    output = StringIO()
    with pytest.raises(HelpSignal):
        build_parser(arguments, output).parse()
    lines = output.getvalue().splitlines()

    assert lines[0] == '.TH DEMO 1 "2025-06-01" "demo 1.2.0" "User Commands"'
    assert lines[1:3] == [".SH NAME", "demo \\- Demo tool"]
    assert ".SH SYNOPSIS" in lines
    assert "\\fBdemo\\fR [OPTIONS] FILE" in lines
    assert ".SH DESCRIPTION" in lines
    assert "Reads C:\\edata." in lines
    assert ".SH POSITIONAL ARGUMENTS" in lines
    assert "ARGUMENT-1 FILE (string)" in lines
    assert ".SH OPTIONS" in lines
    assert ".SS Common options" in lines
    assert "\\fB-n\\fR, \\fB--number\\fR (integer)" in lines
    assert "How many. This option is required." in lines
    assert "\\fB--fast\\fR" in lines
    assert ".SH VERSION" in lines


def test_paragraphs_and_lines_are_separated():
    output = StringIO()
    with pytest.raises(HelpSignal):
        build_parser(["--export-help", "man"], output).parse()
    text = output.getvalue()
    assert "Reads C:\\edata.\n.sp\nSecond paragraph.\n" in text
    assert ".SS Tuning\nFirst line.\n.br\nSecond line.\n" in text


def test_list_items_use_tagged_paragraphs():
    output = StringIO()
    with pytest.raises(HelpSignal):
        build_parser(["--export-help=man"], output).parse()
    text = output.getvalue()
    assert ".TP\n\\fB--fast\\fR\nGo fast.\n" in text


def test_man_format_selected():
    parser = Parser("demo", ["--export-help", "man"], output=StringIO())
    assert isinstance(parser._format, ManFormat)


def test_every_metadata_field_is_rendered():
    output = StringIO()
    parser = Parser("tool", ["--export-help", "man"], output=output)
    values = {
        "app_name": "tool",
        "version": "9.9.9",
        "short_description": "Short summary",
        "description": ["Long description."],
        "synopsis": ["tool [-q] FILE"],
        "examples": ["tool -q a.txt"],
        "date": "2024-12-24",
        "man_page_title": "Tool Manual",
        "man_page_section": 7,
    }
    for name, value in values.items():
        setattr(parser.metadata, name, value)
    with pytest.raises(HelpSignal):
        parser.parse()
    text = output.getvalue()

    assert {field.name for field in fields(ParserMetadata)} == set(values)
    for value in values.values():
        rendered = value[0] if isinstance(value, list) else str(value)
        assert rendered in text


def test_lines_starting_with_control_characters_are_protected():
    output = StringIO()
    parser = Parser("demo", ["--export-help", "man"], output=output)
    parser.metadata.description = [".hidden is a dot file.", "'quoted' text."]
    parser.add_line(".profile is read at login.")
    parser.add_list_item(".bashrc", "'Interactive' shells.")
    with pytest.raises(HelpSignal):
        parser.parse()
    lines = output.getvalue().splitlines()
    assert "\\&.hidden is a dot file." in lines
    assert "\\&'quoted' text." in lines
    assert "\\&.profile is read at login." in lines
    assert "\\&.bashrc" in lines
    assert "\\&'Interactive' shells." in lines
