from __future__ import annotations
from collections.abc import Iterable
from typing import TypedDict

from stylelines.css import LenientParser, Lexer, Line, LineKind, StylesheetError, open_css
from stylelines.css.lexer import Source

__version__ = "0.1.0"

__all__ = [
    "FormatOptions",
    "DEFAULTS",
    "default_options",
    "parse",
    "parse_file",
    "format_lines",
    "LenientParser",
    "Lexer",
    "Line",
    "LineKind",
    "StylesheetError",
    "open_css",
]

class FormatOptions(TypedDict, total=False):
    indent: str
    annotate: bool

DEFAULTS: FormatOptions = {
    "indent": "\t",
    "annotate": False,
}

def default_options(origin: FormatOptions | dict) -> FormatOptions:
    for key, value in DEFAULTS.items():
        origin[key] = origin.get(key, value)
    return origin

def parse(source: Source) -> list[Line]:
    """Read every line of a stylesheet given as text or a text stream."""
    return list(LenientParser(source))

def parse_file(path: str) -> list[Line]:
    with open_css(path) as stream:
        return parse(stream)

def format_lines(lines: Iterable[Line], **options) -> str:
    """Render lines back to CSS, one per row.

    Options:
        indent (str): Unit written once per nesting level. Defaults to a tab.
        annotate (bool): Append the line kind as a trailing comment.

    Raises:
        TypeError: An option other than the ones above was given.
    """
    if unknown := sorted(set(options) - set(DEFAULTS)):
        raise TypeError(f"Unknown format option(s): {', '.join(unknown)}")
    opts = default_options(options)
    render = Line.annotated if opts["annotate"] else Line.to_css
    return "\n".join(render(line, opts["indent"]) for line in lines)
