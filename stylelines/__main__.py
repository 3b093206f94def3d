"""Print the lines of one or more stylesheets.

    python -m stylelines theme.less
    python -m stylelines --annotate --spaces 2 a.css b.scss
    cat theme.css | python -m stylelines --tokens
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import TextIO

from conterm.pretty import Markup

from stylelines import DEFAULTS, Lexer, LenientParser, Line, LineKind, StylesheetError, open_css

log = logging.getLogger("stylelines")

KIND_COLORS = {
    LineKind.UNKNOWN: "red",
    LineKind.BLOCK_OPENING: "cyan",
    LineKind.PROPERTY: "green",
    LineKind.BLOCK_CLOSURE: "cyan",
}


def render(line: Line, indent: str, annotate: bool, color: bool) -> str:
    code = line.to_css(indent)
    if not annotate:
        return code
    if color:
        return f"{code} " + Markup.parse(f"[{KIND_COLORS[line.kind]}]/* {line.kind.name} */")
    return line.annotated(indent)


def dump(stream: TextIO, args: argparse.Namespace, out: TextIO) -> None:
    if args.tokens:
        for token in Lexer(stream):
            out.write(f"{token!r}\n")
        return

    color = args.annotate and out.isatty()
    for line in LenientParser(stream):
        out.write(render(line, args.indent, args.annotate, color) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="stylelines",
        description="Split CSS, LESS and SASS sources into block and property lines.",
    )
    parser.add_argument("paths", nargs="*", help="Stylesheets to read, '-' or nothing for stdin")
    parser.add_argument("--tokens", action="store_true", help="Dump the raw token stream instead")
    parser.add_argument("--annotate", "-a", action="store_true", help="Append the kind of each line")
    parser.add_argument("--indent", default=DEFAULTS["indent"], help="Indentation unit (default: tab)")
    parser.add_argument("--spaces", type=int, metavar="N", help="Indent with N spaces")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log lenient recoveries")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.spaces is not None:
        args.indent = " " * args.spaces

    status = 0
    for path in args.paths or ["-"]:
        if path == "-":
            dump(sys.stdin, args, sys.stdout)
            continue
        try:
            with open_css(path) as stream:
                dump(stream, args, sys.stdout)
        except (OSError, UnicodeDecodeError, StylesheetError) as error:
            log.error("Cannot read %s: %s", path, error)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
