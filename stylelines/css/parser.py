""" Lenient CSS line parser

Cuts a token stream into lines without understanding selectors or values:

<block-opening/>    | `<declaration/> {`
<property/>         | `<declaration/>: <value/>;` or `<declaration/>;`
<block-closure/>    | `}`

A property missing its `;` before a `}` is still reported as a property, and the
closure of its block follows on the next call. Comments are skipped.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from stylelines.css.lexer import Lexer, Source
from stylelines.css.tokens import *

__all__ = ["LineKind", "Line", "LenientParser", "join", "classify"]

log = logging.getLogger(__name__)

# No space is written before these, nor after an opening parenthesis
TIGHT = "(),;:{}"

class LineKind(Enum):
    UNKNOWN = 0
    BLOCK_OPENING = 1
    BLOCK_CLOSURE = 2
    PROPERTY = 3


@dataclass(frozen=True, eq=False)
class Line:
    """One classified statement.

    `parent` is the innermost block still open when the line was read, shared by
    every line of that block. A closure's parent is the block it closes.
    `value` is only set for a property with a `:`.
    """

    kind: LineKind
    parent: Optional[Line] = None
    declaration: str = ""
    value: Optional[str] = None

    def ancestors(self) -> Iterator[Line]:
        parent = self.parent
        while parent is not None:
            yield parent
            parent = parent.parent

    @property
    def depth(self) -> int:
        """Indentation level, a closure sits at the level of its opening line."""
        depth = sum(1 for _ in self.ancestors())
        if self.kind is LineKind.BLOCK_CLOSURE:
            return max(depth - 1, 0)
        return depth

    def to_css(self, indent: str = "\t") -> str:
        """Converts this line back to CSS code."""
        code = indent * self.depth
        if self.kind is LineKind.PROPERTY:
            code += self.declaration
            if self.value is not None:
                code += f": {self.value}"
            return code + ";"
        elif self.kind is LineKind.BLOCK_OPENING:
            return code + f"{self.declaration} {{"
        elif self.kind is LineKind.BLOCK_CLOSURE:
            return code + f"{self.declaration}}}"
        return code + self.declaration

    def annotated(self, indent: str = "\t") -> str:
        return f"{self.to_css(indent)} /* {self.kind.name} */"

    def __str__(self) -> str:
        return self.to_css()

    def __repr__(self) -> str:
        parent = "None" if self.parent is None else repr(self.parent.declaration)
        value = "" if self.value is None else f", value={self.value!r}"
        return f"Line({self.kind.name}, {self.declaration!r}{value}, parent={parent})"


def join(tokens: list[Token], start: int, end: int) -> str:
    """Rebuild source text for `tokens[start:end]` with conventional CSS spacing.

    Words are separated by one space, except before `( ) , ; : { }` and right after
    `(`, so `rgba(0,0,0,.5)` and `margin 0 auto` come back as written.
    """
    text = ''
    previous = None
    for i in range(start, end):
        token = tokens[i]
        char = token.char
        if i > start and (char is None or char not in TIGHT) and previous != '(':
            text += ' '
        text += str(token)
        previous = char
    return text


def classify(parent: Line | None, tokens: list[Token]) -> Line:
    """Build the line for a complete statement, its delimiter being the last token."""
    length = len(tokens)
    last = tokens[-1]

    if isinstance(last, LCurlyBracket):
        return Line(LineKind.BLOCK_OPENING, parent, join(tokens, 0, length - 1))
    elif isinstance(last, RCurlyBracket):
        if not join(tokens, 0, length - 1):
            return Line(LineKind.BLOCK_CLOSURE, parent)
        # `;` was left out before the `}`
        return _property_(parent, tokens)
    elif isinstance(last, Semicolon):
        return _property_(parent, tokens)

    # Leftovers at the end of the stream
    return Line(LineKind.UNKNOWN, parent, join(tokens, 0, length))


def _property_(parent: Line | None, tokens: list[Token]) -> Line:
    end = len(tokens) - 1
    for i in range(end):
        if isinstance(tokens[i], Colon):
            return Line(
                LineKind.PROPERTY,
                parent,
                join(tokens, 0, i),
                join(tokens, i + 1, end),
            )
    return Line(LineKind.PROPERTY, parent, join(tokens, 0, end))


class LenientParser:
    """Reads a stylesheet one line at a time.

    Nothing in the input is an error: unbalanced braces, missing semicolons and
    trailing garbage all still produce lines. The stream is read lazily and is not
    closed by the parser.
    """

    def __init__(self, source: Source | Lexer) -> None:
        self.lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.parent: Line | None = None
        # A `}` ended a property, its block closure is owed on the next call
        self.pending_closure = False

    def __iter__(self) -> Iterator[Line]:
        return self

    def __next__(self) -> Line:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line

    def _pop_(self):
        if self.parent is not None:
            self.parent = self.parent.parent

    def next_line(self) -> Line | None:
        """Read the next line, `None` once the stream is exhausted."""
        if self.pending_closure:
            self.pending_closure = False
            line = Line(LineKind.BLOCK_CLOSURE, self.parent)
            log.debug("Closing %r after a property without ';'", line.parent)
            self._pop_()
            return line

        statement: list[Token] = []
        comment = False
        last_comment_char = None

        for token in self.lexer:
            char = token.char

            if comment:
                if char == '/' and last_comment_char == '*':
                    comment = False
                    # Back to back comments must not merge
                    last_comment_char = None
                else:
                    last_comment_char = char
                continue

            if isinstance(token, Asterisk) and statement and isinstance(statement[-1], Slash):
                comment = True
                statement.pop()
                continue

            statement.append(token)

            if isinstance(token, Semicolon):
                return classify(self.parent, statement)
            elif isinstance(token, LCurlyBracket):
                self.parent = classify(self.parent, statement)
                return self.parent
            elif isinstance(token, RCurlyBracket):
                line = classify(self.parent, statement)
                if line.kind is LineKind.PROPERTY:
                    self.pending_closure = True
                else:
                    if self.parent is None:
                        log.debug("Unbalanced '}' at the top level")
                    self._pop_()
                return line

        if comment:
            log.debug("Stream ended inside a comment")
        if statement:
            log.debug("Unterminated statement at the end of the stream")
            return classify(self.parent, statement)

        if self.parent is not None:
            log.debug("Stream ended with %d unclosed block(s)", 1 + sum(1 for _ in self.parent.ancestors()))
            # Unclosed blocks are dropped so later calls are plain end of stream
            self.parent = None
        return None
