""" Lenient CSS lexing

A deliberately small tokenizer shared by plain CSS, LESS and SASS/SCSS sources.
Characters fall into four classes:

word        | letters, digits, `- . % # $ @`, code points >= 160
whitespace  | code points 0 to 32, never reported
quote       | `"` and `'`, content kept verbatim up to the matching quote
ordinary    | anything else, one token per character

References:
    - [less variables](https://lesscss.org/features/#variables-feature)
    - [sass variables](https://sass-lang.com/documentation/variables/)
    - [@charset](https://developer.mozilla.org/en-US/docs/Web/CSS/@charset)
"""

from __future__ import annotations
import codecs
import io
import logging
import re
from typing import TextIO
from typing_extensions import TypeAliasType

from stylelines.css.tokens import *

__all__ = ["Check", "Lexer", "Source", "StylesheetError", "open_css"]

log = logging.getLogger(__name__)

Source = TypeAliasType("Source", TextIO | str)

WORD_SYMBOLS = "-.%#$@"
QUOTES = "\"'"

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and ('a' <= current <= 'z' or 'A' <= current <= 'Z')

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and '0' <= current <= '9'

    @staticmethod
    def high(current: str | None) -> bool:
        """Latin-1 supplement and above, minus the C1 control block."""
        return current is not None and ord(current) >= 160

    @staticmethod
    def word(current: str | None) -> bool:
        return current is not None and (
            Check.letter(current)
            or Check.digit(current)
            or current in WORD_SYMBOLS
            or Check.high(current)
        )

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and ord(current) <= 32

    @staticmethod
    def quote(current: str | None) -> bool:
        return current is not None and current in QUOTES

    @staticmethod
    def newline(current: str | None) -> bool:
        return current is not None and current in "\r\n"


class StylesheetError(Exception): pass

CHARSET = re.compile(rb'@charset\s*["\']([^"\']+)["\']\s*;')

def open_css(path: str) -> TextIO:
    """Open a stylesheet as a text stream, honouring a leading `@charset` rule.

    The rule itself is left in the stream so it is reported like any other statement.
    Sources without one are read as UTF-8, with an optional BOM.

    Raises:
        StylesheetError: The declared charset is not a text codec.
    """
    stream = open(path, "rb")
    encoding = "utf-8-sig"
    # A UTF-8 BOM may precede the rule, it is skipped when a charset is declared
    start = len(codecs.BOM_UTF8) if stream.read(3) == codecs.BOM_UTF8 else 0
    stream.seek(start)
    if (head := stream.read(8)) == b'@charset':
        head += stream.readline(128)
        if (match := CHARSET.match(head)) is not None:
            encoding = match.group(1).decode("ascii", "replace").strip().lower()
            log.debug("%s declares charset %s", path, encoding)
    stream.seek(start)
    try:
        return io.TextIOWrapper(stream, encoding=encoding, newline="")
    except LookupError:
        stream.close()
        raise StylesheetError(f"Unknown charset {encoding!r} in {path}") from None


class Lexer:
    """Forward-only tokenizer over a character stream.

    Iterating yields tokens until the end of the stream. `consume` keeps returning
    `EOF` once the stream is exhausted.
    """

    def __init__(self, source: Source) -> None:
        if isinstance(source, str):
            source = io.StringIO(source)
        if source is None or not callable(getattr(source, "read", None)):
            raise TypeError(
                f"Expected a readable text stream or a string, got {type(source).__name__}"
            )
        self.source = source
        self._pushback: str | None = None
        self._done = False
        # Only a stream opened by the lexer itself is closed by it
        self._owned = False

    @staticmethod
    def from_path(path: str) -> Lexer:
        """Tokenize a stylesheet file, which is closed once its end is reached."""
        lexer = Lexer(open_css(path))
        lexer._owned = True
        return lexer

    def close(self):
        """Stop reading, closing the stream if this lexer opened it."""
        self._done = True
        self._pushback = None
        if self._owned:
            self.source.close()

    def __enter__(self) -> Lexer:
        return self

    def __exit__(self, *_):
        self.close()

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        next = self.consume()
        if isinstance(next, EOF):
            raise StopIteration
        return next

    def process(self) -> list[Token]:
        """Tokenize the rest of the stream at once."""
        return [token for token in self]

    def peek(self) -> str | None:
        """The next code point without consuming it."""
        if self._pushback is None:
            self._pushback = self.next()
        return self._pushback

    def next(self) -> str | None:
        if self._pushback is not None:
            current, self._pushback = self._pushback, None
            return current
        if self._done:
            return None
        current = self.source.read(1)
        if not current:
            self.close()
            return None
        return current

    def _consume_word_(self, current: str) -> Word:
        word = current
        while Check.word(self.peek()):
            word += self.next()
        return Word(word)

    def _consume_string_(self, quote: str) -> String:
        string = ''
        while True:
            peek = self.peek()
            if peek is None or Check.newline(peek):
                # Unterminated strings stop at the line break, which stays whitespace
                return String(string, quote)
            next = self.next()
            if next == quote:
                return String(string, quote)
            string += next
            if next == "\\" and (escaped := self.peek()) is not None and not Check.newline(escaped):
                string += self.next()

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        next = self.next()
        while Check.whitespace(next):
            next = self.next()

        if next is None:
            return EOF()
        elif Check.word(next):
            return self._consume_word_(next)
        elif Check.quote(next):
            return self._consume_string_(next)
        return delim(next)

