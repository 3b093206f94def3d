from typing import Literal

__all__ = [
    "Token",
    "Word",
    "String",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",
    "Slash",
    "Asterisk",

    "LCurlyBracket",
    "RCurlyBracket",
    "LParantheses",
    "RParantheses",

    "EOF",
    "delim",
]

class Token:
    raw: str
    def __init__(self, raw: str = ''):
        self.raw = raw

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

    def __str__(self) -> str:
        return self.raw

    @property
    def char(self) -> str | None:
        """The raw character of an ordinary token, `None` for words, strings and EOF."""
        return None

class Word(Token): pass

class String(Token):
    quote: Literal['"', "'"]
    def __init__(self, raw: str = '', quote: Literal['"', "'"] = '"'):
        self.quote = quote
        super().__init__(raw)

    def __repr__(self) -> str:
        return f'String({self.quote}{self.raw}{self.quote})'

    def __str__(self) -> str:
        return f"{self.quote}{self.raw}{self.quote}"

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) != 1:
            raise ValueError("Delimiters must be exactly one codepoint long")
        super().__init__(raw)

    @property
    def char(self) -> str:
        return self.raw

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass
class Slash(Delim): pass
class Asterisk(Delim): pass

class LCurlyBracket(Delim): pass
class RCurlyBracket(Delim): pass
class LParantheses(Delim): pass
class RParantheses(Delim): pass

class EOF(Token): pass

DELIMS: dict[str, type[Delim]] = {
    ':': Colon,
    ';': Semicolon,
    ',': Comma,
    '/': Slash,
    '*': Asterisk,
    '{': LCurlyBracket,
    '}': RCurlyBracket,
    '(': LParantheses,
    ')': RParantheses,
}

def delim(char: str) -> Delim:
    """Build the most specific ordinary token for a single character."""
    return DELIMS.get(char, Delim)(char)
