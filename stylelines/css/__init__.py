"""
References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [less](https://lesscss.org/features/)
    - [sass](https://sass-lang.com/documentation/syntax/)

<comment></comment>
<block-opening> <declaration/> {
    <property/>: <value/>;
    <property/>: <value/> }    <- implicit `;`, the closure is reported separately
</block-opening>

declaration => selector, at-rule or mixin call, kept as text,
value => anything up to `;` or `}`, kept as text,
block => `{}`, nested to any depth,
"""
from stylelines.css.lexer import Lexer, StylesheetError, open_css
from stylelines.css.parser import LenientParser, Line, LineKind, classify, join

__all__ = [
    "Lexer",
    "StylesheetError",
    "open_css",
    "LenientParser",
    "Line",
    "LineKind",
    "classify",
    "join",
]
