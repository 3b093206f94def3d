"""Shared fixtures for the stylelines tests."""

import pytest

from stylelines import LenientParser


LESS_SOURCE = """\
@import "mixins.less";
@primary: #336699;
/* Buttons */
.button {
  color: @primary;
  .rounded(4px);
  .large { padding: 10px 20px }
}
"""


SCSS_SOURCE = """\
$font-stack: Helvetica, sans-serif;
nav {
  ul { margin: 0; }
  a { font: 100% $font-stack; @include transition(color .3s); }
}
"""


def summary(lines):
    """(kind name, declaration, value) for each line."""
    return [(line.kind.name, line.declaration, line.value) for line in lines]


@pytest.fixture
def lines():
    """Parse a source string into its full list of lines."""
    def _lines(source):
        return list(LenientParser(source))
    return _lines


@pytest.fixture
def less_lines(lines):
    return lines(LESS_SOURCE)


@pytest.fixture
def scss_lines(lines):
    return lines(SCSS_SOURCE)
