""" Regular expressions matched by a backtracking tree walker,
implemented in pure Python.

Example usage:

>>> import retrack
>>> retrack.matches('a{2,3}', 'aaa')
True
>>> retrack.compile('(a|b)+(c|d)+').match('abdc').groups()
('b', 'c')

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

from .common import RegexSyntaxError, UnexpectedChar, UnexpectedEOS
from .common import UnexpectedParenClose, InvalidRange, NestingTooDeep
from .nodes import Literal, Range, Any, Negate, Lookahead, Repeat
from .nodes import Concat, Or, Capture
from .parser import parse
from .pattern import compile, matches, Pattern, Match


__all__ = (
    "compile",
    "matches",
    "parse",
    "Pattern",
    "Match",
    "Literal",
    "Range",
    "Any",
    "Negate",
    "Lookahead",
    "Repeat",
    "Concat",
    "Or",
    "Capture",
    "RegexSyntaxError",
    "UnexpectedChar",
    "UnexpectedParenClose",
    "UnexpectedEOS",
    "InvalidRange",
    "NestingTooDeep",
)
