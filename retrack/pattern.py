""" Compiled patterns and their match results.

Example usage:

>>> from retrack import compile
>>> p = compile('(a|b)+c')
>>> p.matches('abac')
True
>>> p.match('abac').group(1)
'a'

"""

import logging
from .parser import Parser, MAX_DEPTH
from .runtime import new_runtime


logger = logging.getLogger("regex.pattern")


def compile(pattern: str, max_depth=MAX_DEPTH):
    """ Compile pattern text into a Pattern.

    Raises a RegexSyntaxError when the pattern is malformed.
    """
    parser = Parser(max_depth=max_depth)
    ast = parser.parse(pattern)
    logger.debug("Compiled %r", pattern)
    return Pattern(pattern, ast, parser.group_count)


def matches(pattern, subject: str) -> bool:
    """ Check if the pattern matches the whole subject """
    if not isinstance(pattern, Pattern):
        pattern = compile(pattern)
    return pattern.matches(subject)


class Pattern:
    """ A compiled pattern. Can be used for any number of matches. """

    def __init__(self, pattern, ast, groups):
        self._pattern = pattern
        self._ast = ast
        self._groups = groups

    def __repr__(self):
        return "Pattern({!r})".format(self._pattern)

    @property
    def pattern(self) -> str:
        """ The source text of this pattern """
        return self._pattern

    @property
    def ast(self):
        return self._ast

    @property
    def groups(self) -> int:
        """ The number of capture groups """
        return self._groups

    def match(self, subject: str):
        """ Match the whole subject, return a Match or None """
        if not isinstance(subject, str):
            raise TypeError(
                "Expected str but got {}".format(type(subject)))

        runtime = new_runtime(subject)
        if runtime.run(self._ast) and runtime.cursor.at_end:
            return Match(self, subject, runtime.spans())
        return None

    def matches(self, subject: str) -> bool:
        return self.match(subject) is not None


class Match:
    """ Result of a successful match """

    def __init__(self, pattern, subject, spans):
        self.pattern = pattern
        self.subject = subject
        self._spans = spans

    def __repr__(self):
        return "<Match {!r} groups={!r}>".format(self.subject, self.groups())

    def _check_index(self, index):
        if not 0 <= index <= self.pattern.groups:
            raise IndexError("no such group: {}".format(index))

    def span(self, index=0):
        """ Start and end of the group, (-1, -1) if it did not match """
        self._check_index(index)
        if index == 0:
            return 0, len(self.subject)
        return self._spans.get(index, (-1, -1))

    def group(self, index=0):
        """ Text of the group, None if it did not match """
        self._check_index(index)
        if index == 0:
            return self.subject
        if index in self._spans:
            start, end = self._spans[index]
            return self.subject[start:end]

    def groups(self, default=None):
        """ Text of all capture groups, in order """
        return tuple(
            default if index not in self._spans else self.group(index)
            for index in range(1, self.pattern.groups + 1)
        )

    @property
    def captures(self):
        """ Captured text per group index, for groups that matched """
        return {index: self.group(index) for index in self._spans}
