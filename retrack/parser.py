""" Pattern parsing.

This module turns pattern text into a tree of nodes. The grammar, from
loosest to tightest binding:

.. code::

    alternation := concat ('|' concat)*
    concat      := repeat*
    repeat      := atom ('*' | '+' | '?' | '{' [m] ',' [n] '}')?
    atom        := '(' ['?:' | '?=' | '?!'] alternation ')'
                 | '[' ['^'] member* ']'
                 | '.'
                 | char

"""

import logging
from . import nodes
from .common import SourceLocation
from .common import UnexpectedChar, UnexpectedEOS, UnexpectedParenClose
from .common import InvalidRange, NestingTooDeep


MAX_DEPTH = 100
QUANTIFIERS = "*+?{"
DIGITS = "0123456789"


def parse(txt, max_depth=MAX_DEPTH):
    """ Parse a pattern into a node tree """
    parser = Parser(max_depth=max_depth)
    return parser.parse(txt)


class Parser:
    """ Recursive descent pattern parser """

    logger = logging.getLogger("regex.parser")

    def __init__(self, max_depth=MAX_DEPTH):
        self.max_depth = max_depth
        self.txt = None
        self.pos = 0
        self.depth = 0
        self.group_count = 0

    def parse(self, txt):
        self.logger.debug("Parsing pattern %r", txt)
        self.txt = txt
        self.pos = 0
        self.depth = 0
        self.group_count = 0
        expr = self._parse_or()
        if not self.at_end():
            # Only a closing parenthesis stops the alternation early:
            raise UnexpectedParenClose(self.location())
        self.logger.debug("Parsed %d capture group(s)", self.group_count)
        return expr

    def current(self):
        if self.pos < len(self.txt):
            return self.txt[self.pos]

    def at_end(self):
        return self.pos >= len(self.txt)

    def peek(self, c):
        """ Look at next character """
        return c == self.current()

    def look_ahead(self, amount):
        """ Take a look at the character amount positions ahead """
        pos = self.pos + amount
        if pos < len(self.txt):
            return self.txt[pos]

    def location(self, offset=None, length=1):
        if offset is None:
            offset = self.pos
        return SourceLocation(self.txt, offset, length)

    def _next_char(self):
        c = self.current()
        if c is None:
            raise UnexpectedEOS(self.location())

        self.pos += 1
        return c

    def eat(self, c):
        """ Consume the given character """
        loc = self.location()
        actual = self._next_char()
        if actual != c:
            raise UnexpectedChar(actual, loc)
        return actual

    def did_eat(self, c):
        if self.peek(c):
            self.eat(c)
            return True
        return False

    def _parse_or(self):
        alternatives = [self._parse_concat()]
        while self.did_eat("|"):
            alternatives.append(self._parse_concat())

        if len(alternatives) == 1:
            return alternatives[0]
        return nodes.Or(alternatives)

    def _parse_concat(self):
        terms = []
        while not self.at_end() and self.current() not in "|)":
            terms.append(self._parse_repeat())

        if len(terms) == 1:
            return terms[0]
        return nodes.Concat(terms)

    def _parse_repeat(self):
        expr = self._parse_element()
        return self._parse_modifier(expr)

    def _parse_element(self):
        """ Parse single element of a pattern """
        c = self.current()
        if c is None:
            raise UnexpectedEOS(self.location())
        elif c == "(":
            expr = self._parse_group()
        elif c == "[":
            expr = self._parse_set()
        elif c == ".":
            self.eat(".")
            expr = nodes.Any()
        elif c in QUANTIFIERS or c in "|)":
            raise UnexpectedChar(c, self.location())
        else:
            expr = self._parse_symbol()
        return expr

    def _parse_group(self):
        """ Parse a parenthesized group, plain or with a ?-marker """
        start = self.pos
        self.eat("(")
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(self.max_depth, self.location(start))

        if self.did_eat("?"):
            loc = self.location()
            marker = self._next_char()
            if marker == ":":
                expr = self._parse_or()
            elif marker == "=":
                expr = nodes.Lookahead(self._parse_or())
            elif marker == "!":
                expr = nodes.Negate(self._parse_or())
            else:
                raise UnexpectedChar(marker, loc)
        else:
            self.group_count += 1
            index = self.group_count
            expr = nodes.Capture(index, self._parse_or())

        self.eat(")")
        self.depth -= 1
        return expr

    def _parse_symbol(self):
        """ Single, possibly escaped, character. """
        if self.peek("\\"):
            return self._parse_escape()
        return nodes.Literal(self._next_char())

    def _parse_escape(self):
        self.eat("\\")
        loc = self.location()
        c = self._next_char()
        if c in nodes.CONTROL_ESCAPES:
            return nodes.Literal(nodes.CONTROL_ESCAPES[c])
        elif c == "d":
            return nodes.digit()
        elif c in nodes.METACHARS or c in "-^/":
            return nodes.Literal(c)
        else:
            raise UnexpectedChar(c, loc)

    def _parse_set(self):
        """ Parse a set of options '[0-9abc]' """
        self.eat("[")
        complement = self.did_eat("^")

        members = []
        while not self.peek("]"):
            start = self.pos
            member = self._parse_symbol()
            if self.peek("-") and self.look_ahead(1) not in ("]", None):
                lo = self._range_bound(member, start)
                self.eat("-")
                hi_start = self.pos
                hi = self._range_bound(self._parse_symbol(), hi_start)
                if lo > hi:
                    raise InvalidRange(
                        lo, hi, self.location(start, self.pos - start))
                member = nodes.Range(lo, hi)
            members.append(member)
        self.eat("]")

        if len(members) == 1:
            expr = members[0]
        else:
            expr = nodes.Or(members)

        if complement:
            expr = nodes.Concat([nodes.Negate(expr), nodes.Any()])

        return expr

    def _range_bound(self, member, start):
        """ Get the character of a range bound, \\d is not allowed here """
        if not isinstance(member, nodes.Literal):
            raise UnexpectedChar("d", self.location(start + 1))
        return member.char

    def _parse_modifier(self, expr):
        """ Parse any quantifier after an expression """
        if self.did_eat("*"):
            expr = nodes.Repeat(0, None, expr)
        elif self.did_eat("+"):
            expr = nodes.Repeat(1, None, expr)
        elif self.did_eat("?"):
            expr = nodes.Repeat(0, 1, expr)
        elif self.peek("{"):
            minimum, maximum = self._parse_bounds()
            expr = nodes.Repeat(minimum, maximum, expr)

        return expr

    def _parse_bounds(self):
        """ Parse '{m,n}' where both m and n are optional """
        start = self.pos
        self.eat("{")
        if self.did_eat("}"):
            # '{}' is the same as '{,}'
            return 0, None
        minimum = self._parse_number()
        self.eat(",")
        maximum = self._parse_number()
        self.eat("}")

        if minimum is None:
            minimum = 0
        if maximum is not None and minimum > maximum:
            raise InvalidRange(
                minimum, maximum, self.location(start, self.pos - start))
        return minimum, maximum

    def _parse_number(self):
        digits = ""
        while not self.at_end() and self.current() in DIGITS:
            digits += self._next_char()
        if digits:
            return int(digits)
