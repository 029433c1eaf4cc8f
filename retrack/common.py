"""
   Error handling routines
   Source location structures
"""

import io


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class SourceLocation:
    """ A location that refers to a position in a pattern text """

    __slots__ = ["pattern", "offset", "length"]

    def __init__(self, pattern, offset, length=1):
        self.pattern = pattern
        self.offset = offset
        self.length = length

    def __repr__(self):
        return f"({self.pattern!r}, {self.offset}, {self.length})"

    def print_message(self, message: str, file=None):
        """ Print a message at this location in the pattern """
        print_message(
            self.pattern, self.offset, self.length, message, file=file)


def print_message(pattern, offset: int, length: int, message: str, file=None):
    """ Render a message nicely below the pattern text """
    base_txt = "      :"
    print("{:5} :{}".format(1, pattern), file=file)
    if length < 1:
        length = 1
    marker = "^" * length
    indent1_txt = base_txt + " " * offset
    indent2_txt = indent1_txt + " " * (length // 2)
    print(f"{indent1_txt}{marker}", file=file)
    print(f"{indent2_txt}|", file=file)
    print(f"{indent2_txt}+---- {message}", file=file)


class RegexSyntaxError(Exception):
    """ A pattern could not be compiled """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    @property
    def pattern(self):
        if self.loc:
            return self.loc.pattern

    @property
    def offset(self):
        if self.loc:
            return self.loc.offset

    def render(self):
        """ Render this error as a list of lines below the pattern """
        f = io.StringIO()
        self.print(file=f)
        return f.getvalue().splitlines()

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class UnexpectedChar(RegexSyntaxError):
    """ A character appeared where the grammar forbids it """
    def __init__(self, char, loc=None, msg=None):
        if msg is None:
            msg = 'Unexpected character {!r}'.format(char)
        super().__init__(msg, loc)
        self.char = char


class UnexpectedParenClose(UnexpectedChar):
    """ A closing parenthesis without an opening one """
    def __init__(self, loc=None):
        super().__init__(')', loc, msg='Unmatched closing parenthesis')


class UnexpectedEOS(RegexSyntaxError):
    """ The pattern ended in the middle of a construct """
    def __init__(self, loc=None):
        super().__init__('Unexpected end of pattern', loc)


class InvalidRange(RegexSyntaxError):
    """ The lower bound of a range is above its upper bound """
    def __init__(self, lo, hi, loc=None):
        super().__init__(
            'Invalid range, {!r} is larger than {!r}'.format(lo, hi), loc)
        self.lo = lo
        self.hi = hi


class NestingTooDeep(RegexSyntaxError):
    """ Groups are nested beyond the configured maximum """
    def __init__(self, max_depth, loc=None):
        super().__init__(
            'Groups nested deeper than {}'.format(max_depth), loc)
        self.max_depth = max_depth
