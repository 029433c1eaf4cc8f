""" Pattern tree nodes.

A compiled pattern is a tree of these nodes. Nodes are immutable once
built and carry no match state, so one tree can be shared by any number
of match calls.

"""

import abc


# Characters that need a backslash to be taken literally:
METACHARS = "\\.*+?()[]{}|"
CLASS_METACHARS = "\\]^-"

# Escape letter to control character:
CONTROL_ESCAPES = {"r": "\r", "n": "\n", "t": "\t", "0": "\0"}
_CONTROL_NAMES = {v: k for k, v in CONTROL_ESCAPES.items()}


def escape(char, special=METACHARS):
    """ Render a single character as pattern text """
    if char in _CONTROL_NAMES:
        return "\\" + _CONTROL_NAMES[char]
    elif char in special:
        return "\\" + char
    else:
        return char


class Node(abc.ABC):
    """ Base class of all pattern tree nodes """

    __slots__ = ()
    _fields = ()
    children = ()

    @abc.abstractmethod
    def orderby(self):
        raise NotImplementedError()

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.orderby() == other.orderby()

    def __hash__(self):
        return hash(self.orderby())

    def __repr__(self):
        args = [repr(getattr(self, f)) for f in self._fields]
        args.extend(repr(c) for c in self.children)
        return "{}({})".format(self.__class__.__name__, ", ".join(args))

    def label(self):
        """ Short description of this node, without its children """
        args = ", ".join(repr(getattr(self, f)) for f in self._fields)
        return "{}({})".format(self.__class__.__name__, args)

    def __or__(self, other):
        if not isinstance(other, Node):
            raise TypeError("Expected Node but got {}".format(type(other)))
        return Or(_flatten(Or, self) + (other,))

    def __add__(self, other):
        if not isinstance(other, Node):
            raise TypeError("Expected Node but got {}".format(type(other)))
        return Concat(_flatten(Concat, self) + (other,))

    def optional(self):
        """ Equivalent to the ?-operator. """
        return Repeat(0, 1, self)

    def kleene(self):
        """ Apply the *-operator to this node. """
        return Repeat(0, None, self)

    def repeat(self, minimum, maximum):
        """ Apply the {m,n}-operator to this node. """
        return Repeat(minimum, maximum, self)


def _flatten(cls, node):
    if type(node) is cls:
        return node.children
    return (node,)


class Literal(Node):
    """ Match exactly this character """

    __slots__ = ("char",)
    _fields = ("char",)

    def __init__(self, char):
        if len(char) != 1:
            raise ValueError("Expected a single character, got {!r}".format(
                char))
        self.char = char

    def orderby(self):
        return self.__class__.__name__, self.char

    def __str__(self):
        return escape(self.char)


class Range(Node):
    """ Match a single character between lo and hi, inclusive """

    __slots__ = ("lo", "hi")
    _fields = ("lo", "hi")

    def __init__(self, lo, hi):
        if lo > hi:
            raise ValueError(
                "Range start {!r} must not exceed end {!r}".format(lo, hi))
        self.lo = lo
        self.hi = hi

    def orderby(self):
        return self.__class__.__name__, self.lo, self.hi

    def __str__(self):
        return "[{}-{}]".format(
            escape(self.lo, CLASS_METACHARS), escape(self.hi, CLASS_METACHARS))


def digit():
    """ The node that \\d stands for """
    return Range("0", "9")


class Any(Node):
    """ Match any single character """

    __slots__ = ()

    def orderby(self):
        return (self.__class__.__name__,)

    def __str__(self):
        return "."


class Negate(Node):
    """ Zero width assertion that the child does not match here """

    __slots__ = ("child",)

    def __init__(self, child):
        self.child = child

    @property
    def children(self):
        return (self.child,)

    def orderby(self):
        return self.__class__.__name__, self.child.orderby()

    def __str__(self):
        return "(?!{})".format(self.child)


class Lookahead(Node):
    """ Zero width assertion that the child matches here """

    __slots__ = ("child",)

    def __init__(self, child):
        self.child = child

    @property
    def children(self):
        return (self.child,)

    def orderby(self):
        return self.__class__.__name__, self.child.orderby()

    def __str__(self):
        return "(?={})".format(self.child)


class Repeat(Node):
    """ Match the child between min and max times, greedily.

    A max of None means there is no upper bound.
    """

    __slots__ = ("min", "max", "child")
    _fields = ("min", "max")

    def __init__(self, minimum, maximum, child):
        if minimum < 0:
            raise ValueError("Negative repeat count {}".format(minimum))
        if maximum is not None and maximum < minimum:
            raise ValueError("Repeat bounds {} > {}".format(minimum, maximum))
        self.min = minimum
        self.max = maximum
        self.child = child

    @property
    def children(self):
        return (self.child,)

    def orderby(self):
        return self.__class__.__name__, self.min, self.max, \
            self.child.orderby()

    def __str__(self):
        if isinstance(self.child, (Concat, Or, Repeat)):
            txt = "(?:{})".format(self.child)
        else:
            txt = str(self.child)

        if (self.min, self.max) == (0, None):
            return txt + "*"
        elif (self.min, self.max) == (1, None):
            return txt + "+"
        elif (self.min, self.max) == (0, 1):
            return txt + "?"
        else:
            maximum = "" if self.max is None else self.max
            return "{}{{{},{}}}".format(txt, self.min, maximum)


class Concat(Node):
    """ Match all children one after the other """

    __slots__ = ("children",)

    def __init__(self, children):
        self.children = tuple(children)

    def orderby(self):
        return self.__class__.__name__, tuple(
            c.orderby() for c in self.children)

    def __str__(self):
        parts = []
        for child in self.children:
            if isinstance(child, (Concat, Or)):
                parts.append("(?:{})".format(child))
            else:
                parts.append(str(child))
        return "".join(parts)


class Or(Node):
    """ Match the first child that matches """

    __slots__ = ("children",)

    def __init__(self, children):
        self.children = tuple(children)

    def orderby(self):
        return self.__class__.__name__, tuple(
            c.orderby() for c in self.children)

    def __str__(self):
        if not self.children:
            return "[]"
        parts = []
        for child in self.children:
            if isinstance(child, Or):
                parts.append("(?:{})".format(child))
            else:
                parts.append(str(child))
        return "|".join(parts)


class Capture(Node):
    """ Match the child and record the text it consumed.

    The index identifies the group; the parser numbers groups from 1 in
    the order of their opening parenthesis.
    """

    __slots__ = ("index", "child")
    _fields = ("index",)

    def __init__(self, index, child):
        self.index = index
        self.child = child

    @property
    def children(self):
        return (self.child,)

    def orderby(self):
        return self.__class__.__name__, self.index, self.child.orderby()

    def __str__(self):
        return "({})".format(self.child)


def walk(node):
    """ Iterate over all nodes in the tree, parents before children """
    stack = [node]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def print_tree(node, file=None):
    """ Print the tree with one node per line, indented by depth """
    stack = [(node, 0)]
    while stack:
        node, depth = stack.pop()
        print("{}{}".format("  " * depth, node.label()), file=file)
        stack.extend((c, depth + 1) for c in reversed(node.children))
