""" Backtracking matcher.

Walks a node tree against a cursor into the subject text. Composite nodes
are evaluated as generators which yield the child to match and receive
its outcome, so the walk uses an explicit stack instead of python
recursion and arbitrarily deep trees can be matched.

Contract of matching a node: on success the cursor is left after the
consumed text. On failure the cursor position is unspecified, the caller
restores it when it needs to.

Repetition is bounded-greedy: a repeat consumes as many iterations as
possible and never gives iterations back when a later node fails.
"""

import logging
from . import nodes
from .cursor import Cursor


def new_runtime(text):
    """ Create a runtime to match against the given text """
    return Runtime(text)


def run(node, runtime):
    """ Match the node at the current position of the runtime """
    return runtime.run(node)


class Runtime:
    """ State of a single match call: the cursor and the captures. """

    logger = logging.getLogger("regex.runtime")

    def __init__(self, text):
        self.cursor = Cursor(text)

        # Log of (group index, start, end), newest last:
        self._captured = []

        self._leaves = {
            nodes.Literal: self._match_literal,
            nodes.Range: self._match_range,
            nodes.Any: self._match_any,
        }
        self._frames = {
            nodes.Negate: self._match_negate,
            nodes.Lookahead: self._match_lookahead,
            nodes.Repeat: self._match_repeat,
            nodes.Concat: self._match_concat,
            nodes.Or: self._match_or,
            nodes.Capture: self._match_capture,
        }

    def mark(self):
        """ Snapshot of the cursor and the captures """
        return self.cursor.snapshot(), len(self._captured)

    def reset(self, mark):
        """ Go back to an earlier snapshot """
        position, count = mark
        self.cursor.restore(position)
        del self._captured[count:]

    def spans(self):
        """ Last recorded (start, end) of each capture group """
        spans = {}
        for index, start, end in self._captured:
            spans[index] = (start, end)
        return dict(sorted(spans.items()))

    def captures(self):
        """ Last recorded text of each capture group """
        return {
            index: self.cursor.slice(start, end)
            for index, (start, end) in self.spans().items()
        }

    def run(self, node) -> bool:
        """ Match the node at the cursor """
        stack = []
        value = self._enter(node, stack)
        while stack:
            try:
                child = stack[-1].send(value)
            except StopIteration as ex:
                stack.pop()
                value = ex.value
            else:
                value = self._enter(child, stack)
        self.logger.debug(
            "%s, cursor at %d", "Match" if value else "No match",
            self.cursor.position)
        return value

    def _enter(self, node, stack):
        """ Match a leaf directly, or push a frame for a composite node.

        When a frame is pushed, None is returned, which is the value to
        start the new generator with.
        """
        typ = type(node)
        if typ in self._leaves:
            return self._leaves[typ](node)
        elif typ in self._frames:
            stack.append(self._frames[typ](node))
        else:  # pragma: no cover
            raise NotImplementedError(str(typ))

    def _match_literal(self, node):
        return self.cursor.advance() == node.char

    def _match_range(self, node):
        char = self.cursor.advance()
        return char is not None and node.lo <= char <= node.hi

    def _match_any(self, node):
        return self.cursor.advance() is not None

    def _match_negate(self, node):
        mark = self.mark()
        matched = yield node.child
        self.reset(mark)
        return not matched

    def _match_lookahead(self, node):
        mark = self.mark()
        matched = yield node.child
        if matched:
            # Keep the captures made inside the assertion
            self.cursor.restore(mark[0])
        else:
            self.reset(mark)
        return matched

    def _match_repeat(self, node):
        count = 0
        mark = self.mark()
        while node.max is None or count < node.max:
            matched = yield node.child
            if not matched:
                self.reset(mark)
                return node.min <= count
            count += 1
            if self.cursor.position == mark[0]:
                # Empty iteration, all further ones would be empty too
                return True
            mark = self.mark()
        return True

    def _match_concat(self, node):
        for child in node.children:
            matched = yield child
            if not matched:
                return False
        return True

    def _match_or(self, node):
        mark = self.mark()
        for child in node.children:
            self.reset(mark)
            matched = yield child
            if matched:
                return True
        self.reset(mark)
        return False

    def _match_capture(self, node):
        start = self.cursor.position
        matched = yield node.child
        if matched:
            self._captured.append((node.index, start, self.cursor.position))
        return matched
