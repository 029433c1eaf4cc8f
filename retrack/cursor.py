""" Position into the subject text of a match.

Backtracking is done by taking a snapshot of the position and restoring
it later. A snapshot is just the integer offset.
"""


class Cursor:
    """ Read position into a string """

    __slots__ = ["text", "position"]

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def __repr__(self):
        return "Cursor({!r}, {})".format(self.text, self.position)

    @property
    def at_end(self) -> bool:
        return self.position >= len(self.text)

    @property
    def remaining(self) -> str:
        return self.text[self.position:]

    def peek(self):
        """ Look at the next character without consuming it """
        if self.position < len(self.text):
            return self.text[self.position]

    def advance(self):
        """ Consume the next character, or return None at the end """
        char = self.peek()
        if char is not None:
            self.position += 1
        return char

    def snapshot(self) -> int:
        return self.position

    def restore(self, snapshot: int):
        self.position = snapshot

    def slice(self, start: int, end: int = None) -> str:
        """ Text between two positions, up to the cursor by default """
        if end is None:
            end = self.position
        return self.text[start:end]
