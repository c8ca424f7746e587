"""Cursor over a document buffer for pulling out the front matter block."""

import frontmatter
from errors import DelimiterMismatch, DelimiterNotFound, UnexpectedEndOfInput

MARKER = "---"


class Scanner:
    """Reads literals and delimited regions from an immutable text buffer.

    The cursor only moves forward. Everything before it has been consumed,
    everything from it on is returned by ``remaining()``.
    """

    def __init__(self, content: str):
        self._content = content
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def at_end(self) -> bool:
        return self._offset == len(self._content)

    def remaining(self) -> str:
        """Return the unconsumed suffix without moving the cursor."""
        return self._content[self._offset :]

    def consume_literal(self, expected: str) -> str:
        """Consume ``expected`` at the cursor and return it.

        Raises UnexpectedEndOfInput if fewer characters remain than
        ``expected`` has, DelimiterMismatch if they differ.
        """
        end = self._offset + len(expected)
        if end > len(self._content):
            raise UnexpectedEndOfInput(expected, self._offset)

        actual = self._content[self._offset : end]
        if actual != expected:
            raise DelimiterMismatch(expected, actual, self._offset)

        self._offset = end
        return actual

    def consume_until(self, delimiter: str) -> str:
        """Return the text up to the next ``delimiter``.

        The cursor stops at the start of the match, so the delimiter can be
        consumed with ``consume_literal`` afterwards.
        """
        idx = self._content.find(delimiter, self._offset)
        if idx == -1:
            raise DelimiterNotFound(delimiter, self._offset)

        sliced = self._content[self._offset : idx]
        self._offset = idx
        return sliced

    def read_front_matter(self) -> frontmatter.Metadata:
        """Consume the ``---`` block and decode it.

        On success the cursor sits right after the closing marker.
        """
        self.consume_literal(MARKER)
        block = self.consume_until(MARKER)
        self.consume_literal(MARKER)
        return frontmatter.decode(block)
