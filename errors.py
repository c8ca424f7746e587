"""Error types raised while converting front matter."""


class ParseError(Exception):
    """Base error for a document that cannot be converted."""


class BadSyntax(ParseError):
    """The document does not have the expected ``---`` block layout."""


class UnexpectedEndOfInput(BadSyntax):
    """Input ended before a literal could be read."""

    def __init__(self, expected: str, offset: int):
        super().__init__(f"unexpected end of input at offset {offset}: expected {expected!r}")
        self.expected = expected
        self.offset = offset


class DelimiterMismatch(BadSyntax):
    """The text at the cursor is not the expected literal."""

    def __init__(self, expected: str, actual: str, offset: int):
        super().__init__(f"expected {expected!r} at offset {offset} but got {actual!r}")
        self.expected = expected
        self.actual = actual
        self.offset = offset


class DelimiterNotFound(BadSyntax):
    """A forward search reached the end of input without a match."""

    def __init__(self, delimiter: str, offset: int):
        super().__init__(f"closing {delimiter!r} not found after offset {offset}")
        self.delimiter = delimiter
        self.offset = offset


class MetadataDecodeError(ParseError):
    """The front matter block is not valid metadata.

    The underlying ``yaml.YAMLError``, when there is one, is available as
    ``__cause__``.
    """

    def __init__(self, reason: str):
        super().__init__(f"malformed metadata: {reason}")
        self.reason = reason
