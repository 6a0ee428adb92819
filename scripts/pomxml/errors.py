"""Exception hierarchy raised by the POM codec.

Every failure surfaces as a subclass of :class:`PomError`. Nothing is retried
or logged and swallowed inside the library; callers decide what to do.
"""

from typing import Optional


class PomError(Exception):
    """Base class for all codec failures."""


class MalformedXML(PomError):
    """The byte stream is not well-formed XML.

    Attributes:
        line: 1-based line of the offending token, when the parser knows it.
        column: 0-based column of the offending token, when the parser knows it.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column


class UnexpectedStructure(PomError):
    """A fixed-schema element does not have the shape its field declares."""


class TruncatedPropertiesSection(PomError):
    """The stream ended before ``</properties>`` was reached.

    Only raised when strict properties decoding is requested.

    Attributes:
        partial: Entries decoded before the stream ended.
    """

    def __init__(self, message: str, partial: dict):
        super().__init__(message)
        self.partial = partial


class WriteFailure(PomError):
    """The output sink rejected a write or flush."""
