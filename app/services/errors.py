"""
Library Errors

Errors raised by the resolver layer. Strawberry reports an exception raised
inside a resolver as a field-level error, so each of these nulls only the
field that raised it.
"""


class LibraryError(Exception):
    """Base class for errors raised by the library services."""

    pass


class InvalidPatternError(LibraryError):
    """Raised when a title filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid title pattern {pattern!r}: {reason}")
