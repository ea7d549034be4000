"""Exceptions raised by sprig.

Everything sprig raises on purpose derives from `SprigError`, so callers can
catch the whole family at once. The more specific classes also derive from the
builtin exception a Python programmer would expect (`TypeError`/`ValueError`
for bad arguments, `OSError` for filesystem trouble).
"""

__all__ = [
    "SprigError",
    "InvalidArgument",
    "ParseError",
    "ParserRejectedMarkup",
    "FetchError",
    "FilesystemError",
    "FeatureNotFound",
]


class SprigError(Exception):
    """Base class for every error raised by sprig."""


class InvalidArgument(SprigError, TypeError, ValueError):
    """A parameter had the wrong type or shape."""


class ParseError(SprigError):
    """An Exception to be raised when the underlying parser simply
    refuses to parse the given markup.
    """

    def __init__(self, message_or_exception):
        """Explain why the parser rejected the given markup, either
        with a textual explanation or another exception.
        """
        if isinstance(message_or_exception, Exception):
            e = message_or_exception
            message_or_exception = f"{e.__class__.__name__}: {str(e)}"
        super().__init__(message_or_exception)


ParserRejectedMarkup = ParseError


class FetchError(SprigError):
    """A document could not be retrieved over HTTP."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f"Failed to receive a response from {url}: {reason}")


class FilesystemError(SprigError, OSError):
    """The filesystem failed for a reason other than a missing path."""


class FeatureNotFound(SprigError, ValueError):
    """No tree builder has all the requested features."""
