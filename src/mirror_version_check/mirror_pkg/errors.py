"""Exceptions raised while resolving versions against a mirror."""

from typing import Optional


class MirrorVersionError(Exception):
    """Base class for all errors raised by this package."""


class MirrorFetchError(MirrorVersionError):
    """The mirror index page could not be retrieved."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Error retrieving contents from url {url}: {reason}")


class InvalidVersionFormatError(MirrorVersionError):
    """A requested version does not have the expected shape."""

    def __init__(self, requested: str, expected: str):
        self.requested = requested
        self.expected = expected
        super().__init__(
            f"Invalid version format: {requested!r}. Expected format: {expected}"
        )


class PatternCompileError(MirrorVersionError):
    """A version pattern built from user input did not compile."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        super().__init__(f"Could not compile version pattern {pattern!r}: {reason}")


class VersionNotFoundError(MirrorVersionError):
    """No version on the mirror satisfies the request."""

    def __init__(self, requested: str, hint: Optional[str] = None):
        self.requested = requested
        self.hint = hint
        message = f"Requested version does not exist: {requested!r}."
        if hint:
            message = f"{message}\n\t{hint}"
        super().__init__(message)
