"""
imdbscrape.errors
=================
Every failure the package raises.  All of them derive from `IMDbError`,
so callers that don't care about the cause can catch just that one.

    InvalidArgument       bad title id / season, raised before any request
    InvalidIdentifier     the title id specifically (subclass of the above)
    TransportError        connection failure or timeout
    NotFound              title page answered 404
    ServerError           episode page answered 500 (usually a bad title id)
    UnexpectedStatus      any other non-200 answer
    SanityCheckFailed     episode page lacks the declared episode count
    CountMismatch         parsed episode count differs from the declared one
    ParseError            a required title field is missing
"""

from __future__ import annotations


class IMDbError(Exception):
    """Base class for every error raised by imdbscrape."""


class InvalidArgument(IMDbError, ValueError):
    """An argument was rejected before any network access."""


class InvalidIdentifier(InvalidArgument):
    def __init__(self, title_id: object) -> None:
        super().__init__(f"invalid imdb id format: {title_id!r}")
        self.title_id = title_id


class TransportError(IMDbError):
    """The request never produced an HTTP response (DNS, TLS, timeout…)."""


class NotFound(IMDbError):
    def __init__(self, url: str) -> None:
        super().__init__(f"title not found (404): {url}")
        self.url = url


class ServerError(IMDbError):
    def __init__(self, url: str) -> None:
        super().__init__(f"imdb server error, possibly invalid imdb id: {url}")
        self.url = url


class UnexpectedStatus(IMDbError):
    def __init__(self, status_code: int, url: str = "") -> None:
        super().__init__(f"status code {status_code} from imdb")
        self.status_code = status_code
        self.url = url


class SanityCheckFailed(IMDbError):
    def __init__(self, message: str = "response from imdb failed sanity check") -> None:
        super().__init__(message)


class CountMismatch(IMDbError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} and parsed {actual}")
        self.expected = expected
        self.actual = actual


class ParseError(IMDbError):
    def __init__(self, field: str) -> None:
        super().__init__(f"required field {field!r} not found on title page")
        self.field = field
