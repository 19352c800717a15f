"""
=============================================================================
REQUEST ERRORS
=============================================================================

Every way a raw request can be rejected, as an exception hierarchy.

    RequestError                    (base, never raised directly)
    ├── InvalidRequest              400  empty input / missing token
    ├── InvalidRequestMethod        405  method not in the fixed set
    ├── NoUrlFound                  400  request line has no target
    ├── HttpVersionNotSupported     505  version token lacks "HTTP/"
    ├── InvalidHeader               400  header line without ':'
    ├── QueryError                  400  pair without '=' / empty query
    ├── CookieError                 400  cookie segment without '='
    └── RequestTooLarge             413  input over max_request_size

Each error keeps the offending text in ``raw`` so callers can log exactly
what was rejected, and the HTTP status a server should answer with in
``status_code``.

Catch the base class to handle any parse failure:

    try:
        request = parse_request(data)
    except RequestError as e:
        reply(Response(HTTPStatus(e.status_code)))

=============================================================================
"""

from typing import Optional


class RequestError(Exception):
    """
    Base class for request parsing failures.

    Attributes:
        raw: The offending input text (request, line, token or segment).
        status_code: HTTP status code to return to the client.
    """

    status_code: int = 400
    message: str = "Invalid request"

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw
        if raw is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message}: {raw}")

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self), self.raw))


class InvalidRequest(RequestError):
    """Empty request, or a request line missing its method or version."""

    message = "Invalid request"


class InvalidRequestMethod(RequestError):
    """Request method is not one of the supported verbs."""

    status_code = 405
    message = "Invalid request method"


class NoUrlFound(RequestError):
    """Request line has a method but no request target."""

    message = "No URL found in request"

    def __init__(self) -> None:
        super().__init__(None)


class HttpVersionNotSupported(RequestError):
    status_code = 505
    message = "HTTP version not supported"


class InvalidHeader(RequestError):
    """Header line does not follow the ``key: value`` scheme."""

    message = "Invalid header"


class QueryError(RequestError):
    message = "Error parsing query"


class CookieError(RequestError):
    message = "Error parsing cookies"


class RequestTooLarge(RequestError):
    """Raw request exceeds the configured size limit."""

    status_code = 413
    message = "Request too large"
