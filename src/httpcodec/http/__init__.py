"""
=============================================================================
HTTP MESSAGE CODEC
=============================================================================

    REQUEST (parsed):                 RESPONSE (rendered):
    ─────────────────                 ────────────────────
    GET /path?k=v HTTP/1.1\r\n        HTTP/1.1 200 OK\r\n
    Header: Value\r\n                 Header: Value\r\n
    Cookie: a=1; b=2\r\n              Set-Cookie: a=1\r\n
    \r\n                              \r\n
    [body]                            [body]

Key points:
- Lines end with CRLF; a bare LF is tolerated when parsing
- Header names are kept exactly as sent (no case-folding)
- A duplicate request header replaces the earlier one
- Query values and cookie values are not percent-decoded

=============================================================================
"""

from .cookies import CookieList, render_set_cookie
from .errors import (
    CookieError,
    HttpVersionNotSupported,
    InvalidHeader,
    InvalidRequest,
    InvalidRequestMethod,
    NoUrlFound,
    QueryError,
    RequestError,
    RequestTooLarge,
)
from .message import HTTPMessage
from .method import Method
from .query import Query
from .request import Request, RequestParser, parse_request, split_message
from .response import Response
from .router import Route
from .status_codes import HTTPStatus

__all__ = [
    # Messages
    "HTTPMessage",
    "Request",
    "Response",

    # Request parsing
    "RequestParser",
    "parse_request",
    "split_message",

    # Building blocks
    "Method",
    "HTTPStatus",
    "Query",
    "CookieList",
    "render_set_cookie",
    "Route",

    # Errors
    "RequestError",
    "InvalidRequest",
    "InvalidRequestMethod",
    "NoUrlFound",
    "HttpVersionNotSupported",
    "InvalidHeader",
    "QueryError",
    "CookieError",
    "RequestTooLarge",
]
