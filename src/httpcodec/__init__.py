"""
=============================================================================
HTTPCODEC - Minimal HTTP/1.1 Message Codec
=============================================================================

Bytes in, Request out. Response in, bytes out.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                     │
    │   socket.recv()                                  socket.sendall()   │
    │        │                                                ▲           │
    │        ▼                                                │           │
    │   ┌──────────────┐    ┌──────────┐    ┌─────────────────┴──┐        │
    │   │ RequestParser│───►│ handler  │───►│ Response           │        │
    │   │  .parse()    │    │ (yours)  │    │  .to_wire_format() │        │
    │   └──────────────┘    └──────────┘    └────────────────────┘        │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

The codec does no I/O and keeps no state between calls. Sockets, routing
tables and connection handling belong to whatever server embeds it.

=============================================================================
QUICK START
=============================================================================

    from httpcodec import parse_request, Response, HTTPStatus

    request = parse_request(raw_bytes)
    if request.path == "/old":
        response = Response().redirect("/new")
    else:
        response = Response(HTTPStatus.OK).set_body_string("Hello!")

    conn.sendall(response.to_wire_format())

=============================================================================
"""

__version__ = "1.0.0"

from .config import CodecConfig, setup_logging
from .http import (
    CookieList,
    CookieError,
    HTTPMessage,
    HTTPStatus,
    HttpVersionNotSupported,
    InvalidHeader,
    InvalidRequest,
    InvalidRequestMethod,
    Method,
    NoUrlFound,
    Query,
    QueryError,
    Request,
    RequestError,
    RequestParser,
    RequestTooLarge,
    Response,
    Route,
    parse_request,
    render_set_cookie,
)

__all__ = [
    "CodecConfig",
    "setup_logging",
    "HTTPMessage",
    "Request",
    "Response",
    "RequestParser",
    "parse_request",
    "Method",
    "HTTPStatus",
    "Query",
    "CookieList",
    "render_set_cookie",
    "Route",
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
