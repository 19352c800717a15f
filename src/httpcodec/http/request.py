"""
=============================================================================
HTTP REQUEST PARSER
=============================================================================

Turns raw request bytes (or text) into a structured Request.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP REQUEST STRUCTURE                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                     │
    │   GET /search?q=http&page=2 HTTP/1.1\r\n     ← request line         │
    │   ─┬─ ───┬─── ──────┬─────  ────┬───                                │
    │    │     │          │           └── version (must contain "HTTP/")  │
    │    │     │          └── query  → Query                              │
    │    │     └── path             → Route(method, path)                 │
    │    └── method                 → Method                              │
    │                                                                     │
    │   Host: example.com\r\n                      ← headers              │
    │   Cookie: sid=abc; theme=dark\r\n            ← also → CookieList    │
    │   \r\n                                       ← separator            │
    │   raw body bytes...                          ← body (not decoded)   │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PARSING STATES
=============================================================================

    Start ──► RequestLine ──► Headers* ──► Cookie re-parse ──► Done
                  │               │               │
                  └───────────────┴───────────────┴──► RequestError

Any step can fail, and the first failure ends the parse. There is no
partially-built Request and no recovery within a call.

=============================================================================
HEADER / BODY SPLIT
=============================================================================

The separator is searched in a fixed order; the first one found wins:

    1. b"\r\n\r\n"   (what the RFC says)
    2. b"\n\n"       (what hand-typed netcat sessions send)

If neither is present the whole input is headers and there is no body.
The header part is decoded as UTF-8 with replacement characters, so bad
bytes never fail the parse; only structural problems do.

=============================================================================
INTERVIEW QUESTIONS ABOUT HTTP PARSING
=============================================================================

Q: "Why not decode the whole request as text?"
A: "The body can be anything: images, gzip, protobuf. Only the header
   block is text, so we split on bytes first and decode just that part."

Q: "What happens with duplicate headers?"
A: "Last one wins. We don't merge values, and names are kept exactly
   as the client sent them."

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from ..config import CodecConfig
from .cookies import CookieList
from .errors import (
    HttpVersionNotSupported,
    InvalidHeader,
    InvalidRequest,
    NoUrlFound,
    QueryError,
    RequestError,
    RequestTooLarge,
)
from .message import HTTPMessage
from .method import Method
from .query import Query
from .router import Route

logger = logging.getLogger(__name__)

# Tried in order, first match wins.
SEPARATORS: Tuple[bytes, ...] = (b"\r\n\r\n", b"\n\n")

VERSION_MARKER = "HTTP/"


@dataclass
class Request(HTTPMessage):
    """
    A parsed HTTP request.

    Attributes:
        route:   (method, path) the request targets.
        query:   Parsed query string, or None when the target had no '?'.
        cookies: Cookies from the ``Cookie`` header; empty if there was none.
        headers: Header name → value, names as received, last write wins.
        body:    Raw bytes after the separator, or None if there were none.
        version: Version token from the request line.
    """

    route: Route
    query: Optional[Query] = None
    cookies: CookieList = field(default_factory=CookieList)
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    version: str = "HTTP/1.1"

    @classmethod
    def new(
        cls,
        method: Method,
        path: str,
        query: Optional[Query] = None,
    ) -> "Request":
        """Empty request for ``method`` and ``path``."""
        return cls(route=Route(method, path), query=query)

    @classmethod
    def from_route(cls, route: Route) -> "Request":
        return cls(route=route)

    @classmethod
    def parse(cls, data: Union[str, bytes]) -> "Request":
        """Parse text or raw bytes. See ``RequestParser.parse``."""
        return RequestParser().parse(data)

    @property
    def method(self) -> Method:
        return self.route.method

    @property
    def path(self) -> str:
        return self.route.path


class RequestParser:
    """
    Parses request text or raw bytes into Request objects.

    The parser holds no per-request state, so one instance can be shared
    freely between threads.

    Usage:
        parser = RequestParser(max_request_size=64 * 1024)
        request = parser.parse(data)
    """

    def __init__(self, max_request_size: Optional[int] = None):
        """
        Args:
            max_request_size: Reject inputs longer than this many bytes
                              with RequestTooLarge. None means no limit.
        """
        self.max_request_size = max_request_size

    @classmethod
    def from_config(cls, config: CodecConfig) -> "RequestParser":
        return cls(max_request_size=config.max_request_size)

    def parse(self, data: Union[str, bytes]) -> Request:
        """
        Parse a request.

        Text input is treated as a header block only (no body). Bytes are
        split at the first separator and whatever follows becomes the body.

        Raises:
            RequestError: The specific subclass describes what was wrong.
        """
        try:
            if isinstance(data, str):
                self._check_size(len(data.encode("utf-8")), data)
                return self.parse_header_block(data)
            return self.parse_bytes(data)
        except RequestError as e:
            logger.debug("Rejected request (%s): %s", type(e).__name__, e)
            raise

    def parse_bytes(self, data: bytes) -> Request:
        data = bytes(data)
        self._check_size(len(data), data)

        header, body = split_message(data)
        request = self.parse_header_block(header.decode("utf-8", errors="replace"))
        if body:
            request.set_body(body)
        return request

    def parse_header_block(self, text: str) -> Request:
        """
        Parse the request line and headers from text.

        =====================================================================
        ALGORITHM
        =====================================================================

        1. Split into lines; the first one is the request line
        2. Request line → method, path, optional query, version
        3. Each following line up to the first blank one → header
        4. ``Cookie`` header (exact name) → CookieList

        =====================================================================
        """
        lines = _split_lines(text)
        if not lines:
            raise InvalidRequest(text)

        method, path, query, version = self._parse_request_line(lines[0], text)

        request = Request.new(method, path, query)
        request.version = version

        for line in lines[1:]:
            if not line:
                break
            key, value = self._parse_header(line)
            request.add_header(key, value)

        # Cookie errors surface only now, after everything else parsed
        cookie_header = request.get_header("Cookie")
        if cookie_header is not None:
            request.cookies = CookieList.parse(cookie_header)

        return request

    def _parse_request_line(
        self,
        line: str,
        raw: str,
    ) -> Tuple[Method, str, Optional[Query], str]:
        """
        Tokenize ``METHOD TARGET VERSION``.

        Tokens are separated by any run of whitespace. Anything after the
        third token is ignored.
        """
        tokens = line.split()

        if len(tokens) < 1:
            raise InvalidRequest(raw)
        method = Method.parse(tokens[0])

        if len(tokens) < 2:
            raise NoUrlFound()
        path, query = self._parse_target(tokens[1])

        if len(tokens) < 3:
            raise InvalidRequest(raw)
        version = tokens[2]
        if VERSION_MARKER not in version:
            raise HttpVersionNotSupported(version)

        return method, path, query, version

    @staticmethod
    def _parse_target(target: str) -> Tuple[str, Optional[Query]]:
        # "/a"     → ("/a", None)
        # "/a?x=1" → ("/a", Query([("x", "1")]))
        # "/a?"    → QueryError
        path, sep, query_string = target.partition("?")
        if not sep:
            return target, None
        if not query_string:
            raise QueryError(target)
        return path, Query.parse(query_string)

    @staticmethod
    def _parse_header(line: str) -> Tuple[str, str]:
        key, sep, value = line.partition(":")
        if not sep:
            raise InvalidHeader(line)
        return key, value.strip()

    def _check_size(self, size: int, data: Union[str, bytes]) -> None:
        if self.max_request_size is not None and size > self.max_request_size:
            if isinstance(data, bytes):
                data = data[:self.max_request_size].decode("utf-8", errors="replace")
            else:
                data = data[:self.max_request_size]
            raise RequestTooLarge(data)


def split_message(data: bytes) -> Tuple[bytes, bytes]:
    """
    Split raw bytes into (header block, body) at the first separator.

    The separator itself is dropped. Without a separator the whole input
    is the header block and the body is empty.
    """
    for separator in SEPARATORS:
        idx = data.find(separator)
        if idx != -1:
            return data[:idx], data[idx + len(separator):]
    return data, b""


def _split_lines(text: str) -> List[str]:
    # Split on '\n' and drop one trailing '\r' per line, so CRLF and bare
    # LF both work. A trailing newline does not add an empty last line.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def parse_request(
    data: Union[str, bytes],
    max_size: Optional[int] = None,
) -> Request:
    """
    Convenience function to parse a request in one call.

    Args:
        data: Request text, or raw bytes possibly followed by a body.
        max_size: Optional size limit in bytes.

    Returns:
        Parsed Request.

    Raises:
        RequestError: If the request is malformed.
    """
    return RequestParser(max_request_size=max_size).parse(data)
