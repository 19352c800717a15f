"""
=============================================================================
HTTP RESPONSE
=============================================================================

A Response is built up by a handler, then rendered to bytes in one go.

    =========================================================================
    SERIALIZATION FORMAT
    =========================================================================

        HTTP/1.1 200 OK\r\n                 ← status line, always 1.1
        Content-Type: text/html\r\n         ← headers, insertion order
        Set-Cookie: sid=abc; Path=/\r\n
        \r\n                                ← always present
        <html>...</html>                    ← body, no terminator

    =========================================================================

Nothing is added behind the caller's back: no Content-Length, Date or
Server headers. What you set is exactly what goes on the wire.

Cookies are not a separate field. ``set_cookie`` renders a ``Set-Cookie``
header and stores it in the header map like any other header.

=============================================================================
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .cookies import render_set_cookie
from .message import HTTPMessage
from .status_codes import HTTPStatus

logger = logging.getLogger(__name__)

HTTP_VERSION = "HTTP/1.1"
CRLF = "\r\n"


@dataclass
class Response(HTTPMessage):
    """
    Represents an HTTP response to be sent to the client.

    Mutators return self, so calls chain:

        response = (Response(HTTPStatus.OK)
            .add_header("Content-Type", "text/plain")
            .set_body_string("Hello"))
        sock.sendall(response.to_wire_format())
    """

    status: HTTPStatus = HTTPStatus.OK
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        self.status = HTTPStatus(self.status)

    @property
    def status_line(self) -> str:
        """``HTTP/1.1 <code> <phrase>``, without the CRLF."""
        return f"{HTTP_VERSION} {int(self.status)} {self.status.phrase}"

    def set_status(self, status: HTTPStatus) -> "Response":
        self.status = HTTPStatus(status)
        return self

    def set_cookie(
        self,
        name: str,
        value: str,
        path: Optional[str] = None,
        max_age: Optional[int] = None,
        expires: Optional[str] = None,
        http_only: bool = False,
        secure: bool = False,
        same_site: Optional[str] = None,
    ) -> "Response":
        """
        Add a ``Set-Cookie`` header.

        Args:
            name: Cookie name
            value: Cookie value, sent as-is
            path: Path attribute
            max_age: Lifetime in seconds
            expires: Preformatted HTTP date
            http_only: Hide the cookie from JavaScript
            secure: Only send over HTTPS
            same_site: "Strict", "Lax" or "None"

        Returns:
            Self for method chaining
        """
        attributes: Dict[str, Optional[str]] = {}
        if path is not None:
            attributes["Path"] = path
        if max_age is not None:
            attributes["Max-Age"] = str(max_age)
        if expires is not None:
            attributes["Expires"] = expires
        if same_site is not None:
            attributes["SameSite"] = same_site
        if secure:
            attributes["Secure"] = None
        if http_only:
            attributes["HttpOnly"] = None

        return self.add_header("Set-Cookie", render_set_cookie(name, value, attributes))

    def set_session_cookie(
        self,
        name: str,
        value: str,
        path: Optional[str] = None,
    ) -> "Response":
        """Add a ``Set-Cookie`` header with no expiry, i.e. a session cookie."""
        return self.set_cookie(name, value, path=path)

    def redirect(self, location: str) -> "Response":
        """
        Turn this into a 301 Moved Permanently pointing at ``location``.

        Overwrites any status and Location header set before.
        """
        self.status = HTTPStatus.MOVED_PERMANENTLY
        return self.add_header("Location", location)

    def to_wire_format(self) -> bytes:
        """
        Serialize the response to bytes for sending over a socket.

        Rendering cannot fail; the same Response always gives the same
        bytes.
        """
        lines = [self.status_line]
        for key, value in self.headers.items():
            lines.append(f"{key}: {value}")

        head = (CRLF.join(lines) + CRLF + CRLF).encode("utf-8")

        logger.debug("Serialized %s with %d header(s)", self.status_line, len(self.headers))

        if self.body is None:
            return head
        return head + self.body

    def to_string(self) -> str:
        """Wire format as text, with invalid UTF-8 in the body replaced."""
        return self.to_wire_format().decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.to_string()
