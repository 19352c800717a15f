"""
Unit tests for HTTP response serialization.
"""

import pytest

from httpcodec.http.response import Response
from httpcodec.http.status_codes import HTTPStatus


class TestWireFormat:
    """Tests for Response.to_wire_format."""

    def test_basic_response(self):
        """Test a bare 200 with no headers and no body."""
        response = Response(HTTPStatus.OK)
        assert response.to_wire_format() == b"HTTP/1.1 200 OK\r\n\r\n"

    def test_default_status_is_ok(self):
        """Test that a new response defaults to 200 OK."""
        assert Response().status_line == "HTTP/1.1 200 OK"

    def test_body_without_headers(self):
        """Test that the body follows the blank line directly."""
        response = Response(HTTPStatus.OK)
        response.set_body_string("Hello, world!")

        assert response.to_wire_format() == b"HTTP/1.1 200 OK\r\n\r\nHello, world!"

    def test_headers_in_insertion_order(self):
        """Test that headers render in the order they were added."""
        response = Response(HTTPStatus.OK)
        response.add_header("Content-Type", "text/html")
        response.add_header("Server", "httpcodec")

        assert response.to_wire_format() == (
            b"HTTP/1.1 200 OK\r\n"
            b"Content-Type: text/html\r\n"
            b"Server: httpcodec\r\n"
            b"\r\n"
        )

    def test_headers_and_body(self):
        """Test headers and body together."""
        response = (Response(HTTPStatus.OK)
            .add_header("Content-Type", "text/html")
            .add_header("Server", "httpcodec")
            .set_body_string("Test body"))

        text = response.to_string()

        assert text.splitlines()[0] == "HTTP/1.1 200 OK"
        assert "Content-Type: text/html\r\n" in text
        assert "Server: httpcodec\r\n" in text
        assert text.split("\r\n\r\n")[-1] == "Test body"

    def test_overwritten_header_keeps_position(self):
        """Test that overwriting a header replaces its value in place."""
        response = (Response()
            .add_header("A", "1")
            .add_header("B", "2")
            .add_header("A", "3"))

        assert response.to_wire_format() == b"HTTP/1.1 200 OK\r\nA: 3\r\nB: 2\r\n\r\n"

    def test_no_automatic_headers(self):
        """Test that nothing is added implicitly."""
        response = Response().set_body(b"abc")
        wire = response.to_wire_format()

        assert b"Content-Length" not in wire
        assert b"Date" not in wire
        assert b"Server" not in wire

    def test_binary_body(self):
        """Test that body bytes are appended verbatim."""
        body = bytes(range(256))
        response = Response().set_body(body)
        assert response.to_wire_format().endswith(b"\r\n\r\n" + body)

    def test_status_line_uses_phrase(self):
        """Test status lines for a few codes."""
        assert Response(HTTPStatus.NOT_FOUND).status_line == "HTTP/1.1 404 Not Found"
        assert Response(HTTPStatus.PROCESSING).status_line == "HTTP/1.1 102 Processing"

    def test_str_matches_wire_format(self):
        """Test that str() gives the decoded wire format."""
        response = Response(HTTPStatus.CREATED).set_body_string("ok")
        assert str(response) == "HTTP/1.1 201 Created\r\n\r\nok"

    def test_serialization_is_idempotent(self):
        """Test that serializing twice yields identical bytes."""
        response = Response().add_header("X", "y").set_body_string("z")
        assert response.to_wire_format() == response.to_wire_format()


class TestCookiesAndRedirects:
    """Tests for cookie and redirect helpers."""

    def test_session_cookie(self):
        """Test that a session cookie is a plain Set-Cookie."""
        response = Response(HTTPStatus.OK)
        response.set_session_cookie("test", "ok")

        assert "Set-Cookie: test=ok\r\n" in response.to_string()
        assert response.get_header("Set-Cookie") == "test=ok"

    def test_session_cookie_with_path(self):
        """Test that a session cookie may carry a path."""
        response = Response().set_session_cookie("sid", "abc", path="/")
        assert response.get_header("Set-Cookie") == "sid=abc; Path=/"

    def test_cookie_attributes(self):
        """Test full cookie attribute rendering."""
        response = Response().set_cookie(
            "sid", "abc",
            path="/",
            max_age=3600,
            same_site="Lax",
            secure=True,
            http_only=True,
        )

        assert response.get_header("Set-Cookie") == (
            "sid=abc; Path=/; Max-Age=3600; SameSite=Lax; Secure; HttpOnly"
        )

    def test_later_cookie_replaces_earlier(self):
        """Test that Set-Cookie follows last-write-wins like any header."""
        response = (Response()
            .set_session_cookie("a", "1")
            .set_session_cookie("b", "2"))

        assert response.get_header("Set-Cookie") == "b=2"

    def test_redirect(self):
        """Test that redirect sets 301 and Location."""
        response = Response(HTTPStatus.PROCESSING)
        response.redirect("/test")

        text = response.to_string()
        assert "HTTP/1.1 301 Moved Permanently" in text
        assert "Location: /test" in text

    def test_redirect_overwrites(self):
        """Test that a second redirect replaces the first."""
        response = Response().redirect("/one").redirect("/two")

        assert response.status == HTTPStatus.MOVED_PERMANENTLY
        assert response.headers == {"Location": "/two"}

    def test_set_status(self):
        """Test changing status after construction."""
        response = Response().set_status(HTTPStatus.NOT_FOUND)
        assert response.status_line == "HTTP/1.1 404 Not Found"

    def test_set_status_from_int(self):
        """Test that plain integers are converted to HTTPStatus."""
        response = Response().set_status(418)
        assert response.status is HTTPStatus.IM_A_TEAPOT

    def test_set_status_unknown_code(self):
        """Test that an unknown code is rejected."""
        with pytest.raises(ValueError):
            Response().set_status(299)


class TestHTTPStatus:
    """Tests for HTTPStatus enum."""

    def test_status_phrases(self):
        """Test reason phrases."""
        assert HTTPStatus.OK.phrase == "OK"
        assert HTTPStatus.MOVED_PERMANENTLY.phrase == "Moved Permanently"
        assert HTTPStatus(505).phrase == "HTTP Version Not Supported"

    def test_integer_behavior(self):
        """Test that members compare as integers."""
        assert HTTPStatus.OK == 200
        assert HTTPStatus(404) is HTTPStatus.NOT_FOUND

    def test_status_categories(self):
        """Test status category helpers."""
        assert HTTPStatus.CONTINUE.is_informational
        assert HTTPStatus.OK.is_success
        assert HTTPStatus.FOUND.is_redirect
        assert HTTPStatus.NOT_FOUND.is_client_error
        assert HTTPStatus.INTERNAL_SERVER_ERROR.is_server_error

        assert HTTPStatus.NOT_FOUND.is_error
        assert HTTPStatus.INTERNAL_SERVER_ERROR.is_error
        assert not HTTPStatus.OK.is_error


class TestResponseStatus:
    """Tests for status handling at construction."""

    def test_constructor_accepts_int(self):
        """Test that an integer status is converted when the response is built."""
        response = Response(404)

        assert response.status is HTTPStatus.NOT_FOUND
        assert response.to_wire_format() == b"HTTP/1.1 404 Not Found\r\n\r\n"

    def test_constructor_rejects_unknown_code(self):
        """Test that an unknown code fails at construction, not serialization."""
        with pytest.raises(ValueError):
            Response(299)
