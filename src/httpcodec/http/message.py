"""
Header and body accessors shared by requests and responses.

Both message types keep a ``headers`` dict and an optional ``body``; this
mixin gives them the same small API over those two fields.
"""

from typing import Dict, Optional


class HTTPMessage:
    """
    Mixin for classes with ``headers: Dict[str, str]`` and
    ``body: Optional[bytes]`` attributes.

    Header names are used exactly as given: ``get_header("host")`` does
    not find a ``Host`` header.
    """

    headers: Dict[str, str]
    body: Optional[bytes]

    def get_header(self, key: str) -> Optional[str]:
        return self.headers.get(key)

    def add_header(self, key: str, value: str):
        """Insert or overwrite a header. Returns self for chaining."""
        self.headers[key] = value
        return self

    def get_header_list(self) -> Dict[str, str]:
        return self.headers

    def get_body(self) -> Optional[bytes]:
        return self.body

    def set_body(self, body: bytes):
        """Set the body from any bytes-like object. Raises TypeError otherwise."""
        self.body = memoryview(body).tobytes()
        return self

    def set_body_string(self, body: str):
        """Set the body from text, encoded as UTF-8."""
        return self.set_body(body.encode("utf-8"))

    def get_body_string(self) -> str:
        """
        Body decoded as UTF-8, with invalid bytes replaced.

        Returns an empty string when there is no body.
        """
        if self.body is None:
            return ""
        return self.body.decode("utf-8", errors="replace")
