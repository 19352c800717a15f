"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpcodec import CodecConfig


@pytest.fixture
def sample_get_request() -> bytes:
    """Sample HTTP GET request with a query string."""
    return (
        b"GET /api/users?page=1&limit=10 HTTP/1.1\r\n"
        b"Host: localhost:8080\r\n"
        b"User-Agent: pytest\r\n"
        b"Accept: application/json\r\n"
        b"\r\n"
    )


@pytest.fixture
def sample_post_request() -> bytes:
    """Sample HTTP POST request with a JSON body and cookies."""
    body = b'{"name": "John", "email": "john@example.com"}'
    return (
        b"POST /api/users HTTP/1.1\r\n"
        b"Host: localhost:8080\r\n"
        b"Content-Type: application/json\r\n"
        + f"Content-Length: {len(body)}\r\n".encode()
        + b"Cookie: session=abc123; theme=dark\r\n"
        b"\r\n"
    ) + body


@pytest.fixture
def config() -> CodecConfig:
    """Default test configuration."""
    return CodecConfig(log_level="WARNING")


@pytest.fixture
def request_file(tmp_path: Path, sample_post_request: bytes) -> Path:
    """Raw POST request written to a file, for the CLI."""
    path = tmp_path / "request.http"
    path.write_bytes(sample_post_request)
    return path
