"""
=============================================================================
HTTPCODEC CLI ENTRY POINT
=============================================================================

Inspect requests and render responses from the shell.

=============================================================================
USAGE
=============================================================================

    # Parse a captured request (file or stdin) and print it as JSON
    python -m httpcodec parse request.txt
    printf 'GET /?a=1 HTTP/1.1\r\nHost: x\r\n\r\n' | python -m httpcodec parse

    # Render a response
    python -m httpcodec respond --status 404 --body "Not here"
    python -m httpcodec respond --header Content-Type:text/plain --body hi
    python -m httpcodec respond --redirect /new-home

    # Reject oversized input, verbose logging
    python -m httpcodec --max-request-size 8192 --log-level DEBUG parse req.txt

=============================================================================
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import LOG_LEVELS, CodecConfig, setup_logging
from .http.errors import RequestError
from .http.request import Request, RequestParser
from .http.response import Response
from .http.status_codes import HTTPStatus

logger = logging.getLogger(__name__)


def request_to_dict(request: Request) -> dict:
    """JSON-friendly summary of a parsed request."""
    return {
        "method": str(request.method),
        "path": request.path,
        "version": request.version,
        "query": None if request.query is None else [list(p) for p in request.query],
        "headers": dict(request.headers),
        "cookies": dict(request.cookies.items()),
        "body": None if request.body is None else request.get_body_string(),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpcodec",
        description="Parse HTTP/1.1 requests and render responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpcodec parse request.txt
  python -m httpcodec respond --status 201 --body created
  python -m httpcodec respond --redirect /login
        """
    )

    # ─────────────────────────────────────────────────────────────────────
    # GLOBAL ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $HTTPCODEC_LOG_LEVEL or INFO)"
    )

    parser.add_argument(
        "--max-request-size",
        type=int,
        default=None,
        help="Reject requests larger than this many bytes"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpcodec {__version__}"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    # ─────────────────────────────────────────────────────────────────────
    # parse
    # ─────────────────────────────────────────────────────────────────────

    parse_cmd = commands.add_parser("parse", help="Parse a raw request into JSON")
    parse_cmd.add_argument(
        "file",
        nargs="?",
        default=None,
        help="File holding the raw request (default: stdin)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # respond
    # ─────────────────────────────────────────────────────────────────────

    respond_cmd = commands.add_parser("respond", help="Render a response to stdout")
    respond_cmd.add_argument("--status", "-s", type=int, default=200)
    respond_cmd.add_argument(
        "--header", "-H",
        action="append",
        default=[],
        metavar="NAME:VALUE",
        help="Add a header (repeatable)"
    )
    respond_cmd.add_argument(
        "--cookie", "-c",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a session cookie (repeatable, last one wins)"
    )
    respond_cmd.add_argument("--body", "-b", default=None)
    respond_cmd.add_argument("--redirect", "-r", default=None, metavar="URL")

    return parser


def _read_input(path: Optional[str]) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def cmd_parse(args: argparse.Namespace, config: CodecConfig) -> int:
    data = _read_input(args.file)
    parser = RequestParser.from_config(config)
    try:
        request = parser.parse(data)
    except RequestError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Parsed %s", request.route)
    print(json.dumps(request_to_dict(request), indent=2))
    return 0


def cmd_respond(args: argparse.Namespace, config: CodecConfig) -> int:
    try:
        response = Response(HTTPStatus(args.status))
    except ValueError:
        print(f"error: unknown status code {args.status}", file=sys.stderr)
        return 2

    for header in args.header:
        name, sep, value = header.partition(":")
        if not sep:
            print(f"error: header must be NAME:VALUE, got {header!r}", file=sys.stderr)
            return 2
        response.add_header(name.strip(), value.strip())

    for cookie in args.cookie:
        name, sep, value = cookie.partition("=")
        if not sep:
            print(f"error: cookie must be NAME=VALUE, got {cookie!r}", file=sys.stderr)
            return 2
        response.set_session_cookie(name, value)

    if args.redirect is not None:
        response.redirect(args.redirect)

    if args.body is not None:
        response.set_body_string(args.body)

    sys.stdout.buffer.write(response.to_wire_format())
    sys.stdout.flush()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns the process exit code: 0 on success, 1 when the request was
    rejected, 2 for bad arguments.
    """
    args = build_parser().parse_args(argv)

    config = CodecConfig.from_env()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.max_request_size is not None:
        config.max_request_size = args.max_request_size

    try:
        config.validate()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(config)

    if args.command == "parse":
        return cmd_parse(args, config)
    return cmd_respond(args, config)


if __name__ == "__main__":
    sys.exit(main())
