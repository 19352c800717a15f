"""
HTTP request methods.

The set of verbs is closed: a token either matches one of the members
exactly (case-sensitive, "get" is not GET) or parsing fails. There is no
catch-all member for extension methods.
"""

from enum import Enum

from .errors import InvalidRequestMethod


class Method(str, Enum):
    """
    HTTP request method.

    Members are also strings, so they compare equal to their token:

        >>> Method.GET == "GET"
        True
        >>> str(Method.POST)
        'POST'
    """

    GET = "GET"            # Retrieve a resource
    POST = "POST"          # Submit data / create
    PUT = "PUT"            # Replace a resource
    DELETE = "DELETE"      # Remove a resource
    HEAD = "HEAD"          # GET without the body
    OPTIONS = "OPTIONS"    # Ask what the server supports (CORS preflight)
    PATCH = "PATCH"        # Partial update
    CONNECT = "CONNECT"    # Open a tunnel (proxies)
    TRACE = "TRACE"        # Loop-back diagnostic

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, token: str) -> "Method":
        """
        Parse a method token from a request line.

        Raises:
            InvalidRequestMethod: If the token is not an exact match.
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidRequestMethod(token) from None
