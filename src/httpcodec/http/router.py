"""
Route values.

A route identifies what a request asks for, a method plus a path, and is
what a routing table dispatches on. The table itself lives with the
server; this module only defines the value it is keyed by.
"""

from dataclasses import dataclass

from .method import Method


@dataclass(frozen=True)
class Route:
    """
    Immutable (method, path) pair.

    Two routes are equal when both method and path match exactly, so
    routes can be used as dict keys:

        handlers = {Route(Method.GET, "/users"): list_users}
        handlers[request.route](request)
    """

    method: Method
    path: str

    def __str__(self) -> str:
        return f"{self.method} {self.path}"
