"""
=============================================================================
COOKIES
=============================================================================

Two directions, two formats:

    REQUEST (client → server)          RESPONSE (server → client)
    ─────────────────────────          ──────────────────────────
    Cookie: a=1; b=2                   Set-Cookie: a=1; Path=/; HttpOnly
            ───┬────                               ─┬─ ────────┬───────
               └── CookieList                       │          └── attributes
                                                    └── name=value

A request packs every cookie into one ``Cookie`` header. A response sends
one cookie per ``Set-Cookie`` header, optionally followed by attributes.

A "session" cookie is just a Set-Cookie without Expires or Max-Age: the
browser drops it when it closes.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .errors import CookieError


@dataclass
class CookieList:
    """
    Cookies sent by the client, name → value.

    Populated only from a ``Cookie`` request header; a new list is empty.
    If a name repeats, the last value wins.
    """

    cookies: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def parse(cls, header_value: str) -> "CookieList":
        """
        Parse a ``Cookie`` header value such as ``a=1; b=2``.

        Segments are split on ';' and stripped; each segment is split on
        its first '=', so values may themselves contain '='.

        Raises:
            CookieError: With the offending segment if it has no '='.
        """
        cookies = {}
        for segment in header_value.split(";"):
            segment = segment.strip()
            name, sep, value = segment.partition("=")
            if not sep:
                raise CookieError(segment)
            cookies[name] = value

        return cls(cookies)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.cookies.get(name, default)

    def items(self):
        return self.cookies.items()

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.cookies.items())

    def __len__(self) -> int:
        return len(self.cookies)

    def __contains__(self, name: object) -> bool:
        return name in self.cookies


def render_set_cookie(
    name: str,
    value: str,
    attributes: Optional[Mapping[str, Optional[str]]] = None,
) -> str:
    """
    Render a single ``Set-Cookie`` header value.

    Attributes are appended in the order given. A ``None`` value renders
    the attribute as a bare flag:

        >>> render_set_cookie("sid", "abc", {"Path": "/", "HttpOnly": None})
        'sid=abc; Path=/; HttpOnly'
    """
    parts = [f"{name}={value}"]
    for attr, attr_value in (attributes or {}).items():
        if attr_value is None:
            parts.append(attr)
        else:
            parts.append(f"{attr}={attr_value}")
    return "; ".join(parts)
