"""
Query string parsing.

    /search?q=http&tag=a&tag=b
            ──────────┬───────
                      └── Query([("q", "http"), ("tag", "a"), ("tag", "b")])

Pairs are kept in arrival order and duplicates are preserved. Values are
stored exactly as received: no percent-decoding, no '+' to space.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import QueryError


@dataclass
class Query:
    """Ordered sequence of ``(key, value)`` pairs from a URL query string."""

    pairs: List[Tuple[str, str]] = field(default_factory=list)

    @classmethod
    def parse(cls, query_string: str) -> "Query":
        """
        Parse ``key1=value1&key2=value2``.

        An empty string yields an empty Query. Each pair is split on its
        first '=', so ``a=b=c`` gives ``("a", "b=c")``.

        Raises:
            QueryError: If any pair has no '='. Carries the whole string;
                        no partial Query is returned.
        """
        if query_string == "":
            return cls()

        pairs = []
        for pair in query_string.split("&"):
            key, sep, value = pair.partition("=")
            if not sep:
                raise QueryError(query_string)
            pairs.append((key, value))

        return cls(pairs)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """First value for ``key``, or ``default``."""
        for name, value in self.pairs:
            if name == key:
                return value
        return default

    def get_all(self, key: str) -> List[str]:
        return [value for name, value in self.pairs if name == key]

    def to_string(self) -> str:
        return "&".join(f"{key}={value}" for key, value in self.pairs)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.pairs)
