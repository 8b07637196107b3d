# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Case-insensitive HTTP headers with multi-value support.

``Headers`` is the platform-native view of a header set: the same shape ASGI
uses on the wire (``list[tuple[bytes, bytes]]``, Latin-1), wrapped with a
case-insensitive read API. It is produced by ``HeadersBuilder.build_headers``
and by ``headers_from_scope`` when reading request headers (the CORS origin
resolver reads ``Origin`` through it).

Processing Schema::

    [(b"Content-Type", b"application/json"), (b"Vary", b"Origin")]
                        ↓  decode latin-1, lowercase names
    [("content-type", "application/json"), ("vary", "Origin")]
                        ↓
    headers.get("CONTENT-TYPE") → "application/json"
    headers.raw                 → [(b"content-type", b"application/json"), ...]

Names are normalized to lowercase, values are preserved. The collection is
read-only.
"""

from collections.abc import Mapping
from typing import Any, Iterator

__all__ = ["Headers", "headers_from_scope"]


class Headers:
    """
    Immutable, case-insensitive HTTP headers.

    Example:
        >>> headers = Headers([(b"Content-Type", b"text/css"), (b"Vary", b"Origin")])
        >>> headers.get("content-type")
        'text/css'
        >>> "VARY" in headers
        True
        >>> headers.raw
        [(b'content-type', b'text/css'), (b'vary', b'Origin')]
    """

    __slots__ = ("_headers",)

    def __init__(self, raw_headers: list[tuple[bytes, bytes]]) -> None:
        """
        Initialize Headers from raw ASGI headers.

        Args:
            raw_headers: List of (name, value) byte tuples, decoded as Latin-1.
        """
        self._headers: list[tuple[str, str]] = [
            (name.decode("latin-1").lower(), value.decode("latin-1"))
            for name, value in raw_headers
        ]

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for ``key`` (case-insensitive), or default."""
        key_lower = key.lower()
        for name, value in self._headers:
            if name == key_lower:
                return value
        return default

    def keys(self) -> list[str]:
        """Unique lowercase names in order of first occurrence."""
        seen: set[str] = set()
        result: list[str] = []
        for name, _ in self._headers:
            if name not in seen:
                seen.add(name)
                result.append(name)
        return result

    def items(self) -> list[tuple[str, str]]:
        return list(self._headers)

    @property
    def raw(self) -> list[tuple[bytes, bytes]]:
        """Headers re-encoded for an ASGI ``http.response.start`` message."""
        return [
            (name.encode("latin-1"), value.encode("latin-1"))
            for name, value in self._headers
        ]

    def __getitem__(self, key: str) -> str:
        """
        Get header value by name.

        Raises:
            KeyError: If header is not present.
        """
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        """Total number of entries, duplicates included."""
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers({self._headers!r})"


def headers_from_scope(scope: Mapping[str, Any]) -> Headers:
    """
    Create Headers from an ASGI scope.

    Returns empty Headers when the scope carries no ``headers`` key.

    Example:
        >>> scope = {"type": "http", "headers": [(b"origin", b"https://a.test")]}
        >>> headers_from_scope(scope).get("origin")
        'https://a.test'
    """
    return Headers(scope.get("headers", []))
