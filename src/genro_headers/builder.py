# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Fluent builder for HTTP response headers.

A ``HeadersBuilder`` owns one mutable header mapping for the response being
assembled. Every setter writes into it and returns the builder, so calls
chain; the terminal ``build`` returns a copy.

Main Pattern
============
::

    headers = (
        build_headers()
        .content_type("json")
        .cache("API_RESPONSE")
        .cors(origin="https://app.example.com")
        .build(body)
    )
    # {"Content-Type": "application/json", "Cache-Control": "...",
    #  "Access-Control-Allow-Origin": "https://app.example.com", ...,
    #  "Content-Length": "123"}

Rules
=====
- Last write wins per header name, except ``vary`` which appends.
- Setters that receive an absent value (``etag(None)``, ``compress(None)``)
  do nothing.
- A setter that raises leaves the mapping untouched.
- ``build`` never aliases internal state: mutating its result does not
  affect the builder.
- The builder does not set status codes. ``redirect`` only writes the
  Location header and an informational X-Redirect-Type marker.

Terminal Methods
================
build(content=None)
    Plain ``dict[str, str]``. Adds Content-Length computed from content
    unless already set.

build_raw(content=None)
    ASGI ``http.response.start`` header list (lowercase, latin-1).

build_headers(content=None)
    ``Headers`` view of the same data.

A builder is meant for a single response handled by a single flow; it has no
internal locking.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from email.utils import format_datetime, formatdate

from .cache_strategies import get_cache_config
from .datastructures import Headers
from .exceptions import CORSConfigError
from .hashing import hash_content, to_bytes
from .mime_types import get_mime_type
from .types import CacheStrategy, Content, ContentType, HeaderSet, RawHeaders
from .utils import split_and_strip

__all__ = [
    "DEFAULT_CORS_HEADERS",
    "DEFAULT_CORS_METHODS",
    "DEFAULT_HSTS_MAX_AGE",
    "HeadersBuilder",
]

DEFAULT_CORS_METHODS = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
DEFAULT_CORS_HEADERS = ("Content-Type", "Authorization")
DEFAULT_CORS_MAX_AGE = 86400
DEFAULT_HSTS_MAX_AGE = 31536000


def _http_date(date: datetime | float) -> str:
    """Format a datetime or Unix timestamp as an RFC 7231 HTTP date."""
    if isinstance(date, datetime):
        if date.tzinfo is None:
            date = date.replace(tzinfo=timezone.utc)
        return format_datetime(date.astimezone(timezone.utc), usegmt=True)
    return formatdate(date, usegmt=True)


class HeadersBuilder:
    """
    Chainable accumulator of response headers.

    Attributes:
        hasher: Digest function used by ``etag`` for content.

    Example:
        >>> HeadersBuilder().content_type("css").cache("STYLESHEET").build()
        {'Content-Type': 'text/css', 'Cache-Control': 'public, max-age=2592000, must-revalidate'}
    """

    __slots__ = ("_headers", "hasher")

    def __init__(self, hasher: Callable[[Content], str] | None = None) -> None:
        """
        Initialize an empty builder.

        Args:
            hasher: Content digest function for ETags. Defaults to
                ``hash_content`` (process-wide ``ContentHasher``).
        """
        self._headers: HeaderSet = {}
        self.hasher = hasher or hash_content

    # -------------------------------------------------------------------------
    # Content type
    # -------------------------------------------------------------------------

    def content_type(self, token: ContentType | str) -> HeadersBuilder:
        """Set Content-Type from a known token, e.g. ``"json"``.

        Unknown tokens give ``application/octet-stream``.
        """
        self._headers["Content-Type"] = get_mime_type(token)
        return self

    def file_path(self, path: str) -> HeadersBuilder:
        """Set Content-Type from the extension of ``path``.

        The text after the last dot is lowercased and looked up; paths with
        no known extension fall back to ``application/octet-stream``.
        """
        extension = path.rsplit(".", 1)[-1].lower()
        self._headers["Content-Type"] = get_mime_type(extension)
        return self

    def mime_type(self, mime_type: str) -> HeadersBuilder:
        """Set Content-Type verbatim, e.g. ``"application/vnd.api+json"``."""
        self._headers["Content-Type"] = mime_type
        return self

    # -------------------------------------------------------------------------
    # Caching
    # -------------------------------------------------------------------------

    def cache(self, strategy: CacheStrategy | str) -> HeadersBuilder:
        """
        Set Cache-Control (and Expires, when defined) from a strategy.

        Raises:
            UnknownCacheStrategyError: If ``strategy`` is not a known token.
        """
        config = get_cache_config(strategy)
        self._headers["Cache-Control"] = config.cache_control
        if config.expires:
            self._headers["Expires"] = config.expires
        return self

    def etag(self, content_or_etag: Content | None = None) -> HeadersBuilder:
        """
        Set ETag from content, or verbatim from a pre-formatted value.

        Args:
            content_or_etag: Content to hash, or a string starting with a
                double quote (used as-is). None or empty does nothing.

        Example:
            >>> HeadersBuilder().etag('"v1"').build()
            {'ETag': '"v1"'}
        """
        if not content_or_etag:
            return self

        if isinstance(content_or_etag, str) and content_or_etag.startswith('"'):
            etag = content_or_etag
        else:
            etag = f'"{self.hasher(content_or_etag)}"'

        self._headers["ETag"] = etag
        return self

    def last_modified(self, date: datetime | float) -> HeadersBuilder:
        """Set Last-Modified from a datetime (naive means UTC) or timestamp."""
        self._headers["Last-Modified"] = _http_date(date)
        return self

    # -------------------------------------------------------------------------
    # Body metadata
    # -------------------------------------------------------------------------

    def content_length(self, length: int) -> HeadersBuilder:
        self._headers["Content-Length"] = str(int(length))
        return self

    def compress(self, encoding: str | None = None) -> HeadersBuilder:
        """Set Content-Encoding (gzip, br, deflate...). None does nothing."""
        if encoding:
            self._headers["Content-Encoding"] = encoding
        return self

    def vary(self, *fields: str) -> HeadersBuilder:
        """Append fields to Vary instead of replacing it.

        Example:
            >>> HeadersBuilder().vary("Accept-Encoding").vary("User-Agent").build()
            {'Vary': 'Accept-Encoding, User-Agent'}
        """
        if not fields:
            return self
        joined = ", ".join(fields)
        existing = self._headers.get("Vary")
        self._headers["Vary"] = f"{existing}, {joined}" if existing else joined
        return self

    # -------------------------------------------------------------------------
    # Redirects
    # -------------------------------------------------------------------------

    def redirect(self, url: str, permanent: bool = False) -> HeadersBuilder:
        """
        Set Location and an X-Redirect-Type marker.

        The status code (301/302/307/308) belongs to the response and must
        be set by the caller.
        """
        self._headers["Location"] = url
        self._headers["X-Redirect-Type"] = "permanent" if permanent else "temporary"
        return self

    # -------------------------------------------------------------------------
    # CORS & security
    # -------------------------------------------------------------------------

    def cors(
        self,
        origin: str = "*",
        methods: str | Iterable[str] | None = None,
        headers: str | Iterable[str] | None = None,
        max_age: int = DEFAULT_CORS_MAX_AGE,
        credentials: bool | None = None,
    ) -> HeadersBuilder:
        """
        Set CORS headers.

        Args:
            origin: Access-Control-Allow-Origin value. Defaults to "*".
            methods: Allowed methods, list or comma-separated string.
                Defaults to GET, POST, PUT, DELETE, OPTIONS.
            headers: Allowed request headers. Defaults to
                Content-Type, Authorization.
            max_age: Preflight cache time in seconds. Defaults to 86400.
            credentials: Allow credentials. None derives it from the origin:
                True for a specific origin, False for "*".

        Raises:
            CORSConfigError: If credentials resolve to True with origin "*".
                Browsers reject that pair, nothing is written.

        Example:
            >>> HeadersBuilder().cors(origin="https://x.test").build()["Access-Control-Allow-Credentials"]
            'true'
        """
        allow_credentials = credentials if credentials is not None else origin != "*"
        if allow_credentials and origin == "*":
            raise CORSConfigError(origin, allow_credentials)

        allow_methods = split_and_strip(
            methods, list(DEFAULT_CORS_METHODS)
        )
        allow_headers = split_and_strip(
            headers, list(DEFAULT_CORS_HEADERS)
        )

        self._headers["Access-Control-Allow-Origin"] = origin
        self._headers["Access-Control-Allow-Methods"] = ", ".join(allow_methods)
        self._headers["Access-Control-Allow-Headers"] = ", ".join(allow_headers)
        if allow_credentials:
            self._headers["Access-Control-Allow-Credentials"] = "true"
        self._headers["Access-Control-Max-Age"] = str(max_age)
        return self

    def security(
        self,
        csp: str | None = None,
        hsts: bool | int = True,
        no_sniff: bool = True,
        frame_options: str | None = "SAMEORIGIN",
        xss_protection: bool = True,
    ) -> HeadersBuilder:
        """
        Set security headers.

        Args:
            csp: Content-Security-Policy value. Omitted when None.
            hsts: True for one year, an int for a custom max-age in seconds,
                False to omit Strict-Transport-Security.
            no_sniff: Emit ``X-Content-Type-Options: nosniff``.
            frame_options: X-Frame-Options value (DENY, SAMEORIGIN...).
                None or empty omits it.
            xss_protection: Emit ``X-XSS-Protection: 1; mode=block``.
        """
        if csp:
            self._headers["Content-Security-Policy"] = csp

        if hsts:
            max_age = DEFAULT_HSTS_MAX_AGE if isinstance(hsts, bool) else int(hsts)
            self._headers["Strict-Transport-Security"] = f"max-age={max_age}; includeSubDomains"

        if no_sniff:
            self._headers["X-Content-Type-Options"] = "nosniff"

        if frame_options:
            self._headers["X-Frame-Options"] = frame_options

        if xss_protection:
            self._headers["X-XSS-Protection"] = "1; mode=block"

        return self

    # -------------------------------------------------------------------------
    # Custom headers
    # -------------------------------------------------------------------------

    def custom(self, name: str, value: str) -> HeadersBuilder:
        """Set any header verbatim. The caller owns its syntax."""
        self._headers[name] = value
        return self

    def custom_headers(self, headers: Mapping[str, str]) -> HeadersBuilder:
        """Merge a mapping of headers, overwriting on collision."""
        self._headers.update(headers)
        return self

    # -------------------------------------------------------------------------
    # Terminal methods
    # -------------------------------------------------------------------------

    def build(self, content: Content | None = None) -> HeaderSet:
        """
        Return a copy of the accumulated headers.

        Args:
            content: Optional body. When given (and non-empty) and
                Content-Length is not set, its byte length is added
                (UTF-8 length for text).

        Returns:
            New ``dict`` owned by the caller.
        """
        result = dict(self._headers)
        if content and "Content-Length" not in result:
            result["Content-Length"] = str(len(to_bytes(content)))
        return result

    def build_raw(self, content: Content | None = None) -> RawHeaders:
        """Return headers as an ASGI raw list: lowercase latin-1 names."""
        return [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in self.build(content).items()
        ]

    def build_headers(self, content: Content | None = None) -> Headers:
        """Return headers as a case-insensitive ``Headers`` collection."""
        return Headers(self.build_raw(content))

    def __repr__(self) -> str:
        return f"HeadersBuilder({self._headers!r})"
