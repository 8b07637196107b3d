# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""CORS origin resolution.

Decides which value to emit as ``Access-Control-Allow-Origin`` for a request,
given an allow-list and the development/production signal. Feed the result to
``HeadersBuilder.cors(origin=...)``.

Decision order (``resolve_cors_origin``):
    1. allow_all (defaults to is_development) and an Origin is present:
       echo the request origin.
    2. Empty allow-list: echo the request origin, or "*" when there is none
       (same-origin deployments with no explicit list).
    3. No Origin header: first allowed origin.
    4. Exact match: the request origin.
       Flexible match (allow_any_localhost / allow_any_port): the request origin.
    5. Otherwise: first allowed origin.

Note:
    Step 5 answers a non-matching origin with *some* allowed origin instead of
    omitting the header. Browsers then reject the response because the value
    differs from their origin, but callers must not read the returned value as
    "this origin was accepted".

Flexible matching:
    Scheme must be equal. With allow_any_localhost, ``localhost``,
    ``127.0.0.1`` and ``0.0.0.0`` are interchangeable hostnames. With
    allow_any_port, the port is ignored once the hostname matches.

Example::

    >>> resolve_cors_origin("https://evil.test", ["https://a.test"], is_development=False)
    'https://a.test'
    >>> resolve_cors_origin("http://127.0.0.1:5173", ["http://localhost:3000"],
    ...                     is_development=False, allow_any_localhost=True,
    ...                     allow_any_port=True)
    'http://127.0.0.1:5173'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import urlsplit

from .config import HeadersConfig
from .datastructures import Headers, headers_from_scope

__all__ = ["LOCALHOST_ALIASES", "get_cors_origin", "request_origin", "resolve_cors_origin"]

logger = logging.getLogger("genro_headers.cors")

LOCALHOST_ALIASES = frozenset({"localhost", "127.0.0.1", "0.0.0.0"})

WILDCARD = "*"


def _split_origin(origin: str) -> tuple[str, str, int | None] | None:
    """Return (scheme, hostname, port) or None if origin does not parse."""
    try:
        parts = urlsplit(origin)
        port = parts.port
    except ValueError:
        return None
    if not parts.scheme or not parts.hostname:
        return None
    return parts.scheme.lower(), parts.hostname.lower(), port


def _origins_match(
    request_origin: str,
    allowed_origin: str,
    allow_any_localhost: bool,
    allow_any_port: bool,
) -> bool:
    request_parts = _split_origin(request_origin)
    allowed_parts = _split_origin(allowed_origin)
    if request_parts is None or allowed_parts is None:
        return False

    req_scheme, req_host, req_port = request_parts
    allowed_scheme, allowed_host, allowed_port = allowed_parts
    if req_scheme != allowed_scheme:
        return False

    same_host = req_host == allowed_host or (
        allow_any_localhost and req_host in LOCALHOST_ALIASES and allowed_host in LOCALHOST_ALIASES
    )
    if not same_host:
        return False
    return allow_any_port or req_port == allowed_port


def resolve_cors_origin(
    request_origin: str | None,
    allowed_origins: Sequence[str],
    is_development: bool,
    *,
    allow_all: bool | None = None,
    allow_any_localhost: bool | None = None,
    allow_any_port: bool | None = None,
) -> str:
    """
    Choose the Access-Control-Allow-Origin value for a request.

    Args:
        request_origin: ``Origin`` request header, None when absent.
        allowed_origins: Allow-list in preference order.
        is_development: Development/production signal.
        allow_all: Echo any origin. Defaults to ``is_development``.
        allow_any_localhost: Treat localhost aliases as one host.
            Defaults to ``is_development``.
        allow_any_port: Ignore ports on hostname match.
            Defaults to ``is_development``.

    Returns:
        Origin string to emit (never empty).
    """
    if allow_all is None:
        allow_all = is_development
    if allow_any_localhost is None:
        allow_any_localhost = is_development
    if allow_any_port is None:
        allow_any_port = is_development

    if allow_all and request_origin:
        logger.debug("CORS allow-all: echoing %s", request_origin)
        return request_origin

    if not allowed_origins:
        return request_origin or WILDCARD

    if not request_origin:
        return allowed_origins[0]

    if request_origin in allowed_origins:
        return request_origin

    if allow_any_localhost or allow_any_port:
        for allowed in allowed_origins:
            if _origins_match(request_origin, allowed, allow_any_localhost, allow_any_port):
                return request_origin

    logger.debug(
        "CORS origin %s not allowed, answering with %s", request_origin, allowed_origins[0]
    )
    return allowed_origins[0]


def request_origin(request: Any) -> str | None:
    """
    Read the ``Origin`` header from a request-like object.

    Accepts an ASGI scope, a ``Headers``, an object with a ``headers``
    attribute exposing ``get`` (framework request objects), a plain header
    mapping (looked up case-insensitively), or None.
    """
    if request is None:
        return None
    if isinstance(request, Headers):
        return request.get("origin")
    if isinstance(request, Mapping):
        if "type" in request and "headers" in request:
            return headers_from_scope(request).get("origin")
        for name, value in request.items():
            if isinstance(name, str) and name.lower() == "origin":
                return value
        return None
    headers = getattr(request, "headers", None)
    if headers is None:
        return None
    if isinstance(headers, (Headers, Mapping)):
        return request_origin(headers)
    return headers.get("origin")


def get_cors_origin(
    request: Any,
    allowed_origins: Sequence[str] | None = None,
    *,
    allow_all: bool | None = None,
    config: HeadersConfig | None = None,
) -> str:
    """
    Resolve the CORS origin for a request using environment configuration.

    Args:
        request: Request-like object, see ``request_origin``.
        allowed_origins: Allow-list. Defaults to ``config.allowed_origins``.
        allow_all: Override the development "allow everything" behavior.
        config: Environment configuration. Defaults to ``HeadersConfig()``,
            read from GENRO_HEADERS_* variables.

    Returns:
        Origin string to emit.
    """
    if config is None:
        config = HeadersConfig()
    if allowed_origins is None:
        allowed_origins = config.allowed_origins
    return resolve_cors_origin(
        request_origin(request),
        list(allowed_origins),
        config.is_development,
        allow_all=allow_all,
        allow_any_localhost=config.allow_any_localhost,
        allow_any_port=config.allow_any_port,
    )
