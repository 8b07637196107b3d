# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Builder factories."""

from __future__ import annotations

from collections.abc import Callable

from .builder import HeadersBuilder
from .types import CacheStrategy, Content, ContentType, HeaderSet

__all__ = ["build_headers", "quick_headers"]


def build_headers(hasher: Callable[[Content], str] | None = None) -> HeadersBuilder:
    """Create a new headers builder.

    Example::

        headers = (
            build_headers()
            .content_type("json")
            .cache("API_RESPONSE")
            .cors()
            .build()
        )
    """
    return HeadersBuilder(hasher=hasher)


def quick_headers(
    content_type: ContentType | str,
    cache: CacheStrategy | str | None = None,
) -> HeaderSet:
    """Content-Type plus optional cache strategy, already built.

    Example::

        quick_headers("json", "NO_CACHE")
    """
    builder = build_headers().content_type(content_type)
    if cache:
        builder.cache(cache)
    return builder.build()
