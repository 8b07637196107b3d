# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Cache strategy table.

Each ``CacheStrategy`` token maps to a ``CacheConfig``: the Cache-Control
value and, for "never cache" and "cache for a year" strategies, an Expires
value.

Expires values are computed once, when the table is built at import time:
the Unix epoch for no-cache entries, import time plus one year for long-lived
ones. Every long-lived entry in a process therefore carries the same
timestamp.

Example::

    >>> get_cache_config("ONE_HOUR")
    CacheConfig(cache_control='public, max-age=3600, must-revalidate', expires=None)
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from email.utils import formatdate
from types import MappingProxyType
from typing import NamedTuple

from .exceptions import UnknownCacheStrategyError
from .types import CacheStrategy

__all__ = ["CACHE_CONFIGS", "CacheConfig", "ONE_YEAR_SECONDS", "get_cache_config"]

ONE_YEAR_SECONDS = 31536000

_NO_STORE = "no-cache, no-store, must-revalidate"


class CacheConfig(NamedTuple):
    """Cache-Control value plus optional Expires value."""

    cache_control: str
    expires: str | None = None


def _build_cache_configs(now: float | None = None) -> Mapping[CacheStrategy, CacheConfig]:
    """Build the strategy table.

    Args:
        now: Unix timestamp used for "one year from now". Defaults to the
            current time.

    Returns:
        Read-only mapping covering every ``CacheStrategy`` member.
    """
    if now is None:
        now = time.time()
    epoch = formatdate(0, usegmt=True)
    next_year = formatdate(now + ONE_YEAR_SECONDS, usegmt=True)

    return MappingProxyType(
        {
            # Generic time-based strategies
            CacheStrategy.NO_CACHE: CacheConfig(_NO_STORE, epoch),
            CacheStrategy.ONE_YEAR: CacheConfig("public, max-age=31536000", next_year),
            CacheStrategy.IMMUTABLE: CacheConfig("public, max-age=31536000, immutable", next_year),
            CacheStrategy.ONE_MONTH: CacheConfig("public, max-age=2592000"),
            CacheStrategy.ONE_WEEK: CacheConfig("public, max-age=604800"),
            CacheStrategy.ONE_DAY: CacheConfig("public, max-age=86400, must-revalidate"),
            CacheStrategy.ONE_HOUR: CacheConfig("public, max-age=3600, must-revalidate"),
            CacheStrategy.FIVE_MINUTES: CacheConfig("public, max-age=300"),
            CacheStrategy.API: CacheConfig("public, max-age=300, s-maxage=3600"),
            # Content-specific strategies
            CacheStrategy.STYLESHEET: CacheConfig("public, max-age=2592000, must-revalidate"),
            CacheStrategy.JAVASCRIPT: CacheConfig("public, max-age=2592000, must-revalidate"),
            CacheStrategy.HASHED_ASSET: CacheConfig("public, max-age=31536000, immutable", next_year),
            CacheStrategy.FONT: CacheConfig("public, max-age=31536000", next_year),
            CacheStrategy.IMAGE: CacheConfig("public, max-age=2592000"),
            CacheStrategy.FAVICON: CacheConfig("public, max-age=31536000", next_year),
            CacheStrategy.HTML_PAGE: CacheConfig("public, max-age=3600, must-revalidate"),
            CacheStrategy.API_RESPONSE: CacheConfig("public, max-age=300, s-maxage=900"),
            CacheStrategy.FEED: CacheConfig("public, max-age=3600"),
            CacheStrategy.SITEMAP: CacheConfig("public, max-age=86400"),
            CacheStrategy.MANIFEST: CacheConfig("public, max-age=86400, must-revalidate"),
            CacheStrategy.SERVICE_WORKER: CacheConfig(_NO_STORE, epoch),
            CacheStrategy.MEDIA_STREAM: CacheConfig("no-cache, no-store"),
            CacheStrategy.DOCUMENT: CacheConfig("public, max-age=86400"),
            CacheStrategy.ARCHIVE: CacheConfig("public, max-age=604800"),
        }
    )


CACHE_CONFIGS = _build_cache_configs()


def get_cache_config(strategy: CacheStrategy | str) -> CacheConfig:
    """Return the cache configuration for a strategy token.

    Args:
        strategy: ``CacheStrategy`` member or its token string.

    Returns:
        The matching ``CacheConfig``.

    Raises:
        UnknownCacheStrategyError: If the token is not a known strategy.
    """
    try:
        return CACHE_CONFIGS[CacheStrategy(strategy)]
    except ValueError:
        raise UnknownCacheStrategyError(strategy) from None
