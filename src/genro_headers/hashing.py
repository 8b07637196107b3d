# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Content hashing for ETag generation.

ETags are freshness validators, not security primitives: the digest must be
deterministic and reasonably unique, collision resistance is not required.

Strategies
==========
Candidates are tried in order, the first one that works wins::

    1. xxhash   - xxh64 from the optional ``xxhash`` package (fastest)
    2. md5      - hashlib.md5, flagged as not used for security
    3. rolling  - 32-bit ``h = h * 31 + byte`` over the UTF-8 bytes

The choice is resolved lazily, once per ``ContentHasher``. Every call is
guarded: if the active strategy raises, the hasher logs a warning and falls
through to the next candidate. The rolling hash has no external dependency,
so the chain always produces a digest.

All strategies return lowercase hex. Text is hashed as its UTF-8 bytes, so
``"café"`` and ``"café".encode()`` share a digest.

Example::

    >>> hash_content("body { margin: 0 }")   # doctest: +SKIP
    '5a3e0d...'
    >>> ContentHasher([ROLLING]).name
    'rolling'

Injection
=========
Tests and callers needing a stable digest pass their own strategy list::

    hasher = ContentHasher([HashStrategy("fixed", lambda data: "abc")])
    build_headers(hasher=hasher).etag("x").build()  # {"ETag": '"abc"'}
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Sequence
from typing import NamedTuple

from .types import Content

__all__ = [
    "DEFAULT_STRATEGIES",
    "ContentHasher",
    "HashStrategy",
    "MD5",
    "ROLLING",
    "XXHASH",
    "hash_content",
    "to_bytes",
]

logger = logging.getLogger("genro_headers.hashing")

# Optional dependency: xxhash for faster digests
try:
    import xxhash

    HAS_XXHASH = True
except ImportError:
    xxhash = None  # type: ignore[assignment]
    HAS_XXHASH = False


class HashStrategy(NamedTuple):
    """A named digest function from bytes to lowercase hex."""

    name: str
    func: Callable[[bytes], str]


def to_bytes(content: Content) -> bytes:
    """Return the bytes to hash or measure for ``content``.

    Raises:
        TypeError: If content is neither text nor bytes-like.
    """
    if isinstance(content, str):
        return content.encode("utf-8")
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    raise TypeError(f"Expected str or bytes-like content, got {type(content).__name__}")


def _xxhash_digest(data: bytes) -> str:
    if HAS_XXHASH:
        return xxhash.xxh64(data).hexdigest()
    raise RuntimeError("xxhash is not installed")


def _md5_digest(data: bytes) -> str:
    return hashlib.md5(data, usedforsecurity=False).hexdigest()


def _rolling_digest(data: bytes) -> str:
    value = 0
    for byte in data:
        value = (value * 31 + byte) & 0xFFFFFFFF
    return f"{value:08x}"


XXHASH = HashStrategy("xxhash", _xxhash_digest)
MD5 = HashStrategy("md5", _md5_digest)
ROLLING = HashStrategy("rolling", _rolling_digest)

DEFAULT_STRATEGIES: tuple[HashStrategy, ...] = (XXHASH, MD5, ROLLING)

_PROBE = b"genro-headers"


class ContentHasher:
    """
    Digest content with the first working strategy.

    Attributes:
        strategies: Ordered candidate strategies.

    Example:
        >>> hasher = ContentHasher()
        >>> hasher("hello") == hasher(b"hello")
        True
    """

    __slots__ = ("strategies", "_index")

    def __init__(self, strategies: Sequence[HashStrategy] | None = None) -> None:
        """
        Initialize hasher.

        Args:
            strategies: Candidate strategies in preference order.
                Defaults to ``DEFAULT_STRATEGIES``. When every candidate
                fails, the rolling hash is used.
        """
        candidates = list(DEFAULT_STRATEGIES if strategies is None else strategies)
        if not candidates:
            candidates = [ROLLING]
        self.strategies: tuple[HashStrategy, ...] = tuple(candidates)
        self._index: int | None = None

    def _resolve(self) -> int:
        """Find the first strategy that digests a probe without raising."""
        if self._index is not None:
            return self._index
        for index, strategy in enumerate(self.strategies):
            try:
                strategy.func(_PROBE)
            except Exception as exc:
                logger.debug("Hash strategy %r unavailable: %s", strategy.name, exc)
                continue
            logger.debug("Using hash strategy %r", strategy.name)
            self._index = index
            return index
        # No candidate survived the probe, keep trying them per call
        self._index = len(self.strategies) - 1
        return self._index

    @property
    def name(self) -> str:
        """Name of the active strategy."""
        return self.strategies[self._resolve()].name

    def __call__(self, content: Content) -> str:
        """
        Return the hex digest of content.

        Args:
            content: Text (hashed as UTF-8) or bytes-like payload.

        Returns:
            Lowercase hex digest.

        Raises:
            TypeError: If content is neither text nor bytes-like.
        """
        data = to_bytes(content)
        start = self._resolve()
        for strategy in self.strategies[start:]:
            try:
                return strategy.func(data)
            except Exception as exc:
                logger.warning("Hash strategy %r failed, falling back: %s", strategy.name, exc)
        return _rolling_digest(data)

    def __repr__(self) -> str:
        names = [strategy.name for strategy in self.strategies]
        return f"ContentHasher(strategies={names!r})"


_default_hasher = ContentHasher()


def hash_content(content: Content) -> str:
    """Hash content with the process-wide default hasher."""
    return _default_hasher(content)
