# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Type definitions for genro-headers.

Purpose
=======
Type aliases and closed token enumerations shared by the builder, the lookup
tables and the presets.

Type Definitions
================

HeaderSet : dict[str, str]
    The produced artifact: canonical header name to header value. Never
    contains duplicate keys, last write wins.

RawHeaders : list[tuple[bytes, bytes]]
    ASGI ``http.response.start`` header list (lowercase latin-1 names).

Content : str | bytes | bytearray | memoryview
    Body payload accepted for ETag hashing and Content-Length computation.
    Text is measured and hashed as its UTF-8 encoding.

Scope : MutableMapping[str, Any]
    ASGI connection scope, used to read the request ``Origin`` header.

Enumerations
============
Both enumerations mix in ``str``, so a member compares equal to its plain
token and either form can be passed wherever a token is expected::

    >>> CacheStrategy.ONE_HOUR == "ONE_HOUR"
    True
    >>> ContentType.JSON == "json"
    True
"""

from __future__ import annotations

from enum import Enum
from typing import Any, MutableMapping

__all__ = [
    "CacheStrategy",
    "Content",
    "ContentType",
    "HeaderSet",
    "RawHeaders",
    "Scope",
]

HeaderSet = dict[str, str]
RawHeaders = list[tuple[bytes, bytes]]
Content = str | bytes | bytearray | memoryview
Scope = MutableMapping[str, Any]


class CacheStrategy(str, Enum):
    """Named Cache-Control/Expires pairings."""

    # Generic time-based strategies
    NO_CACHE = "NO_CACHE"
    ONE_YEAR = "ONE_YEAR"
    ONE_MONTH = "ONE_MONTH"
    ONE_WEEK = "ONE_WEEK"
    ONE_DAY = "ONE_DAY"
    ONE_HOUR = "ONE_HOUR"
    FIVE_MINUTES = "FIVE_MINUTES"
    API = "API"
    IMMUTABLE = "IMMUTABLE"

    # Content-specific strategies
    STYLESHEET = "STYLESHEET"
    JAVASCRIPT = "JAVASCRIPT"
    HASHED_ASSET = "HASHED_ASSET"
    FONT = "FONT"
    IMAGE = "IMAGE"
    FAVICON = "FAVICON"
    HTML_PAGE = "HTML_PAGE"
    API_RESPONSE = "API_RESPONSE"
    FEED = "FEED"
    SITEMAP = "SITEMAP"
    MANIFEST = "MANIFEST"
    SERVICE_WORKER = "SERVICE_WORKER"
    MEDIA_STREAM = "MEDIA_STREAM"
    DOCUMENT = "DOCUMENT"
    ARCHIVE = "ARCHIVE"


class ContentType(str, Enum):
    """Short content-type tokens accepted by ``HeadersBuilder.content_type``."""

    # Text & code
    HTML = "html"
    CSS = "css"
    JAVASCRIPT = "javascript"
    JSON = "json"
    XML = "xml"
    TEXT = "text"
    CSV = "csv"
    MARKDOWN = "markdown"

    # Images
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    SVG = "svg"
    WEBP = "webp"
    ICON = "icon"
    BMP = "bmp"

    # Fonts
    WOFF = "woff"
    WOFF2 = "woff2"
    TRUETYPE = "truetype"
    EMBEDDED_OPENTYPE = "embedded-opentype"
    OPENTYPE = "opentype"

    # Audio/video
    MP4 = "mp4"
    WEBM = "webm"
    OGG = "ogg"
    MPEG = "mpeg"
    WAV = "wav"
    FLAC = "flac"

    # Documents & archives
    PDF = "pdf"
    ZIP = "zip"
    TAR = "tar"
    GZIP = "gzip"
