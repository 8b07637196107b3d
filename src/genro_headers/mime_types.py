# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""MIME type table.

Maps short content-type tokens (``json``, ``truetype``...) and raw file
extensions (``js``, ``jpg``...) to the Content-Type value to emit. Lookups
are case-sensitive and never fail: a miss yields ``application/octet-stream``.

Example::

    >>> get_mime_type("json")
    'application/json'
    >>> get_mime_type("jpg")
    'image/jpeg'
    >>> get_mime_type("unknown")
    'application/octet-stream'
"""

from __future__ import annotations

from types import MappingProxyType

from .types import ContentType

__all__ = ["DEFAULT_MIME_TYPE", "MIME_TYPES", "get_mime_type"]

DEFAULT_MIME_TYPE = "application/octet-stream"

MIME_TYPES = MappingProxyType(
    {
        # Text & code
        "html": "text/html; charset=utf-8",
        "css": "text/css",
        "javascript": "application/javascript",
        "json": "application/json",
        "xml": "application/xml",
        "text": "text/plain; charset=utf-8",
        "csv": "text/csv",
        "markdown": "text/markdown; charset=utf-8",
        # Images
        "png": "image/png",
        "jpeg": "image/jpeg",
        "gif": "image/gif",
        "svg": "image/svg+xml",
        "webp": "image/webp",
        "icon": "image/x-icon",
        "bmp": "image/bmp",
        # Fonts
        "woff": "font/woff",
        "woff2": "font/woff2",
        "truetype": "font/ttf",
        "embedded-opentype": "application/vnd.ms-fontobject",
        "opentype": "font/otf",
        # Video
        "mp4": "video/mp4",
        "webm": "video/webm",
        "ogg": "video/ogg",
        # Audio
        "mpeg": "audio/mpeg",
        "wav": "audio/wav",
        "flac": "audio/flac",
        # Documents
        "pdf": "application/pdf",
        "doc": "application/msword",
        "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        # Archives
        "zip": "application/zip",
        "tar": "application/x-tar",
        "gzip": "application/gzip",
        "7z": "application/x-7z-compressed",
        # File extension aliases (used by HeadersBuilder.file_path)
        "js": "application/javascript",
        "txt": "text/plain; charset=utf-8",
        "jpg": "image/jpeg",
        "ico": "image/x-icon",
        "ttf": "font/ttf",
        "eot": "application/vnd.ms-fontobject",
        "otf": "font/otf",
        "mp3": "audio/mpeg",
        "gz": "application/gzip",
    }
)


def get_mime_type(token: ContentType | str) -> str:
    """Return the MIME type for a content-type token or file extension.

    Args:
        token: ``ContentType`` member, token string or bare extension.

    Returns:
        MIME type string, ``DEFAULT_MIME_TYPE`` when the token is unknown.
    """
    if isinstance(token, ContentType):
        token = token.value
    return MIME_TYPES.get(token, DEFAULT_MIME_TYPE)
