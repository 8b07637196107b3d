# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Named header presets for common response shapes.

Each preset is a fixed call sequence on a fresh builder and returns the
builder, so callers can keep chaining before ``build``::

    common_headers.css(stylesheet).vary("Accept-Encoding").build(stylesheet)

House policy encoded here:
    - Static assets (CSS, JS, hashed files) get long caching plus an ETag.
    - API responses get short caching and CORS, ETags only for expensive ones.
    - Real-time APIs and service workers are never cached.
    - Media streams are not cached and advertise byte ranges.
"""

from __future__ import annotations

from .builder import HeadersBuilder
from .exceptions import HeadersError
from .factory import build_headers
from .types import CacheStrategy, Content

__all__ = ["CommonHeaders", "FEED_MIME_TYPES", "SECURE_CSP", "common_headers"]

FEED_MIME_TYPES = {
    "rss": "application/rss+xml",
    "atom": "application/atom+xml",
}

SECURE_CSP = (
    "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'"
)

POWERED_BY = "genro-headers"


class CommonHeaders:
    """Preset namespace, use the ``common_headers`` instance."""

    __slots__ = ()

    # Static assets - ETags make sense here

    def css(self, content: Content | None = None) -> HeadersBuilder:
        return build_headers().content_type("css").cache(CacheStrategy.STYLESHEET).etag(content)

    def javascript(self, content: Content | None = None) -> HeadersBuilder:
        return (
            build_headers().content_type("javascript").cache(CacheStrategy.JAVASCRIPT).etag(content)
        )

    def hashed_asset(self, file_path: str, content: Content | None = None) -> HeadersBuilder:
        """Fingerprinted asset (``app.3f9a1c.js``): immutable for a year."""
        return build_headers().file_path(file_path).cache(CacheStrategy.HASHED_ASSET).etag(content)

    def font(self, file_path: str) -> HeadersBuilder:
        """Web font, cached for a year and readable cross-origin."""
        return build_headers().file_path(file_path).cache(CacheStrategy.FONT).cors(origin="*")

    def image(self, file_path: str) -> HeadersBuilder:
        return build_headers().file_path(file_path).cache(CacheStrategy.IMAGE)

    def favicon(self) -> HeadersBuilder:
        return build_headers().content_type("icon").cache(CacheStrategy.FAVICON)

    # API responses - no automatic ETags

    def api(self) -> HeadersBuilder:
        return build_headers().content_type("json").cache(CacheStrategy.API_RESPONSE).cors()

    def expensive_api(self, content: Content | None = None) -> HeadersBuilder:
        """API response worth revalidating: adds an ETag when content is given."""
        return self.api().etag(content)

    def realtime(self) -> HeadersBuilder:
        return build_headers().content_type("json").cache(CacheStrategy.NO_CACHE).cors()

    # HTML and documents

    def html(self) -> HeadersBuilder:
        return build_headers().content_type("html").cache(CacheStrategy.HTML_PAGE).security()

    def expensive_html(self, content: Content | None = None) -> HeadersBuilder:
        return self.html().etag(content)

    # Special files

    def manifest(self, content: Content | None = None) -> HeadersBuilder:
        return build_headers().content_type("json").cache(CacheStrategy.MANIFEST).etag(content)

    def service_worker(self) -> HeadersBuilder:
        return build_headers().content_type("javascript").cache(CacheStrategy.SERVICE_WORKER)

    def sitemap(self, content: Content | None = None) -> HeadersBuilder:
        return build_headers().content_type("xml").cache(CacheStrategy.SITEMAP).etag(content)

    def feed(self, content: Content | None = None, feed_type: str = "rss") -> HeadersBuilder:
        """
        RSS or Atom feed.

        Raises:
            HeadersError: If ``feed_type`` is neither "rss" nor "atom".
        """
        try:
            mime_type = FEED_MIME_TYPES[feed_type]
        except KeyError:
            raise HeadersError(f"Unknown feed type: {feed_type!r}") from None
        return (
            build_headers()
            .content_type("xml")
            .cache(CacheStrategy.FEED)
            .etag(content)
            .mime_type(mime_type)
        )

    # Media - no ETags

    def video(self, file_path: str) -> HeadersBuilder:
        return self._media(file_path)

    def audio(self, file_path: str) -> HeadersBuilder:
        return self._media(file_path)

    def _media(self, file_path: str) -> HeadersBuilder:
        return (
            build_headers()
            .file_path(file_path)
            .cache(CacheStrategy.MEDIA_STREAM)
            .custom("Accept-Ranges", "bytes")
        )

    # Documents - ETag only if content is given

    def pdf(self, content: Content | None = None) -> HeadersBuilder:
        return (
            build_headers()
            .content_type("pdf")
            .cache(CacheStrategy.DOCUMENT)
            .custom("Content-Disposition", "inline")
            .etag(content)
        )

    def download(
        self, filename: str, file_path: str, content: Content | None = None
    ) -> HeadersBuilder:
        """Attachment download named ``filename``, typed from ``file_path``."""
        return (
            build_headers()
            .file_path(file_path)
            .cache(CacheStrategy.ARCHIVE)
            .custom("Content-Disposition", f'attachment; filename="{filename}"')
            .etag(content)
        )

    # Security & redirects

    def secure(self) -> HeadersBuilder:
        return (
            build_headers()
            .security(csp=SECURE_CSP, hsts=31536000)
            .custom("X-Powered-By", POWERED_BY)
        )

    def permanent_redirect(self, url: str) -> HeadersBuilder:
        return build_headers().redirect(url, permanent=True)

    def temporary_redirect(self, url: str) -> HeadersBuilder:
        return build_headers().redirect(url, permanent=False)


common_headers = CommonHeaders()
