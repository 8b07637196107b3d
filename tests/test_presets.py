# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for header presets."""

import pytest

from genro_headers import build_headers, common_headers
from genro_headers.builder import HeadersBuilder
from genro_headers.exceptions import HeadersError

EPOCH = "Thu, 01 Jan 1970 00:00:00 GMT"


class TestParity:
    """Presets equal their documented call sequences."""

    def test_api(self) -> None:
        manual = build_headers().content_type("json").cache("API_RESPONSE").cors().build()
        assert common_headers.api().build() == manual

    def test_realtime(self) -> None:
        manual = build_headers().content_type("json").cache("NO_CACHE").cors().build()
        assert common_headers.realtime().build() == manual

    def test_html(self) -> None:
        manual = build_headers().content_type("html").cache("HTML_PAGE").security().build()
        assert common_headers.html().build() == manual

    def test_expensive_api_with_content(self) -> None:
        manual = (
            build_headers().content_type("json").cache("API_RESPONSE").cors().etag("{}").build()
        )
        assert common_headers.expensive_api("{}").build() == manual

    def test_presets_return_builders(self) -> None:
        assert isinstance(common_headers.favicon(), HeadersBuilder)
        assert common_headers.api() is not common_headers.api()


class TestStaticAssets:
    def test_css_with_content(self) -> None:
        headers = common_headers.css("body{}").build()
        assert headers["Content-Type"] == "text/css"
        assert headers["Cache-Control"] == "public, max-age=2592000, must-revalidate"
        assert "ETag" in headers

    def test_css_without_content_has_no_etag(self) -> None:
        assert "ETag" not in common_headers.css().build()

    def test_javascript(self) -> None:
        headers = common_headers.javascript("let a").build()
        assert headers["Content-Type"] == "application/javascript"
        assert "ETag" in headers

    def test_hashed_asset(self) -> None:
        headers = common_headers.hashed_asset("app.3f9a1c.js", "code").build()
        assert headers["Content-Type"] == "application/javascript"
        assert headers["Cache-Control"] == "public, max-age=31536000, immutable"
        assert "Expires" in headers
        assert "ETag" in headers

    def test_font_allows_any_origin_without_credentials(self) -> None:
        headers = common_headers.font("inter.woff2").build()
        assert headers["Content-Type"] == "font/woff2"
        assert headers["Access-Control-Allow-Origin"] == "*"
        assert "Access-Control-Allow-Credentials" not in headers

    def test_image(self) -> None:
        headers = common_headers.image("logo.png").build()
        assert headers == {"Content-Type": "image/png", "Cache-Control": "public, max-age=2592000"}

    def test_favicon(self) -> None:
        headers = common_headers.favicon().build()
        assert headers["Content-Type"] == "image/x-icon"
        assert headers["Cache-Control"] == "public, max-age=31536000"


class TestSpecialFiles:
    def test_manifest(self) -> None:
        headers = common_headers.manifest().build()
        assert headers["Content-Type"] == "application/json"
        assert headers["Cache-Control"] == "public, max-age=86400, must-revalidate"

    def test_service_worker_is_never_cached(self) -> None:
        headers = common_headers.service_worker().build()
        assert headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
        assert headers["Expires"] == EPOCH

    def test_sitemap(self) -> None:
        headers = common_headers.sitemap("<urlset/>").build()
        assert headers["Content-Type"] == "application/xml"
        assert headers["Cache-Control"] == "public, max-age=86400"
        assert "ETag" in headers

    def test_feed_rss_default(self) -> None:
        headers = common_headers.feed("<rss/>").build()
        assert headers["Content-Type"] == "application/rss+xml"
        assert headers["Cache-Control"] == "public, max-age=3600"

    def test_feed_atom(self) -> None:
        headers = common_headers.feed(feed_type="atom").build()
        assert headers["Content-Type"] == "application/atom+xml"
        assert "ETag" not in headers

    def test_feed_unknown_type(self) -> None:
        with pytest.raises(HeadersError):
            common_headers.feed(feed_type="json")


class TestMediaAndDocuments:
    @pytest.mark.parametrize(
        "preset, path, mime",
        [("video", "clip.mp4", "video/mp4"), ("audio", "song.mp3", "audio/mpeg")],
    )
    def test_media(self, preset: str, path: str, mime: str) -> None:
        headers = getattr(common_headers, preset)(path).build()
        assert headers == {
            "Content-Type": mime,
            "Cache-Control": "no-cache, no-store",
            "Accept-Ranges": "bytes",
        }

    def test_pdf(self) -> None:
        headers = common_headers.pdf().build()
        assert headers["Content-Type"] == "application/pdf"
        assert headers["Content-Disposition"] == "inline"
        assert headers["Cache-Control"] == "public, max-age=86400"

    def test_download(self) -> None:
        headers = common_headers.download("report.zip", "/tmp/export.zip").build()
        assert headers["Content-Type"] == "application/zip"
        assert headers["Content-Disposition"] == 'attachment; filename="report.zip"'
        assert headers["Cache-Control"] == "public, max-age=604800"


class TestSecurityAndRedirects:
    def test_secure(self) -> None:
        headers = common_headers.secure().build()
        assert headers["Content-Security-Policy"].startswith("default-src 'self'")
        assert headers["Strict-Transport-Security"] == "max-age=31536000; includeSubDomains"
        assert headers["X-Powered-By"] == "genro-headers"

    def test_permanent_redirect(self) -> None:
        headers = common_headers.permanent_redirect("/new").build()
        assert headers == {"Location": "/new", "X-Redirect-Type": "permanent"}

    def test_temporary_redirect(self) -> None:
        headers = common_headers.temporary_redirect("/tmp").build()
        assert headers == {"Location": "/tmp", "X-Redirect-Type": "temporary"}

    def test_presets_keep_chaining(self) -> None:
        headers = common_headers.html().vary("Accept-Encoding").build("<p>hi</p>")
        assert headers["Vary"] == "Accept-Encoding"
        assert headers["Content-Length"] == "9"
