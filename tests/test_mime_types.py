# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for the MIME type table."""

import pytest

from genro_headers.mime_types import DEFAULT_MIME_TYPE, MIME_TYPES, get_mime_type
from genro_headers.types import ContentType


class TestGetMimeType:
    """Tests for get_mime_type()."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("html", "text/html; charset=utf-8"),
            ("css", "text/css"),
            ("javascript", "application/javascript"),
            ("json", "application/json"),
            ("text", "text/plain; charset=utf-8"),
            ("markdown", "text/markdown; charset=utf-8"),
            ("svg", "image/svg+xml"),
            ("icon", "image/x-icon"),
            ("truetype", "font/ttf"),
            ("embedded-opentype", "application/vnd.ms-fontobject"),
            ("mpeg", "audio/mpeg"),
            ("gzip", "application/gzip"),
        ],
    )
    def test_known_tokens(self, token: str, expected: str) -> None:
        """Content-type tokens map to their documented MIME type."""
        assert get_mime_type(token) == expected

    @pytest.mark.parametrize(
        "extension, expected",
        [
            ("js", "application/javascript"),
            ("txt", "text/plain; charset=utf-8"),
            ("jpg", "image/jpeg"),
            ("ico", "image/x-icon"),
            ("ttf", "font/ttf"),
            ("eot", "application/vnd.ms-fontobject"),
            ("otf", "font/otf"),
            ("mp3", "audio/mpeg"),
            ("gz", "application/gzip"),
        ],
    )
    def test_extension_aliases(self, extension: str, expected: str) -> None:
        """Legacy file extensions map to the same MIME families."""
        assert get_mime_type(extension) == expected

    def test_every_content_type_member_is_mapped(self) -> None:
        """Every ContentType member has a table entry."""
        for member in ContentType:
            assert member.value in MIME_TYPES
            assert get_mime_type(member) == MIME_TYPES[member.value]

    def test_unknown_token_falls_back(self) -> None:
        """Unknown tokens resolve to application/octet-stream."""
        assert get_mime_type("unknown") == DEFAULT_MIME_TYPE == "application/octet-stream"

    def test_lookup_is_case_sensitive(self) -> None:
        """Tokens are case-sensitive."""
        assert get_mime_type("JSON") == DEFAULT_MIME_TYPE

    def test_table_is_read_only(self) -> None:
        """The table cannot be mutated."""
        with pytest.raises(TypeError):
            MIME_TYPES["json"] = "text/plain"  # type: ignore[index]
