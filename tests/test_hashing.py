# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for content hashing."""

import hashlib
import logging

import pytest

from genro_headers.hashing import (
    MD5,
    ROLLING,
    XXHASH,
    ContentHasher,
    HashStrategy,
    hash_content,
    to_bytes,
)

HEX_DIGITS = set("0123456789abcdef")


def _broken(data: bytes) -> str:
    raise RuntimeError("unavailable")


def _fails_after_probe(data: bytes) -> str:
    if data == b"genro-headers":
        return "probe"
    raise RuntimeError("boom")


class TestToBytes:
    """Tests for to_bytes()."""

    def test_str_is_utf8(self) -> None:
        assert to_bytes("café") == "café".encode("utf-8")

    def test_bytes_like(self) -> None:
        assert to_bytes(b"abc") == b"abc"
        assert to_bytes(bytearray(b"abc")) == b"abc"
        assert to_bytes(memoryview(b"abc")) == b"abc"

    def test_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            to_bytes(42)  # type: ignore[arg-type]


class TestStrategies:
    """Tests for the individual digest strategies."""

    def test_md5(self) -> None:
        """md5 strategy is the hex MD5 digest."""
        assert MD5.func(b"hello") == "5d41402abc4b2a76b9719d911017c592"

    def test_rolling_known_values(self) -> None:
        """Rolling hash is h = h * 31 + byte, 8 zero-padded hex digits."""
        assert ROLLING.func(b"") == "00000000"
        assert ROLLING.func(b"a") == "00000061"
        assert ROLLING.func(b"ab") == "00000c21"

    def test_rolling_is_masked_to_32_bits(self) -> None:
        """Long input never exceeds 8 hex digits."""
        digest = ROLLING.func(b"x" * 1000)
        assert len(digest) == 8
        assert set(digest) <= HEX_DIGITS

    def test_xxhash(self) -> None:
        """xxhash strategy matches xxh64 when the package is installed."""
        xxhash = pytest.importorskip("xxhash")
        assert XXHASH.func(b"hello") == xxhash.xxh64(b"hello").hexdigest()


class TestContentHasher:
    """Tests for ContentHasher strategy selection."""

    def test_first_available_strategy_wins(self) -> None:
        """A strategy failing the probe is skipped."""
        hasher = ContentHasher([HashStrategy("broken", _broken), MD5, ROLLING])
        assert hasher.name == "md5"
        assert hasher("hello") == hashlib.md5(b"hello").hexdigest()

    def test_fallback_at_call_time(self, caplog: pytest.LogCaptureFixture) -> None:
        """A strategy failing during a call falls through to the next one."""
        hasher = ContentHasher([HashStrategy("flaky", _fails_after_probe), ROLLING])
        assert hasher.name == "flaky"
        with caplog.at_level(logging.WARNING, logger="genro_headers.hashing"):
            assert hasher(b"a") == "00000061"
        assert "flaky" in caplog.text

    def test_all_strategies_failing_uses_rolling(self) -> None:
        """The rolling hash is the last resort."""
        hasher = ContentHasher([HashStrategy("broken", _broken)])
        assert hasher(b"ab") == "00000c21"

    def test_empty_strategy_list_uses_rolling(self) -> None:
        assert ContentHasher([]).name == "rolling"

    def test_default_prefers_xxhash_when_installed(self) -> None:
        pytest.importorskip("xxhash")
        assert ContentHasher().name == "xxhash"

    def test_default_without_xxhash_uses_md5(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without xxhash the default chain lands on md5."""
        import genro_headers.hashing as hashing

        monkeypatch.setattr(hashing, "HAS_XXHASH", False)
        assert ContentHasher().name == "md5"

    def test_xxhash_strategy_raises_when_flag_is_off(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The xxhash strategy is gated on HAS_XXHASH."""
        import genro_headers.hashing as hashing

        monkeypatch.setattr(hashing, "HAS_XXHASH", False)
        with pytest.raises(RuntimeError, match="xxhash"):
            XXHASH.func(b"hello")

    def test_has_xxhash_reflects_installation(self) -> None:
        import genro_headers.hashing as hashing

        try:
            import xxhash  # noqa: F401
        except ImportError:
            assert hashing.HAS_XXHASH is False
        else:
            assert hashing.HAS_XXHASH is True

    def test_text_and_bytes_share_digest(self) -> None:
        hasher = ContentHasher()
        assert hasher("héllo") == hasher("héllo".encode("utf-8"))

    def test_deterministic_lowercase_hex(self) -> None:
        """Digests are stable, non-empty lowercase hex."""
        first = hash_content("same content")
        assert first == hash_content("same content")
        assert first
        assert set(first) <= HEX_DIGITS

    def test_different_content_differs(self) -> None:
        assert hash_content("a") != hash_content("b")

    def test_repr_lists_strategies(self) -> None:
        assert "rolling" in repr(ContentHasher([ROLLING]))
