# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for exception classes."""

import pytest

from genro_headers.exceptions import (
    CORSConfigError,
    HeadersError,
    UnknownCacheStrategyError,
)


class TestCORSConfigError:
    """Tests for CORSConfigError class."""

    def test_attributes(self) -> None:
        exc = CORSConfigError("*", True)
        assert exc.origin == "*"
        assert exc.credentials is True

    def test_message(self) -> None:
        """Message explains how to fix the configuration."""
        message = str(CORSConfigError("*", True))
        assert "wildcard" in message
        assert "credentials" in message

    def test_hierarchy(self) -> None:
        exc = CORSConfigError("*", True)
        assert isinstance(exc, HeadersError)
        assert isinstance(exc, ValueError)

    def test_repr(self) -> None:
        assert repr(CORSConfigError("*", True)) == "CORSConfigError(origin='*', credentials=True)"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(HeadersError):
            raise CORSConfigError("*", True)


class TestUnknownCacheStrategyError:
    """Tests for UnknownCacheStrategyError class."""

    def test_attributes_and_message(self) -> None:
        exc = UnknownCacheStrategyError("FOREVER")
        assert exc.strategy == "FOREVER"
        assert str(exc) == "Unknown cache strategy: 'FOREVER'"

    def test_hierarchy(self) -> None:
        exc = UnknownCacheStrategyError("X")
        assert isinstance(exc, HeadersError)
        assert isinstance(exc, ValueError)

    def test_repr(self) -> None:
        assert repr(UnknownCacheStrategyError("X")) == "UnknownCacheStrategyError(strategy='X')"
