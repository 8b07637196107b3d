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

"""
Exception classes for genro-headers.

Builder operations either fully succeed or raise before touching the
accumulated headers, so a caught exception leaves the builder exactly as it
was before the failing call.

Module Structure
----------------
1. HeadersError - Base class, catch it to handle anything raised here
2. CORSConfigError - Credentialed CORS requested with the wildcard origin
3. UnknownCacheStrategyError - Cache strategy token outside the closed set

Both concrete errors also inherit from ValueError: they signal a bad argument
value supplied by the caller.

Unknown MIME tokens are NOT errors: they resolve to
``application/octet-stream``.

CORSConfigError
---------------
Browsers reject ``Access-Control-Allow-Credentials: true`` together with
``Access-Control-Allow-Origin: *``. The builder refuses to emit the pair.

Attributes:
    origin (str): The requested origin (always "*" today)
    credentials (bool): The resolved credentials flag

Example:
    >>> build_headers().cors(origin="*", credentials=True)
    Traceback (most recent call last):
        ...
    genro_headers.exceptions.CORSConfigError: CORS: Cannot use credentials ...

UnknownCacheStrategyError
-------------------------
Attributes:
    strategy (str): The unrecognized token

Example:
    >>> get_cache_config("FOREVER")
    Traceback (most recent call last):
        ...
    genro_headers.exceptions.UnknownCacheStrategyError: Unknown cache strategy: 'FOREVER'
"""

__all__ = [
    "CORSConfigError",
    "HeadersError",
    "UnknownCacheStrategyError",
]


class HeadersError(Exception):
    """Base class for all genro-headers errors."""


class CORSConfigError(HeadersError, ValueError):
    """
    Invalid CORS configuration.

    Raised by ``HeadersBuilder.cors`` when credentials resolve to True while
    the origin is the wildcard ``"*"``.

    Attributes:
        origin: Requested Access-Control-Allow-Origin value.
        credentials: Resolved credentials flag.
    """

    def __init__(self, origin: str, credentials: bool) -> None:
        """
        Initialize CORS configuration error.

        Args:
            origin: Requested origin.
            credentials: Resolved credentials flag.
        """
        self.origin = origin
        self.credentials = credentials
        super().__init__(
            f'CORS: Cannot use credentials with wildcard origin "{origin}". '
            "Specify an exact origin or set credentials to False."
        )

    def __repr__(self) -> str:
        """Return detailed string representation."""
        return f"CORSConfigError(origin={self.origin!r}, credentials={self.credentials!r})"


class UnknownCacheStrategyError(HeadersError, ValueError):
    """
    Cache strategy token outside the closed enumeration.

    Attributes:
        strategy: The unrecognized token.
    """

    def __init__(self, strategy: object) -> None:
        self.strategy = strategy
        super().__init__(f"Unknown cache strategy: {strategy!r}")

    def __repr__(self) -> str:
        return f"UnknownCacheStrategyError(strategy={self.strategy!r})"
