# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""genro-headers - Fluent builder for HTTP response headers.

Main components:
    HeadersBuilder: Chainable accumulator, ``build()`` returns a plain dict
    build_headers / quick_headers: Builder factories
    common_headers: Presets (css, api, html, feed, download...)

Lookups:
    get_mime_type: Content-type token or extension to MIME type
    get_cache_config: Cache strategy token to Cache-Control/Expires

Helpers:
    ContentHasher / hash_content: ETag digests (xxhash, md5, rolling fallback)
    get_cors_origin / resolve_cors_origin: Environment-aware CORS origin choice
    HeadersConfig: GENRO_HEADERS_* configuration

Usage:
    from genro_headers import build_headers, common_headers

    headers = build_headers().content_type("json").cache("API_RESPONSE").cors().build()
    headers = common_headers.css(stylesheet).build(stylesheet)
"""

__version__ = "0.1.0"

from .builder import HeadersBuilder
from .cache_strategies import CACHE_CONFIGS, CacheConfig, get_cache_config
from .config import HeadersConfig
from .cors import get_cors_origin, request_origin, resolve_cors_origin
from .datastructures import Headers, headers_from_scope
from .exceptions import CORSConfigError, HeadersError, UnknownCacheStrategyError
from .factory import build_headers, quick_headers
from .hashing import ContentHasher, HashStrategy, hash_content
from .mime_types import DEFAULT_MIME_TYPE, MIME_TYPES, get_mime_type
from .presets import CommonHeaders, common_headers
from .types import CacheStrategy, ContentType, HeaderSet

__all__ = [
    # Builder
    "HeadersBuilder",
    "build_headers",
    "quick_headers",
    # Presets
    "CommonHeaders",
    "common_headers",
    # Lookup tables
    "CACHE_CONFIGS",
    "CacheConfig",
    "get_cache_config",
    "DEFAULT_MIME_TYPE",
    "MIME_TYPES",
    "get_mime_type",
    # Types
    "CacheStrategy",
    "ContentType",
    "HeaderSet",
    # Hashing
    "ContentHasher",
    "HashStrategy",
    "hash_content",
    # CORS & configuration
    "HeadersConfig",
    "get_cors_origin",
    "request_origin",
    "resolve_cors_origin",
    # Data structures
    "Headers",
    "headers_from_scope",
    # Exceptions
    "CORSConfigError",
    "HeadersError",
    "UnknownCacheStrategyError",
]
