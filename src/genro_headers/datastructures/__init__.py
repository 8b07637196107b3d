# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""
Data structures bridging built header sets and ASGI.

Mapping between genro-headers and ASGI::

    HeadersBuilder.build()      →  dict[str, str]
    HeadersBuilder.build_raw()  →  [(b"content-type", b"...")]  (http.response.start)
    HeadersBuilder.build_headers() / headers_from_scope(scope)  →  Headers
"""

from .headers import Headers, headers_from_scope

__all__ = ["Headers", "headers_from_scope"]
