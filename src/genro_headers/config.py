# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Runtime configuration - environment signal and CORS allow-list.

The CORS origin resolver needs one environment signal ("is this production?")
plus an optional allow-list. ``HeadersConfig`` gathers them with genro-toolbox
``SmartOptions``.

Config precedence (later overrides earlier):
    1. Built-in DEFAULTS (environment = "development")
    2. Optional YAML config file, ``headers:`` section
    3. Environment variables: GENRO_HEADERS_* and command line arguments
    4. Explicit constructor parameters

Environment variables::

    GENRO_HEADERS_ENVIRONMENT=production
    GENRO_HEADERS_ALLOWED_ORIGINS="https://app.example.com, https://admin.example.com"
    GENRO_HEADERS_ALLOW_ANY_LOCALHOST=off
    GENRO_HEADERS_ALLOW_ANY_PORT=off

Config file::

    headers:
      environment: production
      allowed_origins: "https://app.example.com"

Flags left unset follow the environment: on in development, off in production.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from genro_toolbox import SmartOptions  # type: ignore[import-untyped]

from .utils import parse_flag, split_and_strip

__all__ = ["HeadersConfig", "PRODUCTION"]

PRODUCTION = "production"

DEFAULTS = {"environment": "development"}


def _headers_opts_spec(
    environment: str,
    allowed_origins: str,
    allow_any_localhost: str,
    allow_any_port: str,
) -> None:
    """Reference function for SmartOptions type extraction (no defaults)."""


class HeadersConfig:
    """Environment-aware settings for CORS origin resolution.

    Example:
        >>> config = HeadersConfig(environment="production",
        ...                        allowed_origins=["https://a.test"])
        >>> config.is_development
        False
        >>> config.allow_any_localhost
        False
    """

    __slots__ = ("_opts",)

    def __init__(
        self,
        environment: str | None = None,
        allowed_origins: str | Sequence[str] | None = None,
        allow_any_localhost: bool | None = None,
        allow_any_port: bool | None = None,
        config_file: str | Path | None = None,
        argv: list[str] | None = None,
    ) -> None:
        if allowed_origins is not None and not isinstance(allowed_origins, str):
            allowed_origins = ",".join(allowed_origins)
        self._opts = self._build_config(
            environment=environment,
            allowed_origins=allowed_origins,
            allow_any_localhost=allow_any_localhost,
            allow_any_port=allow_any_port,
            config_file=config_file,
            argv=argv or [],
        )

    def _build_config(
        self,
        environment: str | None,
        allowed_origins: str | None,
        allow_any_localhost: bool | None,
        allow_any_port: bool | None,
        config_file: str | Path | None,
        argv: list[str],
    ) -> SmartOptions:
        """Merge defaults, config file, environment/argv and caller options."""
        env_argv_opts = SmartOptions(_headers_opts_spec, env="GENRO_HEADERS", argv=argv)

        caller_opts = SmartOptions(
            dict(
                environment=environment,
                allowed_origins=allowed_origins,
                allow_any_localhost=allow_any_localhost,
                allow_any_port=allow_any_port,
            ),
            ignore_none=True,
        )

        file_opts = SmartOptions({})
        if config_file is not None and Path(config_file).exists():
            file_opts = SmartOptions(str(config_file))["headers"] or SmartOptions({})

        return SmartOptions(DEFAULTS) + file_opts + env_argv_opts + caller_opts

    @property
    def environment(self) -> str:
        """Environment name, "development" unless configured otherwise."""
        return str(self._opts["environment"] or DEFAULTS["environment"])

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION

    @property
    def is_development(self) -> bool:
        """Anything that is not production counts as development."""
        return not self.is_production

    @property
    def allowed_origins(self) -> list[str]:
        """Configured allow-list, empty when unset."""
        return split_and_strip(self._opts["allowed_origins"])

    @property
    def allow_any_localhost(self) -> bool:
        """Treat localhost, 127.0.0.1 and 0.0.0.0 as the same host."""
        return bool(parse_flag(self._opts["allow_any_localhost"], self.is_development))

    @property
    def allow_any_port(self) -> bool:
        """Accept any port when the hostname matches an allowed origin."""
        return bool(parse_flag(self._opts["allow_any_port"], self.is_development))

    def __repr__(self) -> str:
        return (
            f"HeadersConfig(environment={self.environment!r}, "
            f"allowed_origins={self.allowed_origins!r})"
        )
