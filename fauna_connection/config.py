# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Configuration for Fauna connections."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .page_request import DEFAULT_PAGE_SIZE

logger = logging.getLogger(__name__)

# FaunaConfig field -> environment variable
ENV_VARS = {
    "secret": "FAUNADB_SECRET_KEY",
    "domain": "FAUNADB_DOMAIN",
    "scheme": "FAUNADB_SCHEME",
    "port": "FAUNADB_PORT",
    "timeout": "FAUNADB_TIMEOUT",
    "page_size": "FAUNADB_PAGE_SIZE",
}

_INT_FIELDS = ("port", "timeout", "page_size")

# Options forwarded verbatim to faunadb.client.FaunaClient
CLIENT_OPTION_KEYS = ("domain", "scheme", "port", "timeout")


@dataclass
class FaunaConfig:
    """Settings for a FaunaConnection.

    Attributes:
        secret: Fauna secret the client authenticates with (required)
        domain: Fauna API host; driver default when None
        scheme: "https" or "http"; driver default when None
        port: API port; driver default when None
        timeout: Request timeout in seconds; driver default when None
        page_size: Default page size for paginated operations
    """
    secret: str | None = None
    domain: str | None = None
    scheme: str | None = None
    port: int | None = None
    timeout: int | None = None
    page_size: int = DEFAULT_PAGE_SIZE

    def was_provided(self, key: str) -> bool:
        """Return True if the key holds a value (distinguishes unset from falsy)."""
        return getattr(self, key, None) is not None

    def client_options(self) -> dict[str, Any]:
        """Return the FaunaClient options that were set."""
        return {key: getattr(self, key) for key in CLIENT_OPTION_KEYS if self.was_provided(key)}

    def with_updates(self, **updates: Any) -> "FaunaConfig":
        """Return a copy with the given non-None values applied.

        Raises:
            AttributeError: If an update names an unknown field
        """
        known = {f.name for f in fields(self)}
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        for key, value in updates.items():
            if key not in known:
                raise AttributeError(
                    f"FaunaConfig has no key '{key}'. Allowed keys: {sorted(known)}"
                )
            if value is not None:
                values[key] = value
        return FaunaConfig(**values)

    def validate(self) -> None:
        """Validate required settings.

        Raises:
            ValueError: If the secret is missing or the page size is not positive
        """
        if not self.secret:
            raise ValueError(
                "Fauna secret is required. "
                f"Provide it explicitly or set {ENV_VARS['secret']}."
            )
        if self.page_size is None or self.page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_VARS[name]} must be an integer, got {raw!r}") from e


def load_fauna_config(
    env: Mapping[str, str] | None = None,
    dotenv_path: str | None = None,
    load_env_file: bool = True,
) -> FaunaConfig:
    """Load a FaunaConfig from environment variables.

    Args:
        env: Mapping to read from instead of ``os.environ``
        dotenv_path: Optional path of a ``.env`` file to load first
        load_env_file: If True and ``env`` is None, populate ``os.environ``
            from a ``.env`` file before reading (existing variables win)

    Returns:
        FaunaConfig built from the environment. The result is not validated;
        call ``validate()`` or pass it to ``FaunaConnection.from_config``.

    Raises:
        ValueError: If an integer setting cannot be parsed
    """
    if env is None:
        if load_env_file:
            path = dotenv_path or find_dotenv(usecwd=True)
            loaded = load_dotenv(dotenv_path=path, override=False) if path else False
            if loaded:
                logger.debug("load_fauna_config: loaded .env file")
        env = os.environ

    values: dict[str, Any] = {}
    for name, var in ENV_VARS.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        values[name] = _parse_int(name, raw) if name in _INT_FIELDS else raw

    config = FaunaConfig(**values)
    logger.debug(
        "load_fauna_config: secret %s, client options %s, page_size %s",
        "set" if config.was_provided("secret") else "missing",
        sorted(config.client_options()),
        config.page_size,
    )
    return config
