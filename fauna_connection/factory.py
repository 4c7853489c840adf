# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Factory for creating FaunaConnection instances from configuration."""

import logging
from typing import Any

from .config import FaunaConfig, load_fauna_config
from .connection import FaunaConnection

logger = logging.getLogger(__name__)


def create_fauna_connection(config: FaunaConfig | None = None, **kwargs: Any) -> FaunaConnection:
    """Create a FaunaConnection.

    Args:
        config: Optional FaunaConfig. If None, it is read from the environment
                (FAUNADB_SECRET_KEY, FAUNADB_DOMAIN, ...), including a .env file.
        **kwargs: Explicit settings (secret, domain, scheme, port, timeout,
                  page_size). Explicit values take precedence over the config.

    Returns:
        FaunaConnection instance

    Raises:
        ValueError: If no secret is available or a setting is invalid
        AttributeError: If a keyword names an unknown setting
    """
    if config is None:
        config = load_fauna_config()

    if kwargs:
        config = config.with_updates(**kwargs)

    connection = FaunaConnection.from_config(config)
    logger.debug("create_fauna_connection: created connection")
    return connection
