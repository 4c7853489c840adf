# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""fauna-connection.

A thin convenience wrapper around the faunadb Python client: each method
composes one FQL expression and returns the database's response unchanged.
"""

__version__ = "0.1.0"

from .config import FaunaConfig, load_fauna_config
from .connection import FaunaConnection
from .cursor import CompositeCursor, Cursor, OpaqueCursor, as_cursor, normalize_cursor
from .factory import create_fauna_connection
from .page_request import DEFAULT_PAGE_SIZE, PageRequest

__all__ = [
    # Version
    "__version__",
    # Connection
    "FaunaConnection",
    "create_fauna_connection",
    # Configuration
    "FaunaConfig",
    "load_fauna_config",
    # Pagination
    "PageRequest",
    "DEFAULT_PAGE_SIZE",
    "Cursor",
    "OpaqueCursor",
    "CompositeCursor",
    "as_cursor",
    "normalize_cursor",
]
