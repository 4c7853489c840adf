# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Convenience wrapper around the faunadb Python client."""

import logging
from collections.abc import Mapping
from typing import Any

from faunadb.client import FaunaClient

from . import query_builder as qb
from .config import FaunaConfig
from .page_request import DEFAULT_PAGE_SIZE, PageRequest

logger = logging.getLogger(__name__)


class FaunaConnection:
    """Wrapper for the faunadb client.

    Every method composes one FQL expression, submits it with
    ``FaunaClient.query`` and returns the decoded response unchanged.
    Driver errors (``faunadb.errors.FaunaError`` and transport errors)
    propagate to the caller as raised.
    """

    @classmethod
    def from_config(cls, config: FaunaConfig) -> "FaunaConnection":
        """Create a FaunaConnection from configuration.

        Args:
            config: FaunaConfig with at least a secret

        Returns:
            Configured FaunaConnection instance

        Raises:
            ValueError: If the configuration is invalid
        """
        config.validate()
        return cls(
            secret=config.secret,
            page_size=config.page_size,
            **config.client_options(),
        )

    def __init__(
        self,
        secret: str | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        **kwargs,
    ):
        """Initialize the connection.

        Args:
            secret: Fauna secret (admin, server or database key)
            page_size: Default page size for paginated operations
            **kwargs: Additional FaunaClient options (domain, scheme, port, timeout)

        Raises:
            ValueError: If secret is missing or page_size is not positive
        """
        if not secret:
            raise ValueError(
                "Fauna secret is required. "
                "Provide the secret of an admin, server or database key."
            )
        if page_size is None or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")

        self.page_size = page_size
        self.client = FaunaClient(secret=secret, **kwargs)
        logger.info(
            "FaunaConnection: client created (options: %s, page_size: %s)",
            sorted(kwargs),
            page_size,
        )

    def _query(self, operation: str, expression: Any) -> Any:
        logger.debug("FaunaConnection: %s", operation)
        try:
            return self.client.query(expression)
        except Exception as e:
            logger.error("FaunaConnection: %s failed - %s", operation, e, exc_info=True)
            raise

    def _size(self, size: int | None) -> int:
        return self.page_size if size is None else size

    def create_db(self, name: str) -> Any:
        """Create a database (requires an admin key).

        Args:
            name: Name of the database

        Returns:
            Database descriptor with ref, ts and name
        """
        return self._query("create_db", qb.build_create_database(name))

    def create_server(self, db_name: str) -> Any:
        """Create a key with the server role for the named database.

        Args:
            db_name: Name of the database the key is for

        Returns:
            Key descriptor, including the new key's secret
        """
        return self._query("create_server", qb.build_create_server_key(db_name))

    def create_collection(self, name: str) -> Any:
        """Create a collection.

        Returns:
            Collection descriptor with ref, ts, history_days and name
        """
        return self._query("create_collection", qb.build_create_collection(name))

    def create_index(self, name: str, src: str, terms: Any = None, values: Any = None) -> Any:
        """Create an index over a collection.

        Args:
            name: Name of the index
            src: Name of the source collection
            terms: Optional index terms, e.g. ``[{"field": ["data", "title"]}]``
            values: Optional index values

        Returns:
            Index descriptor
        """
        return self._query("create_index", qb.build_create_index(name, src, terms, values))

    def create(self, collection: str, docs: Any) -> Any:
        """Create one document or a list of documents in a collection.

        Args:
            collection: Name of the collection
            docs: A document, or a list of documents

        Returns:
            List of created documents
        """
        return self._query("create", qb.build_create(collection, docs))

    def create_with_custom_id(self, collection: str, pairs: Any) -> Any:
        """Create documents with caller-chosen ids.

        Args:
            collection: Name of the collection
            pairs: Sequence of ``(id, document)`` pairs

        Returns:
            List of created documents
        """
        return self._query("create_with_custom_id", qb.build_create_with_custom_id(collection, pairs))

    def get(self, collection: str, ref: Any) -> Any:
        """Retrieve a document by collection and id."""
        return self._query("get", qb.build_get(collection, ref))

    def get_match(self, index: str, value: Any) -> Any:
        """Retrieve the first document whose index terms match ``value``.

        For an index ``posts_by_title`` with term ``title``, a value of
        ``"My Blog Post"`` returns the first post with that title.
        """
        return self._query("get_match", qb.build_get_match(index, value))

    def get_all_refs_by_index(self, index: str, size: int | None = None) -> Any:
        """Return a page of document refs in an index without terms.

        Args:
            index: Name of the index
            size: Page size; the connection default when None

        Returns:
            Page with ``data`` (refs) and optional ``before``/``after`` cursors
        """
        return self._query(
            "get_all_refs_by_index",
            qb.build_all_refs_by_index(index, self._size(size)),
        )

    def get_all_docs_by_index(
        self,
        index: str,
        scope: Any = None,
        term: Any = None,
        size: int | None = None,
        before: Any = None,
        after: Any = None,
    ) -> Any:
        """Return a page of full documents matched by an index.

        Args:
            index: Name of the index
            scope: Optional database ref in which to perform the match
            term: Optional search term for an index with terms
            size: Page size; the connection default when None
            before: Cursor for paging backward. Either a native cursor, a
                ``CompositeCursor`` or a ``{"collection": ..., "ref": ...}`` mapping
            after: Cursor for paging forward, same forms as ``before``

        Only a mapping whose keys are exactly ``collection`` and ``ref`` is
        rewritten into a document ref. A mapping with any other keys (for
        example ``{"collection": ..., "ref": ..., "ts": ...}``) is sent to the
        database as given and will be rejected there; wrap such values in a
        ``CompositeCursor`` instead.

        Returns:
            Page with ``data`` (documents) and optional ``before``/``after`` cursors
        """
        request = PageRequest(
            index=index,
            scope=scope,
            term=term,
            size=size,
            before=before,
            after=after,
        )
        return self.get_page(request)

    def get_page(self, request: PageRequest) -> Any:
        """Execute a PageRequest and return the engine's page unchanged."""
        size = request.resolved_size(self.page_size)
        return self._query(
            f"get_page index={request.index} size={size}",
            qb.build_page_query(request, size),
        )

    def update(self, collection: str, ref: Any, data: Mapping[str, Any]) -> Any:
        """Merge ``data`` into a document's data.

        Returns:
            The updated document
        """
        return self._query("update", qb.build_update(collection, ref, data))

    def replace(self, collection: str, ref: Any, data: Mapping[str, Any]) -> Any:
        """Replace a document's data; fields not in ``data`` are removed.

        Returns:
            The updated document
        """
        return self._query("replace", qb.build_replace(collection, ref, data))

    def delete(self, collection: str, ref: Any) -> Any:
        """Delete a document.

        Returns:
            Snapshot of the deleted document
        """
        return self._query("delete", qb.build_delete(collection, ref))

    def paginate_db(self, db_name: str, size: int | None = None) -> Any:
        return self._query("paginate_db", qb.build_paginate_db(db_name, self._size(size)))

    def get_database(self, db_name: str) -> Any:
        return self._query("get_database", qb.build_get_database(db_name))
