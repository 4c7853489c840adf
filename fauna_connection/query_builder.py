# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""FQL expression builders.

Each function composes exactly one expression from its inputs using
``faunadb.query`` primitives. Nothing here talks to the network; the
expressions are submitted by ``FaunaConnection``.
"""

from collections.abc import Mapping
from typing import Any

from faunadb import query as q

from .cursor import normalize_cursor
from .page_request import PageRequest


def document_ref(collection: str, ref: Any) -> Any:
    """Reference to a document by collection name and id."""
    return q.ref(q.collection(collection), ref)


def build_create_database(name: str) -> Any:
    return q.create_database({"name": name})


def build_create_server_key(db_name: str) -> Any:
    return q.create_key({"database": q.database(db_name), "role": "server"})


def build_create_collection(name: str) -> Any:
    return q.create_collection({"name": name})


def build_create_index(name: str, source: str, terms: Any = None, values: Any = None) -> Any:
    """Compose a CreateIndex over the named source collection.

    ``terms`` and ``values`` are only sent when provided.
    """
    params: dict[str, Any] = {"name": name, "source": q.collection(source)}
    if terms is not None:
        params["terms"] = terms
    if values is not None:
        params["values"] = values
    return q.create_index(params)


def build_create(collection: str, docs: Any) -> Any:
    """Compose a Map that creates one document per entry of ``docs``.

    A single mapping is treated as a one-element list, so creating one
    document and creating a batch share the same expression shape.
    """
    documents = list(docs) if isinstance(docs, (list, tuple)) else [docs]
    return q.map_(
        q.lambda_(
            "doc",
            q.create(q.collection(collection), {"data": q.var("doc")}),
        ),
        documents,
    )


def build_create_with_custom_id(collection: str, pairs: Any) -> Any:
    """Compose a Map that creates documents from ``(id, data)`` pairs."""
    return q.map_(
        q.lambda_(
            ["id", "data"],
            q.create(
                q.ref(q.collection(collection), q.var("id")),
                {"data": q.var("data")},
            ),
        ),
        [list(pair) for pair in pairs],
    )


def build_get(collection: str, ref: Any) -> Any:
    return q.get(document_ref(collection, ref))


def build_get_match(index: str, value: Any) -> Any:
    return q.get(q.match(q.index(index), value))


def build_all_refs_by_index(index: str, size: int) -> Any:
    return q.paginate(q.match(q.index(index)), size=size)


def build_match(index: str, scope: Any = None, term: Any = None) -> Any:
    """Compose Match(Index(index, scope), term).

    The scope and term are only included when present.
    """
    index_ref = q.index(index) if scope is None else q.index(index, scope)
    if term is None:
        return q.match(index_ref)
    return q.match(index_ref, term)


def build_page_query(request: PageRequest, size: int) -> Any:
    """Compose the paginated, resolved match for a page request.

    Args:
        request: The page request
        size: Page size to submit, already resolved against the default

    Returns:
        Map(Paginate(Match(...), size, before, after), Lambda(ref, Get(ref)))
    """
    page = q.paginate(
        build_match(request.index, request.scope, request.term),
        size=size,
        before=normalize_cursor(request.before),
        after=normalize_cursor(request.after),
    )
    return q.map_(q.lambda_("ref", q.get(q.var("ref"))), page)


def build_update(collection: str, ref: Any, data: Mapping[str, Any]) -> Any:
    return q.update(document_ref(collection, ref), {"data": data})


def build_replace(collection: str, ref: Any, data: Mapping[str, Any]) -> Any:
    return q.replace(document_ref(collection, ref), {"data": data})


def build_delete(collection: str, ref: Any) -> Any:
    return q.delete(document_ref(collection, ref))


def build_paginate_db(db_name: str, size: int) -> Any:
    return q.paginate(q.database(db_name), size=size)


def build_get_database(db_name: str) -> Any:
    return q.get(q.database(db_name))
