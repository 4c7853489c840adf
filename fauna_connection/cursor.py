# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Pagination cursors and their normalization into native Fauna references."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from faunadb import query as q

_COMPOSITE_KEYS = frozenset({"collection", "ref"})


@dataclass(frozen=True)
class OpaqueCursor:
    """A cursor already in the engine's native form.

    Typically the ``before`` or ``after`` value of a previous page, or a
    ``faunadb.objects.Ref``. It is submitted exactly as given.
    """

    token: Any


@dataclass(frozen=True)
class CompositeCursor:
    """A document boundary given as a collection name and a document id."""

    collection: str
    ref: Any

    @classmethod
    def from_dict(cls, value: Mapping[str, Any]) -> "CompositeCursor":
        return cls(collection=value["collection"], ref=value["ref"])


Cursor: TypeAlias = OpaqueCursor | CompositeCursor


def as_cursor(value: Any) -> Cursor | None:
    """Coerce a caller-supplied cursor value into a ``Cursor``.

    Args:
        value: A ``Cursor``, a ``{"collection": ..., "ref": ...}`` mapping,
            any native cursor value, or None

    Returns:
        The tagged cursor, or None when no cursor was supplied
    """
    if value is None:
        return None
    if isinstance(value, (OpaqueCursor, CompositeCursor)):
        return value
    # Only the exact two-key shape is composite; anything else is native.
    if isinstance(value, Mapping) and set(value.keys()) == _COMPOSITE_KEYS:
        return CompositeCursor.from_dict(value)
    return OpaqueCursor(value)


def normalize_cursor(cursor: Cursor | None) -> Any:
    """Return the value to submit for a cursor.

    Composite cursors become ``Ref(Collection(collection), ref)``; opaque
    cursors are unwrapped unchanged.
    """
    if cursor is None:
        return None
    if isinstance(cursor, CompositeCursor):
        return q.ref(q.collection(cursor.collection), cursor.ref)
    if isinstance(cursor, OpaqueCursor):
        return cursor.token
    raise TypeError(f"Unsupported cursor type: {type(cursor).__name__}")
