# SPDX-License-Identifier: MIT
# Copyright (c) 2025 fauna-connection contributors

"""Page request model for index pagination."""

from dataclasses import dataclass, field
from typing import Any

from .cursor import Cursor, as_cursor

DEFAULT_PAGE_SIZE = 64


@dataclass(frozen=True)
class PageRequest:
    """A request for one page of documents matched by an index.

    Attributes:
        index: Name of the index to match on
        scope: Optional database reference the index lives in
        term: Optional value (or list of values) for the index terms
        size: Page size; None means the connection's default page size
        before: Optional cursor for paging backward
        after: Optional cursor for paging forward
    """

    index: str
    scope: Any = None
    term: Any = None
    size: int | None = None
    before: Cursor | None = field(default=None)
    after: Cursor | None = field(default=None)

    def __post_init__(self):
        # Accept raw cursor values; store them tagged.
        object.__setattr__(self, "before", as_cursor(self.before))
        object.__setattr__(self, "after", as_cursor(self.after))

    def resolved_size(self, default_size: int) -> int:
        """Return the page size to submit, falling back to ``default_size``."""
        return default_size if self.size is None else self.size
