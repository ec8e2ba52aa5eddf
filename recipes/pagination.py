"""Offset cursors and connection envelopes for paged recipe listings.

A cursor is the base64 encoding of an edge's zero-based position in the
current sort order. It names a position, not a recipe, so rows inserted or
removed between two page fetches shift later pages.
"""

import base64
import binascii
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from recipes.conf import recipix_setting
from recipes.errors import MalformedCursor, ValidationError

# Largest offset accepted from a cursor or query parameter. Offset plus page
# size stays well inside every backend's LIMIT/OFFSET range.
MAX_OFFSET = 2**31 - 1


def encode_cursor(offset: int) -> str:
    """Return the opaque cursor for ``offset``."""
    if offset < 0:
        raise ValueError("offset must be non-negative")
    return base64.b64encode(str(offset).encode("ascii")).decode("ascii")


def decode_cursor(cursor: str) -> int:
    """Return the offset encoded in ``cursor`` or raise MalformedCursor."""
    try:
        raw = base64.b64decode(cursor.encode("ascii"), validate=True).decode("ascii")
    except (binascii.Error, UnicodeError, AttributeError):
        raise MalformedCursor()
    if not raw.isdigit():
        raise MalformedCursor()
    offset = int(raw)
    if offset > MAX_OFFSET:
        raise MalformedCursor()
    return offset


@dataclass(frozen=True)
class PageWindow:
    """The half-open slice ``[offset, offset + limit)`` of a result set."""
    offset: int
    limit: int

    @property
    def end(self) -> int:
        return self.offset + self.limit


def window(first: Optional[int] = None, after: Optional[str] = None) -> PageWindow:
    """
    Resolve ``first``/``after`` into a window.

    ``after`` is the cursor of the last edge the caller already has, so the
    window starts one position past it.
    """
    if first is None:
        first = recipix_setting("DEFAULT_PAGE_SIZE")
    if first < 0:
        raise ValidationError("first must be a non-negative integer.")
    first = min(first, recipix_setting("MAX_PAGE_SIZE"))
    offset = decode_cursor(after) + 1 if after else 0
    return PageWindow(offset=offset, limit=first)


def build_connection(items: Sequence[Any], offset: int, total_count: int) -> Dict[str, Any]:
    """Wrap a page of ``items`` starting at ``offset`` in a connection envelope."""
    edges: List[Dict[str, Any]] = [
        {"node": item, "cursor": encode_cursor(offset + index)}
        for index, item in enumerate(items)
    ]
    return {
        "edges": edges,
        "page_info": {
            "has_next_page": offset + len(edges) < total_count,
            "has_previous_page": offset > 0,
            "start_cursor": edges[0]["cursor"] if edges else None,
            "end_cursor": edges[-1]["cursor"] if edges else None,
        },
        "total_count": total_count,
    }
