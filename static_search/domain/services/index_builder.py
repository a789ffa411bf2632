"""
Index Builder - Domain Service
Pure functions that decide when to emit the index and what it contains.

Index format (JSON, compact, UTF-8):
{
  "siteName": "...", "siteDomain": "...", "siteLogo": "...", "siteAuthor": "...",
  "items": [{"title": "...", "summary": "...", "url": "..."}, ...]
}

Items are pages followed by posts, in the order the host produced them.
The index is always recomputed in full, so writing it twice is harmless.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List, Sequence, Union

from ..entities.search import BuildContext, ContentItem, SearchIndex, SiteMeta
from ..errors import IndexDecodeError


_ITEM_FIELDS = ("title", "summary", "url")


def collect_items(pages: Iterable[Any], posts: Iterable[Any]) -> List[ContentItem]:
    """Concatenate pages then posts, reducing each record to a ContentItem."""
    items = [ContentItem.from_mapping(page) for page in pages or []]
    items.extend(ContentItem.from_mapping(post) for post in posts or [])
    return items


def build_index(items: Iterable[ContentItem], meta: SiteMeta) -> SearchIndex:
    """Build the SearchIndex for items; total, an empty list gives an empty index."""
    return SearchIndex(
        site_name=meta.site_name,
        site_domain=meta.site_domain,
        site_logo=meta.site_logo,
        site_author=meta.site_author,
        items=tuple(items),
    )


def should_emit(build_context: Union[BuildContext, Sequence[str], None]) -> bool:
    """True iff the context is exactly ["frontpage"] or exactly ["blogpage"]."""
    if not isinstance(build_context, BuildContext):
        build_context = BuildContext.of(build_context)
    return build_context.is_listing_view


def serialize_index(index: SearchIndex) -> bytes:
    return json.dumps(index.to_dict(), ensure_ascii=False, separators=(',', ':')).encode('utf-8')


def deserialize_index(data: Union[bytes, str]) -> SearchIndex:
    """Decode an index document, validating all of it before returning.

    Raises
    ------
    IndexDecodeError
        If the body is not JSON, or does not have the SearchIndex shape.
    """
    try:
        if isinstance(data, bytes):
            data = data.decode('utf-8')
        doc = json.loads(data)
    except (UnicodeDecodeError, ValueError) as e:
        raise IndexDecodeError(f"Search index is not valid JSON: {e}") from e

    if not isinstance(doc, dict):
        raise IndexDecodeError("Search index root must be a JSON object")

    items = doc.get('items')
    if not isinstance(items, list):
        raise IndexDecodeError("Search index is missing an 'items' list")

    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise IndexDecodeError(f"Item {position} is not an object")
        for name in _ITEM_FIELDS:
            if not isinstance(item.get(name), str):
                raise IndexDecodeError(f"Item {position} has no string '{name}'")

    return SearchIndex.from_dict(doc)


__all__ = ["collect_items", "build_index", "should_emit", "serialize_index", "deserialize_index"]
