"""
Query Matcher - Domain Service
Case-insensitive substring filtering over index items, independent of any
browser or transport.
"""

from enum import Enum
from typing import Iterable, List, Optional

from ..entities.search import ContentItem
from ..repositories.base import RenderSink


class MatchState(Enum):
    """Per page load: IDLE -> FETCHING -> one of the three terminal states"""
    IDLE = "idle"
    FETCHING = "fetching"
    MATCHED = "matched"
    NO_MATCH = "no_match"
    FETCH_FAILED = "fetch_failed"

    @property
    def is_terminal(self) -> bool:
        return self in (MatchState.MATCHED, MatchState.NO_MATCH, MatchState.FETCH_FAILED)


def resolve_term(raw: Optional[str]) -> str:
    """Missing query parameter means the empty term, which matches every item"""
    return raw if raw is not None else ""


def matches(item: ContentItem, term: str) -> bool:
    needle = term.lower()
    return needle in item.title.lower() or needle in item.summary.lower()


def filter_items(items: Iterable[ContentItem], term: str) -> List[ContentItem]:
    """Items whose title or summary contains term, kept in index order"""
    return [item for item in items if matches(item, term)]


def render_results(sink: RenderSink, results: List[ContentItem]) -> MatchState:
    """
    Render results into sink after clearing it.

    One heading+summary block per result in order, or a single
    "no results" notice when results is empty.
    """
    sink.clear()
    if not results:
        sink.show_no_results()
        return MatchState.NO_MATCH

    for item in results:
        sink.append_result(item)
    return MatchState.MATCHED


__all__ = ["MatchState", "resolve_term", "matches", "filter_items", "render_results"]
