"""Query source and render sink that mirror what the results page does in a browser."""
from __future__ import annotations

from html import escape
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from ..domain.entities.search import ContentItem
from ..domain.repositories.base import QuerySource, RenderSink


NO_RESULTS_HTML = '<p>No Results Found</p>'
FAILURE_HTML = '<p class="search-error">Search is currently unavailable.</p>'


class UrlQuerySource(QuerySource):
    """Reads parameters from a page URL's query string (first value wins)."""

    def __init__(self, page_url: str):
        self.page_url = page_url
        self._params = parse_qs(urlparse(page_url).query, keep_blank_values=True)

    def get_param(self, name: str) -> Optional[str]:
        values = self._params.get(name)
        if not values:
            return None
        return values[0]


class HtmlRenderSink(RenderSink):
    """Collects the markup the browser script would put into #search-results."""

    def __init__(self):
        self.query_value: Optional[str] = None
        self.nodes: List[str] = []

    def clear(self) -> None:
        self.nodes = []

    def set_query_value(self, term: str) -> None:
        self.query_value = term

    def append_result(self, item: ContentItem) -> None:
        self.nodes.append(
            f'<h5><a href="{escape(item.url)}">{escape(item.title)}</a></h5><p>{escape(item.summary)}</p>'
        )

    def show_no_results(self) -> None:
        self.nodes.append(NO_RESULTS_HTML)

    def show_failure(self, error: Exception) -> None:
        self.nodes.append(FAILURE_HTML)

    @property
    def html(self) -> str:
        return ''.join(self.nodes)


__all__ = ["UrlQuerySource", "HtmlRenderSink", "NO_RESULTS_HTML", "FAILURE_HTML"]
