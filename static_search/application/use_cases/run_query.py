"""
Application Use Case - Query Matching
One page load: fetch the index, read the term, filter and render
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...domain.entities.search import ContentItem, SearchConfig
from ...domain.errors import StaticSearchError
from ...domain.repositories.base import IndexFetcher, QuerySource, RenderSink
from ...domain.services.index_builder import deserialize_index
from ...domain.services.query_matcher import MatchState, filter_items, render_results, resolve_term

logger = logging.getLogger(__name__)


@dataclass
class RunQueryRequest:
    """Request DTO for a query run"""
    config: SearchConfig


@dataclass
class RunQueryResponse:
    """Response DTO for a query run"""
    state: MatchState
    term: Optional[str] = None
    results: List[ContentItem] = field(default_factory=list)
    error: Optional[StaticSearchError] = None

    @property
    def success(self) -> bool:
        return self.state != MatchState.FETCH_FAILED


class RunQueryUseCase:
    """
    Browser-side matching, expressed against injected collaborators
    Suspends only while the index is fetched; no retry, no cancellation
    """

    def __init__(self, fetcher: IndexFetcher, query_source: QuerySource, sink: RenderSink):
        self._fetcher = fetcher
        self._query_source = query_source
        self._sink = sink
        self.state = MatchState.IDLE

    async def execute(self, request: RunQueryRequest) -> RunQueryResponse:
        config = request.config
        self.state = MatchState.FETCHING

        # 1. Fetch and decode the whole index before touching the output
        try:
            body = await self._fetcher.fetch(f"./{config.output_file}")
            index = deserialize_index(body)
        except StaticSearchError as e:
            logger.error("Search unavailable: %s", e)
            self._sink.clear()
            self._sink.show_failure(e)
            self.state = MatchState.FETCH_FAILED
            return RunQueryResponse(state=self.state, error=e)

        # 2. Missing parameter is the empty term
        term = resolve_term(self._query_source.get_param(config.search_param))

        # 3. Echo the term back into the search box
        self._sink.set_query_value(term)

        # 4-5. Filter in index order and render
        results = filter_items(index.items, term)
        self.state = render_results(self._sink, results)
        logger.debug("Query %r matched %d of %d items", term, len(results), len(index.items))

        return RunQueryResponse(state=self.state, term=term, results=results)
