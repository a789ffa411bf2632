"""
Application Use Case - Search Index Emission
Gate, build, render and hand the index bytes to the storage sink
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ...domain.entities.search import ContentItem, SiteMeta, DEFAULT_OUTPUT_FILE
from ...domain.repositories.base import FeedRenderer, OutputSink
from ...domain.services.index_builder import build_index, should_emit

logger = logging.getLogger(__name__)


@dataclass
class EmitSearchIndexRequest:
    """Request DTO for index emission"""
    items: List[ContentItem]
    meta: SiteMeta
    menu_context: Sequence[str] = field(default_factory=list)
    output_file: str = DEFAULT_OUTPUT_FILE


@dataclass
class EmitSearchIndexResponse:
    """Response DTO for index emission"""
    emitted: bool
    output_path: Optional[str] = None
    item_count: int = 0


class EmitSearchIndexUseCase:
    """
    Writes search.json while the host renders one of the listing views
    Emitting more than once per build simply rewrites the same file
    """

    def __init__(self, sink: OutputSink, feed_renderer: FeedRenderer):
        self._sink = sink
        self._feed_renderer = feed_renderer

    def execute(self, request: EmitSearchIndexRequest) -> EmitSearchIndexResponse:
        if not should_emit(request.menu_context):
            logger.debug("Skipping search index for menu context %s", list(request.menu_context))
            return EmitSearchIndexResponse(emitted=False)

        index = build_index(request.items, request.meta)
        content = self._feed_renderer.render(index)
        self._sink.write(request.output_file, content)

        logger.info("Wrote search index %s (%d items)", request.output_file, len(index.items))
        return EmitSearchIndexResponse(
            emitted=True,
            output_path=request.output_file,
            item_count=len(index.items),
        )
