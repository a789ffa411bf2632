"""
Static Search Plugin - Host Integration
Attaches the search forms and index emission to the host's insertion points.

The host hands each hook a renderer and the page context. The renderer is
expected to expose:

- `global_context`     dict, with `website.searchUrl` and `config.basic.logo`
- `site_config`        object with `display_name` and `domain`
- `content_structure`  object with `pages` and `posts`
- `menu_context`       list of page-group tags for the page being rendered
- `output_dir`         site output root
- `compile_template` / `render_template` when a feed template is configured

Nothing computed during one hook is stored on the plugin; each hook derives
what it needs from its own arguments.
"""

import logging
from typing import Any, Mapping, Optional

from ..application.use_cases.emit_index import (
    EmitSearchIndexRequest, EmitSearchIndexResponse, EmitSearchIndexUseCase
)
from ..domain.entities.search import SearchConfig, SiteMeta
from ..domain.repositories.base import FeedRenderer, OutputSink, PluginAPI
from ..domain.services.index_builder import collect_items
from .feeds import JsonFeedRenderer, TemplateFeedRenderer
from .markup import render_search_content, render_search_input, search_url_from
from .storage import FileSystemSink

logger = logging.getLogger(__name__)

SEARCH_INPUT_HOOK = 'customSearchInput'
SEARCH_CONTENT_HOOK = 'customSearchContent'


def _lookup(obj: Any, *path: str) -> Any:
    for key in path:
        if obj is None:
            return None
        if isinstance(obj, Mapping):
            obj = obj.get(key)
        else:
            obj = getattr(obj, key, None)
    return obj


def site_meta_from(renderer: Any, context: Any) -> SiteMeta:
    """Site header fields for the index, '' where the host has nothing"""
    return SiteMeta(
        site_name=_lookup(renderer, 'site_config', 'display_name') or '',
        site_domain=_lookup(renderer, 'site_config', 'domain') or '',
        site_logo=_lookup(renderer, 'global_context', 'config', 'basic', 'logo') or '',
        site_author=_lookup(context, 'siteOwner') or '',
    )


class StaticSearchPlugin:
    """
    Search plugin registered with the host through PluginAPI
    Renders both forms and writes the index on the listing views
    """

    def __init__(self, api: PluginAPI, name: str, config: SearchConfig, sink: Optional[OutputSink] = None):
        self.api = api
        self.name = name
        self.config = config
        self._sink = sink

        missing = config.missing_fields()
        if missing:
            logger.warning("Plugin %s: search configuration incomplete, missing %s", name, ', '.join(missing))

    def add_insertions(self) -> None:
        self.api.register_hook(SEARCH_INPUT_HOOK, self.add_search_input, 1)
        self.api.register_hook(SEARCH_CONTENT_HOOK, self.add_search_content, 1)

    def add_search_input(self, renderer: Any, context: Any) -> str:
        return render_search_input(self.config, search_url_from(_lookup(renderer, 'global_context')))

    def add_search_content(self, renderer: Any, context: Any) -> str:
        self.emit_index(renderer, context)
        return render_search_content(self.config, search_url_from(_lookup(renderer, 'global_context')))

    def emit_index(self, renderer: Any, context: Any) -> EmitSearchIndexResponse:
        """Write the index if the renderer is on a listing view"""
        use_case = EmitSearchIndexUseCase(
            sink=self._sink or FileSystemSink(renderer.output_dir),
            feed_renderer=self._feed_renderer(renderer),
        )
        request = EmitSearchIndexRequest(
            items=collect_items(
                _lookup(renderer, 'content_structure', 'pages') or [],
                _lookup(renderer, 'content_structure', 'posts') or [],
            ),
            meta=site_meta_from(renderer, context),
            menu_context=_lookup(renderer, 'menu_context') or [],
            output_file=self.config.output_file,
        )
        return use_case.execute(request)

    def _feed_renderer(self, renderer: Any) -> FeedRenderer:
        if self.config.feed_template:
            return TemplateFeedRenderer(renderer, self.config.feed_template, _lookup(renderer, 'global_context'))
        return JsonFeedRenderer()


__all__ = ["StaticSearchPlugin", "site_meta_from", "SEARCH_INPUT_HOOK", "SEARCH_CONTENT_HOOK"]
