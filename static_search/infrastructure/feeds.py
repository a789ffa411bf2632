"""Feed renderers: turn a SearchIndex into the bytes written to the index file."""
from __future__ import annotations

from typing import Any, Dict, Optional

from jinja2 import TemplateError

from ..domain.entities.search import SearchIndex
from ..domain.errors import FeedRenderError
from ..domain.repositories.base import FeedRenderer
from ..domain.services.index_builder import serialize_index


class JsonFeedRenderer(FeedRenderer):
    """Canonical compact JSON."""

    def render(self, index: SearchIndex) -> bytes:
        return serialize_index(index)


class TemplateFeedRenderer(FeedRenderer):
    """Delegates to the host template collaborator.

    The renderer must expose `compile_template(name)` and
    `render_template(compiled, context, global_context, name)`; the returned
    string is written verbatim. Template errors are raised as FeedRenderError.
    """

    def __init__(self, renderer: Any, template_name: str, global_context: Optional[Dict[str, Any]] = None):
        self._renderer = renderer
        self._template_name = template_name
        self._global_context = global_context or {}

    def render(self, index: SearchIndex) -> bytes:
        try:
            compiled = self._renderer.compile_template(self._template_name)
            content = self._renderer.render_template(
                compiled, index.to_dict(), self._global_context, self._template_name
            )
        except TemplateError as e:
            raise FeedRenderError(self._template_name, f"{type(e).__name__}: {e}") from e
        return content.encode('utf-8')


__all__ = ["JsonFeedRenderer", "TemplateFeedRenderer"]
