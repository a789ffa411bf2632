"""
Local Site Host
A small in-process generator that plays the host's role for the plugin:
hook registration, template compilation/rendering and the page build loop.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, Template, select_autoescape
from markupsafe import Markup

from ..domain.entities.search import ContentItem
from ..domain.repositories.base import HookHandler, OutputSink, PluginAPI
from .config.site_manager import SiteConfig

logger = logging.getLogger(__name__)


_DEFAULT_TEMPLATES = {
    'base.html': """<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <title>{{ title }} | {{ website.name }}</title>
</head>
<body>
    <header>
        <a href="/" class="logo">{{ website.name }}</a>
        {{ insertions.customSearchInput }}
    </header>
    <main>
        {% block main %}{% endblock %}
    </main>
</body>
</html>
""",
    'index.html': """{% extends "base.html" %}
{% block main %}
{% for page in pages %}
<article><h2><a href="{{ page.url }}">{{ page.title }}</a></h2><p>{{ page.summary }}</p></article>
{% endfor %}
{% endblock %}
""",
    'blog.html': """{% extends "base.html" %}
{% block main %}
{% for post in posts %}
<article><h2><a href="{{ post.url }}">{{ post.title }}</a></h2><p>{{ post.summary }}</p></article>
{% endfor %}
{% endblock %}
""",
    'search.html': """{% extends "base.html" %}
{% block main %}
<h1>Search</h1>
{{ insertions.customSearchContent }}
{% endblock %}
""",
}

# (template, output path, menu context)
SITE_PAGES: List[Tuple[str, str, List[str]]] = [
    ('index.html', 'index.html', ['frontpage']),
    ('blog.html', 'blog/index.html', ['blogpage']),
    ('search.html', 'search.html', ['search']),
]


class HookRegistry(PluginAPI):
    """PluginAPI implementation; handlers run in priority order, then registration order"""

    def __init__(self):
        self._hooks: Dict[str, List[Tuple[int, int, HookHandler]]] = {}
        self._counter = 0

    def register_hook(self, point: str, handler: HookHandler, priority: int = 1) -> None:
        self._counter += 1
        self._hooks.setdefault(point, []).append((priority, self._counter, handler))
        logger.debug("Registered hook %s (priority %d)", point, priority)

    @property
    def points(self) -> List[str]:
        return list(self._hooks)

    def run(self, point: str, renderer: Any, context: Any) -> str:
        handlers = sorted(self._hooks.get(point, []), key=lambda h: (h[0], h[1]))
        return ''.join(handler(renderer, context) for _, _, handler in handlers)


@dataclass
class ContentStructure:
    pages: List[ContentItem] = field(default_factory=list)
    posts: List[ContentItem] = field(default_factory=list)


class SiteRenderer:
    """
    Renderer instance handed to plugin hooks
    Templates come from theme_dir when given, else from the built-in set
    """

    def __init__(
        self,
        site_config: SiteConfig,
        content_structure: ContentStructure,
        output_dir: Union[str, Path],
        theme_dir: Optional[Union[str, Path]] = None
    ):
        self.site_config = site_config
        self.content_structure = content_structure
        self.output_dir = str(output_dir)
        self.menu_context: List[str] = []
        self.global_context: Dict[str, Any] = {
            'website': {
                'name': site_config.display_name,
                'url': site_config.domain,
                'searchUrl': site_config.search_url,
            },
            'config': {'basic': {'logo': site_config.logo}},
        }

        loaders = [DictLoader(_DEFAULT_TEMPLATES)]
        if theme_dir:
            loaders.insert(0, FileSystemLoader(str(theme_dir)))
        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(['html', 'htm', 'xml']),
        )

    def compile_template(self, name: str) -> Template:
        return self._env.get_template(name)

    def render_template(self, compiled: Template, context: Dict[str, Any], global_context: Dict[str, Any], name: str) -> str:
        logger.debug("Rendering template %s", name)
        return compiled.render({**global_context, **context})


@dataclass
class BuildReport:
    pages: List[str] = field(default_factory=list)


class SiteBuilder:
    """Renders every site page, computing all hook insertions for each one"""

    def __init__(self, renderer: SiteRenderer, registry: HookRegistry, sink: OutputSink):
        self.renderer = renderer
        self.registry = registry
        self._sink = sink

    def _page_context(self, title: str) -> Dict[str, Any]:
        structure = self.renderer.content_structure
        return {
            'title': title,
            'siteOwner': self.renderer.site_config.author,
            'pages': structure.pages,
            'posts': structure.posts,
        }

    def render_page(self, template_name: str, menu_context: List[str]) -> str:
        self.renderer.menu_context = list(menu_context)
        context = self._page_context(menu_context[0].title() if menu_context else '')
        context['insertions'] = {
            point: Markup(self.registry.run(point, self.renderer, context))
            for point in self.registry.points
        }
        compiled = self.renderer.compile_template(template_name)
        return self.renderer.render_template(compiled, context, self.renderer.global_context, template_name)

    def build(self) -> BuildReport:
        report = BuildReport()
        for template_name, output_path, menu_context in SITE_PAGES:
            html = self.render_page(template_name, menu_context)
            self._sink.write(output_path, html.encode('utf-8'))
            report.pages.append(output_path)
        logger.info("Built %d pages into %s", len(report.pages), self.renderer.output_dir)
        return report


__all__ = ["HookRegistry", "ContentStructure", "SiteRenderer", "SiteBuilder", "BuildReport", "SITE_PAGES"]
