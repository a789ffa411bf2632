import json
import logging
from types import SimpleNamespace

import pytest

from static_search.domain.entities.search import SearchConfig
from static_search.domain.errors import FeedRenderError
from static_search.domain.repositories.base import PluginAPI
from static_search.infrastructure.config.site_manager import SiteConfig
from static_search.infrastructure.plugin import (
    SEARCH_CONTENT_HOOK, SEARCH_INPUT_HOOK, StaticSearchPlugin, site_meta_from
)
from static_search.infrastructure.site_host import ContentStructure, SiteRenderer


CONFIG = SearchConfig(search_param='q', search_placeholder='Search', search_submit_label='Go')


class RecordingAPI(PluginAPI):
    def __init__(self):
        self.hooks = []

    def register_hook(self, point, handler, priority=1):
        self.hooks.append((point, handler, priority))


def make_renderer(menu_context, output_dir='/tmp/out', search_url='/search.html'):
    return SimpleNamespace(
        global_context={'website': {'searchUrl': search_url}, 'config': {'basic': {'logo': '/logo.png'}}},
        site_config=SimpleNamespace(display_name='Pets', domain='https://pets.example'),
        content_structure=SimpleNamespace(
            pages=[{'title': 'About', 'summary': 'Pet blog', 'url': '/about'}],
            posts=[{'title': 'Cats', 'summary': 'About cats', 'url': '/cats'}],
        ),
        menu_context=menu_context,
        output_dir=output_dir,
    )


def test_add_insertions_registers_both_hooks(memory_sink):
    api = RecordingAPI()
    plugin = StaticSearchPlugin(api, 'static-search', CONFIG, sink=memory_sink)
    plugin.add_insertions()

    assert [(p, prio) for p, _, prio in api.hooks] == [(SEARCH_INPUT_HOOK, 1), (SEARCH_CONTENT_HOOK, 1)]
    assert api.hooks[0][1] == plugin.add_search_input
    assert api.hooks[1][1] == plugin.add_search_content


def test_search_input_uses_global_search_url(memory_sink):
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG, sink=memory_sink)
    html = plugin.add_search_input(make_renderer(['post']), {})
    assert 'action="/search.html"' in html


def test_search_input_without_website_context(memory_sink):
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG, sink=memory_sink)
    renderer = SimpleNamespace(global_context=None)
    assert 'action=""' in plugin.add_search_input(renderer, {})


def test_search_content_on_frontpage_writes_index(memory_sink):
    sink = memory_sink
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG, sink=sink)

    html = plugin.add_search_content(make_renderer(['frontpage']), {'siteOwner': 'Jane'})

    assert 'search-page-form' in html
    data = json.loads(sink.files['search.json'])
    assert data['siteName'] == 'Pets'
    assert data['siteDomain'] == 'https://pets.example'
    assert data['siteLogo'] == '/logo.png'
    assert data['siteAuthor'] == 'Jane'
    assert [i['title'] for i in data['items']] == ['About', 'Cats']


def test_search_content_elsewhere_does_not_write_index(memory_sink):
    sink = memory_sink
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG, sink=sink)

    html = plugin.add_search_content(make_renderer(['search']), {})

    assert 'search-page-form' in html
    assert sink.files == {}


def test_plugin_keeps_no_render_state(memory_sink):
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG, sink=memory_sink)
    before = set(vars(plugin))
    plugin.add_search_content(make_renderer(['frontpage']), {})
    plugin.add_search_input(make_renderer(['frontpage']), {})
    assert set(vars(plugin)) == before


def test_default_sink_writes_to_output_dir(tmp_path):
    plugin = StaticSearchPlugin(RecordingAPI(), 'p', CONFIG)
    response = plugin.emit_index(make_renderer(['blogpage'], output_dir=str(tmp_path)), {})

    assert response.emitted
    assert (tmp_path / 'search.json').exists()


def test_feed_template_delegates_to_host_renderer(memory_sink):
    calls = []

    def compile_template(name):
        calls.append(('compile', name))
        return 'compiled'

    def render_template(compiled, context, global_context, name):
        calls.append(('render', compiled, name))
        return 'FEED:' + ','.join(item['title'] for item in context['items'])

    renderer = make_renderer(['frontpage'])
    renderer.compile_template = compile_template
    renderer.render_template = render_template
    sink = memory_sink
    config = SearchConfig('q', 'Search', 'Go', feed_template='search-feed.json')

    StaticSearchPlugin(RecordingAPI(), 'p', config, sink=sink).emit_index(renderer, {})

    assert calls == [('compile', 'search-feed.json'), ('render', 'compiled', 'search-feed.json')]
    assert sink.files['search.json'] == b'FEED:About,Cats'


def test_missing_feed_template_raises_feed_render_error(memory_sink):
    renderer = SiteRenderer(SiteConfig(display_name='Pets'), ContentStructure(), '/tmp/out')
    renderer.menu_context = ['frontpage']
    config = SearchConfig('q', 'Search', 'Go', feed_template='search-feed.json')

    with pytest.raises(FeedRenderError) as excinfo:
        StaticSearchPlugin(RecordingAPI(), 'p', config, sink=memory_sink).emit_index(renderer, {})

    assert excinfo.value.template_name == 'search-feed.json'
    assert 'TemplateNotFound' in excinfo.value.reason
    assert memory_sink.files == {}


def test_incomplete_config_logs_warning(caplog):
    with caplog.at_level(logging.WARNING):
        StaticSearchPlugin(RecordingAPI(), 'p', SearchConfig('q', '', 'Go'))
    assert 'search_placeholder' in caplog.text


def test_site_meta_defaults_to_empty_strings():
    meta = site_meta_from(SimpleNamespace(), None)
    assert (meta.site_name, meta.site_domain, meta.site_logo, meta.site_author) == ('', '', '', '')
