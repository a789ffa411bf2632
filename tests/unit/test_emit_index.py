import json
import logging

from static_search.application.use_cases.emit_index import EmitSearchIndexRequest, EmitSearchIndexUseCase
from static_search.domain.entities.search import ContentItem, SiteMeta
from static_search.infrastructure.feeds import JsonFeedRenderer


ITEMS = [ContentItem('About', 'a', '/about'), ContentItem('Cats', 'About cats', '/cats')]


def make_request(menu_context, output_file='search.json'):
    return EmitSearchIndexRequest(items=ITEMS, meta=SiteMeta(site_name='S'), menu_context=menu_context, output_file=output_file)


def test_emits_on_frontpage(memory_sink):
    sink = memory_sink
    response = EmitSearchIndexUseCase(sink, JsonFeedRenderer()).execute(make_request(['frontpage']))

    assert response.emitted is True
    assert response.output_path == 'search.json'
    assert response.item_count == 2
    data = json.loads(sink.files['search.json'])
    assert [i['url'] for i in data['items']] == ['/about', '/cats']


def test_skips_other_views(caplog, memory_sink):
    sink = memory_sink
    with caplog.at_level(logging.DEBUG):
        response = EmitSearchIndexUseCase(sink, JsonFeedRenderer()).execute(make_request(['post']))

    assert response.emitted is False
    assert sink.files == {}
    assert 'Skipping search index' in caplog.text


def test_emitting_twice_is_idempotent(memory_sink):
    sink = memory_sink
    use_case = EmitSearchIndexUseCase(sink, JsonFeedRenderer())
    use_case.execute(make_request(['frontpage']))
    first = sink.files['search.json']
    use_case.execute(make_request(['blogpage']))

    assert sink.write_count == 2
    assert sink.files['search.json'] == first


def test_custom_output_file(memory_sink):
    sink = memory_sink
    EmitSearchIndexUseCase(sink, JsonFeedRenderer()).execute(make_request(['blogpage'], output_file='data/idx.json'))
    assert list(sink.files) == ['data/idx.json']
