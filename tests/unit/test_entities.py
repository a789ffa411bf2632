"""
Unit tests for search domain entities
"""

import pytest
from types import SimpleNamespace

from static_search.domain.entities.search import (
    BuildContext, ContentItem, SearchConfig, SearchIndex, DEFAULT_OUTPUT_FILE
)
from static_search.domain.errors import ConfigurationIncomplete


class TestContentItem:
    """Test reduction of host records to content items"""

    def test_from_mapping_keeps_only_search_fields(self):
        item = ContentItem.from_mapping({'title': 'Cats', 'summary': 'About cats', 'url': '/cats', 'tags': ['x']})
        assert item == ContentItem(title='Cats', summary='About cats', url='/cats')

    def test_from_object(self):
        record = SimpleNamespace(title='Dogs', summary='About dogs', url='/dogs', author='a')
        assert ContentItem.from_mapping(record) == ContentItem('Dogs', 'About dogs', '/dogs')

    def test_missing_fields_become_empty_strings(self):
        item = ContentItem.from_mapping({'title': 'Only title', 'summary': None})
        assert item.summary == ''
        assert item.url == ''

    def test_item_is_immutable(self):
        item = ContentItem('a', 'b', 'c')
        with pytest.raises(Exception):
            item.title = 'changed'


class TestSearchIndex:
    """Test wire shape of the index"""

    def test_to_dict_uses_camel_case_keys_in_order(self):
        index = SearchIndex('Site', 'example.com', '/logo.png', 'Jane', (ContentItem('t', 's', '/u'),))
        data = index.to_dict()
        assert list(data) == ['siteName', 'siteDomain', 'siteLogo', 'siteAuthor', 'items']
        assert data['items'] == [{'title': 't', 'summary': 's', 'url': '/u'}]

    def test_from_dict_inverse(self):
        index = SearchIndex('Site', 'example.com', '', 'Jane', (ContentItem('t', 's', '/u'),))
        assert SearchIndex.from_dict(index.to_dict()) == index


class TestSearchConfig:
    """Test configuration completeness reporting"""

    def test_complete_config(self):
        config = SearchConfig('q', 'Search', 'Go')
        assert config.is_complete
        assert config.output_file == DEFAULT_OUTPUT_FILE
        config.require_complete()

    def test_blank_fields_reported(self):
        config = SearchConfig('q', '  ', '')
        assert config.missing_fields() == ['search_placeholder', 'search_submit_label']
        assert not config.is_complete

    def test_require_complete_raises(self):
        with pytest.raises(ConfigurationIncomplete) as exc:
            SearchConfig('', 'Search', 'Go').require_complete()
        assert exc.value.fields == ['search_param']


class TestBuildContext:
    """Test listing-view classification"""

    @pytest.mark.parametrize('menu_context', [['frontpage'], ['blogpage'], ('frontpage',)])
    def test_listing_views(self, menu_context):
        assert BuildContext.of(menu_context).is_listing_view

    @pytest.mark.parametrize('menu_context', [None, [], ['post'], ['frontpage', 'blogpage'], ['blogpage', 'tag']])
    def test_other_views(self, menu_context):
        assert not BuildContext.of(menu_context).is_listing_view
