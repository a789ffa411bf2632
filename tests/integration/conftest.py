import pytest
import yaml


@pytest.fixture
def pets_site(tmp_path):
    """A site config with the Cats/Dogs posts, written to tmp_path/site.yaml"""
    data = {
        'site': {'name': 'Pets', 'domain': 'https://pets.example', 'logo': '', 'author': 'Jane', 'search_url': '/search.html'},
        'search': {'param': 'q', 'placeholder': 'Search', 'submit_label': 'Go', 'output_file': 'search.json'},
        'pages': [],
        'posts': [
            {'title': 'Cats', 'summary': 'About cats', 'url': '/cats'},
            {'title': 'Dogs', 'summary': 'About dogs', 'url': '/dogs'},
        ],
    }
    path = tmp_path / 'site.yaml'
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding='utf-8')
    return path
