"""
Configuration manager for a static site.
Handles the YAML file describing site metadata, search settings and content.
"""
import logging
import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass

from ...domain.entities.search import ContentItem, SearchConfig, DEFAULT_OUTPUT_FILE

logger = logging.getLogger(__name__)


@dataclass
class SiteConfig:
    """Site-wide settings."""
    display_name: str
    domain: str = ''
    logo: str = ''
    author: str = ''
    search_url: str = ''


class SiteConfigManager:
    """Manages site configuration and content from a YAML file."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else Path("site.yaml")
        self._config_data = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if self._config_data is None:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config_data = yaml.safe_load(f) or {}

        return self._config_data

    def _section(self, name: str) -> Dict[str, Any]:
        config = self._load_config()
        if not isinstance(config.get(name), dict):
            raise KeyError(f"Section '{name}' not found in {self.config_path}")
        return config[name]

    def get_site(self) -> SiteConfig:
        """Get site metadata."""
        site = self._section('site')
        return SiteConfig(
            display_name=site.get('name') or '',
            domain=site.get('domain') or '',
            logo=site.get('logo') or '',
            author=site.get('author') or '',
            search_url=site.get('search_url') or ''
        )

    def get_search(self) -> SearchConfig:
        """Get search settings. Blank values are reported, not replaced."""
        search = self._section('search')
        config = SearchConfig(
            search_param=search.get('param') or '',
            search_placeholder=search.get('placeholder') or '',
            search_submit_label=search.get('submit_label') or '',
            search_autofocus=bool(search.get('autofocus', False)),
            output_file=search.get('output_file') or DEFAULT_OUTPUT_FILE,
            feed_template=search.get('feed_template')
        )
        missing = config.missing_fields()
        if missing:
            logger.warning("Search configuration in %s is missing: %s", self.config_path, ', '.join(missing))
        return config

    def list_pages(self) -> List[ContentItem]:
        """All pages in file order."""
        return [ContentItem.from_mapping(p) for p in self._load_config().get('pages') or []]

    def list_posts(self) -> List[ContentItem]:
        """All posts in file order."""
        return [ContentItem.from_mapping(p) for p in self._load_config().get('posts') or []]
