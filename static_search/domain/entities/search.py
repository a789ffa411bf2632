"""
Domain Entities - Search Objects
Content items, the search index and the configuration that shapes markup
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..errors import ConfigurationIncomplete


DEFAULT_OUTPUT_FILE = "search.json"

# Menu contexts on which the index gets (re)emitted
EMIT_CONTEXTS = ("frontpage", "blogpage")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _field(data: Any, key: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(key)
    return getattr(data, key, None)


@dataclass(frozen=True)
class ContentItem:
    """Value Object for one page or post reduced to its searchable fields"""
    title: str
    summary: str
    url: str

    @classmethod
    def from_mapping(cls, data: Any) -> "ContentItem":
        """Reduce a host page/post record (mapping or object) to title/summary/url"""
        if isinstance(data, ContentItem):
            return data
        return cls(
            title=_text(_field(data, 'title')),
            summary=_text(_field(data, 'summary')),
            url=_text(_field(data, 'url')),
        )

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "summary": self.summary, "url": self.url}


@dataclass(frozen=True)
class SiteMeta:
    """Site-level metadata copied verbatim into the index header"""
    site_name: str = ""
    site_domain: str = ""
    site_logo: str = ""
    site_author: str = ""


@dataclass(frozen=True)
class SearchIndex:
    """
    Search Index - Aggregate Root
    Everything the browser needs to answer a query, built once per site build
    """
    site_name: str
    site_domain: str
    site_logo: str
    site_author: str
    items: Tuple[ContentItem, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape written to search.json"""
        return {
            "siteName": self.site_name,
            "siteDomain": self.site_domain,
            "siteLogo": self.site_logo,
            "siteAuthor": self.site_author,
            "items": [item.to_dict() for item in self.items],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchIndex":
        return cls(
            site_name=_text(data.get("siteName")),
            site_domain=_text(data.get("siteDomain")),
            site_logo=_text(data.get("siteLogo")),
            site_author=_text(data.get("siteAuthor")),
            items=tuple(ContentItem.from_mapping(item) for item in data.get("items", [])),
        )


@dataclass(frozen=True)
class SearchConfig:
    """
    Search Configuration Entity
    Read-only values used to parameterize the rendered forms and script
    """
    search_param: str
    search_placeholder: str
    search_submit_label: str
    search_autofocus: bool = False
    output_file: str = DEFAULT_OUTPUT_FILE
    feed_template: Optional[str] = None

    REQUIRED_FIELDS = ('search_param', 'search_placeholder', 'search_submit_label', 'output_file')

    def missing_fields(self) -> List[str]:
        """Names of required fields that are blank"""
        return [name for name in self.REQUIRED_FIELDS if not _text(getattr(self, name)).strip()]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields()

    def require_complete(self) -> None:
        """Raise ConfigurationIncomplete if any required field is blank"""
        missing = self.missing_fields()
        if missing:
            raise ConfigurationIncomplete(missing)


@dataclass(frozen=True)
class BuildContext:
    """The host's page-group classification for the page being rendered"""
    menu_context: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, menu_context: Optional[Sequence[str]]) -> "BuildContext":
        return cls(tuple(menu_context or ()))

    @property
    def is_listing_view(self) -> bool:
        return len(self.menu_context) == 1 and self.menu_context[0] in EMIT_CONTEXTS
