"""
Domain Errors
Failures the search core can surface to its callers
"""

from typing import Iterable, Optional


class StaticSearchError(Exception):
    """Base class for every error raised by the search core"""


class ConfigurationIncomplete(StaticSearchError):
    """One or more required search settings are blank"""

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Search configuration incomplete: missing {', '.join(self.fields)}")


class IndexFetchError(StaticSearchError):
    """The index file could not be retrieved"""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch search index from {url}: {reason}")


class IndexDecodeError(StaticSearchError):
    """The fetched body is not a valid search index document"""


class FeedRenderError(StaticSearchError):
    """The host template could not produce the index file"""

    def __init__(self, template_name: str, reason: str):
        self.template_name = template_name
        self.reason = reason
        super().__init__(f"Feed template '{template_name}' could not be rendered: {reason}")
