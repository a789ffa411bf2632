"""
Domain Interfaces
Collaborators the search core depends on, following Dependency Inversion
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..entities.search import ContentItem, SearchIndex


# Hook handler signature: (renderer, context) -> html
HookHandler = Callable[[Any, Any], str]


class PluginAPI(ABC):
    """
    Capability injected by the host generator
    The only way the plugin attaches itself to the host lifecycle
    """

    @abstractmethod
    def register_hook(self, point: str, handler: HookHandler, priority: int = 1) -> None:
        """Register handler to be called when the host reaches insertion point"""
        pass


class OutputSink(ABC):
    """Storage collaborator that persists build artifacts"""

    @abstractmethod
    def write(self, output_path: str, data: bytes) -> None:
        """Write data to output_path, creating directories and overwriting"""
        pass


class FeedRenderer(ABC):
    """Turns a SearchIndex into the bytes of the index file"""

    @abstractmethod
    def render(self, index: SearchIndex) -> bytes:
        pass


class IndexFetcher(ABC):
    """Retrieves the raw index document relative to the current page"""

    @abstractmethod
    async def fetch(self, relative_url: str) -> bytes:
        """Return the body of relative_url; raise IndexFetchError on failure"""
        pass


class QuerySource(ABC):
    """Read access to the current page's query string"""

    @abstractmethod
    def get_param(self, name: str) -> Optional[str]:
        """Value of the named parameter, or None when absent"""
        pass


class RenderSink(ABC):
    """
    Output surface for query results
    The browser equivalent is the search box plus the #search-results element
    """

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def set_query_value(self, term: str) -> None:
        """Pre-fill the visible search box"""
        pass

    @abstractmethod
    def append_result(self, item: ContentItem) -> None:
        pass

    @abstractmethod
    def show_no_results(self) -> None:
        pass

    @abstractmethod
    def show_failure(self, error: Exception) -> None:
        pass
