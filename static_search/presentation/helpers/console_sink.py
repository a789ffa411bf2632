"""
Console Render Sink
Shows query results in the terminal instead of a page
"""

from typing import List, Optional

from rich.console import Console
from rich.table import Table

from ...domain.entities.search import ContentItem
from ...domain.repositories.base import RenderSink


class ConsoleRenderSink(RenderSink):
    """Buffers results and prints them as a rich table on flush()"""

    def __init__(self, console: Console):
        self.console = console
        self.query_value: Optional[str] = None
        self.results: List[ContentItem] = []
        self.no_results = False
        self.error: Optional[Exception] = None

    def clear(self) -> None:
        self.results = []
        self.no_results = False
        self.error = None

    def set_query_value(self, term: str) -> None:
        self.query_value = term

    def append_result(self, item: ContentItem) -> None:
        self.results.append(item)

    def show_no_results(self) -> None:
        self.no_results = True

    def show_failure(self, error: Exception) -> None:
        self.error = error

    def flush(self) -> None:
        if self.error is not None:
            self.console.print(f"[red]❌ Search unavailable: {self.error}[/red]")
            return

        self.console.print(f"[cyan]🔎 Query:[/cyan] {self.query_value!r}")
        if self.no_results:
            self.console.print("[yellow]No Results Found[/yellow]")
            return

        table = Table(title=f"{len(self.results)} result(s)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Summary")
        table.add_column("URL", style="cyan")
        for position, item in enumerate(self.results, 1):
            table.add_row(str(position), item.title, item.summary, item.url)
        self.console.print(table)
