"""
Query Command - Run the Matcher Outside a Browser

Fetches the index relative to a results-page URL, reads the query term from
that URL and prints the matches. Works against a built site directory or a
deployed site.
"""

import asyncio
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from static_search.application.use_cases.run_query import RunQueryRequest, RunQueryUseCase
from static_search.domain.entities.search import SearchConfig, DEFAULT_OUTPUT_FILE
from static_search.infrastructure.config.site_manager import SiteConfigManager
from static_search.infrastructure.http_transport import CurlTransport, FileTransport
from static_search.infrastructure.index_fetcher import TransportIndexFetcher
from static_search.infrastructure.page_io import UrlQuerySource
from static_search.presentation.helpers.console_sink import ConsoleRenderSink


def _load_search_config(config_path: str, param: Optional[str], index_file: Optional[str]) -> Optional[SearchConfig]:
    path = Path(config_path)
    if path.exists():
        config = SiteConfigManager(path).get_search()
    elif param:
        config = SearchConfig(search_param=param, search_placeholder='', search_submit_label='')
    else:
        return None

    if param:
        config = replace(config, search_param=param)
    if index_file:
        config = replace(config, output_file=index_file)
    return config


@click.command('query')
@click.argument('page_url')
@click.option(
    '--site-dir',
    '-d',
    type=click.Path(exists=True, file_okay=False),
    help='Serve the index from a built site directory instead of the network'
)
@click.option(
    '--config',
    '-c',
    'config_path',
    default='site.yaml',
    show_default=True,
    help='Site configuration providing the search settings'
)
@click.option('--param', '-p', help='Query-string parameter holding the term')
@click.option('--index-file', help=f'Index file name (default from config, else {DEFAULT_OUTPUT_FILE})')
def query_command(page_url: str, site_dir: Optional[str], config_path: str, param: Optional[str], index_file: Optional[str]) -> None:
    """
    Run a search the way the results page does.

    Examples:
        python main.py query "/search.html?q=cats" --site-dir public

        python main.py query "https://example.com/search.html?q=cats" --param q
    """
    console = Console()

    try:
        config = _load_search_config(config_path, param, index_file)
    except KeyError as e:
        console.print(f"[red]❌ Failed to load search configuration: {e}[/red]")
        raise SystemExit(1)

    if config is None:
        console.print(f"[red]❌ No configuration at {config_path}; pass --param[/red]")
        raise SystemExit(1)

    transport = FileTransport(site_dir) if site_dir else CurlTransport()
    sink = ConsoleRenderSink(console)
    use_case = RunQueryUseCase(
        fetcher=TransportIndexFetcher(page_url, transport),
        query_source=UrlQuerySource(page_url),
        sink=sink,
    )

    response = asyncio.run(use_case.execute(RunQueryRequest(config=config)))
    sink.flush()

    if not response.success:
        raise SystemExit(1)
