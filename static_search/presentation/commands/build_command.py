"""
Build Command - Static Site Build

Renders the site pages with the search plugin attached and writes the
search index next to them.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from static_search.domain.errors import StaticSearchError
from static_search.infrastructure.config.site_manager import SiteConfigManager
from static_search.infrastructure.plugin import StaticSearchPlugin
from static_search.infrastructure.site_host import ContentStructure, HookRegistry, SiteBuilder, SiteRenderer
from static_search.infrastructure.storage import FileSystemSink


@click.command('build')
@click.option(
    '--config',
    '-c',
    'config_path',
    default='site.yaml',
    show_default=True,
    type=click.Path(dir_okay=False),
    help='Site configuration and content (YAML)'
)
@click.option(
    '--output',
    '-o',
    'output_dir',
    default='public',
    show_default=True,
    type=click.Path(file_okay=False),
    help='Directory the site is written to'
)
@click.option(
    '--theme',
    '-t',
    'theme_dir',
    type=click.Path(exists=True, file_okay=False),
    help='Directory with templates overriding the built-in ones'
)
def build_command(config_path: str, output_dir: str, theme_dir: Optional[str]) -> None:
    """
    Build the site and its search index.

    Examples:
        python main.py build --config site.yaml --output public
    """
    console = Console()

    try:
        manager = SiteConfigManager(Path(config_path))
        site = manager.get_site()
        search = manager.get_search()
        structure = ContentStructure(pages=manager.list_pages(), posts=manager.list_posts())
    except (FileNotFoundError, KeyError) as e:
        console.print(f"[red]❌ Failed to load site configuration: {e}[/red]")
        raise SystemExit(1)

    if not search.is_complete:
        console.print(f"[yellow]⚠️  Search configuration incomplete: {', '.join(search.missing_fields())}[/yellow]")

    sink = FileSystemSink(output_dir)
    registry = HookRegistry()
    StaticSearchPlugin(registry, 'static-search', search, sink=sink).add_insertions()

    renderer = SiteRenderer(site, structure, output_dir, theme_dir=theme_dir)
    try:
        report = SiteBuilder(renderer, registry, sink).build()
    except StaticSearchError as e:
        console.print(f"[red]❌ Build failed: {e}[/red]")
        raise SystemExit(1)

    table = Table(title=f"🏗️  {site.display_name or 'Site'} built")
    table.add_column("Artifact", style="cyan")
    table.add_column("Path")
    for page in report.pages:
        table.add_row("page", str(sink.resolve(page)))
    table.add_row("index", str(sink.resolve(search.output_file)))
    console.print(table)
    console.print(f"[green]✅ {len(structure.pages)} pages and {len(structure.posts)} posts indexed[/green]")
