"""
CLI Presentation Layer - Main Entry Point
Clean routing to modular commands
"""

import click

from .helpers.logging_setup import configure_logging

# Import commands
from .commands.build_command import build_command
from .commands.query_command import query_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """🔎 Static Search CLI - Site Search Index Builder"""
    configure_logging(verbose)


# Register commands
cli.add_command(build_command)
cli.add_command(query_command)


if __name__ == "__main__":
    cli()
