#!/usr/bin/env python3
"""
Static Search - site-search add-on for static-site generators
Main entry point following Clean Architecture principles

Architecture Layers:
- Domain: Search entities, index building and query matching
- Application: Use cases and orchestration
- Infrastructure: Storage, transports, markup and the plugin host
- Presentation: User interface (CLI)
"""

from static_search.presentation.cli import cli

if __name__ == "__main__":
    cli()
