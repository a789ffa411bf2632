"""
Static Search - site-search add-on for static-site generators

Architecture Layers:
- Domain: search entities, index building and query matching
- Application: emission and query use cases
- Infrastructure: storage, transports, markup, plugin and local host
- Presentation: User interface (CLI)
"""

__version__ = "1.0.0"
