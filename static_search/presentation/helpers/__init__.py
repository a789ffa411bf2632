"""
Presentation Layer Helpers
"""

from .console_sink import ConsoleRenderSink
from .logging_setup import configure_logging

__all__ = [
    'ConsoleRenderSink',
    'configure_logging',
]
