"""
Presentation Commands Module
All CLI command implementations
"""

from .build_command import build_command
from .query_command import query_command

__all__ = [
    'build_command',
    'query_command',
]
