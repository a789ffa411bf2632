"""Filesystem storage for build artifacts (the index file and rendered pages)."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..domain.repositories.base import OutputSink

logger = logging.getLogger(__name__)


class FileSystemSink(OutputSink):
    """Writes artifacts under a site output directory.

    Parameters
    ----------
    root: str | Path
        Site output root. Relative output paths are resolved against it.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def resolve(self, output_path: str) -> Path:
        return self.root / output_path

    def write(self, output_path: str, data: Union[bytes, str]) -> None:
        if isinstance(data, str):
            data = data.encode('utf-8')
        path = self.resolve(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'wb') as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)


__all__ = ["FileSystemSink"]
