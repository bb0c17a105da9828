"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the recursive directory walk that indexes regular files by filename.
Features:
- Uses os.walk for traversal and pathlib.Path for per-file checks
- Skips directories that cannot be listed instead of aborting
- Never follows symbolic links (neither to directories nor to files)
- Sorted traversal, so discovery order is reproducible between runs
"""

import os
import time
import logging
from collections import defaultdict
from pathlib import Path
from typing import Optional

from namedup.core.models import File, NameGroups
from namedup.core.interfaces import FileScanner

logger = logging.getLogger(__name__)


class ScanError(RuntimeError):
    """Raised when the root directory cannot be scanned at all."""


class FileScannerImpl(FileScanner):
    """
    Scans a directory recursively and groups regular files by filename.

    Attributes:
        root_dir: Root directory to scan
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def scan(self) -> NameGroups:
        """
        Single-pass walk with debug logging.
        Returns filename -> files, in discovery order.
        """
        logger.debug(f"Root directory: {self.root_dir}")

        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise ScanError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise ScanError(error_msg)

        name_groups = defaultdict(list)
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            dirs.sort()

            for filename in sorted(files):
                file = self._process_file(Path(root) / filename)
                if file:
                    name_groups[file.name].append(file)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.debug(f"Scan completed. Indexed {sum(len(v) for v in name_groups.values())} files "
                     f"under {len(name_groups)} names.")

        return dict(name_groups)

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        # Unlistable directory (usually permission denied): skip it, keep walking siblings
        logger.debug(f"Skipping inaccessible directory: {error}")

    @staticmethod
    def _process_file(path: Path) -> Optional[File]:
        """
        Return a File for a regular, non-symlink file, else None.
        """
        try:
            if path.is_symlink():
                logger.debug(f"Skipping symbolic link: {path}")
                return None
            if not path.is_file():
                logger.debug(f"Skipping non-regular file: {path}")
                return None
            size = path.stat().st_size
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return None

        return File(path=str(path), size=size)

