"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Splits a name bucket into hash sub-groups using File objects and a Hasher.
"""

import logging
from typing import List, Dict, Any, Callable, Optional, Tuple
from collections import defaultdict

from namedup.core.interfaces import FileGrouper, Hasher
from namedup.core.models import File, HashResult
from namedup.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper using content digests.
    Uses an injected Hasher instance for flexibility and testability.

    Files whose digest is unavailable are left out of every group and
    remembered in `skipped_files`, so two unreadable files never match.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()
        self.skipped_files: List[Tuple[str, str]] = []

    def group_by_full_hash(self, files: List[File]) -> Dict[str, List[File]]:
        """Groups files by full content digest."""
        return self._group_by(files, self._digest_or_skip)

    def _digest_or_skip(self, file: File) -> Optional[str]:
        result: HashResult = self.hasher.compute_full_hash(file)
        if not result.is_available:
            self.skipped_files.append((file.path, result.error))
            return None
        return result.digest

    @staticmethod
    def _group_by(files: List[File], key_func: Callable[[File], Any]) -> Dict[Any, List[File]]:
        """
        Helper method to group files by any computed key.
        Args:
            files: List of files to group
            key_func: Function that computes a hashable key from a File, or None to skip it
        Returns:
            Dict[key, List[File]] with groups of 2+ files, in first-seen order
        """
        groups = defaultdict(list)
        for file in files:
            key = key_func(file)
            if key is not None:
                groups[key].append(file)

        return {key: group for key, group in groups.items() if len(group) >= 2}
