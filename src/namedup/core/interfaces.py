"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search.
These protocols enforce structural typing using Python's `typing.Protocol` so the
scanner, hasher, grouper and finder can be swapped independently in tests.

Key Components:
---------------
- HashAlgorithm: Factory for incremental hash accumulators (SHA-256 by default).
- Hasher: Interface for computing the full content digest of a file.
- FileScanner: Interface for walking a directory and indexing files by filename.
- FileGrouper: Interface for splitting a name bucket into hash sub-groups and
  recording the files it could not read.
- DuplicateFinder: Interface for the engine that turns name buckets into duplicate sets.
"""

from typing import Protocol, List, Dict, Tuple
from namedup.core.models import File, HashResult, NameGroups, DuplicateReport


# ===== Interfaces =====

class HashAccumulator(Protocol):
    """Incremental digest state, as returned by hashlib constructors."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in a different hash function without affecting the
    grouping logic.
    """

    @staticmethod
    def new() -> HashAccumulator:
        """Returns a fresh accumulator."""
        ...


class Hasher(Protocol):
    """Interface for hashing the whole content of a file."""
    def compute_full_hash(self, file: File) -> HashResult: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and indexing regular files by filename.
    """
    def scan(self) -> NameGroups:
        """
        Scan files from the configured directory.

        Returns:
            Mapping from filename to the files sharing it, in discovery order.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping the files of one name bucket by content digest.
    """
    skipped_files: List[Tuple[str, str]]

    def group_by_full_hash(self, files: List[File]) -> Dict[str, List[File]]:
        """Group files by their full content digest, keeping groups of 2+ files."""
        ...


class DuplicateFinder(Protocol):
    """
    Interface for the duplicate search engine.
    """
    def find_duplicates(
        self,
        name_groups: NameGroups
    ) -> DuplicateReport:
        """
        Hash every name bucket with 2+ files and collect the duplicate sets.

        Args:
            name_groups: Output of FileScanner.scan().

        Returns:
            DuplicateReport with duplicate sets and aggregate statistics.
        """
        ...
