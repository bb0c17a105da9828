"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for name-and-content duplicate detection.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import os


# ======================
#  Core Data Models
# ======================

@dataclass
class File:
    """
    Represents a single regular file found during the walk.
    """
    path: str
    size: int  # in bytes
    name: Optional[str] = None

    def __post_init__(self):
        """Automatically extract basename from path if not provided."""
        if self.name is None:
            self.name = os.path.basename(self.path)

    def __repr__(self):
        return f"<File path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class HashResult:
    """
    Outcome of hashing one file: either a hex digest or the reason it is unavailable.
    Unavailable results are never used as grouping keys.
    """
    digest: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.digest is None) == (self.error is None):
            raise ValueError("HashResult needs exactly one of digest or error")
        if self.digest == "":
            raise ValueError("HashResult digest cannot be empty")

    @classmethod
    def computed(cls, digest: str) -> 'HashResult':
        return cls(digest=digest)

    @classmethod
    def unavailable(cls, reason: str) -> 'HashResult':
        return cls(error=reason)

    @property
    def is_available(self) -> bool:
        return self.digest is not None


# Filename -> files sharing that filename, in discovery order
NameGroups = Dict[str, List[File]]


@dataclass
class DuplicateSet:
    """
    Files sharing both filename and content digest.
    """
    name: str
    digest: str
    files: List[File]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this set."""
        return len(self.files)

    @property
    def total_size(self) -> int:
        return sum(f.size for f in self.files)

    @property
    def paths(self) -> List[str]:
        return [f.path for f in self.files]

    def is_duplicate(self) -> bool:
        """True if this set contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateSet name={self.name}, count={len(self.files)}>"


@dataclass
class DuplicateReport:
    """
    Result of a duplicate search: the duplicate sets plus aggregate statistics.
    """
    duplicate_sets: List[DuplicateSet] = field(default_factory=list)
    skipped_files: List[Tuple[str, str]] = field(default_factory=list)  # (path, reason)
    total_time: float = 0.0

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicate_sets)

    @property
    def total_bytes(self) -> int:
        """Bytes across every path that appears in a duplicate set."""
        return sum(s.total_size for s in self.duplicate_sets)

    @property
    def total_files(self) -> int:
        """Number of paths that appear in a duplicate set."""
        return sum(s.duplicate_count for s in self.duplicate_sets)

    @property
    def reclaimable_bytes(self) -> int:
        """
        Approximate reclaimable space: total bytes minus one average-sized file.
        Not the exact sum of (set size - 1) * file size over all sets.
        """
        count = self.total_files
        if count == 0:
            return 0
        average_file_size = self.total_bytes // count
        return self.total_bytes - average_file_size

    def summary(self) -> Tuple[int, int]:
        """(total_bytes, total_files) for the final estimate."""
        return self.total_bytes, self.total_files

    def __repr__(self):
        return f"<DuplicateReport sets={len(self.duplicate_sets)}, files={self.total_files}>"


"""
DTO for scan parameters with built-in validation.
"""

DEFAULT_CHUNK_SIZE = 8192


@dataclass
class ScanParams:
    """Parameters for a duplicate search with validation."""
    root_dir: str
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
