"""
Core duplicate search engine — scanner, hasher, grouper, and finder.

This package contains the whole pipeline of namedup:
- FileScannerImpl: recursive directory walk, regular files indexed by filename
- HasherImpl + Sha256AlgorithmImpl: chunked SHA-256 digests returned as HashResult
- FileGrouperImpl: digest sub-groups inside one name bucket
- DuplicateFinderImpl: name bucket -> digest sub-group -> DuplicateSet
- Models: File, HashResult, DuplicateSet, DuplicateReport and ScanParams

All components are pure Python and only report; nothing is deleted or moved.
"""

from .models import File, HashResult, NameGroups, DuplicateSet, DuplicateReport, ScanParams
from .scanner import FileScannerImpl, ScanError
from .hasher import HasherImpl, Sha256AlgorithmImpl
from .grouper import FileGrouperImpl
from .finder import DuplicateFinderImpl

__all__ = [
    "FileScannerImpl",
    "ScanError",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "FileGrouperImpl",
    "DuplicateFinderImpl",
    "File",
    "HashResult",
    "NameGroups",
    "DuplicateSet",
    "DuplicateReport",
    "ScanParams",
]
