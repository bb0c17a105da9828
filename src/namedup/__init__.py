"""
namedup — finds files that share both filename and content.

Core features:
- Recursive walk that indexes regular files by filename
- SHA-256 content comparison inside each filename bucket
- Report of duplicate sets with an estimate of reclaimable space
- Interactive CLI; reports only, never deletes
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("namedup")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    from pathlib import Path

    # src/namedup/__init__.py -> repository root
    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from namedup.commands import DuplicateSearchCommand
from namedup.core import ScanParams, File, DuplicateSet, DuplicateReport, HashResult

__all__ = [
    "DuplicateSearchCommand",
    "ScanParams",
    "File",
    "DuplicateSet",
    "DuplicateReport",
    "HashResult",
    "__version__",
]
