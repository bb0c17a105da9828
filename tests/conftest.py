"""
Shared fixtures for duplicate search tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'namedup' is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_tree(temp_dir):
    """
    Returns a builder: make_tree({"a/x.txt": b"hello", ...}) writes the files
    under temp_dir (creating parent directories) and returns {relpath: Path}.
    """
    def _make(layout: Dict[str, bytes]) -> Dict[str, Path]:
        created = {}
        for rel_path, content in layout.items():
            path = temp_dir / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
            created[rel_path] = path
        return created

    return _make


@pytest.fixture
def test_files(make_tree) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - report.txt twice with identical content (duplicates)
    - notes.txt twice with different content (same name, not duplicates)
    - photo.jpg and copy.jpg with identical content (different names, not duplicates)
    - data.bin three times with identical content (one set of 3)
    """
    return make_tree({
        "a/report.txt": b"A" * 1024,
        "b/report.txt": b"A" * 1024,
        "a/notes.txt": b"first",
        "b/notes.txt": b"second",
        "a/photo.jpg": b"P" * 300,
        "b/copy.jpg": b"P" * 300,
        "x/data.bin": b"D" * 100,
        "y/data.bin": b"D" * 100,
        "z/deep/data.bin": b"D" * 100,
    })
