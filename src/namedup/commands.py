"""
Unified command orchestrator for the duplicate search.
This is the SINGLE source of truth for the scan -> find workflow used by the CLI.
"""
from typing import Optional

from namedup.core.models import ScanParams, DuplicateReport, NameGroups
from namedup.core.scanner import FileScannerImpl
from namedup.core.hasher import HasherImpl
from namedup.core.grouper import FileGrouperImpl
from namedup.core.finder import DuplicateFinderImpl


class DuplicateSearchCommand:
    """
    Orchestrates the entire duplicate search:
    1. Walk the root directory and index files by filename
    2. Hash every name bucket with 2+ files
    3. Collect duplicate sets and totals into a DuplicateReport

    Usage:
        params = ScanParams(root_dir="/data")
        command = DuplicateSearchCommand()
        report = command.execute(params)
    """

    def __init__(self):
        self.name_groups: Optional[NameGroups] = None

    def execute(
            self,
            params: ScanParams
    ) -> DuplicateReport:
        """
        Execute the search with given parameters.

        Args:
            params: Validated scan parameters

        Returns:
            DuplicateReport with duplicate sets and totals

        Raises:
            ScanError: If the root directory does not exist or is not a directory
        """
        scanner = FileScannerImpl(params.root_dir)
        self.name_groups = scanner.scan()

        hasher = HasherImpl(chunk_size=params.chunk_size)
        finder = DuplicateFinderImpl(FileGrouperImpl(hasher))
        return finder.find_duplicates(self.name_groups)

    def get_name_groups(self) -> NameGroups:
        """Get the filename index built by the last execution."""
        if self.name_groups is None:
            raise RuntimeError("Execute command first before accessing name groups")
        return self.name_groups
