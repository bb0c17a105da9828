"""
Copyright (c) 2026 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/finder.py
Two-pass duplicate search: filename bucket -> content digest sub-group.

Only name buckets with 2+ files are hashed. Every digest sub-group with 2+ files
becomes a DuplicateSet, and its files are folded into the report totals.
Buckets are visited in the order the scanner discovered them, so the same tree
always produces the same sets in the same order.
"""

import time
import logging
from namedup.core.interfaces import DuplicateFinder, FileGrouper
from namedup.core.grouper import FileGrouperImpl
from namedup.core.models import NameGroups, DuplicateReport, DuplicateSet

logger = logging.getLogger(__name__)


class DuplicateFinderImpl(DuplicateFinder):
    def __init__(self, grouper: FileGrouper = None):
        self.grouper = grouper or FileGrouperImpl()

    def find_duplicates(
            self,
            name_groups: NameGroups
    ) -> DuplicateReport:
        start_time = time.time()
        report = DuplicateReport()

        candidates = {name: files for name, files in name_groups.items() if len(files) >= 2}
        total_files = sum(len(files) for files in candidates.values())
        logger.debug(f"{len(candidates)} names shared by {total_files} files need hashing")

        self.grouper.skipped_files = []
        for name, files in candidates.items():
            hash_groups = self.grouper.group_by_full_hash(files)
            for digest, same_content in hash_groups.items():
                report.duplicate_sets.append(DuplicateSet(name=name, digest=digest, files=same_content))

        report.skipped_files = list(self.grouper.skipped_files)
        report.total_time = time.time() - start_time

        if report.skipped_files:
            logger.warning(f"Skipped {len(report.skipped_files)} unreadable files")
        logger.debug(f"Found {len(report.duplicate_sets)} duplicate sets "
                     f"in {report.total_time:.3f}s")
        return report
