"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups FileRecords by content digest and builds the DuplicateReport.
"""

import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Sequence

from onecopy.core.interfaces import FileGrouper
from onecopy.core.models import DuplicateGroup, DuplicateReport, FileRecord, HashAlgorithmName

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    Pure aggregation over an already collected record sequence.
    Arrival order is kept inside each group, so the first record seen for a
    digest becomes the retained original.
    """

    def __init__(self, algorithm: HashAlgorithmName = HashAlgorithmName.SHA256):
        self.algorithm = algorithm

    def group_by_digest(self, records: Sequence[FileRecord]) -> Dict[bytes, List[FileRecord]]:
        """Groups records by digest, dropping digests seen only once."""
        return self._group_by(records, lambda r: r.digest)

    def build_report(self, records: Sequence[FileRecord]) -> DuplicateReport:
        groups = [
            DuplicateGroup(digest=digest, size=members[0].size, members=members)
            for digest, members in self.group_by_digest(records).items()
        ]
        report = DuplicateReport(groups=groups, scanned_count=len(records), algorithm=self.algorithm)
        logger.debug(f"Grouping done: {len(report)} groups, {report.total_duplicate_count} duplicates "
                     f"from {len(records)} files")
        return report

    @staticmethod
    def _group_by(records: Sequence[FileRecord], key_func: Callable[[FileRecord], Any]) -> Dict[Any, List[FileRecord]]:
        """
        Helper method to group records by any computed key.
        Args:
            records: Records to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            Dict[key, List[FileRecord]] with groups of two or more, in first-seen key order
        """
        groups = defaultdict(list)
        for record in records:
            groups[key_func(record)].append(record)

        return {key: group for key, group in groups.items() if len(group) >= 2}
