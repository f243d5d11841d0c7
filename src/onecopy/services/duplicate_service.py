from typing import Iterable, List
from onecopy.core.models import DuplicateGroup, DuplicateReport, FileRecord


class DuplicateService:
    @staticmethod
    def files_to_delete(report: DuplicateReport) -> List[FileRecord]:
        """
        Keeps the first member of every group and marks the rest for deletion.

        Returns:
            Records of every non-first member, in group order.
        """
        files = []
        for group in report.groups:
            files.extend(group.members[1:])
        return files

    @staticmethod
    def remove_files_from_report(report: DuplicateReport, file_paths: Iterable[str]) -> DuplicateReport:
        """
        Builds a new report without the given paths.

        Groups that contain fewer than 2 files after removal are discarded.
        The input report is left untouched.

        Args:
            report (DuplicateReport): Report to filter.
            file_paths (Iterable[str]): Paths of files to drop.

        Returns:
            DuplicateReport: Report of what is still duplicated.
        """
        removed = set(file_paths)
        updated_groups = []
        dropped = 0
        for group in report.groups:
            remaining = [f for f in group.members if f.path not in removed]
            dropped += len(group.members) - len(remaining)
            if len(remaining) >= 2:
                updated_groups.append(DuplicateGroup(digest=group.digest, size=group.size, members=remaining))
        return DuplicateReport(
            groups=updated_groups,
            scanned_count=report.scanned_count - dropped,
            algorithm=report.algorithm,
        )
