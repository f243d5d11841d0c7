"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/deleter.py
Removes redundant copies listed in a DuplicateReport.

SAFETY CONTRACT
---------------
• Nothing is touched unless the caller passes confirmed=True
• The first member of a group is never a deletion target
• One failed removal never stops the pass; it lands in DeletionOutcome.failures
• The report is not modified and describes the pre-deletion state
"""

import logging
from typing import List, Optional, Tuple

from onecopy.core.interfaces import DeletionExecutor, ProgressCallback
from onecopy.core.models import DeletionOutcome, DuplicateReport, Stage
from onecopy.services.duplicate_service import DuplicateService
from onecopy.services.file_service import FileService

logger = logging.getLogger(__name__)


class DeletionExecutorImpl(DeletionExecutor):
    """
    Deletes every non-first member of every group, one file at a time.

    Attributes:
        use_trash: Move files to the system trash instead of unlinking them
    """

    def __init__(self, use_trash: bool = False):
        self.use_trash = use_trash

    def execute(
            self,
            report: DuplicateReport,
            confirmed: bool = False,
            progress_callback: Optional[ProgressCallback] = None
    ) -> DeletionOutcome:
        # Only a literal True counts as confirmation
        if confirmed is not True:
            logger.debug("Deletion not confirmed, nothing removed")
            return DeletionOutcome.skipped()

        targets = DuplicateService.files_to_delete(report)
        originals = {group.original.path for group in report.groups}
        remove = FileService.move_to_trash if self.use_trash else FileService.remove_file

        deleted_paths: List[str] = []
        failures: List[Tuple[str, str]] = []
        freed_bytes = 0
        total = len(targets)

        for processed, record in enumerate(targets, 1):
            if record.path in originals:
                # Same path listed as original elsewhere: keep it
                failures.append((record.path, "path is the retained original of a group"))
                logger.warning(f"Refusing to delete retained original: {record.path}")
            else:
                try:
                    remove(record.path)
                    deleted_paths.append(record.path)
                    freed_bytes += record.size
                    logger.debug(f"Deleted: {record.path}")
                except OSError as e:
                    failures.append((record.path, str(e)))
                    logger.warning(f"Unable to delete {record.path}: {e}")

            if progress_callback:
                progress_callback(Stage.DELETING.value, processed, total)

        logger.info(f"Deletion finished: {len(deleted_paths)} deleted, {len(failures)} failed, "
                    f"{freed_bytes} bytes freed")

        return DeletionOutcome(
            deleted_count=len(deleted_paths),
            freed_bytes=freed_bytes,
            failures=tuple(failures),
            deleted_paths=tuple(deleted_paths),
            attempted=True,
        )
