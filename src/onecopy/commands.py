"""
Unified command orchestrator for deduplication.
This is the SINGLE source of truth for business logic — used by the CLI and library callers.
No console I/O here — pure Python.
"""
import logging
import time
from typing import List, Optional

from onecopy.core.models import DuplicateReport, DeletionOutcome, FileRecord, ScanParams
from onecopy.core.interfaces import ProgressCallback, StoppedFlag
from onecopy.core.scanner import FileScannerImpl
from onecopy.core.hasher import FingerprinterImpl, HasherImpl, get_algorithm
from onecopy.core.grouper import FileGrouperImpl
from onecopy.core.deleter import DeletionExecutorImpl

logger = logging.getLogger(__name__)


class DeduplicationCommand:
    """
    Orchestrates the entire deduplication workflow:
    1. Validate the root and discover regular files
    2. Fingerprint them on a worker pool
    3. Group by digest into a DuplicateReport
    4. On explicit confirmation, delete the redundant copies

    Usage:
        params = ScanParams(root_dir="/data")
        command = DeduplicationCommand()
        report = command.execute(params, progress_callback=printer)

        # caller shows the report and asks the user
        outcome = command.delete(report, confirmed=answer == "y")
    """

    def __init__(self, use_trash: bool = False):
        self._deleter = DeletionExecutorImpl(use_trash=use_trash)
        self._records: List[FileRecord] = []  # Local state storage
        self.elapsed: float = 0.0

    def execute(
            self,
            params: ScanParams,
            progress_callback: Optional[ProgressCallback] = None,
            stopped_flag: Optional[StoppedFlag] = None
    ) -> DuplicateReport:
        """
        Scan params.root_dir and return the duplicate report.

        Args:
            params: Validated scan parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            DuplicateReport, empty when nothing is duplicated

        Raises:
            ScanPreconditionError: If the root is missing or not a directory
        """
        start_time = time.time()

        # Step 1: Discover files
        scanner = FileScannerImpl(root_dir=params.root_dir)
        paths = scanner.scan(stopped_flag=stopped_flag, progress_callback=progress_callback)

        # Step 2: Fingerprint on the worker pool
        hasher = HasherImpl(get_algorithm(params.algorithm), block_size=params.block_size)
        fingerprinter = FingerprinterImpl(hasher, workers=params.workers)
        self._records = fingerprinter.fingerprint(
            paths,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        )

        # Step 3: Group
        report = FileGrouperImpl(params.algorithm).build_report(self._records)

        self.elapsed = time.time() - start_time
        logger.info(f"Scan of {params.root_dir} done in {self.elapsed:.2f}s: "
                    f"{len(paths)} files discovered, {len(self._records)} fingerprinted, "
                    f"{len(report)} duplicate groups")
        return report

    def delete(
            self,
            report: DuplicateReport,
            confirmed: bool = False,
            progress_callback: Optional[ProgressCallback] = None
    ) -> DeletionOutcome:
        """Delete redundant copies. A no-op unless confirmed is True."""
        return self._deleter.execute(report, confirmed=confirmed, progress_callback=progress_callback)

    def get_records(self) -> List[FileRecord]:
        """Get fingerprinted records after execution."""
        return self._records.copy()  # Return copy to prevent external mutation
