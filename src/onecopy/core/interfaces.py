"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` to ensure
consistency across modules while maintaining flexibility and modularity.

Key Components:
---------------
- HashAlgorithm: Incremental hash function factory (SHA-256, BLAKE2b, xxHash).
- Hasher: Computes the full-content digest of a single file.
- FileScanner: Walks a directory tree and lists candidate files.
- Fingerprinter: Turns candidate paths into FileRecords using a worker pool.
- FileGrouper: Builds the DuplicateReport from FileRecords.
- DeletionExecutor: Removes every non-original member of every group.
"""

from typing import Protocol, List, Sequence, Optional, Callable
from onecopy.core.models import FileRecord, DuplicateReport, DeletionOutcome

ProgressCallback = Callable[[str, int, Optional[int]], None]
StoppedFlag = Callable[[], bool]


# ===== Interfaces =====

class HashState(Protocol):
    """Running digest state, as returned by hashlib and xxhash constructors."""
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, BLAKE2b or xxHash
    without affecting the rest of the deduplication logic.
    """
    name: str
    digest_size: int

    def new(self) -> HashState:
        """Returns a fresh incremental hash state."""
        ...


class Hasher(Protocol):
    """Interface for hashing the full content of a file."""
    def compute_digest(self, path: str) -> bytes: ...


class FileScanner(Protocol):
    """
    Interface for scanning file systems and collecting candidate files.
    """
    def scan(
        self,
        stopped_flag: Optional[StoppedFlag] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[str]:
        """
        Scan files from the configured directory.

        Args:
            stopped_flag: Function that returns True if operation should be canceled.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Paths of regular files in deterministic discovery order.
        """
        ...


class Fingerprinter(Protocol):
    """Interface for the parallel read + hash stage."""
    def fingerprint(
        self,
        paths: Sequence[str],
        stopped_flag: Optional[StoppedFlag] = None,
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[FileRecord]:
        """
        Returns one FileRecord per readable, non-empty file, in the order of `paths`.
        Unreadable files are omitted.
        """
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping FileRecords by content digest.
    """
    def build_report(self, records: Sequence[FileRecord]) -> DuplicateReport:
        """Group records by digest and keep groups with two or more members."""
        ...


class DeletionExecutor(Protocol):
    """
    Interface for removing redundant copies listed in a report.
    """
    def execute(
        self,
        report: DuplicateReport,
        confirmed: bool = False,
        progress_callback: Optional[ProgressCallback] = None
    ) -> DeletionOutcome:
        """
        Delete every non-first member of every group when confirmed is True.

        Returns:
            DeletionOutcome with counts, freed bytes and per-file failures.
        """
        ...
