"""
Core deduplication engine — scanner, hasher, grouper and deletion executor.

This package contains the pipeline of onecopy:
- FileScannerImpl: recursive, symlink-free directory traversal in sorted order
- HasherImpl + FingerprinterImpl: full-content digests on a bounded thread pool
- FileGrouperImpl: digest grouping into an immutable DuplicateReport
- DeletionExecutorImpl: confirmed-only removal of every non-original member
- Models: FileRecord, DuplicateGroup, DuplicateReport, DeletionOutcome, ScanParams

All components are pure Python with no console I/O — suitable for CLI and library usage.
"""

from .models import (
    FileRecord, DuplicateGroup, DuplicateReport, DeletionOutcome, ScanParams,
    HashAlgorithmName, ScanPreconditionError)
from .scanner import FileScannerImpl
from .hasher import (
    HasherImpl, FingerprinterImpl, Sha256AlgorithmImpl, Blake2bAlgorithmImpl, XXHashAlgorithmImpl,
    get_algorithm)
from .grouper import FileGrouperImpl
from .deleter import DeletionExecutorImpl

__all__ = [
    "FileScannerImpl",
    "HasherImpl",
    "FingerprinterImpl",
    "Sha256AlgorithmImpl",
    "Blake2bAlgorithmImpl",
    "XXHashAlgorithmImpl",
    "get_algorithm",
    "FileGrouperImpl",
    "DeletionExecutorImpl",
    "FileRecord",
    "DuplicateGroup",
    "DuplicateReport",
    "DeletionOutcome",
    "ScanParams",
    "HashAlgorithmName",
    "ScanPreconditionError",
]
