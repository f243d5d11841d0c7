"""
onecopy — content-addressed duplicate file finder.

Core features:
- Concurrent fingerprinting on a bounded thread pool (SHA-256 by default)
- Deterministic original/duplicate split inside each group of identical files
- Confirmed-only deletion, permanent or to the system trash (via send2trash)
- CLI interface for interactive and scripted usage
"""

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version("onecopy")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from onecopy.commands import DeduplicationCommand
from onecopy.core import (
    ScanParams, HashAlgorithmName, FileRecord, DuplicateGroup, DuplicateReport,
    DeletionOutcome, ScanPreconditionError)
from onecopy.utils.convert_utils import ConvertUtils
from onecopy.services import DuplicateService
from onecopy.services.file_service import FileService

__all__ = [
    "DeduplicationCommand",
    "ScanParams",
    "HashAlgorithmName",
    "FileRecord",
    "DuplicateGroup",
    "DuplicateReport",
    "DeletionOutcome",
    "ScanPreconditionError",
    "ConvertUtils",
    "DuplicateService",
    "FileService",
    "__version__",
]
