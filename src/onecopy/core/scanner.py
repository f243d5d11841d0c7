"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory traversal using os.walk and pathlib.
Features:
- Validates the root directory before any work starts
- Recursively scans directories without following symbolic links
- Visits directories and files in sorted name order, so discovery is reproducible
- Returns the list of candidate regular files
"""

import os
import stat
import time
import logging
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

# Local imports
from onecopy.core.models import ScanPreconditionError, Stage
from onecopy.core.interfaces import FileScanner, ProgressCallback, StoppedFlag


class FileScannerImpl(FileScanner):
    """
    Walks a directory tree and lists every regular file under it.
    Sizes and content are not read here; see Fingerprinter.

    Attributes:
        root_dir: Root directory to scan
    """

    def __init__(self, root_dir: str):
        self.root_dir = root_dir

    def validate_root(self) -> Path:
        """
        Checks the root precondition.
        Raises:
            ScanPreconditionError: root is missing or not a directory
        """
        root_path = Path(self.root_dir)
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise ScanPreconditionError(error_msg)
        if not root_path.is_dir():
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise ScanPreconditionError(error_msg)
        return root_path

    def scan(self,
             stopped_flag: Optional[StoppedFlag] = None,
             progress_callback: Optional[ProgressCallback] = None) -> List[str]:
        """
        Single-pass directory walk.
        Returns paths of regular files in discovery order.
        """
        logger.debug(f"Root directory: {self.root_dir}")
        root_path = self.validate_root()

        found_files: List[str] = []

        if stopped_flag and stopped_flag():
            logger.debug("Scan cancelled before start")
            return []

        start_time = time.time()

        # followlinks=False keeps symlinked directories out of the walk
        for root, dirs, files in os.walk(str(root_path), onerror=self._on_walk_error):
            if stopped_flag and stopped_flag():
                logger.debug("Scan interrupted by user")
                return []

            dirs.sort()
            for filename in sorted(files):
                path = os.path.join(root, filename)
                if not self._is_regular_file(path):
                    continue
                found_files.append(path)

                if progress_callback:
                    progress_callback(Stage.DISCOVERING.value, len(found_files), None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Discovery finished in {elapsed_time:.2f} seconds: {len(found_files)} files")
        return found_files

    @staticmethod
    def _is_regular_file(path: str) -> bool:
        """
        True for regular files only. Symlinks, sockets, fifos and device
        nodes are skipped, as are entries that vanish before lstat.
        """
        try:
            mode = os.lstat(path).st_mode
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return False

        if stat.S_ISLNK(mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return False
        if not stat.S_ISREG(mode):
            logger.debug(f"Skipping special file: {path}")
            return False
        return True

    @staticmethod
    def _on_walk_error(error: OSError) -> None:
        # Unlistable directories are skipped, the walk goes on
        logger.debug(f"Skipping inaccessible directory: {error.filename}: {error.strerror}")
