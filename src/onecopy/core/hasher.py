"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/hasher.py
Implements file fingerprinting with pluggable hash algorithms.

HasherImpl reads a file once, front to back, in fixed-size blocks and returns
the digest of its full content. FingerprinterImpl runs HasherImpl over many
files on a bounded thread pool and turns the results into FileRecords.
"""

import hashlib
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

import xxhash

from onecopy.core.models import (
    DEFAULT_BLOCK_SIZE, FileRecord, HashAlgorithmName, Stage, default_workers)
from onecopy.core.interfaces import (
    Fingerprinter, HashAlgorithm, HashState, Hasher, ProgressCallback, StoppedFlag)

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.SHA256.value
    digest_size = 32

    def new(self) -> HashState:
        return hashlib.sha256()


class Blake2bAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.BLAKE2B.value
    digest_size = 32

    def new(self) -> HashState:
        return hashlib.blake2b(digest_size=self.digest_size)


class XXHashAlgorithmImpl(HashAlgorithm):
    name = HashAlgorithmName.XXH128.value
    digest_size = 16

    def new(self) -> HashState:
        return xxhash.xxh3_128()


ALGORITHMS: Dict[HashAlgorithmName, type] = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.BLAKE2B: Blake2bAlgorithmImpl,
    HashAlgorithmName.XXH128: XXHashAlgorithmImpl,
}


def get_algorithm(name: HashAlgorithmName) -> HashAlgorithm:
    try:
        return ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    """

    def __init__(self, algorithm: Optional[HashAlgorithm] = None, block_size: int = DEFAULT_BLOCK_SIZE):
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.block_size = block_size

    def compute_digest(self, path: str) -> bytes:
        """
        Digest of the whole file.
        Raises:
            OSError: the file cannot be opened or read
        """
        state = self.algorithm.new()
        with open(path, 'rb') as f:
            for block in iter(lambda: f.read(self.block_size), b''):
                state.update(block)
        return state.digest()


class FingerprinterImpl(Fingerprinter):
    """
    Reads and hashes files on a bounded ThreadPoolExecutor.
    Workers share nothing: each returns Optional[FileRecord] and the calling
    thread collects them in submission order.
    """

    def __init__(self, hasher: Optional[Hasher] = None, workers: Optional[int] = None):
        self.hasher = hasher or HasherImpl()
        self.workers = workers if workers is not None else default_workers()
        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

    def fingerprint(
            self,
            paths: Sequence[str],
            stopped_flag: Optional[StoppedFlag] = None,
            progress_callback: Optional[ProgressCallback] = None
    ) -> List[FileRecord]:
        if stopped_flag and stopped_flag():
            return []

        total = len(paths)
        records: List[FileRecord] = []
        skipped = 0

        logger.debug(f"Fingerprinting {total} files with {self.workers} workers")

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            # map() yields in submission order whatever the completion order
            for processed, record in enumerate(executor.map(self._process_file, paths), 1):
                if stopped_flag and stopped_flag():
                    logger.debug("Fingerprinting interrupted by user")
                    executor.shutdown(wait=True, cancel_futures=True)
                    return []

                if record is not None:
                    records.append(record)
                else:
                    skipped += 1

                if progress_callback:
                    progress_callback(Stage.FINGERPRINTING.value, processed, total)

        logger.debug(f"Fingerprinted {len(records)} files, omitted {skipped}")
        return records

    def _process_file(self, path: str) -> Optional[FileRecord]:
        """
        Stat and hash one file.
        Returns None for empty or unreadable files.
        """
        try:
            size = os.stat(path).st_size
        except OSError as e:
            logger.debug(f"Could not get size of {path}: {e}")
            return None

        # Skip zero-byte files
        if size == 0:
            logger.debug(f"Skipping zero-byte file: {path}")
            return None

        try:
            digest = self.hasher.compute_digest(path)
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return None

        return FileRecord(path=path, size=size, digest=digest)
