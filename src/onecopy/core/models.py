"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models and domain logic for file scanning and deduplication.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content digest used to fingerprint files.
    """
    SHA256 = "sha256"
    BLAKE2B = "blake2b"
    XXH128 = "xxh128"

    @property
    def display_name(self) -> str:
        """Human-readable name for UI display."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.BLAKE2B: "BLAKE2b-256",
            HashAlgorithmName.XXH128: "xxHash128",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            HashAlgorithmName.SHA256:
                "SHA-256 (cryptographic, default)",
            HashAlgorithmName.BLAKE2B:
                "BLAKE2b with 256-bit output (cryptographic, faster on 64-bit CPUs)",
            HashAlgorithmName.XXH128:
                "xxHash 128-bit (fastest, not collision resistant against crafted input)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    DISCOVERING = "discovering"
    FINGERPRINTING = "fingerprinting"
    DELETING = "deleting"


# =============================
# Exceptions
# =============================

class ScanPreconditionError(RuntimeError):
    """Root path is missing or is not a directory. Raised before any work starts."""


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    A readable, non-empty regular file and the digest of its full content.
    """
    path: str
    size: int  # in bytes
    digest: bytes

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    def __repr__(self):
        return f"<FileRecord path={self.path}, size={self.size}>"


@dataclass(frozen=True)
class DuplicateGroup:
    """
    Files sharing one content digest.
    Members keep discovery order: the first one is the retained original,
    every other member is a duplicate.
    """
    digest: bytes
    size: int
    members: Tuple[FileRecord, ...]

    def __post_init__(self):
        # Accept any sequence, store a tuple
        object.__setattr__(self, "members", tuple(self.members))
        if len(self.members) < 2:
            raise ValueError("A duplicate group needs at least two members")
        for member in self.members:
            if member.digest != self.digest:
                raise ValueError(f"Digest mismatch for {member.path}")
            if member.size != self.size:
                raise ValueError(f"Cannot add file with different size to a group: {member.path}")

    @property
    def original(self) -> FileRecord:
        return self.members[0]

    @property
    def duplicates(self) -> Tuple[FileRecord, ...]:
        return self.members[1:]

    @property
    def duplicate_count(self) -> int:
        """How many members would be removed."""
        return len(self.members) - 1

    @property
    def wasted_bytes(self) -> int:
        return sum(f.size for f in self.duplicates)

    @property
    def hex_digest(self) -> str:
        return self.digest.hex()

    def __len__(self):
        return len(self.members)

    def __repr__(self):
        return f"<DuplicateGroup digest={self.hex_digest[:8]}, size={self.size}, count={len(self.members)}>"


@dataclass(frozen=True)
class DuplicateReport:
    """
    Read-only summary of one scan. Groups are keyed by digest.
    Totals are derived once from the groups.
    """
    groups: Tuple[DuplicateGroup, ...] = ()
    scanned_count: int = 0
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    total_wasted_bytes: int = field(init=False)
    total_duplicate_count: int = field(init=False)

    def __post_init__(self):
        groups = tuple(self.groups)
        seen = set()
        for group in groups:
            if group.digest in seen:
                raise ValueError(f"Digest {group.hex_digest} appears in more than one group")
            seen.add(group.digest)

        object.__setattr__(self, "groups", groups)
        object.__setattr__(self, "total_wasted_bytes", sum(g.wasted_bytes for g in groups))
        object.__setattr__(self, "total_duplicate_count", sum(g.duplicate_count for g in groups))

    @property
    def is_empty(self) -> bool:
        return not self.groups

    def __len__(self):
        return len(self.groups)

    def __iter__(self):
        return iter(self.groups)

    def __repr__(self):
        return (f"<DuplicateReport groups={len(self.groups)}, duplicates={self.total_duplicate_count}, "
                f"wasted={self.total_wasted_bytes}>")


@dataclass(frozen=True)
class DeletionOutcome:
    """
    Result of one deletion pass.
    attempted is False when the pass was skipped for lack of confirmation.
    """
    deleted_count: int = 0
    freed_bytes: int = 0
    failures: Tuple[Tuple[str, str], ...] = ()
    deleted_paths: Tuple[str, ...] = ()
    attempted: bool = False

    @classmethod
    def skipped(cls) -> 'DeletionOutcome':
        return cls()

    @property
    def failed_count(self) -> int:
        return len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures


"""
DTO for scan parameters with built-in validation.
Interface-agnostic — used by the CLI and by library callers.
"""

DEFAULT_BLOCK_SIZE = 1024 * 1024


def default_workers() -> int:
    return os.cpu_count() or 1


@dataclass
class ScanParams:
    """Parameters for a scan with validation."""
    root_dir: str
    workers: int = field(default_factory=default_workers)
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        if self.workers < 1:
            raise ValueError("Worker count must be at least 1")

        if self.block_size < 1:
            raise ValueError("Block size must be positive")

        if not isinstance(self.algorithm, HashAlgorithmName):
            try:
                self.algorithm = HashAlgorithmName(str(self.algorithm).lower())
            except ValueError:
                raise ValueError(f"Unknown hash algorithm: '{self.algorithm}'")

    @staticmethod
    def from_strings(
            root_dir: str,
            workers: Optional[int] = None,
            algorithm: str = HashAlgorithmName.SHA256.value,
    ) -> 'ScanParams':
        """
        Factory method to create params from raw CLI values.
        """
        return ScanParams(
            root_dir=root_dir.strip(),
            workers=workers if workers is not None else default_workers(),
            algorithm=algorithm,
        )
