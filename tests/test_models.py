"""
Unit tests for data models: invariants of groups, derived totals of reports,
and ScanParams validation.
"""
import pytest
from onecopy.core.models import (
    DeletionOutcome, DuplicateGroup, DuplicateReport, FileRecord, HashAlgorithmName, ScanParams)


def rec(path, size, digest):
    return FileRecord(path=path, size=size, digest=digest)


class TestDuplicateGroup:

    def test_first_member_is_original(self):
        group = DuplicateGroup(digest=b"d1", size=10, members=[rec("/a", 10, b"d1"), rec("/b", 10, b"d1")])

        assert group.original.path == "/a"
        assert [f.path for f in group.duplicates] == ["/b"]
        assert group.duplicate_count == 1
        assert group.wasted_bytes == 10

    def test_members_are_stored_as_tuple(self):
        group = DuplicateGroup(digest=b"d1", size=1, members=[rec("/a", 1, b"d1"), rec("/b", 1, b"d1")])
        assert isinstance(group.members, tuple)

    def test_rejects_single_member(self):
        with pytest.raises(ValueError, match="at least two"):
            DuplicateGroup(digest=b"d1", size=1, members=[rec("/a", 1, b"d1")])

    def test_rejects_digest_mismatch(self):
        with pytest.raises(ValueError, match="Digest mismatch"):
            DuplicateGroup(digest=b"d1", size=1, members=[rec("/a", 1, b"d1"), rec("/b", 1, b"d2")])

    def test_rejects_size_mismatch(self):
        with pytest.raises(ValueError, match="different size"):
            DuplicateGroup(digest=b"d1", size=1, members=[rec("/a", 1, b"d1"), rec("/b", 2, b"d1")])

    def test_group_is_immutable(self):
        group = DuplicateGroup(digest=b"d1", size=1, members=[rec("/a", 1, b"d1"), rec("/b", 1, b"d1")])
        with pytest.raises(AttributeError):
            group.size = 5


class TestDuplicateReport:

    def test_totals_are_derived_from_groups(self):
        g1 = DuplicateGroup(digest=b"x", size=5, members=[rec("/a", 5, b"x"), rec("/b", 5, b"x")])
        g2 = DuplicateGroup(digest=b"y", size=7, members=[
            rec("/c", 7, b"y"), rec("/d", 7, b"y"), rec("/e", 7, b"y")])

        report = DuplicateReport(groups=[g1, g2], scanned_count=6)

        assert report.total_duplicate_count == 1 + 2
        assert report.total_wasted_bytes == 5 + 7 * 2
        assert [f.path for g in report for f in g.duplicates] == ["/b", "/d", "/e"]

    def test_empty_report(self):
        report = DuplicateReport()
        assert report.is_empty
        assert report.total_duplicate_count == 0
        assert report.total_wasted_bytes == 0
        assert len(report) == 0

    def test_rejects_duplicate_digest_keys(self):
        g1 = DuplicateGroup(digest=b"x", size=5, members=[rec("/a", 5, b"x"), rec("/b", 5, b"x")])
        g2 = DuplicateGroup(digest=b"x", size=5, members=[rec("/c", 5, b"x"), rec("/d", 5, b"x")])
        with pytest.raises(ValueError, match="more than one group"):
            DuplicateReport(groups=[g1, g2])


class TestDeletionOutcome:

    def test_skipped_outcome_is_not_attempted(self):
        outcome = DeletionOutcome.skipped()
        assert outcome.attempted is False
        assert outcome.deleted_count == 0
        assert outcome.freed_bytes == 0
        assert outcome.ok

    def test_failed_count(self):
        outcome = DeletionOutcome(failures=(("/a", "gone"), ("/b", "denied")), attempted=True)
        assert outcome.failed_count == 2
        assert not outcome.ok


class TestScanParams:

    def test_defaults(self):
        params = ScanParams(root_dir="/data")
        assert params.workers >= 1
        assert params.algorithm is HashAlgorithmName.SHA256
        assert params.block_size == 1024 * 1024

    def test_rejects_empty_root(self):
        with pytest.raises(ValueError, match="Root directory cannot be empty"):
            ScanParams(root_dir="")

    def test_rejects_zero_workers(self):
        with pytest.raises(ValueError, match="Worker count"):
            ScanParams(root_dir="/data", workers=0)

    def test_rejects_zero_block_size(self):
        with pytest.raises(ValueError, match="Block size"):
            ScanParams(root_dir="/data", block_size=0)

    def test_algorithm_from_string(self):
        params = ScanParams(root_dir="/data", algorithm="BLAKE2B")
        assert params.algorithm is HashAlgorithmName.BLAKE2B

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown hash algorithm"):
            ScanParams(root_dir="/data", algorithm="md5")

    def test_from_strings_strips_root_and_fills_workers(self):
        params = ScanParams.from_strings(root_dir="  /data \n", workers=None, algorithm="xxh128")
        assert params.root_dir == "/data"
        assert params.workers >= 1
        assert params.algorithm is HashAlgorithmName.XXH128
