"""
Critical tests for DeletionExecutorImpl — data safety first.
The retained original of each group must survive every scenario.
"""
import hashlib
from unittest import mock
from onecopy.core.deleter import DeletionExecutorImpl
from onecopy.core.models import DuplicateGroup, DuplicateReport, FileRecord


def make_report(*groups_of_paths):
    """Builds a report from real files: each argument is a list of Paths with equal content."""
    groups = []
    for paths in groups_of_paths:
        content = paths[0].read_bytes()
        digest = hashlib.sha256(content).digest()
        members = [FileRecord(path=str(p), size=len(content), digest=digest) for p in paths]
        groups.append(DuplicateGroup(digest=digest, size=len(content), members=members))
    return DuplicateReport(groups=groups, scanned_count=sum(len(g) for g in groups))


def write(path, content):
    path.write_bytes(content)
    return path


class TestDeletionExecutor:

    def test_deletes_all_but_first_member(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        c = write(temp_dir / "c.txt", b"hello")
        x = write(temp_dir / "x.txt", b"other content")
        y = write(temp_dir / "y.txt", b"other content")
        report = make_report([a, b, c], [x, y])

        outcome = DeletionExecutorImpl().execute(report, confirmed=True)

        assert a.exists() and x.exists()
        assert not b.exists() and not c.exists() and not y.exists()
        assert outcome.attempted
        assert outcome.deleted_count == 3
        assert outcome.freed_bytes == 5 + 5 + 13
        assert outcome.failures == ()
        assert outcome.deleted_paths == (str(b), str(c), str(y))

    def test_without_confirmation_nothing_is_touched(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        report = make_report([a, b])

        outcome = DeletionExecutorImpl().execute(report)

        assert a.exists() and b.exists()
        assert not outcome.attempted
        assert outcome.deleted_count == 0

    def test_truthy_non_boolean_is_not_confirmation(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        report = make_report([a, b])

        outcome = DeletionExecutorImpl().execute(report, confirmed="yes")

        assert b.exists()
        assert not outcome.attempted

    def test_failure_does_not_abort_pass(self, temp_dir):
        """A vanished duplicate is recorded as a failure; the next file is still deleted."""
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        c = write(temp_dir / "c.txt", b"hello")
        report = make_report([a, b, c])
        b.unlink()

        outcome = DeletionExecutorImpl().execute(report, confirmed=True)

        assert a.exists()
        assert not c.exists()
        assert outcome.deleted_count == 1
        assert outcome.freed_bytes == 5
        assert [path for path, _ in outcome.failures] == [str(b)]

    def test_report_is_not_mutated(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        report = make_report([a, b])
        before = (report.groups, report.total_duplicate_count, report.total_wasted_bytes)

        DeletionExecutorImpl().execute(report, confirmed=True)

        assert (report.groups, report.total_duplicate_count, report.total_wasted_bytes) == before

    def test_never_deletes_a_path_that_is_an_original(self, temp_dir):
        """Even a hand-built report listing an original as a duplicate elsewhere keeps it."""
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        c = write(temp_dir / "c.txt", b"world")
        g1 = DuplicateGroup(digest=b"1", size=5, members=[
            FileRecord(str(a), 5, b"1"), FileRecord(str(b), 5, b"1")])
        g2 = DuplicateGroup(digest=b"2", size=5, members=[
            FileRecord(str(c), 5, b"2"), FileRecord(str(a), 5, b"2")])
        report = DuplicateReport(groups=[g1, g2])

        outcome = DeletionExecutorImpl().execute(report, confirmed=True)

        assert a.exists() and c.exists()
        assert not b.exists()
        assert [path for path, _ in outcome.failures] == [str(a)]

    def test_empty_report(self):
        outcome = DeletionExecutorImpl().execute(DuplicateReport(), confirmed=True)
        assert outcome.attempted
        assert outcome.deleted_count == 0

    def test_trash_mode_uses_send2trash(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        report = make_report([a, b])

        with mock.patch("onecopy.services.file_service.send2trash") as mock_trash:
            outcome = DeletionExecutorImpl(use_trash=True).execute(report, confirmed=True)

        mock_trash.assert_called_once_with(str(b.absolute()))
        assert outcome.deleted_count == 1
        assert a.exists()

    def test_trash_failure_is_recorded(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        report = make_report([a, b])

        with mock.patch("onecopy.services.file_service.send2trash", side_effect=Exception("no trash")):
            outcome = DeletionExecutorImpl(use_trash=True).execute(report, confirmed=True)

        assert outcome.deleted_count == 0
        assert outcome.failures[0][0] == str(b)
        assert "no trash" in outcome.failures[0][1]

    def test_progress_callback(self, temp_dir):
        a = write(temp_dir / "a.txt", b"hello")
        b = write(temp_dir / "b.txt", b"hello")
        c = write(temp_dir / "c.txt", b"hello")
        calls = []

        DeletionExecutorImpl().execute(make_report([a, b, c]), confirmed=True,
                                       progress_callback=lambda *args: calls.append(args))

        assert calls == [("deleting", 1, 2), ("deleting", 2, 2)]
