#!/usr/bin/env python3
"""
onecopy CLI — Command line interface for duplicate file detection and removal.
Drives the same core engine as library callers, with console interaction:
progress bars, the duplicate listing, and the deletion prompt.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Dict, NoReturn, Optional

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from onecopy.core.models import DeletionOutcome, DuplicateReport, ScanParams, ScanPreconditionError
from onecopy.commands import DeduplicationCommand
from onecopy.services.duplicate_service import DuplicateService
from onecopy.utils.convert_utils import ConvertUtils
from onecopy.aliases import ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self._bars: Dict[str, tqdm] = {}

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="onecopy",
            description="onecopy — find files with identical content and remove the extra copies",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            type=str,
            default=None,
            help="Directory to scan. Read from standard input when omitted"
        )
        parser.add_argument(
            "--workers", "-w",
            type=int,
            default=None,
            metavar='',
            help="Number of hashing threads. Default: number of CPUs"
        )
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--delete",
            action="store_true",
            help="After the report, delete every duplicate and keep the first file of each group.\n"
                 "Asks for confirmation unless --yes is given."
        )
        parser.add_argument(
            "--yes", "-y",
            action="store_true",
            help="Skip the confirmation prompt when used with --delete (for automation/scripts)"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move deleted files to the system trash instead of removing them"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show timings and log messages"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.yes and not args.delete:
            self.error_exit("--yes can only be used with --delete")

        if args.trash and not args.delete:
            self.error_exit("--trash can only be used with --delete")

        if args.workers is not None and args.workers < 1:
            self.error_exit("--workers must be at least 1")

        # Prevent interactive confirmation in non-TTY environments
        if args.delete and not args.yes:
            if not self.is_interactive():
                self.error_exit(
                    "Cannot request interactive confirmation in non-interactive session.\n"
                    "Use --yes to proceed without confirmation when piping output or running in scripts."
                )

    @staticmethod
    def is_interactive() -> bool:
        """True when both stdin and stdout are attached to a terminal."""
        return sys.stdin.isatty() and sys.stdout.isatty()

    def read_root(self, args: argparse.Namespace) -> str:
        """Root directory from --input, or from standard input."""
        if args.input is not None:
            directory = args.input.strip()
        else:
            try:
                directory = input("Path to scan: ").strip()
            except EOFError:
                directory = ""

        if not directory:
            self.error_exit("No directory given")

        root_path = Path(directory).expanduser()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {directory}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {directory}")
        return str(root_path)

    def create_params(self, root_dir: str, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams.from_strings(
                root_dir=root_dir,
                workers=args.workers,
                algorithm=ALGORITHM_ALIASES[args.algorithm].value,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - one tqdm bar per stage on stderr."""
        bar = self._bars.get(stage)
        if bar is None:
            bar = tqdm(
                total=total,
                desc=stage.capitalize(),
                unit="files",
                file=sys.stderr,
                disable=self.quiet,
                leave=self.verbose,
            )
            self._bars[stage] = bar
        bar.update(current - bar.n)

    def close_progress(self) -> None:
        for bar in self._bars.values():
            bar.close()
        self._bars.clear()

    def run_scan(self, params: ScanParams, command: DeduplicationCommand) -> DuplicateReport:
        """Execute the scan workflow."""
        if not self.quiet:
            print(f"Searching directory: {ConvertUtils.display_path(params.root_dir)}")

        try:
            with logging_redirect_tqdm():
                report = command.execute(params, progress_callback=self.progress_callback)
        except ScanPreconditionError as e:
            self.error_exit(str(e))
        finally:
            self.close_progress()

        if self.verbose:
            print(f"{report.scanned_count} files fingerprinted with "
                  f"{params.algorithm.display_name} in {command.elapsed:.2f}s")
        return report

    def output_report(self, report: DuplicateReport) -> None:
        """Print every group with its original and duplicates, then the summary."""
        if self.quiet:
            return

        print("\nResults")
        print("=" * 10)

        if report.is_empty:
            print("No duplicate files found.")
            return

        for idx, group in enumerate(report.groups, 1):
            print(f"\nDuplicate group {idx} (hash: {group.hex_digest[:8]}...)")
            print(f"   Size: {group.size} bytes")
            print(f"   [ORIGINAL]  {ConvertUtils.display_path(group.original.path)}")
            for file in group.duplicates:
                print(f"   [DUPLICATE] {ConvertUtils.display_path(file.path)}")

        print("\nSummary")
        print("=" * 10)
        print(f"Total duplicate files: {report.total_duplicate_count}")
        print(f"Total wasted space: {report.total_wasted_bytes} bytes "
              f"({ConvertUtils.bytes_to_mb(report.total_wasted_bytes)} MB)")

    def confirm_deletion(self, report: DuplicateReport, assume_yes: bool) -> bool:
        """Ask the user; --yes answers for them."""
        if assume_yes:
            if not self.quiet:
                print("WARNING: --yes flag skips confirmation. Proceeding with deletion...")
            return True

        # Safety check: confirm we're still in interactive mode
        if not self.is_interactive():
            self.error_exit(
                "Lost interactive terminal during operation. "
                "Use --yes to proceed in non-interactive environments."
            )

        try:
            response = input(f"\nDelete {report.total_duplicate_count} duplicate files? [y/N]: ")
        except EOFError:
            response = ""
        return ConvertUtils.is_affirmative(response)

    def output_outcome(self, outcome: DeletionOutcome) -> None:
        """Print deletion results."""
        if not outcome.attempted:
            if not self.quiet:
                print("No files were deleted.")
            return

        for path, reason in outcome.failures:
            self.warning(f"Unable to delete {path}: {reason}")

        if self.quiet:
            return

        print("\nRemoval complete!")
        print(f"Files deleted: {outcome.deleted_count}")
        print(f"Space freed: {outcome.freed_bytes} bytes ({ConvertUtils.bytes_to_mb(outcome.freed_bytes)} MB)")
        if outcome.failures:
            print(f"Failed to delete {outcome.failed_count} file(s)")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"WARNING: {ConvertUtils.display_path(message)}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {ConvertUtils.display_path(message)}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> DeletionOutcome:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        root_dir = self.read_root(args)
        params = self.create_params(root_dir, args)

        command = DeduplicationCommand(use_trash=args.trash)
        report = self.run_scan(params, command)
        self.output_report(report)

        outcome = DeletionOutcome.skipped()
        if args.delete and not report.is_empty:
            confirmed = self.confirm_deletion(report, assume_yes=args.yes)
            with logging_redirect_tqdm():
                outcome = command.delete(report, confirmed=confirmed, progress_callback=self.progress_callback)
            self.close_progress()
            self.output_outcome(outcome)
            if self.verbose and outcome.failures:
                remaining = DuplicateService.remove_files_from_report(report, outcome.deleted_paths)
                print(f"{len(remaining)} group(s) still hold duplicates")

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\nCompleted in {elapsed:.2f} seconds")
        return outcome


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
