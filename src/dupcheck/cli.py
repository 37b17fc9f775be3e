#!/usr/bin/env python3
"""
dupcheck CLI — Command line interface for duplicate file detection and removal.
Runs the search engine, renders the duplicate table and deletes duplicates only after confirmation.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from dupcheck import __version__
from dupcheck.commands import DuplicateSearchCommand
from dupcheck.core.exceptions import DupCheckError, InvalidArgumentsError
from dupcheck.core.models import DuplicateRecord, SearchParams
from dupcheck.services.file_service import FileService
from dupcheck.services.report_service import ReportService
from dupcheck.utils.convert_utils import ConvertUtils
from dupcheck.aliases import CHUNK_SIZE_HELP_TEXT, CROSS_HELP_TEXT, DESCRIPTION_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments (validation happens in create_params)."""
        parser = argparse.ArgumentParser(
            prog="dup",
            description=DESCRIPTION_TEXT,
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Checked by hand so a missing directory exits with 1, not argparse's 2
        parser.add_argument(
            "directories",
            nargs="*",
            metavar="dir",
            help="Directories to check for duplicates"
        )

        # Comparison options
        parser.add_argument(
            "--cross", "-x",
            action="store_true",
            help=CROSS_HELP_TEXT
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Recursively check files in subdirectories"
        )
        parser.add_argument(
            "--chunk-size",
            default="1M",
            type=str,
            metavar='SIZE',
            help=CHUNK_SIZE_HELP_TEXT
        )

        # Actions
        parser.add_argument(
            "--yes", "-y",
            action="store_true",
            help="Delete duplicates without confirmation prompt (for automation/scripts)"
        )
        parser.add_argument(
            "--dry-run", "-n",
            action="store_true",
            dest="dry_run",
            help="Only show the duplicate table, never prompt or delete"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move duplicates to system trash instead of deleting them permanently"
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
            help="Show progress, debug logs and detailed statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def create_params(self, args: argparse.Namespace) -> SearchParams:
        """Create SearchParams from CLI arguments, exiting with 1 on invalid input."""
        if args.yes and args.dry_run:
            self.error_exit("--yes cannot be combined with --dry-run")

        try:
            chunk_size = ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid chunk size: {e}")

        try:
            params = SearchParams(
                directories=list(args.directories),
                cross=args.cross,
                recursive=args.recursive,
                chunk_size=chunk_size,
            )
        except InvalidArgumentsError as e:
            self.error_exit(str(e))

        # Prevent interactive confirmation in non-TTY environments
        if not args.yes and not args.dry_run and not self.is_interactive():
            self.error_exit(
                "Cannot request interactive confirmation in non-interactive session.\n"
                "Use --yes to delete without confirmation or --dry-run to only report duplicates."
            )

        return params

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(
                f"\r  [{stage}] {current}/{total} ({percent:.1f}%)"
            )
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files...")
        sys.stderr.flush()

    def run_search(self, params: SearchParams) -> List[DuplicateRecord]:
        """Execute the duplicate search workflow; fatal errors end the run with no report."""
        command = DuplicateSearchCommand()
        if self.verbose:
            mode_display = "cross" if params.cross else "full"
            print(f"Checking {len(params.directories)} directories (mode: {mode_display})...")

        try:
            records, stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.verbose else None
            )
        except DupCheckError as e:
            if self.verbose:
                sys.stderr.write("\n")
            self.error_exit(str(e))

        if self.verbose:
            sys.stderr.write("\n")
            print()
            print(stats.print_summary())

        return records

    def output_results(self, records: List[DuplicateRecord], preview: bool = False) -> None:
        """Render the duplicate table (File, Matched to); a preview before deletion is never suppressed."""
        if self.quiet and not preview:
            return

        print()
        ReportService.render(records)
        space = FileService.reclaimable_bytes(records)
        print(f"Reclaimable space: {ConvertUtils.bytes_to_human(space)}")

    @staticmethod
    def is_interactive() -> bool:
        """True if the confirmation prompt can be answered by a user at a terminal."""
        return sys.stdin.isatty()

    @staticmethod
    def confirm(prompt: str) -> bool:
        """Ask a yes/no question; anything but y/yes (including EOF) means no."""
        try:
            response = input(prompt)
        except EOFError:
            print()
            return False
        return response.strip().lower() in ("y", "yes")

    def execute_deletion(self, records: List[DuplicateRecord], use_trash: bool) -> None:
        """Delete every duplicate, continuing past individual failures."""
        action = "Moving" if use_trash else "Deleting"
        target = " to trash" if use_trash else ""
        print(f"{action} {len(records)} files{target}...")

        deleted, failures = FileService.delete_duplicates(records, use_trash=use_trash)

        if self.verbose:
            for path in deleted:
                print(f"  removed {path}")

        if failures:
            print(f"\n⚠️  Partial success: {len(deleted)}/{len(records)} files removed.")
            print(f"Failed to remove {len(failures)} file(s):")
            for error in failures[:5]:  # Show first 5 errors
                print(f"  • {os.path.basename(error.path)}: {error.reason}")
            if len(failures) > 5:
                print(f"  ...and {len(failures) - 5} more files")
        else:
            print("Done.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet and not args.verbose

        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = self.create_params(args)
        records = self.run_search(params)

        if not records:
            if not self.quiet:
                print("No duplicate files found.")
            return

        # Always show the table before asking for confirmation (safety first)
        self.output_results(records, preview=not (args.yes or args.dry_run))

        if args.dry_run:
            if not self.quiet:
                print("Dry run: nothing deleted.")
            return

        if args.yes:
            self.warning("--yes flag skips confirmation. Proceeding with deletion...")
        elif not self.confirm("Delete duplicates? [y/N] "):
            print("Not deleting.")
            return

        self.execute_deletion(records, use_trash=args.trash)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
