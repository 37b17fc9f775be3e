"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Renders the duplicate report as a two-column table (File, Matched to) using rich.
"""
from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from dupcheck.core.models import DuplicateRecord


class ReportService:
    HEADERS = ("File", "Matched to")

    @staticmethod
    def build_table(records: Sequence[DuplicateRecord]) -> Table:
        """Build the report table; rows keep the order of `records`."""
        table = Table(box=box.SIMPLE_HEAD, show_edge=False, header_style="italic underline")
        for header in ReportService.HEADERS:
            table.add_column(header, overflow="fold", min_width=len(header))
        for record in records:
            table.add_row(record.duplicate, record.original)
        return table

    @staticmethod
    def render(records: Sequence[DuplicateRecord], console: Optional[Console] = None) -> None:
        """Print the summary line and the table."""
        console = console or Console()
        console.print(f"Found {len(records)} duplicate files.", highlight=False)
        console.print(ReportService.build_table(records))
