# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from anotherday.domain.models import DayReport


class ConsoleView:
    """
    Terminal rendering of shown days.
    Cell values go in as Text, never as markup: task labels are free text.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def build_table(self, reports: List[DayReport]) -> Table:
        table = Table(header_style="reverse", box=None, pad_edge=False, show_edge=False)
        table.add_column("Time", style="yellow", min_width=7, no_wrap=True)
        table.add_column("Project", style="green", min_width=16)
        table.add_column("ID", style="bright_black", min_width=9)
        table.add_column("Task", style="white")

        for report in reports:
            table.add_row(Text(report.day, style="bold underline cyan"))
            for row in report.rows:
                table.add_row(
                    Text(row.timestamp_label),
                    Text(row.project),
                    Text(row.id or ""),
                    Text(row.label),
                )
            if report.rows:
                table.add_row(
                    Text(f"{report.total_hours:.1f}h", style="bold"),
                    Text("total", style="dim"),
                    end_section=True,
                )
        return table

    def render(self, reports: List[DayReport]) -> None:
        self.console.print(self.build_table(reports))
        if not reports:
            self.console.print(Text("No records.", style="dim"))
