#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import datetime as dt
import sys
from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console

from anotherday.config import AppConfig
from anotherday.core.date_range import DateRangeResolver
from anotherday.core.duration_engine import DurationCalculator
from anotherday.core.entry_codec import EntryCodec
from anotherday.services.log_service import LogService
from anotherday.services.report_service import ReportService
from anotherday.storage.day_log import DayLogStore
from anotherday.storage.repos import EntryRepo
from anotherday.ui.cli import app as cli_app
from anotherday.ui.console_view import ConsoleView
from anotherday.ui.markdown_renderer import MarkdownRenderer


@dataclass
class Services:
    cfg: AppConfig
    log_service: LogService
    report_service: ReportService
    view: ConsoleView
    markdown: MarkdownRenderer


def build_services(
    cfg: Optional[AppConfig] = None,
    clock: Optional[Callable[[], dt.datetime]] = None,
    console: Optional[Console] = None,
) -> Services:
    cfg = cfg or AppConfig()

    store = DayLogStore(cfg)
    repo = EntryRepo(store, EntryCodec(cfg))

    log_service = LogService(repo, cfg, clock=clock)
    report_service = ReportService(
        repo,
        DateRangeResolver(cfg, clock=clock),
        DurationCalculator(cfg, clock=clock),
    )

    return Services(
        cfg=cfg,
        log_service=log_service,
        report_service=report_service,
        view=ConsoleView(console),
        markdown=MarkdownRenderer(),
    )


def main():
    try:
        cfg = AppConfig.from_env()
    except ValueError as e:
        print(f"another-day: {e}", file=sys.stderr)
        sys.exit(2)

    cli_app(obj=build_services(cfg), prog_name="another-day")


if __name__ == "__main__":
    main()
