# -*- coding: utf-8 -*-

import logging
from typing import List, Optional

from anotherday.core.date_range import DateRangeResolver
from anotherday.core.duration_engine import DurationCalculator
from anotherday.domain.models import DayReport
from anotherday.storage.repos import EntryRepo

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        repo: EntryRepo,
        resolver: DateRangeResolver,
        calculator: DurationCalculator,
    ):
        self.repo = repo
        self.resolver = resolver
        self.calculator = calculator

    def report_day(self, day: str) -> Optional[DayReport]:
        """
        None when the day has no log file or could not be read.
        Failures stay local to the day.
        """
        try:
            entries = self.repo.list_for_day(day)
        except FileNotFoundError:
            logger.debug("no log for %s, skipping", day)
            return None
        except (OSError, UnicodeDecodeError):
            logger.exception("could not read log for %s", day)
            return None

        try:
            rows = self.calculator.compute_rows(day, entries)
        except ValueError:
            logger.exception("could not compute durations for %s", day)
            return None
        return DayReport(day=day, rows=rows)

    def show(self, start: Optional[str] = None, end: Optional[str] = None) -> List[DayReport]:
        reports: List[DayReport] = []
        for day in self.resolver.resolve(start, end):
            report = self.report_day(day)
            if report is not None:
                reports.append(report)
        return reports
