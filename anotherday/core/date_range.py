# -*- coding: utf-8 -*-

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from anotherday.config import AppConfig

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class ExplicitRange:
    start: dt.date
    end: dt.date


@dataclass(frozen=True)
class Yesterday:
    pass


@dataclass(frozen=True)
class Week:
    pass


@dataclass(frozen=True)
class Month:
    pass


@dataclass(frozen=True)
class Default:
    pass


RangeSpec = Union[ExplicitRange, Yesterday, Week, Month, Default]


def _parse_date(token: Optional[str]) -> Optional[dt.date]:
    if not token or not DATE_RE.match(token):
        return None
    try:
        return dt.date.fromisoformat(token)
    except ValueError:
        return None


def classify(start_token: Optional[str], end_token: Optional[str] = None) -> RangeSpec:
    """
    First match wins:
      yyyy-mm-dd [yyyy-mm-dd]
      yesterday
      week
      month
      anything else -> today
    """
    start = _parse_date(start_token)
    if start is not None:
        end = _parse_date(end_token)
        return ExplicitRange(start=start, end=end if end is not None else start)
    if start_token == "yesterday":
        return Yesterday()
    if start_token == "week":
        return Week()
    if start_token == "month":
        return Month()
    return Default()


def days_between(start: dt.date, end: dt.date) -> List[dt.date]:
    if end < start:
        return [start]
    return [start + dt.timedelta(days=i) for i in range((end - start).days + 1)]


class DateRangeResolver:
    def __init__(
        self,
        cfg: Optional[AppConfig] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ):
        self.cfg = cfg or AppConfig()
        self._clock = clock

    def now(self) -> dt.datetime:
        if self._clock is not None:
            return self.cfg.to_local(self._clock())
        return self.cfg.to_local(dt.datetime.now(dt.timezone.utc))

    def today(self) -> dt.date:
        return self.now().date()

    def bounds(self, spec: RangeSpec) -> tuple:
        today = self.today()
        if isinstance(spec, ExplicitRange):
            return spec.start, spec.end
        if isinstance(spec, Yesterday):
            y = today - dt.timedelta(days=1)
            return y, y
        if isinstance(spec, Week):
            back = (today.weekday() - self.cfg.week_start) % 7
            return today - dt.timedelta(days=back), today
        if isinstance(spec, Month):
            return today.replace(day=1), today
        if isinstance(spec, Default):
            return today, today
        raise TypeError(f"unknown range spec: {spec!r}")

    def resolve_dates(
        self, start_token: Optional[str], end_token: Optional[str] = None
    ) -> List[dt.date]:
        start, end = self.bounds(classify(start_token, end_token))
        return days_between(start, end)

    def resolve(
        self, start_token: Optional[str], end_token: Optional[str] = None
    ) -> List[str]:
        return [
            d.strftime(self.cfg.day_format)
            for d in self.resolve_dates(start_token, end_token)
        ]
