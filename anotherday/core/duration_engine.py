# -*- coding: utf-8 -*-

import datetime as dt
import math
from typing import Callable, List, Optional, Sequence, Union

from anotherday.config import AppConfig
from anotherday.domain.models import Entry, TaskRow

ESTIMATE_MARK = "~"


def peek_next(entries: Sequence[Entry], i: int) -> Optional[Entry]:
    j = i + 1
    return entries[j] if j < len(entries) else None


def round_half_hours(hours: float, minimum: float = 0.5) -> float:
    # half-up, not banker's rounding: 1.25h -> 1.5h
    return max(math.floor(hours * 2 + 0.5) / 2, minimum)


def format_hours(hours: float, estimated: bool = False) -> str:
    return f"{ESTIMATE_MARK if estimated else ''}{hours:.1f}h"


class DurationCalculator:
    """
    Pure duration engine (no I/O).

    One forward pass over a day's entries with one-entry lookahead:
    - a task runs until the next entry starts, whatever its kind
    - breaks produce no row
    - the last task of the day is open-ended: it runs until now (today)
      or until 23:59:59 (any other day) and is marked as an estimate
    """

    def __init__(
        self,
        cfg: Optional[AppConfig] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ):
        self.cfg = cfg or AppConfig()
        self._clock = clock

    def now(self) -> dt.datetime:
        if self._clock is not None:
            return self._clock().astimezone(dt.timezone.utc)
        return dt.datetime.now(dt.timezone.utc)

    def compute_rows(
        self, day: Union[str, dt.date], entries: Sequence[Entry]
    ) -> List[TaskRow]:
        if isinstance(day, str):
            day = dt.datetime.strptime(day, self.cfg.day_format).date()

        # each boundary gets the offset in force at that moment
        localize = self.cfg.localize
        day_start = localize(dt.datetime.combine(day, dt.time(0, 0)))
        next_day = localize(dt.datetime.combine(day + dt.timedelta(days=1), dt.time(0, 0)))
        end_of_day = localize(dt.datetime.combine(day, dt.time(23, 59, 59)))

        rows: List[TaskRow] = []
        for i, entry in enumerate(entries):
            if not entry.is_task:
                continue

            start = self.anchor(day, entry.time, day_start, next_day)
            nxt = peek_next(entries, i)
            if nxt is not None:
                end = self.anchor(day, nxt.time, day_start, next_day)
                estimated = False
            else:
                end = self._open_end(day_start, end_of_day)
                estimated = True

            hours = (end - start).total_seconds() / 3600.0
            rounded = round_half_hours(hours, self.cfg.min_duration_hours)
            rows.append(
                TaskRow(
                    timestamp_label=format_hours(rounded, estimated),
                    project=entry.project,
                    id=entry.id,
                    label=entry.label,
                    hours=rounded,
                    estimated=estimated,
                )
            )
        return rows

    def anchor(
        self,
        day: dt.date,
        t: dt.time,
        day_start: dt.datetime,
        next_day: dt.datetime,
    ) -> dt.datetime:
        """
        Place a UTC time of day on the UTC date that lands it inside the
        local calendar day [day_start, next_day).
        """
        for offset in (0, -1, 1):
            candidate = dt.datetime.combine(
                day + dt.timedelta(days=offset), t, tzinfo=dt.timezone.utc
            )
            if day_start <= candidate < next_day:
                return candidate
        return dt.datetime.combine(day, t, tzinfo=dt.timezone.utc)

    def _open_end(self, day_start: dt.datetime, end_of_day: dt.datetime) -> dt.datetime:
        now = self.now()
        if day_start <= now < end_of_day:
            return now
        # TODO: revisit capping past open-ended tasks at 23:59:59 once there is
        # a configurable end-of-workday.
        return end_of_day
