# -*- coding: utf-8 -*-

import datetime as dt
import logging
from typing import Callable, Optional, Tuple

from anotherday.config import AppConfig
from anotherday.domain.models import KIND_BREAK, KIND_TASK, Entry
from anotherday.storage.repos import EntryRepo

logger = logging.getLogger(__name__)

TIME_INPUT_FORMATS = ("%H:%M:%S", "%H:%M")


def parse_local_time(raw: str) -> dt.time:
    raw = (raw or "").strip()
    for fmt in TIME_INPUT_FORMATS:
        try:
            return dt.datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    raise ValueError("Invalid time. Use HH:MM:SS or HH:MM.")


class LogService:
    """
    Appends task/break marks to today's log.
    - the day key is the local date
    - the stored time is UTC
    """

    def __init__(
        self,
        repo: EntryRepo,
        cfg: Optional[AppConfig] = None,
        clock: Optional[Callable[[], dt.datetime]] = None,
    ):
        self.repo = repo
        self.cfg = cfg or AppConfig()
        self._clock = clock

    def _now_local(self) -> dt.datetime:
        if self._clock is not None:
            return self.cfg.to_local(self._clock())
        return self.cfg.to_local(dt.datetime.now(dt.timezone.utc))

    def resolve_instant(self, at: Optional[str] = None) -> Tuple[str, dt.time]:
        """
        Returns (day key, UTC time of day) for now, or for `at` (local time
        of day, today).
        """
        local = self._now_local()
        if at:
            t = parse_local_time(at)
            local = self.cfg.localize(dt.datetime.combine(local.date(), t))
        day = local.strftime(self.cfg.day_format)
        utc_time = local.astimezone(dt.timezone.utc).time().replace(microsecond=0)
        return day, utc_time

    def start_task(
        self,
        project: str,
        label: str,
        task_id: Optional[str] = None,
        at: Optional[str] = None,
    ) -> Entry:
        project = (project or "").strip()
        label = (label or "").strip()
        if not project:
            raise ValueError("Project cannot be empty.")
        if not label:
            raise ValueError("Task cannot be empty.")

        day, t = self.resolve_instant(at)
        entry = Entry(
            kind=KIND_TASK,
            time=t,
            project=project,
            label=label,
            id=(task_id or "").strip() or None,
        )
        self.repo.append(day, entry)
        logger.debug("task %s/%s started on %s at %s UTC", project, label, day, t)
        return entry

    def take_break(self, at: Optional[str] = None) -> Entry:
        day, t = self.resolve_instant(at)
        entry = Entry(kind=KIND_BREAK, time=t)
        self.repo.append(day, entry)
        logger.debug("break on %s at %s UTC", day, t)
        return entry
