# -*- coding: utf-8 -*-

from __future__ import annotations

import datetime as dt
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ENV_STORE_DIR = "ANOTHER_DAY_DIR"
ENV_TIMEZONE = "ANOTHER_DAY_TZ"
ENV_WEEK_START = "ANOTHER_DAY_WEEK_START"


def _default_store_dir() -> str:
    return os.path.join(os.path.expanduser("~"), "another-day")


@dataclass(frozen=True)
class AppConfig:
    store_dir: str = field(default_factory=_default_store_dir)
    timezone: Optional[str] = None  # IANA name, None = host zone
    separator: str = "|"
    min_duration_hours: float = 0.5
    week_start: int = 6  # Monday=0 .. Sunday=6
    time_format: str = "%H:%M:%S"
    day_format: str = "%Y-%m-%d"

    def localize(self, naive: dt.datetime) -> dt.datetime:
        """
        Wall-clock time in the configured zone -> aware datetime.
        Without a configured zone the host's rules apply to that very
        instant, so past days across a DST change get their own offset.
        """
        if self.timezone:
            return naive.replace(tzinfo=ZoneInfo(self.timezone))
        return naive.astimezone()

    def to_local(self, moment: dt.datetime) -> dt.datetime:
        if self.timezone:
            return moment.astimezone(ZoneInfo(self.timezone))
        return moment.astimezone()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        kwargs = {}

        store_dir = (env.get(ENV_STORE_DIR) or "").strip()
        if store_dir:
            kwargs["store_dir"] = os.path.expanduser(store_dir)

        tz_name = (env.get(ENV_TIMEZONE) or "").strip()
        if tz_name:
            try:
                ZoneInfo(tz_name)
            except (ZoneInfoNotFoundError, ValueError):
                raise ValueError(f"{ENV_TIMEZONE}: unknown timezone {tz_name!r}.")
            kwargs["timezone"] = tz_name

        week_start = (env.get(ENV_WEEK_START) or "").strip()
        if week_start:
            try:
                n = int(week_start)
            except ValueError:
                raise ValueError(f"{ENV_WEEK_START}: expected a weekday number 0-6.")
            if not 0 <= n <= 6:
                raise ValueError(f"{ENV_WEEK_START}: expected a weekday number 0-6.")
            kwargs["week_start"] = n

        return cls(**kwargs)
