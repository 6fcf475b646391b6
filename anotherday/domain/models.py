# -*- coding: utf-8 -*-

import datetime as dt
from dataclasses import dataclass, field
from typing import List, Optional

KIND_TASK = "task"
KIND_BREAK = "break"


@dataclass(frozen=True)
class Entry:
    kind: str  # task | break
    time: dt.time  # UTC time of day
    project: str = ""
    label: str = ""
    id: Optional[str] = None

    @property
    def is_task(self) -> bool:
        return self.kind == KIND_TASK


@dataclass(frozen=True)
class TaskRow:
    timestamp_label: str  # "1.5h", "~0.5h"
    project: str
    id: Optional[str]
    label: str
    hours: float
    estimated: bool


@dataclass(frozen=True)
class DayReport:
    day: str  # yyyy-mm-dd
    rows: List[TaskRow] = field(default_factory=list)

    @property
    def total_hours(self) -> float:
        return sum(r.hours for r in self.rows)
