# -*- coding: utf-8 -*-

import datetime as dt
import logging
from typing import List, Optional

from anotherday.config import AppConfig
from anotherday.domain.models import KIND_BREAK, KIND_TASK, Entry

logger = logging.getLogger(__name__)


class EntryCodec:
    """
    One log line <-> one Entry.

    Task:  task|HH:MM:SS|project|label|id
    Break: break|HH:MM:SS

    Fields are written verbatim. A field containing the separator is not
    rejected; it simply will not survive a round trip.
    """

    def __init__(self, cfg: Optional[AppConfig] = None):
        self.cfg = cfg or AppConfig()

    def encode(self, entry: Entry) -> str:
        fields: List[str] = [entry.kind, entry.time.strftime(self.cfg.time_format)]
        if entry.kind == KIND_TASK:
            fields += [entry.project or "", entry.label or ""]
            if entry.id:
                fields.append(entry.id)
        return self.cfg.separator.join(fields)

    def decode(self, line: str) -> Optional[Entry]:
        line = (line or "").rstrip("\r\n")
        if not line.strip():
            return None

        parts = line.split(self.cfg.separator)
        kind = parts[0]
        if kind not in (KIND_TASK, KIND_BREAK):
            logger.debug("skipping line with unknown kind: %r", line)
            return None

        t = self._parse_time(parts[1] if len(parts) > 1 else "")
        if t is None:
            logger.debug("skipping line with unreadable time: %r", line)
            return None

        if kind == KIND_BREAK:
            return Entry(kind=KIND_BREAK, time=t)

        project = parts[2] if len(parts) > 2 else ""
        label = parts[3] if len(parts) > 3 else ""
        entry_id = parts[4] if len(parts) > 4 else ""
        return Entry(
            kind=KIND_TASK,
            time=t,
            project=project,
            label=label,
            id=entry_id or None,
        )

    def decode_lines(self, text: str) -> List[Entry]:
        out: List[Entry] = []
        for line in (text or "").splitlines():
            e = self.decode(line)
            if e is not None:
                out.append(e)
        return out

    def _parse_time(self, raw: str) -> Optional[dt.time]:
        try:
            return dt.datetime.strptime(raw.strip(), self.cfg.time_format).time()
        except ValueError:
            return None
